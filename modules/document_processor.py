import io
import logging
import os

import chardet
import docx  # python-docx for DOCX docs
import fitz  # PyMuPDF for PDFs

from modules.category_classifier import classify_content
from modules.keyword_extractor import DEFAULT_TOP_N, extract_keywords

logger = logging.getLogger(__name__)

DEFAULT_MAX_PDF_PAGES = 20

TEXT_EXTENSIONS = {'txt', 'md', 'csv', 'json', 'xml', 'html', 'js', 'ts', 'py'}


class DocumentDecodeError(ValueError):
    """Raised when a binary document cannot be turned into text."""

    def __init__(self, filename, reason):
        super().__init__(f"Failed to read {filename}: {reason}")
        self.filename = filename
        self.reason = reason


def file_extension(filename):
    return os.path.splitext(filename or '')[1].lstrip('.').lower()


def decode_text(data):
    """Decode raw bytes as UTF-8, falling back to a chardet guess."""
    try:
        return data.decode('utf-8-sig')
    except UnicodeDecodeError:
        encoding = chardet.detect(data)['encoding'] or 'utf-8'
        logger.debug("UTF-8 decode failed, using detected encoding %s", encoding)
        try:
            return data.decode(encoding, errors='replace')
        except LookupError:
            return data.decode('utf-8', errors='replace')


def extract_pdf_text(data, max_pages=DEFAULT_MAX_PDF_PAGES):
    """Extract text from the first max_pages pages; later pages are dropped silently."""
    parts = []
    with fitz.open(stream=data, filetype='pdf') as doc:
        page_count = min(doc.page_count, max_pages)
        if doc.page_count > max_pages:
            logger.info("PDF has %d pages, reading the first %d", doc.page_count, max_pages)
        for page_number in range(page_count):
            parts.append(doc[page_number].get_text())
    return "\n\n".join(parts)


def extract_docx_text(data):
    document = docx.Document(io.BytesIO(data))
    return "\n".join(para.text for para in document.paragraphs)


def extract_text(data, filename, max_pdf_pages=DEFAULT_MAX_PDF_PAGES):
    """Extract text from PDF, DOCX or any text-like upload."""
    file_type = file_extension(filename)
    if file_type == 'pdf':
        try:
            return extract_pdf_text(data, max_pdf_pages)
        except Exception as e:
            raise DocumentDecodeError(filename, e) from e
    if file_type == 'docx':
        try:
            return extract_docx_text(data)
        except Exception as e:
            raise DocumentDecodeError(filename, e) from e
    # Everything else, known text extension or not, is read as text
    return decode_text(data)


def process_document(data, filename, top_n=DEFAULT_TOP_N, max_pdf_pages=DEFAULT_MAX_PDF_PAGES):
    text = extract_text(data, filename, max_pdf_pages)
    keywords = extract_keywords(text, top_n)
    result = classify_content(text, keywords)
    logger.info("Categorized %s as %s (score %d)", filename, result.category, result.score)
    return {
        'text': text,
        'keywords': keywords,
        'category': result.category,
        'score': result.score,
    }

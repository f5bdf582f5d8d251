import logging

import magic
from werkzeug.utils import secure_filename

from modules import monitor
from modules.document_processor import file_extension

logger = logging.getLogger(__name__)

DOCX_MIME = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'

ALLOWED_MIMES = {
    'application/pdf',
    DOCX_MIME,
    'application/json',
    'application/xml',
    'application/javascript',
    # Empty files still get categorized (as Others)
    'application/x-empty',
    'inode/x-empty',
}

# Older libmagic builds report DOCX as a plain zip container
DOCX_CONTAINER_MIMES = {DOCX_MIME, 'application/zip', 'application/octet-stream'}


def detect_mime(stream):
    file_start = stream.read(2048)
    stream.seek(0)
    return magic.from_buffer(file_start, mime=True)


def allowed_file(filename, mime):
    ext = file_extension(filename)
    if ext == 'pdf':
        return mime == 'application/pdf'
    if ext == 'docx':
        return mime in DOCX_CONTAINER_MIMES
    return mime.startswith('text/') or mime in ALLOWED_MIMES


def handle_file_uploads(uploaded_files, organizer, config):
    """
    Validate werkzeug FileStorage uploads and hand them to the organizer.

    Returns a dict with the processed records, decode failures and rejected
    uploads. Raises ValueError when nothing usable was uploaded.
    """
    uploaded_files = [f for f in uploaded_files if f and f.filename]
    if not uploaded_files:
        raise ValueError("No file selected.")

    max_files = config.get('MAX_FILES_PER_UPLOAD')
    if max_files and len(uploaded_files) > max_files:
        raise ValueError(f"Too many files, at most {max_files} per upload.")

    accepted = []
    rejected = []
    for uploaded_file in uploaded_files:
        filename = secure_filename(uploaded_file.filename) or 'unnamed'
        mime = detect_mime(uploaded_file.stream)
        if not allowed_file(filename, mime):
            monitor.log_rejected_upload(filename, f"disallowed type {mime}")
            rejected.append({'name': filename, 'error': f"Disallowed file type detected: {mime}"})
            continue
        accepted.append((filename, uploaded_file.read(), mime))

    def report_progress(progress, filename):
        logger.info("Processed %s (%d%%)", filename, progress)

    processed, failed = organizer.add_files(accepted, progress_callback=report_progress)

    return {
        'processed': processed,
        'failed': [{'name': name, 'error': message} for name, message in failed],
        'rejected': rejected,
    }

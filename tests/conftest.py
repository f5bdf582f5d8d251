import io

import docx
import fitz
import pytest

from app import create_app
from config import Config


@pytest.fixture
def app(tmp_path):
    class TestConfig(Config):
        TESTING = True
        LOG_DIR = str(tmp_path / 'logs')
        RATELIMIT_ENABLED = False
        MAX_FILES_PER_UPLOAD = 5

    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_pdf():
    def _make_pdf(pages):
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            page.insert_text((72, 72), text)
        data = doc.tobytes()
        doc.close()
        return data
    return _make_pdf


@pytest.fixture
def make_docx():
    def _make_docx(paragraphs):
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        buffer = io.BytesIO()
        document.save(buffer)
        return buffer.getvalue()
    return _make_docx

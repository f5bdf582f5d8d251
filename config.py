import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'this-is-a-very-secret-key'
    LOG_DIR = os.path.join(os.path.abspath(os.path.dirname(__file__)), 'logs')
    LOG_LEVEL = 'INFO'
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024
    MAX_FILES_PER_UPLOAD = 50
    MAX_PDF_PAGES = 20
    TOP_KEYWORDS = 10
    PREVIEW_CHARS = 5000
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = 'memory://'
    DEFAULT_RATE_LIMITS = ["200 per day", "50 per hour"]
    UPLOAD_RATE_LIMIT = "10/minute"

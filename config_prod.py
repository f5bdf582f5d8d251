# config_prod.py
import os

from config import Config as BaseConfig


class Config(BaseConfig):
    SECRET_KEY = os.environ.get('SECRET_KEY', 'fallback-secret-key')
    LOG_DIR = os.environ.get('LOG_DIR', BaseConfig.LOG_DIR)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 50 * 1024 * 1024))
    MAX_PDF_PAGES = int(os.environ.get('MAX_PDF_PAGES', 20))
    TOP_KEYWORDS = int(os.environ.get('TOP_KEYWORDS', 10))
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'redis://localhost:6379')
    DEBUG = False

# modules/monitor.py
import logging
from logging.handlers import RotatingFileHandler
import os

LOGGER_NAME = 'fileorganizer'
LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(log_dir, level=logging.INFO, max_bytes=10*1024*1024, backup_count=5):
    """Attach a rotating file handler to the app logger and the modules package."""
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, 'app.log')

    handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in (LOGGER_NAME, 'modules'):
        target = logging.getLogger(name)
        target.setLevel(level)
        # One file handler per process; a new app factory call replaces it
        for existing in list(target.handlers):
            if isinstance(existing, RotatingFileHandler):
                target.removeHandler(existing)
                existing.close()
        target.addHandler(handler)

    return log_path


def log_processing_error(filename, error):
    logger.error(f"Error processing file {filename}: {error}")


def log_rejected_upload(filename, reason):
    logger.warning(f"Rejected upload {filename}: {reason}")


def log_info(message):
    logger.info(message)

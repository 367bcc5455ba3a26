import os
from dotenv import load_dotenv

load_dotenv(override=True)


class Config:
    """
    Base configuration for the portfolio admin console.
    Sites override values via environment variables or Flask app.config.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')

    # Content API
    API_BASE_URL = os.getenv('PORTFOLIO_API_URL', 'http://localhost:5001')
    API_TIMEOUT = 10  # seconds
    DEFAULT_HEADERS = {'Content-Type': 'application/json'}

    # Session key holding the admin bearer token
    SESSION_TOKEN_KEY = 'adminToken'

    # Attachment uploads
    MAX_IMAGE_SIZE = 5 * 1024 * 1024
    IMAGE_FIELD_NAME = 'image'

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))
    ADMIN_LOG_DB = os.getenv('ADMIN_LOG_DB', os.path.join(DB_DIR, 'admin_log.db'))
    LOGS_TABLE = 'app_logs'

    BRAND_NAME = os.getenv('BRAND_NAME', 'Portfolio Admin')


def get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then Config, then env var"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val is not None:
            return val
    except RuntimeError:
        pass
    val = getattr(Config, key, None)
    if val is not None:
        return val
    return os.getenv(key, default)

"""
Application configuration with environment-specific settings.

Usage:
    from config import get_config
    app.config.from_object(get_config())
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration with common settings."""

    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        raise ValueError(
            "SECRET_KEY environment variable is required!\n"
            "Generate one with: python -c 'import secrets; print(secrets.token_hex(32))'"
        )

    # Session configuration
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 3600  # 1 hour

    # Remote blog API
    API_URL = os.environ.get('API_URL', 'http://localhost:8000/api').rstrip('/')
    API_TIMEOUT = float(os.environ.get('API_TIMEOUT', 10))

    # Public site URL, used for canonical and share links
    WEBSITE_URL = os.environ.get('WEBSITE_URL', 'http://localhost:5000').rstrip('/')

    # Page sizes
    LIMIT_PAGE_ARTICLES_RELATED = int(os.environ.get('LIMIT_PAGE_ARTICLES_RELATED', 3))

    # Credential cookie set by the login flow, and the lookup that validates it
    SESSION_TOKEN_COOKIE = 'token'
    CURRENT_USER_KEY = '/current_user'

    # Rate limiting
    RATELIMIT_ENABLED = True


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False
    SESSION_COOKIE_SECURE = False  # Allow HTTP in development

    SEND_FILE_MAX_AGE_DEFAULT = 0  # Disable caching for development


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True  # Require HTTPS

    PREFERRED_URL_SCHEME = 'https'

    # Additional validation for production
    if not os.environ.get('SECRET_KEY'):
        raise ValueError("SECRET_KEY must be explicitly set in production!")


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG = False
    TESTING = True
    SESSION_COOKIE_SECURE = False
    RATELIMIT_ENABLED = False

    API_URL = 'http://api.test'
    WEBSITE_URL = 'https://blog.test'
    LIMIT_PAGE_ARTICLES_RELATED = 3


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env_name=None):
    """
    Get configuration class for specified environment.

    Args:
        env_name (str): Environment name (development/production/testing)
                       If None, uses FLASK_ENV environment variable

    Returns:
        Config class for the specified environment
    """
    if env_name is None:
        env_name = os.environ.get('FLASK_ENV', 'development')

    return config.get(env_name, config['default'])

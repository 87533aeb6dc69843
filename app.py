"""
Blog front-end - server-rendered article pages backed by a remote blog API
"""
from dataclasses import dataclass
import os

from flask import Flask, request

from config import get_config
from extensions import limiter
from routes import main_bp, article_bp
from services import (
    ApiClient,
    ArticleService,
    FetchConfig,
    MarkdownService,
    ShareService,
    make_requests_fetcher,
)
from utils.logger import setup_logger
from utils.session import handle_fetch_error
from utils.time_format import time_format, iso_format


@dataclass
class BlogServices:
    """Services shared by every request, stored in ``app.extensions['blog']``."""
    client: ApiClient
    articles: ArticleService
    share: ShareService
    markdown: MarkdownService


def set_security_headers(response):
    """Apply security headers to all responses."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-XSS-Protection'] = '1; mode=block'

    if request.is_secure:
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

    response.headers['Content-Security-Policy'] = (
        "default-src 'self'; "
        "script-src 'self' https://cdn.jsdelivr.net; "
        "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "img-src 'self' data: https:; "
        "font-src 'self' https://cdn.jsdelivr.net; "
        "connect-src 'self'; "
        "frame-ancestors 'self'; "
        "base-uri 'self'; "
        "form-action 'self'"
    )

    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

    return response


def build_fetch_config(app, fetcher=None) -> FetchConfig:
    """
    Build the single fetch policy used for every API call.

    Args:
        app: Flask application (reads API_URL and API_TIMEOUT)
        fetcher: Optional replacement for the requests-backed fetcher

    Returns:
        FetchConfig with retries disabled and the session error callback
    """
    if fetcher is None:
        fetcher = make_requests_fetcher(app.config['API_URL'], app.config['API_TIMEOUT'])

    return FetchConfig(
        fetcher=fetcher,
        on_error=handle_fetch_error,
        should_retry_on_error=False,
    )


def create_app(config_class=None, fetcher=None):
    """
    Application factory.

    Args:
        config_class: Config class to load; defaults to the FLASK_ENV one
        fetcher: Optional fetcher injected into the fetch configuration

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    setup_logger(app)
    app.after_request(set_security_headers)

    limiter.init_app(app)

    client = ApiClient(build_fetch_config(app, fetcher))
    app.extensions['blog'] = BlogServices(
        client=client,
        articles=ArticleService(
            client,
            related_limit=app.config['LIMIT_PAGE_ARTICLES_RELATED'],
            current_user_key=app.config['CURRENT_USER_KEY'],
        ),
        share=ShareService(app.config['WEBSITE_URL']),
        markdown=MarkdownService(),
    )

    app.jinja_env.globals["time_format"] = time_format
    app.jinja_env.globals["iso_format"] = iso_format
    app.jinja_env.globals["website_url"] = app.config['WEBSITE_URL']

    app.register_blueprint(main_bp)
    app.register_blueprint(article_bp)

    return app


app = create_app()


if __name__ == "__main__":
    debug_mode = app.config.get('DEBUG', False)
    env_name = os.environ.get('FLASK_ENV', 'development')

    app.logger.info(f"Environment: {env_name} - Debug Mode: {debug_mode}")
    app.logger.info(f"Blog API: {app.config['API_URL']}")

    if debug_mode and env_name == 'production':
        app.logger.warning("Debug mode enabled in production! Set FLASK_DEBUG=false")

    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 5000))

    app.run(host=host, port=port, debug=debug_mode)

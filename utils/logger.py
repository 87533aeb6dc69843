"""
Logging Setup

Console logging for the Flask application with request and response lines,
so every API-backed page view can be traced in the server output.
"""

import logging
import sys
from flask import request, has_request_context

LOG_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(app):
    """
    Configure logging for the Flask application.

    Sets up:
    - Timestamped log format
    - Console output to stdout
    - A log line for every incoming request and its response status
    - DEBUG level in debug mode, INFO otherwise

    Args:
        app: Flask application instance
    """
    # app.logger is shared by name across app instances; attach one handler only
    if not any(getattr(h, '_blog_console', False) for h in app.logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handler._blog_console = True
        app.logger.addHandler(handler)

    if app.debug:
        app.logger.setLevel(logging.DEBUG)
    else:
        app.logger.setLevel(logging.INFO)

    # Prevent duplicate logs from propagating
    app.logger.propagate = False

    @app.before_request
    def log_request_info():
        """Log incoming request details."""
        if has_request_context():
            app.logger.info(
                f"Request: {request.method} {request.path} "
                f"from {request.remote_addr}"
            )

    @app.after_request
    def log_response_info(response):
        """Log response status."""
        if has_request_context():
            app.logger.info(
                f"Response: {response.status_code} for "
                f"{request.method} {request.path}"
            )
        return response

    app.logger.info(f"Logging configured - Level: {logging.getLevelName(app.logger.level)}")

    return app

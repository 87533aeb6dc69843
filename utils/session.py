"""
Session Cookie Helpers

The login flow stores the API token in a client cookie. These helpers read it
and clear it when the API rejects it.
"""

from typing import Optional

from flask import after_this_request, current_app, has_request_context, request


def get_token(name: str = 'token') -> Optional[str]:
    """Return the credential cookie of the current request, if any."""
    if not has_request_context():
        return None
    return request.cookies.get(name) or None


def remove_cookie(name: str) -> bool:
    """
    Clear a client cookie on the response being built.

    Returns:
        True if the deletion was scheduled, False outside a request
    """
    if not has_request_context():
        return False

    @after_this_request
    def delete_cookie(response):
        response.delete_cookie(name)
        return response

    return True


def handle_fetch_error(error: Exception, key: str) -> None:
    """
    Application-wide fetch error callback.

    Logs every failed fetch. When the failing request is the current-user
    lookup, the stored token is no longer trusted and its cookie is cleared.
    """
    current_app.logger.error(f"Errors: {error!r} (key: {key})")

    if key == current_app.config.get('CURRENT_USER_KEY', '/current_user'):
        remove_cookie(current_app.config.get('SESSION_TOKEN_COOKIE', 'token'))

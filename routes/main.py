"""
Main Routes Blueprint

Site-wide pieces shared by every page: the signed-in user shown in the
header and the error pages.
"""

from flask import Blueprint, render_template, current_app, g

from utils.session import get_token

main_bp = Blueprint('main', __name__)


def load_current_user():
    """Resolve the signed-in user once per request, or None."""
    if 'current_user' not in g:
        token = get_token(current_app.config['SESSION_TOKEN_COOKIE'])
        g.current_user = None
        if token:
            services = current_app.extensions['blog']
            g.current_user = services.articles.get_current_user(token)
    return g.current_user


@main_bp.app_context_processor
def inject_current_user():
    return {'current_user': load_current_user()}


@main_bp.app_errorhandler(404)
def page_not_found(e):
    """Custom 404 error page."""
    return render_template("404.html"), 404

"""
Routes Package - Blueprint Registration

This package organizes Flask routes into modular blueprints.
"""

from .main import main_bp
from .article import article_bp

__all__ = ['main_bp', 'article_bp']

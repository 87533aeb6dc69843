"""
Services Package - Business Logic Layer

This package contains service classes that talk to the blog API and prepare
article data, keeping route handlers thin and focused on HTTP concerns.
"""

from .api_client import ApiClient, ApiError, FetchConfig, make_requests_fetcher
from .article_service import ArticleService
from .markdown_service import MarkdownService
from .share_service import ShareLinks, ShareService

__all__ = [
    'ApiClient',
    'ApiError',
    'FetchConfig',
    'make_requests_fetcher',
    'ArticleService',
    'MarkdownService',
    'ShareLinks',
    'ShareService',
]

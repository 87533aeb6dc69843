"""
Article Service - Loads article pages from the remote blog API

Fetches the article and its related list concurrently and only returns a page
when both calls succeed.
"""

from concurrent.futures import ThreadPoolExecutor
from urllib.parse import quote
from typing import List, Optional

from flask import current_app, copy_current_request_context, has_app_context, has_request_context

from models import Article, ArticlePage, Author
from schemas import parse_article_response, parse_article_list_response, parse_user_response
from services.api_client import ApiClient


class ArticleService:
    """Service for reading articles from the blog API."""

    def __init__(self, client: ApiClient, related_limit: int, current_user_key: str = '/current_user'):
        """
        Initialize the article service.

        Args:
            client: Configured API client
            related_limit: Page size for the related-articles list
            current_user_key: API path of the signed-in user lookup
        """
        self.client = client
        self.related_limit = related_limit
        self.current_user_key = current_user_key

    def fetch_article(self, slug: str) -> Optional[Article]:
        """Fetch one article by slug; None if the API reports failure."""
        payload = self.client.get(f"/articles/{quote(slug, safe='')}")
        return parse_article_response(payload)

    def fetch_related(self, slug: str) -> Optional[List[Article]]:
        """Fetch the first page of articles related to ``slug``."""
        payload = self.client.get(
            "/articles",
            params={'related': slug, 'offset': 0, 'limit': self.related_limit}
        )
        return parse_article_list_response(payload)

    def get_article_page(self, slug: str) -> Optional[ArticlePage]:
        """
        Load everything the article page renders.

        Both requests are issued at once and joined. The page is returned only
        when both succeed; any error or unsuccessful response from either
        call gives None.

        Args:
            slug: Article slug from the URL

        Returns:
            ArticlePage, or None when the data is unavailable
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            article_future = executor.submit(self._call_in_context(self.fetch_article), slug)
            related_future = executor.submit(self._call_in_context(self.fetch_related), slug)

            try:
                article = article_future.result()
                articles_related = related_future.result()
            except Exception as e:
                self._log_error(f"Article page unavailable for '{slug}': {e}")
                return None

        if article is None or articles_related is None:
            self._log_warning(f"API reported failure for article '{slug}'")
            return None

        return ArticlePage(article=article, articles_related=articles_related)

    def get_current_user(self, token: str) -> Optional[Author]:
        """
        Look up the signed-in user for a session token.

        Failures have already been handed to the fetch error callback, so the
        caller only learns that there is no user.
        """
        try:
            payload = self.client.get(self.current_user_key, token=token)
            return parse_user_response(payload)
        except Exception as e:
            self._log_warning(f"Current user lookup failed: {e}")
            return None

    @staticmethod
    def _call_in_context(func):
        """Run ``func`` inside a copy of the caller's Flask context, if any."""
        if not has_app_context():
            return func

        if has_request_context():
            return copy_current_request_context(func)

        app = current_app._get_current_object()

        def wrapper(*args, **kwargs):
            with app.app_context():
                return func(*args, **kwargs)

        return wrapper

    @staticmethod
    def _log_error(message: str):
        if has_app_context():
            current_app.logger.error(message)

    @staticmethod
    def _log_warning(message: str):
        if has_app_context():
            current_app.logger.warning(message)

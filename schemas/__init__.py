"""
Validation Schemas Package

Contains Pydantic models for validating remote API responses.
"""

from .article import (
    ArticleSchema,
    ArticleResponse,
    ArticleListResponse,
    UserResponse,
    parse_article_response,
    parse_article_list_response,
    parse_user_response,
)

__all__ = [
    'ArticleSchema',
    'ArticleResponse',
    'ArticleListResponse',
    'UserResponse',
    'parse_article_response',
    'parse_article_list_response',
    'parse_user_response',
]

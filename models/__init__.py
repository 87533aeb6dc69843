"""
Models package for the blog front-end.

Provides the data models for articles, their authors and taxonomy terms.
"""
from .article import Article, ArticlePage, Author, Term

__all__ = [
    'Article',
    'ArticlePage',
    'Author',
    'Term',
]

"""
Unit Tests for Data Models

Tests the Article, Author, Term and ArticlePage models.
"""

import pytest
from datetime import datetime, timedelta, timezone
from models import Article, ArticlePage, Author, Term


def build_article(**overrides):
    created = datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc)
    fields = dict(
        id=1,
        slug='test-article',
        title='Test Title',
        created_at=created,
        updated_at=created,
        user=Author(id=7, full_name='Jane Writer'),
    )
    fields.update(overrides)
    return Article(**fields)


class TestArticleModel:
    """Test Article dataclass."""

    def test_article_creation(self):
        """Test: Create article with required fields and defaults."""
        article = build_article()

        assert article.slug == 'test-article'
        assert article.title == 'Test Title'
        assert article.excerpt == ''
        assert article.image is None
        assert article.categories == []
        assert article.tags == []

    def test_not_updated_when_timestamps_equal(self):
        """Test: Same created/updated time is not an update."""
        article = build_article()
        assert article.is_updated is False

    def test_updated_when_strictly_later(self):
        """Test: A later updated_at marks the article as updated."""
        article = build_article()
        article.updated_at = article.created_at + timedelta(seconds=1)
        assert article.is_updated is True

    def test_not_updated_when_earlier(self):
        """Test: An updated_at before created_at is ignored."""
        article = build_article()
        article.updated_at = article.created_at - timedelta(days=1)
        assert article.is_updated is False

    def test_reading_time_minimum(self):
        """Test: Empty content still reads in 1 minute."""
        assert build_article(content='').reading_time == 1

    def test_reading_time_400_words(self):
        """Test: 400 words = 2 minutes."""
        article = build_article(content=" ".join(["word"] * 400))
        assert article.reading_time == 2


class TestTermModel:
    """Test Term dataclass."""

    def test_term_fields(self):
        term = Term(id=3, slug='python', title='Python')
        assert term.slug == 'python'
        assert term.title == 'Python'


class TestArticlePage:
    """Test ArticlePage container."""

    def test_with_related(self):
        page = ArticlePage(article=build_article(), articles_related=[build_article(id=2, slug='other')])
        assert [a.slug for a in page.articles_related] == ['other']

    def test_no_related(self):
        page = ArticlePage(article=build_article())
        assert page.articles_related == []

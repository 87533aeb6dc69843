"""
Blog article, author and taxonomy models.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

WORDS_PER_MINUTE = 200


@dataclass
class Author:
    """The user who owns an article."""
    id: int
    full_name: str
    avatar: Optional[str] = None


@dataclass
class Term:
    """A category or tag attached to an article."""
    id: int
    slug: str
    title: str


@dataclass
class Article:
    """Represents a blog article as served by the API."""
    id: int
    slug: str
    title: str
    created_at: datetime
    updated_at: datetime
    user: Author
    excerpt: str = ''
    content: str = ''
    image: Optional[str] = None
    categories: List[Term] = field(default_factory=list)
    tags: List[Term] = field(default_factory=list)

    @property
    def is_updated(self) -> bool:
        """True only when the article was edited after it was created."""
        return self.updated_at > self.created_at

    @property
    def reading_time(self) -> int:
        """Estimated reading time in minutes (minimum 1)."""
        words = len(self.content.split())
        return max(1, round(words / WORDS_PER_MINUTE))


@dataclass
class ArticlePage:
    """Everything the article page needs to render."""
    article: Article
    articles_related: List[Article] = field(default_factory=list)

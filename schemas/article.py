"""
Blog API Response Schemas

Pydantic models for validating the envelopes returned by the remote blog API.
Every response has the shape ``{"success": bool, "data": ...}``; the schemas
check it before the payload is turned into the dataclass models.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models import Article, Author, Term


class UserSchema(BaseModel):
    """Validation schema for the author embedded in an article."""
    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore')

    id: int
    full_name: str = Field(..., min_length=1)
    avatar: Optional[str] = None

    def to_model(self) -> Author:
        return Author(id=self.id, full_name=self.full_name, avatar=self.avatar)


class TermSchema(BaseModel):
    """Validation schema for a category or tag."""
    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore')

    id: int
    slug: str = Field(..., min_length=1)
    title: str

    def to_model(self) -> Term:
        return Term(id=self.id, slug=self.slug, title=self.title)


class ArticleSchema(BaseModel):
    """
    Validation schema for a single article.

    Timestamps arrive as ISO 8601 strings and are parsed to datetimes.
    Missing optional collections default to empty lists.
    """
    model_config = ConfigDict(extra='ignore')

    id: int
    slug: str = Field(..., min_length=1)
    title: str
    excerpt: Optional[str] = ''
    content: Optional[str] = ''
    image: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    user: UserSchema
    categories: List[TermSchema] = Field(default_factory=list)
    tags: List[TermSchema] = Field(default_factory=list)

    @field_validator('image', mode='before')
    @classmethod
    def blank_image_is_none(cls, v):
        """Treat an empty image URL as no image."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('created_at', 'updated_at')
    @classmethod
    def naive_timestamp_is_utc(cls, v: datetime) -> datetime:
        """Timestamps without an offset are UTC, so the two stay comparable."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_validator('categories', 'tags', mode='before')
    @classmethod
    def null_list_is_empty(cls, v):
        """Some API versions send null instead of an empty list."""
        return [] if v is None else v

    def to_model(self) -> Article:
        return Article(
            id=self.id,
            slug=self.slug,
            title=self.title,
            excerpt=self.excerpt or '',
            content=self.content or '',
            image=self.image,
            created_at=self.created_at,
            updated_at=self.updated_at,
            user=self.user.to_model(),
            categories=[c.to_model() for c in self.categories],
            tags=[t.to_model() for t in self.tags],
        )


class ArticleResponse(BaseModel):
    """Envelope for ``GET /articles/{slug}``."""
    model_config = ConfigDict(extra='ignore')

    success: bool = False
    data: Optional[ArticleSchema] = None


class ArticleListResponse(BaseModel):
    """Envelope for ``GET /articles``."""
    model_config = ConfigDict(extra='ignore')

    success: bool = False
    data: List[ArticleSchema] = Field(default_factory=list)


class UserResponse(BaseModel):
    """Envelope for ``GET /current_user``."""
    model_config = ConfigDict(extra='ignore')

    success: bool = False
    data: Optional[UserSchema] = None


def parse_article_response(payload: dict) -> Optional[Article]:
    """
    Validate an article envelope.

    Args:
        payload: Decoded JSON body

    Returns:
        Article model, or None if the API reported failure

    Raises:
        pydantic.ValidationError: If the payload is malformed
    """
    response = ArticleResponse.model_validate(payload)
    if not response.success or response.data is None:
        return None
    return response.data.to_model()


def parse_article_list_response(payload: dict) -> Optional[List[Article]]:
    """
    Validate an article list envelope.

    Returns:
        List of Article models, or None if the API reported failure
    """
    response = ArticleListResponse.model_validate(payload)
    if not response.success:
        return None
    return [article.to_model() for article in response.data]


def parse_user_response(payload: dict) -> Optional[Author]:
    """Validate a current-user envelope; None if the API reported failure."""
    response = UserResponse.model_validate(payload)
    if not response.success or response.data is None:
        return None
    return response.data.to_model()

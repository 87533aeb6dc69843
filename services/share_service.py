"""
Share Service - Canonical URLs and social sharing links for articles
"""

from dataclasses import dataclass
from urllib.parse import quote

FACEBOOK_SHARER_URL = 'https://www.facebook.com/sharer.php'
TWITTER_INTENT_URL = 'https://twitter.com/intent/tweet'

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class ShareLinks:
    """Prebuilt outbound links for one article."""
    canonical: str
    facebook: str
    twitter: str


class ShareService:
    """Builds canonical and share URLs from the public website URL."""

    def __init__(self, website_url: str):
        self.website_url = website_url.rstrip('/')

    def canonical_url(self, slug: str) -> str:
        """Fully qualified URL of an article page."""
        return f"{self.website_url}/article/{slug}"

    def share_links(self, slug: str, title: str) -> ShareLinks:
        """
        Build the Facebook and Twitter share links for an article.

        The canonical URL is interpolated as-is; only the tweet text (the
        title) is percent-encoded.
        """
        canonical = self.canonical_url(slug)
        tweet_title = quote(title or '', safe=_URI_COMPONENT_SAFE)
        return ShareLinks(
            canonical=canonical,
            facebook=f"{FACEBOOK_SHARER_URL}?u={canonical}",
            twitter=f"{TWITTER_INTENT_URL}?text={tweet_title}%20{canonical}",
        )

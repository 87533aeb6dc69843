"""
Markdown Service - Renders article bodies to HTML
"""

import markdown
from markdown.extensions import Extension

MARKDOWN_EXTENSIONS = ['fenced_code', 'tables', 'sane_lists']


class EscapeHtmlExtension(Extension):
    """Render raw HTML in the source as text instead of markup."""

    def extendMarkdown(self, md):
        md.preprocessors.deregister('html_block')
        md.inlinePatterns.deregister('html')


class MarkdownService:
    """Converts markdown article content to HTML."""

    def __init__(self, extensions=None):
        self.extensions = list(extensions or MARKDOWN_EXTENSIONS)

    def render(self, source: str) -> str:
        """
        Render markdown text to an HTML fragment.

        Raw HTML tags in the source are escaped, so API content cannot
        inject scripts or event handlers into the page.

        Args:
            source: Markdown text, may be empty or None

        Returns:
            HTML string (empty for empty input)
        """
        if not source:
            return ''
        return markdown.markdown(
            source,
            extensions=self.extensions + [EscapeHtmlExtension()],
            output_format='html',
        )

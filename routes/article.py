"""
Article Routes Blueprint

Renders a single article page with its related articles and share links.
"""

from flask import Blueprint, render_template, abort, current_app

article_bp = Blueprint('article', __name__, url_prefix='/article')


@article_bp.route("/<slug>")
def article(slug):
    """Display an article loaded from the blog API."""
    services = current_app.extensions['blog']

    page = services.articles.get_article_page(slug)
    if page is None:
        current_app.logger.warning(f"Article not found: {slug}")
        abort(404)

    article_data = page.article
    share = services.share.share_links(article_data.slug, article_data.title)
    content_html = services.markdown.render(article_data.content)

    current_app.logger.info(
        f"Article accessed: {slug} - {len(page.articles_related)} related"
    )

    return render_template(
        "article.html",
        article=article_data,
        articles_related=page.articles_related,
        content_html=content_html,
        share=share,
    )

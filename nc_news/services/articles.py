"""Compatibility façade that re-exports article service functions.

Routers import this module so tests can patch one place regardless of
where the implementation lives.
"""

from .articles_read import count_articles, get_article, list_articles  # noqa: F401
from .articles_write import delete_article, insert_article, update_article_votes  # noqa: F401

__all__ = [
    "list_articles",
    "count_articles",
    "get_article",
    "update_article_votes",
    "insert_article",
    "delete_article",
]

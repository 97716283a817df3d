from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Tuple

from nc_news.core.errors import InvalidParameter
from nc_news.services.pagination import Page


class SortColumn(str, Enum):
    article_id = "article_id"
    title = "title"
    topic = "topic"
    author = "author"
    created_at = "created_at"
    votes = "votes"
    comment_count = "comment_count"

    @property
    def sql(self) -> str:
        return _SORT_SQL[self]


# Trusted identifiers; user input only ever selects one of these
_SORT_SQL = {
    SortColumn.article_id: "articles.article_id",
    SortColumn.title: "articles.title",
    SortColumn.topic: "articles.topic",
    SortColumn.author: "articles.author",
    SortColumn.created_at: "articles.created_at",
    SortColumn.votes: "articles.votes",
    SortColumn.comment_count: "comment_count",
}


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"

    @property
    def sql(self) -> str:
        return "ASC" if self is SortOrder.asc else "DESC"


DEFAULT_SORT = SortColumn.created_at
DEFAULT_ORDER = SortOrder.desc

LISTING_COLUMNS = """
    articles.article_id, articles.title, articles.topic, articles.author,
    articles.created_at, articles.votes, articles.article_img_url,
    CAST(COUNT(comments.comment_id) AS INT) AS comment_count
"""


def parse_sort_column(value: Optional[str]) -> SortColumn:
    if value is None or value == "":
        return DEFAULT_SORT
    try:
        return SortColumn(value)
    except ValueError:
        raise InvalidParameter("sort_by") from None


def parse_sort_order(value: Optional[str]) -> SortOrder:
    if value is None or value == "":
        return DEFAULT_ORDER
    try:
        return SortOrder(value.lower())
    except ValueError:
        raise InvalidParameter("order") from None


def _topic_filter(topic: Optional[str], args: List[Any]) -> str:
    if topic is None:
        return ""
    args.append(topic)
    return "WHERE articles.topic = $%d" % len(args)


def _order_clause(sort_by: SortColumn, order: SortOrder) -> str:
    keys = ["%s %s" % (sort_by.sql, order.sql)]
    if sort_by is not SortColumn.created_at:
        keys.append("articles.created_at DESC")
    if sort_by is not SortColumn.article_id:
        keys.append("articles.article_id DESC")
    return ", ".join(keys)


def build_articles_query(
    topic: Optional[str] = None,
    sort_by: SortColumn = DEFAULT_SORT,
    order: SortOrder = DEFAULT_ORDER,
    page: Optional[Page] = None,
) -> Tuple[str, List[Any]]:
    """Compose the article listing statement and its bound arguments.

    Comments are left-joined and counted in the same statement, so an article
    with no comments still appears with ``comment_count`` 0. Ties on the sort
    key fall back to newest first, then highest id, which keeps page
    boundaries stable across requests.
    """
    args: List[Any] = []
    where_sql = _topic_filter(topic, args)
    sql = f"""
        SELECT {LISTING_COLUMNS}
        FROM articles
        LEFT JOIN comments ON comments.article_id = articles.article_id
        {where_sql}
        GROUP BY articles.article_id
        ORDER BY {_order_clause(sort_by, order)}
        """
    if page is not None:
        args.extend([page.limit, page.offset])
        sql += "LIMIT $%d OFFSET $%d\n" % (len(args) - 1, len(args))
    return sql, args


def build_article_count_query(topic: Optional[str] = None) -> Tuple[str, List[Any]]:
    args: List[Any] = []
    where_sql = _topic_filter(topic, args)
    sql = f"""
        SELECT CAST(COUNT(*) AS INT) AS total_count
        FROM articles
        {where_sql}
        """
    return sql, args

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from nc_news.db.pool import pool
from nc_news.services.articles_query import (
    DEFAULT_ORDER,
    DEFAULT_SORT,
    SortColumn,
    SortOrder,
    build_article_count_query,
    build_articles_query,
)
from nc_news.services.pagination import Page
from nc_news.services.shaping import shape_articles


logger = logging.getLogger("nc_news.articles")


async def list_articles(
    topic: Optional[str] = None,
    sort_by: SortColumn = DEFAULT_SORT,
    order: SortOrder = DEFAULT_ORDER,
    page: Optional[Page] = None,
) -> List[Dict[str, Any]]:
    sql, args = build_articles_query(topic, sort_by, order, page)
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch(sql, *args)
    logger.debug(
        "Articles listed",
        extra={"event": "articles_listed", "topic": topic, "sort_by": sort_by.value, "rows": len(rows)},
    )
    return shape_articles(rows)


async def count_articles(topic: Optional[str] = None) -> int:
    sql, args = build_article_count_query(topic)
    p = pool()
    async with p.acquire() as conn:
        total = await conn.fetchval(sql, *args)
    return int(total or 0)


async def get_article(article_id: int) -> Optional[Dict[str, Any]]:
    sql = """
    SELECT
      articles.article_id,
      articles.title,
      articles.topic,
      articles.author,
      articles.body,
      articles.created_at,
      articles.votes,
      articles.article_img_url,
      CAST(COUNT(comments.comment_id) AS INT) AS comment_count
    FROM articles
    LEFT JOIN comments ON comments.article_id = articles.article_id
    WHERE articles.article_id = $1
    GROUP BY articles.article_id
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, article_id)
    if not row:
        return None
    return dict(row)

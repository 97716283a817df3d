from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from nc_news.db.pool import pool


logger = logging.getLogger("nc_news.articles")

_RETURNING = """
RETURNING article_id, title, topic, author, body, created_at, votes, article_img_url
"""


async def update_article_votes(article_id: int, inc_votes: int) -> Optional[Dict[str, Any]]:
    sql = """
    UPDATE articles
    SET votes = votes + $1
    WHERE article_id = $2
    """ + _RETURNING
    count_sql = "SELECT CAST(COUNT(*) AS INT) FROM comments WHERE article_id = $1"
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, inc_votes, article_id)
        if not row:
            return None
        comment_count = await conn.fetchval(count_sql, article_id)
    article = dict(row)
    article["comment_count"] = int(comment_count or 0)
    return article


async def insert_article(
    author: str,
    title: str,
    body: str,
    topic: str,
    article_img_url: Optional[str] = None,
) -> Dict[str, Any]:
    # Unset image falls back to the column default
    if article_img_url is None:
        sql = """
        INSERT INTO articles (author, title, body, topic)
        VALUES ($1, $2, $3, $4)
        """ + _RETURNING
        args = [author, title, body, topic]
    else:
        sql = """
        INSERT INTO articles (author, title, body, topic, article_img_url)
        VALUES ($1, $2, $3, $4, $5)
        """ + _RETURNING
        args = [author, title, body, topic, article_img_url]
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, *args)
    article = dict(row)
    article["comment_count"] = 0
    logger.info(
        "Article created",
        extra={"event": "article_created", "article_id": article["article_id"], "topic": topic},
    )
    return article


async def delete_article(article_id: int) -> bool:
    p = pool()
    async with p.acquire() as conn:
        async with conn.transaction():
            await conn.execute("DELETE FROM comments WHERE article_id = $1", article_id)
            deleted = await conn.fetchval(
                "DELETE FROM articles WHERE article_id = $1 RETURNING article_id", article_id
            )
    if deleted is None:
        return False
    logger.info("Article deleted", extra={"event": "article_deleted", "article_id": article_id})
    return True

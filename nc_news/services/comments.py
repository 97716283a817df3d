from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from nc_news.db.pool import pool
from nc_news.services.pagination import Page


logger = logging.getLogger("nc_news.comments")

COMMENT_COLUMNS = "comment_id, article_id, author, body, votes, created_at"


async def list_comments(article_id: int, page: Optional[Page] = None) -> Optional[List[Dict[str, Any]]]:
    """Comments for an article, newest first.

    Returns None when the article itself does not exist, an empty list when
    it exists but has no comments (or the page is past the end).
    """
    args: List[Any] = [article_id]
    sql = f"""
    SELECT {COMMENT_COLUMNS}
    FROM comments
    WHERE article_id = $1
    ORDER BY created_at DESC, comment_id DESC
    """
    if page is not None:
        args.extend([page.limit, page.offset])
        sql += "LIMIT $2 OFFSET $3\n"
    p = pool()
    async with p.acquire() as conn:
        exists = await conn.fetchval("SELECT 1 FROM articles WHERE article_id = $1", article_id)
        if exists is None:
            return None
        rows = await conn.fetch(sql, *args)
    return [dict(r) for r in rows]


async def insert_comment(article_id: int, username: str, body: str) -> Dict[str, Any]:
    sql = f"""
    INSERT INTO comments (article_id, author, body)
    VALUES ($1, $2, $3)
    RETURNING {COMMENT_COLUMNS}
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, article_id, username, body)
    comment = dict(row)
    logger.info(
        "Comment created",
        extra={"event": "comment_created", "comment_id": comment["comment_id"], "article_id": article_id},
    )
    return comment


async def update_comment_votes(comment_id: int, inc_votes: int) -> Optional[Dict[str, Any]]:
    sql = f"""
    UPDATE comments
    SET votes = votes + $1
    WHERE comment_id = $2
    RETURNING {COMMENT_COLUMNS}
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, inc_votes, comment_id)
    return dict(row) if row else None


async def delete_comment(comment_id: int) -> bool:
    p = pool()
    async with p.acquire() as conn:
        deleted = await conn.fetchval(
            "DELETE FROM comments WHERE comment_id = $1 RETURNING comment_id", comment_id
        )
    if deleted is None:
        return False
    logger.info("Comment deleted", extra={"event": "comment_deleted", "comment_id": comment_id})
    return True

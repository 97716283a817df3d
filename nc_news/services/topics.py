from __future__ import annotations

from typing import Dict, List, Optional

from nc_news.db.pool import pool


async def list_topics() -> List[Dict]:
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch("SELECT slug, description FROM topics ORDER BY slug")
        return [dict(r) for r in rows]


async def insert_topic(slug: str, description: Optional[str] = None) -> Dict:
    sql = """
    INSERT INTO topics (slug, description)
    VALUES ($1, $2)
    RETURNING slug, description
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, slug, description)
        return dict(row)

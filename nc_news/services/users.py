from __future__ import annotations

from typing import Dict, List, Optional

from nc_news.db.pool import pool


async def list_users() -> List[Dict]:
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch("SELECT username, name, avatar_url FROM users ORDER BY username")
        return [dict(r) for r in rows]


async def get_user(username: str) -> Optional[Dict]:
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(
            "SELECT username, name, avatar_url FROM users WHERE username = $1", username
        )
        return dict(row) if row else None

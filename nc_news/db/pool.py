# nc_news/db/pool.py
import logging
from typing import Optional

import asyncpg

from nc_news.config import DB_DSN, DB_POOL_MAX_SIZE, DB_POOL_MIN_SIZE

logger = logging.getLogger("nc_news.db")

_pool: Optional[asyncpg.pool.Pool] = None


async def connect_db():
    global _pool
    if _pool is None:
        if not DB_DSN:
            raise RuntimeError("DATABASE_URL is not configured")
        _pool = await asyncpg.create_pool(dsn=DB_DSN, min_size=DB_POOL_MIN_SIZE, max_size=DB_POOL_MAX_SIZE)
        logger.info(
            "Database pool opened",
            extra={"event": "db_pool_opened", "min_size": DB_POOL_MIN_SIZE, "max_size": DB_POOL_MAX_SIZE},
        )


async def close_db():
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None
        logger.info("Database pool closed", extra={"event": "db_pool_closed"})


def pool():
    if _pool is None:
        raise RuntimeError("Database pool is not initialized. Call connect_db() first.")
    return _pool

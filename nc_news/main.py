from contextlib import asynccontextmanager

import logging

from fastapi import FastAPI

from nc_news.api import articles
from nc_news.api import comments as comments_api
from nc_news.api import endpoints as endpoints_api
from nc_news.api import topics as topics_api
from nc_news.api import users as users_api
from nc_news.config import LOG_LEVEL, ROOT_PATH
from nc_news.core.errors import register_error_handlers
from nc_news.db import pool as db_pool


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Looked up through the module so tests can swap the pool hooks out
    await db_pool.connect_db()
    try:
        yield
    finally:
        await db_pool.close_db()


app = FastAPI(
    title="NC News",
    lifespan=lifespan,
    root_path=ROOT_PATH,
)
app.include_router(endpoints_api.router)
app.include_router(topics_api.router)
app.include_router(articles.router)
app.include_router(comments_api.router)
app.include_router(users_api.router)
register_error_handlers(app)

# Basic logging configuration (can be overridden by server config)
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

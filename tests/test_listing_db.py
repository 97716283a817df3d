"""Listing behaviour against a real PostgreSQL database.

Runs only when TEST_DATABASE_URL points at a scratch database; every test
rebuilds the schema from nc_news/db/schema.sql and reseeds it.
"""
from __future__ import annotations

import asyncio
import os
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient


TEST_DSN = os.getenv("TEST_DATABASE_URL")
pytestmark = pytest.mark.skipif(not TEST_DSN, reason="TEST_DATABASE_URL is not set")

SCHEMA = Path(__file__).resolve().parents[1] / "nc_news" / "db" / "schema.sql"


def _ts(month: int, day: int) -> datetime:
    return datetime(2020, month, day, 12, 0, tzinfo=timezone.utc)


TOPICS = [("mitch", "The man, the Mitch, the legend"), ("cats", "Not dogs"), ("paper", "what books are made of")]
USERS = [
    ("butter_bridge", "jonny", None),
    ("icellusedkars", "sam", None),
    ("rogersop", "paul", None),
    ("lurker", "do_nothing", None),
]
# (title, topic, author, created_at, votes)
ARTICLES = [
    ("Living in the shadow of a great man", "mitch", "butter_bridge", _ts(7, 9), 100),
    ("Sony Vaio; or, The Laptop", "mitch", "icellusedkars", _ts(10, 16), 0),
    ("Eight pug gifs that remind me of mitch", "mitch", "icellusedkars", _ts(11, 3), 0),
    ("Student SUES Mitch!", "mitch", "rogersop", _ts(5, 6), 0),
    ("UNCOVERED: catspiracy to bring down democracy", "cats", "rogersop", _ts(8, 3), 0),
    ("A", "mitch", "icellusedkars", _ts(10, 18), 0),
    ("Z", "mitch", "icellusedkars", _ts(1, 7), 0),
    ("Does Mitch predate civilisation?", "mitch", "icellusedkars", _ts(4, 17), 0),
    ("They're not exactly dogs, are they?", "mitch", "butter_bridge", _ts(6, 6), 0),
    ("Seven inspirational thought leaders from Manchester UK", "mitch", "rogersop", _ts(5, 14), 0),
    ("Am I a cat?", "mitch", "icellusedkars", _ts(1, 15), 0),
    ("Another article about Mitch", "mitch", "butter_bridge", _ts(10, 11), 0),
    ("Moustache", "mitch", "butter_bridge", _ts(3, 1), 12),
]
# article_id -> number of comments
COMMENT_COUNTS = {1: 11, 3: 2, 5: 2, 6: 1, 9: 2}


async def _seed() -> None:
    import asyncpg

    conn = await asyncpg.connect(TEST_DSN)
    try:
        await conn.execute(SCHEMA.read_text(encoding="utf-8"))
        await conn.executemany("INSERT INTO topics (slug, description) VALUES ($1, $2)", TOPICS)
        await conn.executemany("INSERT INTO users (username, name, avatar_url) VALUES ($1, $2, $3)", USERS)
        await conn.executemany(
            "INSERT INTO articles (title, topic, author, body, created_at, votes) VALUES ($1, $2, $3, 'body', $4, $5)",
            [(t, topic, a, c, v) for t, topic, a, c, v in ARTICLES],
        )
        comments = []
        for article_id, count in COMMENT_COUNTS.items():
            for i in range(count):
                comments.append((article_id, "lurker", f"comment {i}", _ts(12, 1 + i)))
        await conn.executemany(
            "INSERT INTO comments (article_id, author, body, created_at) VALUES ($1, $2, $3, $4)", comments
        )
    finally:
        await conn.close()


@pytest.fixture()
def db_client(monkeypatch):
    asyncio.run(_seed())
    import nc_news.db.pool as db_pool

    monkeypatch.setattr(db_pool, "DB_DSN", TEST_DSN)
    monkeypatch.setattr(db_pool, "_pool", None)
    from nc_news import main as main_mod

    with TestClient(main_mod.app) as test_client:
        yield test_client


def _is_sorted(values, descending=False):
    pairs = list(zip(values, values[1:]))
    return all(a >= b for a, b in pairs) if descending else all(a <= b for a, b in pairs)


def test_default_listing_newest_first(db_client):
    data = db_client.get("/api/articles").json()
    assert data["totalCount"] == len(ARTICLES)
    assert len(data["articles"]) == 10
    assert _is_sorted([a["created_at"] for a in data["articles"]], descending=True)
    assert all("body" not in a for a in data["articles"])


def test_comment_counts_match_comment_rows(db_client):
    data = db_client.get(f"/api/articles?limit={len(ARTICLES)}").json()
    counts = {a["article_id"]: a["comment_count"] for a in data["articles"]}
    for article_id in range(1, len(ARTICLES) + 1):
        assert counts[article_id] == COMMENT_COUNTS.get(article_id, 0)


def test_topic_filter(db_client):
    data = db_client.get("/api/articles?topic=cats").json()
    assert data["totalCount"] == 1
    assert [a["topic"] for a in data["articles"]] == ["cats"]

    resp = db_client.get("/api/articles?topic=unknowntopic")
    assert resp.status_code == 404
    assert resp.text == "No articles found for topic: unknowntopic"


def test_topic_value_is_not_sql(db_client):
    resp = db_client.get("/api/articles", params={"topic": "mitch' OR '1'='1"})
    assert resp.status_code == 404


def test_sort_by_votes_defaults_to_descending_with_date_ties(db_client):
    articles = db_client.get(f"/api/articles?sort_by=votes&limit={len(ARTICLES)}").json()["articles"]
    assert [a["article_id"] for a in articles[:2]] == [1, 13]
    tied = [a["created_at"] for a in articles if a["votes"] == 0]
    assert _is_sorted(tied, descending=True)


def test_sort_by_author_ascending(db_client):
    articles = db_client.get("/api/articles?sort_by=author&order=asc&limit=20").json()["articles"]
    assert _is_sorted([a["author"] for a in articles])


def test_sort_by_comment_count(db_client):
    articles = db_client.get("/api/articles?sort_by=comment_count&order=desc").json()["articles"]
    assert _is_sorted([a["comment_count"] for a in articles], descending=True)
    assert articles[0]["comment_count"] == 11


def test_page_two_of_three(db_client):
    data = db_client.get("/api/articles?sort_by=article_id&order=asc&limit=3&p=2").json()
    assert [a["article_id"] for a in data["articles"]] == [4, 5, 6]
    assert data["articles"][1]["comment_count"] == 2
    assert data["totalCount"] == len(ARTICLES)


def test_full_page_returns_every_article_once(db_client):
    data = db_client.get(f"/api/articles?limit={len(ARTICLES)}").json()
    ids = [a["article_id"] for a in data["articles"]]
    assert sorted(ids) == list(range(1, len(ARTICLES) + 1))


def test_pages_partition_the_listing(db_client):
    seen = []
    for page in range(1, 6):
        seen += [a["article_id"] for a in db_client.get(f"/api/articles?sort_by=votes&limit=3&p={page}").json()["articles"]]
    assert len(seen) == len(set(seen)) == len(ARTICLES)


def test_comment_lifecycle_updates_count(db_client):
    resp = db_client.post("/api/articles/2/comments", json={"username": "rogersop", "body": "first!"})
    assert resp.status_code == 201
    assert db_client.get("/api/articles/2").json()["article"]["comment_count"] == 1

    resp = db_client.post("/api/articles/2/comments", json={"username": "ghost", "body": "boo"})
    assert resp.status_code == 404

    comment_id = db_client.get("/api/articles/2/comments").json()["comments"][0]["comment_id"]
    assert db_client.delete(f"/api/comments/{comment_id}").status_code == 204
    assert db_client.get("/api/articles/2").json()["article"]["comment_count"] == 0

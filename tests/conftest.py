import pytest
import sys
from pathlib import Path

# Ensure repository root is on sys.path for `import nc_news`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def client(monkeypatch):
    # Patch DB init/close in lifespan to no-op
    import nc_news.db.pool as db_pool

    async def _noop(*args, **kwargs):
        return None

    monkeypatch.setattr(db_pool, "connect_db", _noop)
    monkeypatch.setattr(db_pool, "close_db", _noop)

    from nc_news import main as main_mod

    with TestClient(main_mod.app) as test_client:
        yield test_client


class FakeTransaction:
    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeConnection:
    """Records every statement and answers from per-method queues."""

    def __init__(self):
        self.calls = []
        self.fetch_results = []
        self.fetchrow_results = []
        self.fetchval_results = []

    async def fetch(self, sql, *args):
        self.calls.append(("fetch", sql, args))
        return self.fetch_results.pop(0) if self.fetch_results else []

    async def fetchrow(self, sql, *args):
        self.calls.append(("fetchrow", sql, args))
        return self.fetchrow_results.pop(0) if self.fetchrow_results else None

    async def fetchval(self, sql, *args):
        self.calls.append(("fetchval", sql, args))
        return self.fetchval_results.pop(0) if self.fetchval_results else None

    async def execute(self, sql, *args):
        self.calls.append(("execute", sql, args))
        return "OK"

    def transaction(self):
        return FakeTransaction()


class _Acquire:
    def __init__(self, conn):
        self._conn = conn

    async def __aenter__(self):
        return self._conn

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakePool:
    def __init__(self, conn):
        self.conn = conn

    def acquire(self):
        return _Acquire(self.conn)


@pytest.fixture()
def fake_conn(monkeypatch):
    conn = FakeConnection()
    fake = FakePool(conn)
    for module in (
        "nc_news.services.articles_read",
        "nc_news.services.articles_write",
        "nc_news.services.comments",
        "nc_news.services.topics",
        "nc_news.services.users",
    ):
        monkeypatch.setattr(f"{module}.pool", lambda: fake)
    return conn

# nc_news/config.py
import os
from dotenv import load_dotenv
load_dotenv()


def _optional_int(name: str):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


DB_DSN = os.getenv("DATABASE_URL")
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", "1"))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ROOT_PATH = os.getenv("ROOT_PATH", "")
DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", "10"))
# None keeps page size unbounded
MAX_PAGE_LIMIT = _optional_int("MAX_PAGE_LIMIT")

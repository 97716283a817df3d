from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from nc_news.config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from nc_news.core.errors import InvalidParameter


@dataclass(frozen=True)
class Page:
    limit: int
    page: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _positive_int(value, default: int, name: str) -> int:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise InvalidParameter(name)
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidParameter(name)
        number = int(text)
    if number < 1:
        raise InvalidParameter(name)
    return number


def parse_page(
    limit=None,
    p=None,
    *,
    default_limit: int = DEFAULT_PAGE_LIMIT,
    max_limit: Optional[int] = MAX_PAGE_LIMIT,
) -> Page:
    """Turn raw ``limit``/``p`` query values into a validated 1-based page.

    Missing values fall back to ``default_limit`` and page 1. Anything that is
    not a positive integer, or a limit above ``max_limit`` when one is
    configured, raises InvalidParameter.
    """
    size = _positive_int(limit, default_limit, "limit")
    if max_limit is not None and size > max_limit:
        raise InvalidParameter("limit")
    number = _positive_int(p, 1, "p")
    return Page(limit=size, page=number)

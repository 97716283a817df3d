from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

LISTING_FIELDS = (
    "article_id",
    "title",
    "topic",
    "author",
    "created_at",
    "votes",
    "article_img_url",
)


def shape_articles(rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Collapse article rows into one listing record per article.

    Accepts either raw article x comment join rows (with ``comment_id``, null
    when the article has no comments) or rows already aggregated by the store
    (with ``comment_count``). Output keeps first-seen article order and never
    carries ``body``.
    """
    shaped: Dict[Any, Dict[str, Any]] = {}
    for raw in rows:
        row = dict(raw)
        article_id = row["article_id"]
        record = shaped.get(article_id)
        if record is None:
            record = {field: row.get(field) for field in LISTING_FIELDS}
            record["comment_count"] = 0
            shaped[article_id] = record
        if "comment_count" in row and row["comment_count"] is not None:
            record["comment_count"] += int(row["comment_count"])
        elif row.get("comment_id") is not None:
            record["comment_count"] += 1
    return list(shaped.values())

# nc_news/api/articles.py
from typing import Optional

from fastapi import APIRouter, Query, Response, status

from nc_news.core.errors import NotFound
from nc_news.models.schemas import (
    ArticleListResponse,
    ArticleResponse,
    CommentListResponse,
    CommentResponse,
    NewArticle,
    NewComment,
    VoteUpdate,
)
from nc_news.services import articles as svc
from nc_news.services import comments as comments_svc
from nc_news.services.articles_query import parse_sort_column, parse_sort_order
from nc_news.services.pagination import parse_page

router = APIRouter(prefix="/api/articles", tags=["articles"])


# -----------------------
#  Listing
# -----------------------

@router.get("", response_model=ArticleListResponse, summary="Paginated, filterable article listing")
async def get_articles(
    topic: Optional[str] = Query(None, description="Only articles with this topic slug"),
    sort_by: Optional[str] = Query(None, description="Column to sort by (default created_at)"),
    order: Optional[str] = Query(None, description="asc or desc (default desc)"),
    limit: Optional[str] = Query(None, description="Page size (default 10)"),
    p: Optional[str] = Query(None, description="1-based page number"),
):
    """
    Validates every query value before touching the store, then issues the
    count query and the listing query as two separate round trips. They do not
    share a transaction, so under concurrent writes totalCount may describe a
    slightly different snapshot than the listed page.
    """
    sort_column = parse_sort_column(sort_by)
    sort_order = parse_sort_order(order)
    page = parse_page(limit, p)
    topic = topic or None

    total_count = await svc.count_articles(topic)
    if topic is not None and total_count == 0:
        raise NotFound(f"No articles found for topic: {topic}")
    articles = await svc.list_articles(topic=topic, sort_by=sort_column, order=sort_order, page=page)
    return {"articles": articles, "totalCount": total_count}


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED,
             summary="Create an article")
async def post_article(payload: NewArticle):
    article = await svc.insert_article(
        author=payload.author,
        title=payload.title,
        body=payload.body,
        topic=payload.topic,
        article_img_url=payload.article_img_url,
    )
    return {"article": article}


# -----------------------
#  Single article
# -----------------------

@router.get("/{article_id}", response_model=ArticleResponse, summary="Full article by id")
async def get_article_by_id(article_id: int):
    article = await svc.get_article(article_id)
    if not article:
        raise NotFound(f"No article found for article_id: {article_id}")
    return {"article": article}


@router.patch("/{article_id}", response_model=ArticleResponse, summary="Change an article's vote count")
async def patch_article(article_id: int, payload: VoteUpdate):
    article = await svc.update_article_votes(article_id, payload.inc_votes)
    if not article:
        raise NotFound(f"No article found for article_id {article_id}")
    return {"article": article}


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an article")
async def remove_article(article_id: int):
    if not await svc.delete_article(article_id):
        raise NotFound(f"No article found for article_id {article_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -----------------------
#  Comments of an article
# -----------------------

@router.get("/{article_id}/comments", response_model=CommentListResponse,
            summary="Comments of an article, newest first")
async def get_comments_by_article_id(
    article_id: int,
    limit: Optional[str] = Query(None),
    p: Optional[str] = Query(None),
):
    page = parse_page(limit, p)
    comments = await comments_svc.list_comments(article_id, page=page)
    if comments is None:
        raise NotFound(f"No article found for article_id {article_id}")
    return {"comments": comments}


@router.post("/{article_id}/comments", response_model=CommentResponse,
             status_code=status.HTTP_201_CREATED, summary="Add a comment to an article")
async def post_comment(article_id: int, payload: NewComment):
    comment = await comments_svc.insert_comment(article_id, payload.username, payload.body)
    return {"comment": comment}

from fastapi import APIRouter, status

from nc_news.models.schemas import NewTopic, TopicListResponse, TopicResponse
from nc_news.services import topics as svc

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("", response_model=TopicListResponse, summary="All topics")
async def get_topics():
    return {"topics": await svc.list_topics()}


@router.post("", response_model=TopicResponse, status_code=status.HTTP_201_CREATED, summary="Create a topic")
async def post_topic(payload: NewTopic):
    topic = await svc.insert_topic(payload.slug, payload.description)
    return {"topic": topic}

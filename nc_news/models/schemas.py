# nc_news/models/schemas.py
from pydantic import BaseModel, ConfigDict, Field, StrictInt
from typing import Optional, List
from datetime import datetime


# --- Topic ---
class Topic(BaseModel):
    slug: str
    description: Optional[str] = None


# --- User ---
class User(BaseModel):
    username: str
    name: str
    avatar_url: Optional[str] = None


# --- Article in a listing ---
# Used by the listing endpoint: no body, comment_count derived per request
class ArticleListItem(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    created_at: datetime
    votes: int
    article_img_url: Optional[str] = None
    comment_count: int = 0


# --- Full article ---
# Used by single-article retrieval, update and creation
class Article(ArticleListItem):
    body: str


class Comment(BaseModel):
    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime


# --- Response envelopes ---
class ArticleListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    articles: List[ArticleListItem]
    total_count: int = Field(alias="totalCount")


class ArticleResponse(BaseModel):
    article: Article


class CommentListResponse(BaseModel):
    comments: List[Comment]


class CommentResponse(BaseModel):
    comment: Comment


class TopicListResponse(BaseModel):
    topics: List[Topic]


class TopicResponse(BaseModel):
    topic: Topic


class UserListResponse(BaseModel):
    users: List[User]


class UserResponse(BaseModel):
    user: User


# --- Request bodies ---
class VoteUpdate(BaseModel):
    inc_votes: StrictInt


class NewArticle(BaseModel):
    author: str
    title: str
    body: str
    topic: str
    article_img_url: Optional[str] = None


class NewComment(BaseModel):
    username: str
    body: str = Field(min_length=1)


class NewTopic(BaseModel):
    slug: str = Field(min_length=1)
    description: Optional[str] = None

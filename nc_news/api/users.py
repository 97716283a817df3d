from fastapi import APIRouter

from nc_news.core.errors import NotFound
from nc_news.models.schemas import UserListResponse, UserResponse
from nc_news.services import users as svc

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserListResponse, summary="All users")
async def get_users():
    return {"users": await svc.list_users()}


@router.get("/{username}", response_model=UserResponse, summary="User by username")
async def get_user_by_username(username: str):
    user = await svc.get_user(username)
    if not user:
        raise NotFound(f"No user found for username: {username}")
    return {"user": user}

from fastapi import APIRouter, Response, status

from nc_news.core.errors import NotFound
from nc_news.models.schemas import CommentResponse, VoteUpdate
from nc_news.services import comments as svc

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.patch("/{comment_id}", response_model=CommentResponse, summary="Change a comment's vote count")
async def patch_comment(comment_id: int, payload: VoteUpdate):
    comment = await svc.update_comment_votes(comment_id, payload.inc_votes)
    if not comment:
        raise NotFound(f"No comment found for comment_id {comment_id}")
    return {"comment": comment}


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a comment")
async def remove_comment(comment_id: int):
    if not await svc.delete_comment(comment_id):
        raise NotFound(f"No comment found for comment_id {comment_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

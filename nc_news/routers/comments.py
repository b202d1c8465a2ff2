from fastapi import APIRouter, Depends, Response

from nc_news.dependencies.postgres import Store, get_store
from nc_news.repositories import comments as comment_repository

router = APIRouter(prefix="/api/comments", tags=["Comments"])


@router.delete("/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: str,
    store: Store = Depends(get_store),
) -> Response:
    await comment_repository.delete_comment(store, comment_id)
    return Response(status_code=204)

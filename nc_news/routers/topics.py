from fastapi import APIRouter, Depends
from pydantic import BaseModel

from nc_news.dependencies.postgres import Store, get_store
from nc_news.repositories import topics as topic_repository

router = APIRouter(prefix="/api/topics", tags=["Topics"])


class TopicResponse(BaseModel):
    slug: str
    description: str


class TopicListResponse(BaseModel):
    topics: list[TopicResponse]


@router.get("", response_model=TopicListResponse)
async def get_topics(store: Store = Depends(get_store)) -> dict:
    return {"topics": await topic_repository.list_topics(store)}

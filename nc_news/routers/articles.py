from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, StrictInt

from nc_news.dependencies.postgres import Store, get_store
from nc_news.repositories import articles as article_repository
from nc_news.repositories import comments as comment_repository

router = APIRouter(prefix="/api/articles", tags=["Articles"])


class PatchArticleRequest(BaseModel):
    # "1" 같은 숫자 문자열도 거부
    inc_votes: StrictInt


class PostCommentRequest(BaseModel):
    username: str = Field(min_length=1)
    body: str = Field(min_length=1)


class ArticleSummaryResponse(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    created_at: datetime | None
    votes: int
    article_img_url: str | None
    comment_count: int


class ArticleResponse(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime | None
    votes: int
    article_img_url: str | None


class ArticleDetailResponse(ArticleResponse):
    comment_count: int


class CommentResponse(BaseModel):
    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime | None


class CommentWithAvatarResponse(CommentResponse):
    avatar_url: str | None


class ArticleListResponse(BaseModel):
    articles: list[ArticleSummaryResponse]


class ArticleDetailEnvelope(BaseModel):
    article: ArticleDetailResponse


class ArticleEnvelope(BaseModel):
    article: ArticleResponse


class CommentListResponse(BaseModel):
    comments: list[CommentWithAvatarResponse]


class CommentEnvelope(BaseModel):
    comment: CommentResponse


@router.get("", response_model=ArticleListResponse)
async def get_articles(
    sort_by: str = Query(default="created_at"),
    order: str = Query(default="desc"),
    topic: Optional[str] = Query(default=None),
    store: Store = Depends(get_store),
) -> dict:
    articles = await article_repository.list_articles(
        store, sort_by=sort_by, order=order, topic=topic
    )
    return {"articles": articles}


@router.get("/{article_id}", response_model=ArticleDetailEnvelope)
async def get_article(
    article_id: str,
    store: Store = Depends(get_store),
) -> dict:
    return {"article": await article_repository.get_article_by_id(store, article_id)}


@router.patch("/{article_id}", response_model=ArticleEnvelope)
async def patch_article_votes(
    article_id: str,
    body: PatchArticleRequest,
    store: Store = Depends(get_store),
) -> dict:
    article = await article_repository.update_article_votes(
        store, article_id, body.inc_votes
    )
    return {"article": article}


@router.get("/{article_id}/comments", response_model=CommentListResponse)
async def get_comments_by_article(
    article_id: str,
    store: Store = Depends(get_store),
) -> dict:
    comments = await comment_repository.list_comments_by_article(store, article_id)
    return {"comments": comments}


@router.post(
    "/{article_id}/comments", response_model=CommentEnvelope, status_code=201
)
async def post_comment(
    article_id: str,
    body: PostCommentRequest,
    store: Store = Depends(get_store),
) -> dict:
    comment = await comment_repository.create_comment(
        store, article_id, body.username, body.body
    )
    return {"comment": comment}

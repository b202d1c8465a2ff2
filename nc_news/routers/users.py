from fastapi import APIRouter, Depends
from pydantic import BaseModel

from nc_news.dependencies.postgres import Store, get_store
from nc_news.repositories import users as user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])


class UserResponse(BaseModel):
    username: str
    name: str
    avatar_url: str | None


class UserListResponse(BaseModel):
    users: list[UserResponse]


class UserDetailResponse(BaseModel):
    user: UserResponse


@router.get("", response_model=UserListResponse)
async def get_users(store: Store = Depends(get_store)) -> dict:
    return {"users": await user_repository.list_users(store)}


@router.get("/{username}", response_model=UserDetailResponse)
async def get_user_by_username(
    username: str,
    store: Store = Depends(get_store),
) -> dict:
    return {"user": await user_repository.get_user_by_username(store, username)}

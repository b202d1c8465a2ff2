from sqlalchemy import select

from nc_news.dependencies.postgres import Store
from nc_news.exceptions import NotFoundError
from nc_news.models.user import User

users = User.__table__

# 외부로 노출되는 사용자 컬럼
PUBLIC_COLUMNS = (users.c.username, users.c.name, users.c.avatar_url)


async def list_users(store: Store) -> list[dict]:
    return await store.execute(select(*PUBLIC_COLUMNS))


async def get_user_by_username(store: Store, username: str) -> dict:
    rows = await store.execute(
        select(*PUBLIC_COLUMNS).where(users.c.username == username)
    )
    if not rows:
        raise NotFoundError("User not found")
    return rows[0]

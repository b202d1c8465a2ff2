from sqlalchemy import select

from nc_news.dependencies.postgres import Store
from nc_news.exceptions import NotFoundError
from nc_news.models.topic import Topic

topics = Topic.__table__


async def list_topics(store: Store) -> list[dict]:
    return await store.execute(select(topics.c.slug, topics.c.description))


async def get_topic(store: Store, slug: str) -> dict:
    rows = await store.execute(
        select(topics.c.slug, topics.c.description).where(topics.c.slug == slug)
    )
    if not rows:
        raise NotFoundError("Topic not found")
    return rows[0]

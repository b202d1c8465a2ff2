import logging

from sqlalchemy import delete, desc, insert, select

from nc_news.dependencies.postgres import Store
from nc_news.exceptions import NotFoundError, ValidationError
from nc_news.models.comment import Comment
from nc_news.models.user import User
from nc_news.repositories.articles import ensure_article_exists, integer_id
from nc_news.repositories.users import get_user_by_username

logger = logging.getLogger(__name__)

comments = Comment.__table__
users = User.__table__


async def list_comments_by_article(store: Store, article_id: str | int) -> list[dict]:
    """
    글의 댓글을 최신순으로 반환합니다. 작성자의 avatar_url이 함께 포함됩니다.
    글은 있지만 댓글이 없으면 빈 리스트를 반환합니다.
    """
    await ensure_article_exists(store, article_id, "Article not found")

    return await store.execute(
        select(*comments.c, users.c.avatar_url)
        .select_from(comments)
        .outerjoin(users, users.c.username == comments.c.author)
        .where(comments.c.article_id == integer_id(article_id))
        .order_by(desc(comments.c.created_at), desc(comments.c.comment_id))
    )


async def create_comment(
    store: Store, article_id: str | int, username: str, body: str
) -> dict:
    """
    검증 순서: 필수 필드 → 글 존재 여부 → 사용자 존재 여부 → INSERT
    """
    if not username or not body:
        raise ValidationError("username and body are required")

    await ensure_article_exists(store, article_id, "Not Found")
    await get_user_by_username(store, username)

    rows = await store.execute(
        insert(comments)
        .values(
            article_id=integer_id(article_id), author=username, body=body, votes=0
        )
        .returning(*comments.c)
    )
    logger.info("comment %s 작성: article=%s", rows[0]["comment_id"], article_id)
    return rows[0]


async def delete_comment(store: Store, comment_id: str | int) -> None:
    rows = await store.execute(
        delete(comments)
        .where(comments.c.comment_id == integer_id(comment_id))
        .returning(comments.c.comment_id)
    )
    if not rows:
        raise NotFoundError("Comment not found")
    logger.info("comment %s 삭제", comment_id)

import logging

from sqlalchemy import Integer, asc, desc, func, literal, select, update

from nc_news.dependencies.postgres import Store
from nc_news.exceptions import NotFoundError, ValidationError
from nc_news.models.article import Article
from nc_news.models.comment import Comment
from nc_news.repositories.topics import get_topic

logger = logging.getLogger(__name__)

articles = Article.__table__
comments = Comment.__table__

# sort_by 허용 목록. 사용자 입력은 SQL 문자열이 아니라 컬럼 객체로만 매핑됨
SORTABLE_COLUMNS = {
    "author": articles.c.author,
    "title": articles.c.title,
    "article_id": articles.c.article_id,
    "topic": articles.c.topic,
    "created_at": articles.c.created_at,
    "votes": articles.c.votes,
    "article_img_url": articles.c.article_img_url,
}

SORT_DIRECTIONS = {"asc": asc, "desc": desc}

# 목록 조회에서는 body를 내려주지 않음
SUMMARY_COLUMNS = (
    articles.c.author,
    articles.c.title,
    articles.c.article_id,
    articles.c.topic,
    articles.c.created_at,
    articles.c.votes,
    articles.c.article_img_url,
)


def _select_with_comment_count(*columns):
    return (
        select(*columns, func.count(comments.c.comment_id).label("comment_count"))
        .select_from(articles)
        .outerjoin(comments, comments.c.article_id == articles.c.article_id)
        .group_by(articles.c.article_id)
    )


def integer_id(value: str | int):
    """
    경로 파라미터(str)를 INTEGER 타입으로 바인딩합니다.
    "banana" 같은 값은 DB에서 22P02로 거부됩니다.
    """
    return literal(value, Integer)


def _coerce_comment_count(row: dict) -> dict:
    return {**row, "comment_count": int(row["comment_count"])}


async def ensure_article_exists(
    store: Store, article_id: str | int, msg: str = "Not Found"
) -> None:
    """article_id에 해당하는 글이 없으면 `msg`로 NotFoundError를 던집니다."""
    rows = await store.execute(
        select(articles.c.article_id).where(
            articles.c.article_id == integer_id(article_id)
        )
    )
    if not rows:
        raise NotFoundError(msg)


async def get_article_by_id(store: Store, article_id: str | int) -> dict:
    rows = await store.execute(
        _select_with_comment_count(*articles.c).where(
            articles.c.article_id == integer_id(article_id)
        )
    )
    if not rows:
        raise NotFoundError("Not Found")
    return _coerce_comment_count(rows[0])


async def list_articles(
    store: Store,
    sort_by: str = "created_at",
    order: str = "desc",
    topic: str | None = None,
) -> list[dict]:
    """
    댓글 수(comment_count)를 포함한 글 목록을 반환합니다.

    sort_by, order는 쿼리를 만들기 전에 허용 목록으로 검증하며
    허용되지 않은 값이면 DB에 접근하지 않고 ValidationError를 던집니다.
    order는 소문자 "asc" / "desc"만 허용합니다.
    topic이 주어지면 해당 토픽의 글만 반환하고, 글이 하나도 없을 때는
    토픽 자체가 존재하는지 확인합니다.
    """
    sort_column = SORTABLE_COLUMNS.get(sort_by)
    if sort_column is None:
        raise ValidationError("Invalid sort_by query")
    direction = SORT_DIRECTIONS.get(order)
    if direction is None:
        raise ValidationError("Invalid order query")

    stmt = _select_with_comment_count(*SUMMARY_COLUMNS).order_by(
        direction(sort_column), direction(articles.c.article_id)
    )
    if topic is not None:
        stmt = stmt.where(articles.c.topic == topic)

    rows = await store.execute(stmt)
    if not rows and topic is not None:
        await get_topic(store, topic)
    return [_coerce_comment_count(row) for row in rows]


async def update_article_votes(
    store: Store, article_id: str | int, inc_votes: int
) -> dict:
    # bool은 int의 하위 타입이므로 따로 거부
    if isinstance(inc_votes, bool) or not isinstance(inc_votes, int):
        raise ValidationError("inc_votes must be an integer")

    rows = await store.execute(
        update(articles)
        .where(articles.c.article_id == integer_id(article_id))
        .values(votes=articles.c.votes + inc_votes)
        .returning(*articles.c)
    )
    if not rows:
        raise NotFoundError("Not Found")
    logger.info("article %s votes 변경: %+d", article_id, inc_votes)
    return rows[0]

import logging
import sys
from typing import Any, AsyncGenerator

from sqlalchemy import URL
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql.expression import Executable

from nc_news.config.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine = create_async_engine(
    URL.create(
        "postgresql+psycopg",
        username=settings.postgres.user,
        password=settings.postgres.passwd,
        host=settings.postgres.host,
        port=settings.postgres.port,
        database=settings.postgres.db,
    ),
    pool_size=settings.postgres.pool_size,
    max_overflow=0,
    echo=settings.postgres.echo,
    pool_pre_ping=True,
    pool_timeout=30,
    connect_args={
        "options": f"-c statement_timeout={settings.postgres.statement_timeout_ms}"
    },
)

_async_session = async_sessionmaker(
    bind=_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


class Store:
    """
    SQL 실행 게이트웨이.

    repository 함수들은 전역 세션 대신 이 객체를 첫 번째 인자로 받습니다.
    `execute()` 한 번이 하나의 트랜잭션이므로 모든 쓰기는 단일 statement로 끝납니다.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def execute(self, statement: Executable) -> list[dict[str, Any]]:
        try:
            result = await self._session.execute(statement)
            rows = (
                [dict(row) for row in result.mappings().all()]
                if result.returns_rows
                else []
            )
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
        return rows


async def get_store() -> AsyncGenerator[Store, None]:
    """
    `store: Store = Depends(get_store)`로 사용
    생성된 connection pool 중 하나를 할당 받아 사용
    """
    async with _async_session() as session:
        yield Store(session)


def _validate_schema(sync_conn) -> list[str]:
    """
    모델 메타데이터와 실제 DB 스키마를 비교하여 불일치 항목을 반환합니다.
    """
    errors = []
    inspector = sa_inspect(sync_conn)
    existing_tables = inspector.get_table_names()

    for table_name, table in Base.metadata.tables.items():
        if table_name not in existing_tables:
            continue

        db_columns = {col["name"] for col in inspector.get_columns(table_name)}
        model_columns = {col.name for col in table.columns}

        for col_name in sorted(model_columns - db_columns):
            errors.append(
                f"[{table_name}] 컬럼 '{col_name}'이 모델에는 있지만 DB에는 없습니다."
            )
        for col_name in sorted(db_columns - model_columns):
            errors.append(
                f"[{table_name}] 컬럼 '{col_name}'이 DB에는 있지만 모델에는 없습니다."
            )

    return errors


async def startup() -> None:
    """서버 시작 시 PostgreSQL 스키마 검증 및 테이블 초기화를 수행합니다."""
    async with _engine.begin() as conn:
        errors = await conn.run_sync(_validate_schema)
        if errors:
            logger.error("DB 스키마와 모델 정의가 일치하지 않습니다:")
            for error in errors:
                logger.error("  - %s", error)
            logger.error("서버를 종료합니다. DB 스키마를 확인해주세요.")
            sys.exit(1)

        # 존재하지 않는 테이블만 생성
        await conn.run_sync(Base.metadata.create_all)
        logger.info("PostgreSQL 테이블 초기화 완료")


async def shutdown() -> None:
    """서버 종료 시 PostgreSQL 연결 풀을 반환합니다."""
    await _engine.dispose()

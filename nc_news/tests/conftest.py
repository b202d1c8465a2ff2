from typing import Any, AsyncGenerator

import httpx
import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from nc_news.dependencies.postgres import Base, Store, get_store
from nc_news.main import app
from nc_news.tests.seed import seed


class FakeStore:
    """
    DB 없이 repository/API를 테스트하기 위한 Store 대역.
    `add_result()`로 넣어둔 결과를 execute 호출 순서대로 돌려주고,
    예외 객체를 넣어두면 해당 호출에서 던집니다.
    """

    def __init__(self):
        self.results: list[Any] = []
        self.statements: list[Any] = []

    def add_result(self, *results: Any) -> "FakeStore":
        self.results.extend(results)
        return self

    async def execute(self, statement) -> list[dict]:
        self.statements.append(statement)
        if not self.results:
            raise AssertionError(f"예상하지 못한 쿼리: {statement}")
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
async def test_client(fake_store: FakeStore) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    DB 연결 없이 API 테스트를 위한 클라이언트.
    get_store를 FakeStore로 대체하고 lifespan은 실행하지 않습니다.
    """
    app.dependency_overrides[get_store] = lambda: fake_store

    async with httpx.AsyncClient(
        # 500 응답을 검증하기 위해 앱 예외를 다시 던지지 않음
        transport=httpx.ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트마다 테이블을 DROP + CREATE 하고 시드 데이터를 넣습니다.
    실제 PostgreSQL이 실행 중이어야 하며, 연결할 수 없으면 테스트를 skip 합니다.
    """
    from nc_news.dependencies.postgres import _engine

    engine = create_async_engine(_engine.url, poolclass=NullPool)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
            await seed(conn)
    except OperationalError as e:
        await engine.dispose()
        pytest.skip(f"PostgreSQL에 연결할 수 없습니다: {e}")

    yield engine

    await engine.dispose()


@pytest.fixture
async def api_client(db_engine: AsyncEngine) -> AsyncGenerator[httpx.AsyncClient, None]:
    """실제 PostgreSQL과 연결된 테스트 클라이언트."""
    session_maker = async_sessionmaker(bind=db_engine, expire_on_commit=False)

    async def _get_store() -> AsyncGenerator[Store, None]:
        async with session_maker() as session:
            yield Store(session)

    app.dependency_overrides[get_store] = _get_store

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()

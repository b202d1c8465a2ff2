import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nc_news.config.config import settings
from nc_news.dependencies import postgres
from nc_news.exception_handler import register_exception_handlers

# 모든 모델을 import하여 Base.metadata에 등록
import nc_news.models.article  # noqa: F401
import nc_news.models.comment  # noqa: F401
import nc_news.models.topic  # noqa: F401
import nc_news.models.user  # noqa: F401

from nc_news.routers import api as api_router
from nc_news.routers import articles as article_router
from nc_news.routers import comments as comment_router
from nc_news.routers import topics as topic_router
from nc_news.routers import users as user_router

# logger 전역 설정
logging.basicConfig(
    level=settings.app.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    await postgres.startup()
    logger.info("nc_news 서버 시작")

    yield

    await postgres.shutdown()
    logger.info("nc_news 서버 종료")


app = FastAPI(title="NC News", lifespan=lifespan)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.app.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router.router)
app.include_router(topic_router.router)
app.include_router(article_router.router)
app.include_router(comment_router.router)
app.include_router(user_router.router)


@app.get(
    "/health",
    tags=["Health Check"],
    summary="Health Check용 API",
)
async def health_check() -> str:
    return "ok"

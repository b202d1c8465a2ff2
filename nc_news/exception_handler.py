import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import DBAPIError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from nc_news.exceptions import (
    NewsApiError,
    NotFoundError,
    StoreTypeError,
    UnexpectedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# 22P02: invalid_text_representation, 22003: numeric_value_out_of_range
MALFORMED_INPUT_SQLSTATES = frozenset({"22P02", "22003"})

ROUTE_NOT_FOUND_MSG = "404 - request not found"


def normalize_exception(exc: Exception) -> NewsApiError:
    """
    임의의 예외를 API 실패 유형 중 하나로 변환합니다.
    """
    if isinstance(exc, NewsApiError):
        return exc
    if isinstance(exc, RequestValidationError):
        return ValidationError()
    if isinstance(exc, StarletteHTTPException):
        # 라우터가 던지는 404/405는 등록되지 않은 경로로 취급
        if exc.status_code in (404, 405):
            return NotFoundError(ROUTE_NOT_FOUND_MSG)
        error = NewsApiError(str(exc.detail))
        error.status_code = exc.status_code
        return error
    if isinstance(exc, DBAPIError):
        sqlstate = getattr(exc.orig, "sqlstate", None)
        if sqlstate in MALFORMED_INPUT_SQLSTATES:
            return StoreTypeError()
    return UnexpectedError()


async def custom_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error = normalize_exception(exc)

    if isinstance(exc, RequestValidationError):
        errors = exc.errors()
        logger.warning(
            "요청 검증 실패: %s %s %s",
            request.method,
            request.url.path,
            errors[0] if errors else None,
        )
    elif isinstance(error, StoreTypeError):
        logger.info(
            "DB가 입력 형식을 거부했습니다: %s %s", request.method, request.url.path
        )
    elif isinstance(error, UnexpectedError) and error is not exc:
        logger.error(
            "처리되지 않은 예외: %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )

    return JSONResponse(status_code=error.status_code, content={"msg": error.msg})


def register_exception_handlers(app: FastAPI) -> None:
    for exc_class in (
        NewsApiError,
        RequestValidationError,
        StarletteHTTPException,
        DBAPIError,
        Exception,
    ):
        app.add_exception_handler(exc_class, custom_exception_handler)

"""
API 실패 유형 정의

모든 실패는 아래 네 가지 중 하나로 분류되어 `{"msg": ...}` 형태로 응답됩니다.
- ValidationError: store 접근 전에 걸러지는 잘못된/누락된 입력 (400)
- NotFoundError: 참조한 리소스가 없음 (404, 메시지는 상황마다 다름)
- StoreTypeError: DB가 값의 형식을 거부함. ex) 정수 컬럼에 "banana" (400)
- UnexpectedError: 그 외 모든 실패 (500)
"""


class NewsApiError(Exception):
    status_code: int = 500
    msg: str = "Internal server error"

    def __init__(self, msg: str | None = None):
        if msg is not None:
            self.msg = msg
        super().__init__(self.msg)


class ValidationError(NewsApiError):
    status_code = 400
    msg = "Bad request"


class NotFoundError(NewsApiError):
    status_code = 404
    msg = "Not Found"


class StoreTypeError(NewsApiError):
    status_code = 400
    msg = "Bad request"


class UnexpectedError(NewsApiError):
    status_code = 500
    msg = "Internal server error"

import json
from pathlib import Path

from fastapi import APIRouter

ENDPOINTS_PATH = Path(__file__).resolve().parent.parent / "endpoints.json"

with ENDPOINTS_PATH.open(encoding="utf-8") as f:
    ENDPOINTS: dict = json.load(f)

router = APIRouter(prefix="/api", tags=["API"])


@router.get("", summary="사용 가능한 모든 엔드포인트 설명")
async def get_api() -> dict:
    return {"endpoints": ENDPOINTS}

"""
시드 라우터

데이터베이스 시드 엔드포인트
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.seeder import seed_database

router = APIRouter(tags=["seed"])


@router.get("/seed")
def seed() -> JSONResponse:
    """
    데이터베이스 시드

    연결 문자열이 없으면 건너뛰고(200), 성공 시 200, 실패 시 500을 반환합니다.

    Returns:
        {"message": ...} 또는 {"error": ...}
    """
    result = seed_database()
    return JSONResponse(content=result.body, status_code=result.status_code)

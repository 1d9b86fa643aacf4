from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.logger import setup_logger
from app.routers import seed

# 애플리케이션 로거 초기화
logger = setup_logger(__name__)


def create_app() -> FastAPI:
    """
    FastAPI 애플리케이션 생성 및 초기화

    데이터베이스는 시드 요청 시에만 연결합니다.

    Returns:
        초기화된 FastAPI 인스턴스
    """
    logger.info("Initializing dashboard seeder application")

    app = FastAPI(
        title="Dashboard Seeder",
        description="Database seed endpoint for the dashboard",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(seed.router)  # /seed 엔드포인트

    @app.get("/health")
    async def health_check() -> dict:
        """헬스 체크 엔드포인트"""
        return {"status": "healthy"}

    logger.info("Dashboard seeder application ready")
    return app


app = create_app()

"""
데이터베이스 시드 실행

확장 → users → customers → invoices → revenue 순서로
하나의 트랜잭션 안에서 시드하고 결과를 상태 코드와 함께 반환합니다.
"""

from dataclasses import dataclass
from typing import Any, Dict

from sqlalchemy.exc import DBAPIError

from app.core import placeholder_data
from app.core.database import connect_database
from app.core.logger import get_logger
from app.models.seed_model import SeedError, SeedMessage
from app.repositories.seed_repo import SeedRepository

logger = get_logger(__name__)

SKIP_MESSAGE = "Skipping database seed due to missing connection string"
SUCCESS_MESSAGE = "Database seeded successfully"


@dataclass
class SeedResult:
    """시드 결과 (HTTP 상태 코드 + JSON 본문)"""

    status_code: int
    body: Dict[str, Any]


def _error_message(error: Exception) -> str:
    # 드라이버 오류는 SQL 구문/파라미터 없이 원본 메시지만 사용
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig).strip()
    return str(error)


def seed_database() -> SeedResult:
    """
    데이터베이스 시드

    DATABASE_URL이 없으면 아무 작업 없이 200으로 건너뜁니다.
    어느 단계에서든 실패하면 전체 트랜잭션을 롤백하고 500을 반환합니다.

    Returns:
        시드 결과
    """
    engine = connect_database()
    if engine is None:
        return SeedResult(200, SeedMessage(message=SKIP_MESSAGE).model_dump())

    logger.info("Seeding database")
    try:
        # 블록을 벗어나면 커밋, 예외가 발생하면 롤백
        with engine.begin() as conn:
            SeedRepository.ensure_extension(conn)
            users = SeedRepository.seed_users(conn, placeholder_data.users)
            logger.info(f"Seeded users ({users} inserted)")
            customers = SeedRepository.seed_customers(conn, placeholder_data.customers)
            logger.info(f"Seeded customers ({customers} inserted)")
            invoices = SeedRepository.seed_invoices(conn, placeholder_data.invoices)
            logger.info(f"Seeded invoices ({invoices} inserted)")
            revenue = SeedRepository.seed_revenue(conn, placeholder_data.revenue)
            logger.info(f"Seeded revenue ({revenue} inserted)")
    except Exception as e:
        logger.exception("Database seed failed, transaction rolled back")
        return SeedResult(500, SeedError(error=_error_message(e)).model_dump())

    logger.info("Database seed committed")
    return SeedResult(200, SeedMessage(message=SUCCESS_MESSAGE).model_dump())

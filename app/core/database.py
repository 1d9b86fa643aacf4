"""
데이터베이스 설정

SQLAlchemy 엔진 생성 및 UUID 서버 기본값 정의
"""

import functools
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql.expression import FunctionElement
from sqlalchemy.types import Uuid

from app.core.config import get_database_url
from app.core.logger import get_logger

logger = get_logger(__name__)

# Base 모델
Base = declarative_base()


class uuid_generate_v4(FunctionElement):
    """
    서버 측 UUID 생성 함수

    PostgreSQL에서는 uuid-ossp 확장의 uuid_generate_v4()를 사용하고,
    SQLite에서는 Uuid 타입의 저장 형식(32자리 hex)과 같은 랜덤 값을 생성합니다.
    """

    type = Uuid()
    name = "uuid_generate_v4"
    inherit_cache = True


@compiles(uuid_generate_v4)
def _compile_uuid_default(element, compiler, **kw):
    return "uuid_generate_v4()"


@compiles(uuid_generate_v4, "sqlite")
def _compile_uuid_default_sqlite(element, compiler, **kw):
    return "lower(hex(randomblob(16)))"


@functools.lru_cache(maxsize=None)
def get_engine(url: str) -> Engine:
    """
    URL별 SQLAlchemy 엔진 생성 (프로세스 내 캐시)

    Args:
        url: SQLAlchemy 연결 URL

    Returns:
        Engine 인스턴스
    """
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, echo=False)

    engine = create_engine(
        url,
        connect_args={"check_same_thread": False},
        pool_pre_ping=True,
        echo=False,
    )

    # pysqlite는 DDL 전에 BEGIN을 보내지 않으므로 트랜잭션을 직접 시작
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


def connect_database() -> Optional[Engine]:
    """
    설정된 데이터베이스 엔진 조회

    DATABASE_URL이 없으면 None을 반환합니다 (오류가 아닌 건너뛰기 상태).

    Returns:
        Engine 또는 None
    """
    url = get_database_url()
    if url is None:
        logger.warning("Database connection string is missing. Skipping database setup.")
        return None

    return get_engine(url)

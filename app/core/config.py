"""
애플리케이션 설정

프로세스 환경변수에서 설정값을 읽습니다.
"""

import os
from typing import Optional

# 비밀번호 해시 비용 (bcrypt rounds)
BCRYPT_ROUNDS = 10

DEFAULT_LOG_LEVEL = "INFO"


def get_database_url() -> Optional[str]:
    """
    데이터베이스 연결 문자열 조회

    DATABASE_URL이 없거나 비어 있으면 None을 반환합니다.
    `postgres://` 스킴은 SQLAlchemy가 인식하는 `postgresql://`로 바꿉니다.

    Returns:
        SQLAlchemy 연결 URL 또는 None
    """
    url = os.getenv("DATABASE_URL", "").strip()
    if not url:
        return None

    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def get_log_level() -> str:
    """로그 레벨 조회 (기본값 INFO)"""
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

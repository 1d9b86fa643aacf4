import logging
import sys
from typing import Optional

from app.core.config import get_log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(
    name: Optional[str] = None,
    level: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    애플리케이션 로거를 설정합니다.

    Args:
        name: 로거 이름 (__name__ 사용 권장)
        level: 로그 레벨 (생략하면 LOG_LEVEL 환경변수)
        format_string: 커스텀 포맷 문자열 (선택사항)

    Returns:
        설정된 Logger 인스턴스
    """
    logger = logging.getLogger(name or "dashboard-seeder")

    # 이미 핸들러가 있으면 중복 추가 방지
    if logger.handlers:
        return logger

    log_level = getattr(logging, (level or get_log_level()).upper(), logging.INFO)
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter(format_string or LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    )
    logger.addHandler(console_handler)

    # 루트 로거로 중복 출력되지 않도록
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    기존 로거를 가져오거나 새로 생성합니다.

    Args:
        name: 로거 이름

    Returns:
        Logger 인스턴스
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        return setup_logger(name)

    return logger

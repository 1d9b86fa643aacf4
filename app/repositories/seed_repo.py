"""
시드 저장소 (Repository)

스키마 생성 및 시드 데이터 삽입 작업 추상화.
모든 작업은 트랜잭션이 열린 Connection을 인자로 받습니다.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Type

import bcrypt
from sqlalchemy import func, select, text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Connection
from sqlalchemy.schema import CreateTable

from app.core.config import BCRYPT_ROUNDS
from app.core.database import Base
from app.core.logger import get_logger
from app.core.models import Customer, Invoice, Revenue, User
from app.models.seed_model import CustomerSeed, InvoiceSeed, RevenueSeed, UserSeed

logger = get_logger(__name__)

# 방언별 INSERT 구문 (ON CONFLICT 지원)
_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def hash_password(password: str) -> str:
    """bcrypt 해시 (cost 10)"""
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    ).decode("utf-8")


class SeedRepository:
    """시드 저장소"""

    @staticmethod
    def ensure_extension(conn: Connection) -> None:
        """
        UUID 생성 확장 설치 (없을 때만)

        PostgreSQL 외의 방언에서는 아무 작업도 하지 않습니다.

        Args:
            conn: 트랜잭션 내 연결
        """
        if conn.dialect.name != "postgresql":
            logger.debug(f"Skipping uuid-ossp extension on dialect '{conn.dialect.name}'")
            return

        conn.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))

    @staticmethod
    def ensure_table(conn: Connection, model: Type[Base]) -> None:
        """
        테이블 생성 (CREATE TABLE IF NOT EXISTS)

        기존 테이블은 변경하지 않습니다.

        Args:
            conn: 트랜잭션 내 연결
            model: ORM 모델 클래스
        """
        conn.execute(CreateTable(model.__table__, if_not_exists=True))

    @staticmethod
    def count_rows(conn: Connection, model: Type[Base]) -> int:
        """테이블 행 수 조회"""
        return conn.execute(select(func.count()).select_from(model.__table__)).scalar_one()

    @staticmethod
    def insert_or_skip(
        conn: Connection,
        model: Type[Base],
        rows: Sequence[dict],
        conflict_columns: Optional[List[str]] = None,
    ) -> int:
        """
        삽입하되 충돌 시 건너뛰기 (INSERT ... ON CONFLICT DO NOTHING)

        모든 행을 하나의 배치 구문으로 실행하며, 기존 행은 절대 갱신하지 않습니다.
        conflict_columns가 없으면 모든 UNIQUE 충돌을 건너뜁니다.

        Args:
            conn: 트랜잭션 내 연결
            model: ORM 모델 클래스
            rows: 삽입할 행 목록
            conflict_columns: 충돌 판단 컬럼 (선택사항)

        Returns:
            실제로 삽입된 행 수

        Raises:
            ValueError: ON CONFLICT를 지원하지 않는 방언
        """
        if not rows:
            return 0

        dialect_insert = _DIALECT_INSERTS.get(conn.dialect.name)
        if dialect_insert is None:
            raise ValueError(f"Unsupported database dialect '{conn.dialect.name}'")

        stmt = dialect_insert(model.__table__).on_conflict_do_nothing(
            index_elements=conflict_columns
        )

        before = SeedRepository.count_rows(conn, model)
        conn.execute(stmt, list(rows))
        return SeedRepository.count_rows(conn, model) - before

    @staticmethod
    def seed_users(conn: Connection, users: Iterable[dict]) -> int:
        """
        users 테이블 생성 및 시드

        비밀번호는 스레드 풀에서 동시에 해시한 뒤 한 번에 삽입합니다.

        Args:
            conn: 트랜잭션 내 연결
            users: 사용자 시드 데이터 (평문 비밀번호)

        Returns:
            삽입된 행 수
        """
        SeedRepository.ensure_table(conn, User)

        seeds = [UserSeed.model_validate(user) for user in users]
        with ThreadPoolExecutor() as executor:
            hashed = list(executor.map(hash_password, [seed.password for seed in seeds]))

        rows = [
            {**seed.model_dump(), "password": password}
            for seed, password in zip(seeds, hashed)
        ]
        return SeedRepository.insert_or_skip(conn, User, rows, ["id"])

    @staticmethod
    def seed_customers(conn: Connection, customers: Iterable[dict]) -> int:
        """customers 테이블 생성 및 시드 (id 충돌 시 건너뜀)"""
        SeedRepository.ensure_table(conn, Customer)
        rows = [CustomerSeed.model_validate(customer).model_dump() for customer in customers]
        return SeedRepository.insert_or_skip(conn, Customer, rows, ["id"])

    @staticmethod
    def seed_invoices(conn: Connection, invoices: Iterable[dict]) -> int:
        """
        invoices 테이블 생성 및 시드

        id는 DB가 생성하므로 (customer_id, amount, status, date)가
        이미 존재하는 행은 삽입하지 않습니다. 스키마의 UNIQUE 제약에 의존하지 않습니다.

        Args:
            conn: 트랜잭션 내 연결
            invoices: 청구서 시드 데이터

        Returns:
            삽입된 행 수
        """
        SeedRepository.ensure_table(conn, Invoice)

        table = Invoice.__table__
        key_columns = (table.c.customer_id, table.c.amount, table.c.status, table.c.date)
        seen = {tuple(row) for row in conn.execute(select(*key_columns))}

        rows = []
        for invoice in invoices:
            row = InvoiceSeed.model_validate(invoice).model_dump()
            key = (row["customer_id"], row["amount"], row["status"], row["date"])
            if key in seen:
                continue
            seen.add(key)
            rows.append(row)

        return SeedRepository.insert_or_skip(conn, Invoice, rows, ["id"])

    @staticmethod
    def seed_revenue(conn: Connection, revenue: Iterable[dict]) -> int:
        """revenue 테이블 생성 및 시드 (month 충돌 시 건너뜀)"""
        SeedRepository.ensure_table(conn, Revenue)
        rows = [RevenueSeed.model_validate(rev).model_dump() for rev in revenue]
        return SeedRepository.insert_or_skip(conn, Revenue, rows, ["month"])


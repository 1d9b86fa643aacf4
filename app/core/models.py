"""
ORM 모델 정의

시드 대상 테이블 (users, customers, invoices, revenue)
"""

from sqlalchemy import Column, Date, Integer, String, Text
from sqlalchemy.types import Uuid

from app.core.database import Base, uuid_generate_v4


class User(Base):
    """사용자 모델"""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, server_default=uuid_generate_v4())
    name = Column(String(255), nullable=False)
    email = Column(Text, nullable=False, unique=True)
    password = Column(Text, nullable=False)  # bcrypt 해시


class Customer(Base):
    """고객 모델"""

    __tablename__ = "customers"

    id = Column(Uuid, primary_key=True, server_default=uuid_generate_v4())
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    image_url = Column(String(255), nullable=False)


class Invoice(Base):
    """청구서 모델"""

    __tablename__ = "invoices"

    id = Column(Uuid, primary_key=True, server_default=uuid_generate_v4())
    customer_id = Column(Uuid, nullable=False)  # FK 제약 없음
    amount = Column(Integer, nullable=False)
    status = Column(String(255), nullable=False)  # pending, paid
    date = Column(Date, nullable=False)


class Revenue(Base):
    """월별 매출 모델"""

    __tablename__ = "revenue"

    month = Column(String(4), nullable=False, unique=True)
    revenue = Column(Integer, nullable=False)

    # DB에는 PK 없이 month UNIQUE만 존재
    __mapper_args__ = {"primary_key": [month]}

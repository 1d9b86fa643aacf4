"""
시드 관련 Pydantic 스키마
"""

import datetime
import uuid

from pydantic import BaseModel


class UserSeed(BaseModel):
    """사용자 시드 데이터"""

    id: uuid.UUID
    name: str
    email: str
    password: str  # 평문, 삽입 전에 해시


class CustomerSeed(BaseModel):
    """고객 시드 데이터"""

    id: uuid.UUID
    name: str
    email: str
    image_url: str


class InvoiceSeed(BaseModel):
    """청구서 시드 데이터 (id는 DB가 생성)"""

    customer_id: uuid.UUID
    amount: int
    status: str  # pending, paid
    date: datetime.date


class RevenueSeed(BaseModel):
    """월별 매출 시드 데이터"""

    month: str
    revenue: int


class SeedMessage(BaseModel):
    """시드 성공/건너뛰기 응답"""

    message: str


class SeedError(BaseModel):
    """시드 실패 응답"""

    error: str

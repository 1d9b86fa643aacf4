"""Tests for SeedRepository: upsert-or-skip, table creation, dialect handling."""

import uuid
from unittest.mock import MagicMock

import bcrypt
import pytest
from sqlalchemy import inspect, select
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from app.core.models import Customer, Invoice, Revenue, User
from app.repositories.seed_repo import SeedRepository, hash_password

CUSTOMER_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"


def _customer(**overrides):
    row = {
        "id": uuid.UUID(CUSTOMER_ID),
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    }
    row.update(overrides)
    return row


# ─── insert_or_skip ──────────────────────────────────────────────────────────

class TestInsertOrSkip:
    def test_inserts_new_rows(self, engine):
        with engine.begin() as conn:
            SeedRepository.ensure_table(conn, Customer)
            inserted = SeedRepository.insert_or_skip(conn, Customer, [_customer()], ["id"])
        assert inserted == 1

    def test_conflict_is_skipped_not_updated(self, engine):
        with engine.begin() as conn:
            SeedRepository.ensure_table(conn, Customer)
            SeedRepository.insert_or_skip(conn, Customer, [_customer()], ["id"])
            inserted = SeedRepository.insert_or_skip(
                conn, Customer, [_customer(name="Someone Else")], ["id"]
            )
            name = conn.execute(select(Customer.name)).scalar_one()
        assert inserted == 0
        assert name == "Delba de Oliveira"

    def test_empty_rows(self, engine):
        with engine.begin() as conn:
            SeedRepository.ensure_table(conn, Customer)
            assert SeedRepository.insert_or_skip(conn, Customer, [], ["id"]) == 0

    def test_unsupported_dialect(self):
        conn = MagicMock()
        conn.dialect.name = "mysql"
        with pytest.raises(ValueError, match="mysql"):
            SeedRepository.insert_or_skip(conn, Customer, [_customer()], ["id"])


# ─── Per-table seeding ───────────────────────────────────────────────────────

class TestSeedTables:
    def test_seed_users_hashes_and_skips_on_id(self, engine):
        users = [{
            "id": "410544b2-4001-4271-9855-fec4b6a6442a",
            "name": "User",
            "email": "user@nextmail.com",
            "password": "123456",
        }]
        with engine.begin() as conn:
            assert SeedRepository.seed_users(conn, users) == 1
            assert SeedRepository.seed_users(conn, users) == 0
            stored = conn.execute(select(User.password)).scalar_one()
        assert stored.startswith("$2b$10$")

    def test_each_user_gets_own_hash(self, engine):
        users = [
            {
                "id": str(uuid.UUID(int=n + 1)),
                "name": f"User {n}",
                "email": f"user{n}@nextmail.com",
                "password": f"secret-{n}",
            }
            for n in range(4)
        ]
        with engine.begin() as conn:
            assert SeedRepository.seed_users(conn, users) == 4
            stored = dict(conn.execute(select(User.email, User.password)).all())

        for user in users:
            hashed = stored[user["email"]].encode("utf-8")
            assert bcrypt.checkpw(user["password"].encode("utf-8"), hashed)
            others = [u["password"] for u in users if u is not user]
            assert not any(bcrypt.checkpw(p.encode("utf-8"), hashed) for p in others)

    def test_seed_invoices_skips_existing_natural_key(self, engine):
        invoice = {"customer_id": CUSTOMER_ID, "amount": 15795, "status": "pending", "date": "2022-12-06"}
        with engine.begin() as conn:
            assert SeedRepository.seed_invoices(conn, [invoice, dict(invoice)]) == 1
            assert SeedRepository.seed_invoices(conn, [invoice]) == 0
            assert SeedRepository.seed_invoices(conn, [dict(invoice, amount=1)]) == 1
            assert SeedRepository.count_rows(conn, Invoice) == 2

    def test_invoices_table_has_no_extra_unique_key(self, engine):
        with engine.begin() as conn:
            SeedRepository.ensure_table(conn, Invoice)
        assert inspect(engine).get_unique_constraints("invoices") == []

    def test_seed_revenue_skips_on_month(self, engine):
        with engine.begin() as conn:
            assert SeedRepository.seed_revenue(conn, [{"month": "Jan", "revenue": 2000}]) == 1
            assert SeedRepository.seed_revenue(conn, [{"month": "Jan", "revenue": 9999}]) == 0
            value = conn.execute(select(Revenue.revenue)).scalar_one()
        assert value == 2000

    def test_seed_invoices_coerces_fixture_strings(self, engine):
        rows = [{"customer_id": CUSTOMER_ID, "amount": 500, "status": "paid", "date": "2023-08-19"}]
        with engine.begin() as conn:
            assert SeedRepository.seed_invoices(conn, rows) == 1
            stored = conn.execute(select(Invoice.customer_id, Invoice.date)).one()
        assert stored.customer_id == uuid.UUID(CUSTOMER_ID)
        assert stored.date.isoformat() == "2023-08-19"

    def test_invalid_fixture_is_rejected(self, engine):
        with engine.begin() as conn:
            with pytest.raises(ValueError):
                SeedRepository.seed_revenue(conn, [{"month": "Jan", "revenue": "lots"}])


# ─── Extension / PostgreSQL rendering ────────────────────────────────────────

class TestPostgres:
    def test_extension_skipped_on_sqlite(self, engine):
        with engine.begin() as conn:
            SeedRepository.ensure_extension(conn)  # no error

    def test_extension_statement_on_postgres(self):
        conn = MagicMock()
        conn.dialect.name = "postgresql"
        SeedRepository.ensure_extension(conn)
        statement = conn.execute.call_args[0][0]
        assert str(statement) == 'CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'

    def test_users_ddl_uses_uuid_generate_v4(self):
        ddl = str(CreateTable(User.__table__).compile(dialect=postgresql.dialect()))
        assert "UUID" in ddl
        assert "DEFAULT uuid_generate_v4()" in ddl
        assert "UNIQUE (email)" in ddl

    def test_ensure_table_uses_if_not_exists(self):
        conn = MagicMock()
        SeedRepository.ensure_table(conn, Customer)
        statement = conn.execute.call_args[0][0]
        ddl = str(statement.compile(dialect=postgresql.dialect()))
        assert ddl.strip().startswith("CREATE TABLE IF NOT EXISTS customers")

    def test_ensure_table_twice(self, engine):
        with engine.begin() as conn:
            SeedRepository.ensure_table(conn, Revenue)
            SeedRepository.ensure_table(conn, Revenue)
        assert "revenue" in inspect(engine).get_table_names()

    def test_on_conflict_clause(self):
        stmt = postgresql.insert(Revenue.__table__).on_conflict_do_nothing(index_elements=["month"])
        assert "ON CONFLICT (month) DO NOTHING" in str(stmt.compile(dialect=postgresql.dialect()))


class TestHashPassword:
    def test_hash_is_salted(self):
        assert hash_password("123456") != hash_password("123456")

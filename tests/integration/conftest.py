import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from textinsight.config.settings import Settings
from textinsight.database import connection
from textinsight.database.connection import close_pool, get_connection, init_pool

SCHEMA_PATH = Path(connection.__file__).parent / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "textinsight_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings, max_size=3)
        with get_connection() as conn:
            conn.execute(SCHEMA_PATH.read_text())
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def seed_document(db_conn: psycopg.Connection[Any]) -> Generator[int, None, None]:
    with db_conn.cursor() as cur:
        cur.execute(
            """
            INSERT INTO text_documents (content, language)
            VALUES (%s, %s)
            RETURNING id
            """,
            ("This is wonderful. I love it.", "en"),
        )
        row = cur.fetchone()
        assert row is not None
        document_id = row[0]
    db_conn.commit()
    try:
        yield document_id
    finally:
        with db_conn.cursor() as cur:
            cur.execute("DELETE FROM text_documents WHERE id = %s", (document_id,))
        db_conn.commit()

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from textinsight.config.settings import Settings

_pool: ConnectionPool | None = None


def init_pool(settings: Settings, max_size: int | None = None) -> None:
    """Initialize the global connection pool from settings.

    Analyzer jobs run on worker threads, so the pool defaults to one
    connection per worker plus one for the request thread.
    """
    global _pool  # noqa: PLW0603
    conninfo = (
        f"host={settings.db_host} "
        f"port={settings.db_port} "
        f"dbname={settings.db_database} "
        f"user={settings.db_username} "
        f"password={settings.db_password}"
    )
    size = max_size if max_size is not None else settings.analysis_max_workers + 1
    _pool = ConnectionPool(conninfo, min_size=1, max_size=size)


def close_pool() -> None:
    """Close the global connection pool."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a connection from the pool. Caller manages commit/rollback."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn

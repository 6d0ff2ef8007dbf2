import asyncio
from typing import Any, NamedTuple

import asyncpg
from aws_lambda_powertools import Logger

from app.exceptions import PersistenceException
from app.settings import Settings

ERROR_DATABASE_FAILURE = "The database operation failed"
ERROR_NOT_CONNECTED = "The database is not connected"


class QueryResult(NamedTuple):
    rows: list[dict[str, Any]]
    row_count: int


def _parse_row_count(status_message: str | None) -> int:
    """Read the affected row count from a command tag like ``UPDATE 1``."""
    parts = (status_message or "").split()
    return int(parts[-1]) if parts and parts[-1].isdigit() else 0


class Database:
    """Process-wide handle around an asyncpg connection pool.

    The pool is opened on application startup with :meth:`connect` and closed
    on shutdown with :meth:`disconnect`. Every driver failure is reported as a
    :class:`PersistenceException`; nothing is retried.
    """

    def __init__(self, settings: Settings):
        self._logger = Logger(utc=True)
        self._settings = settings
        self._pool: asyncpg.Pool | None = None

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self):
        if self._pool:
            return
        self._logger.info(
            f"Connecting to database host={self._settings.db_host} "
            f"port={self._settings.db_port} name={self._settings.db_name}"
        )
        try:
            self._pool = await asyncpg.create_pool(
                host=self._settings.db_host,
                port=self._settings.db_port,
                user=self._settings.db_user,
                password=self._settings.db_password,
                database=self._settings.db_name,
                min_size=self._settings.db_pool_min_size,
                max_size=self._settings.db_pool_max_size,
                command_timeout=self._settings.db_command_timeout,
            )
        except (asyncpg.PostgresError, OSError, asyncio.TimeoutError) as exc:
            self._logger.exception("Unable to create the connection pool")
            raise PersistenceException(ERROR_DATABASE_FAILURE) from exc

    async def disconnect(self):
        if not self._pool:
            return
        pool, self._pool = self._pool, None
        await pool.close()
        self._logger.info("Database connection pool closed")

    async def execute(self, statement: str, *params: Any) -> QueryResult:
        pool = self._get_pool()
        try:
            async with pool.acquire(timeout=self._settings.db_pool_timeout) as connection:
                prepared = await connection.prepare(statement)
                records = await prepared.fetch(*params)
                row_count = _parse_row_count(prepared.get_statusmsg())
        except (
            asyncpg.PostgresError,
            asyncpg.InterfaceError,
            OSError,
            asyncio.TimeoutError,
        ) as exc:
            self._logger.exception(f"Failed to execute {statement=}")
            raise PersistenceException(ERROR_DATABASE_FAILURE) from exc
        return QueryResult(rows=[dict(record) for record in records], row_count=row_count)

    async def execute_script(self, script: str):
        pool = self._get_pool()
        try:
            async with pool.acquire(timeout=self._settings.db_pool_timeout) as connection:
                await connection.execute(script)
        except (
            asyncpg.PostgresError,
            asyncpg.InterfaceError,
            OSError,
            asyncio.TimeoutError,
        ) as exc:
            self._logger.exception("Failed to execute script")
            raise PersistenceException(ERROR_DATABASE_FAILURE) from exc

    def _get_pool(self) -> asyncpg.Pool:
        if not self._pool:
            self._logger.error(ERROR_NOT_CONNECTED)
            raise PersistenceException(ERROR_NOT_CONNECTED)
        return self._pool

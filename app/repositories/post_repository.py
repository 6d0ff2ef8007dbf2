import re
from typing import Any

from aws_lambda_powertools import Logger

from app.database import Database

POST_COLUMNS = "id, titulo, img, descripcion, likes"
SERIAL_MAX = 2_147_483_647


def _sanitize_table_name(name: str) -> str:
    if not re.fullmatch(r"[A-Za-z0-9_]+", name or ""):
        raise ValueError(f"Invalid table name: {name!r}")
    return name


class PostRepository:
    def __init__(self, database: Database, table_name: str = "posts"):
        self._logger = Logger(utc=True)
        self._database = database
        self._table = _sanitize_table_name(table_name)

    async def create_table(self):
        await self._database.execute_script(
            f"""
            CREATE TABLE IF NOT EXISTS {self._table} (
                id SERIAL PRIMARY KEY,
                titulo TEXT NOT NULL,
                img TEXT NOT NULL,
                descripcion TEXT NOT NULL,
                likes INTEGER NOT NULL DEFAULT 0 CHECK (likes >= 0)
            )
            """
        )
        self._logger.info(f"Ensured table={self._table}")

    async def get_posts(self) -> list[dict[str, Any]]:
        result = await self._database.execute(
            f"SELECT {POST_COLUMNS} FROM {self._table}"
        )
        return result.rows

    async def create_post(self, titulo: str, img: str, descripcion: str) -> dict[str, Any]:
        result = await self._database.execute(
            f"INSERT INTO {self._table} (titulo, img, descripcion, likes) "
            f"VALUES ($1, $2, $3, 0) RETURNING {POST_COLUMNS}",
            titulo,
            img,
            descripcion,
        )
        return result.rows[0]

    async def increment_likes(self, post_id: int) -> dict[str, Any] | None:
        if not self._is_storable_id(post_id):
            return None
        result = await self._database.execute(
            f"UPDATE {self._table} SET likes = likes + 1 WHERE id = $1 RETURNING {POST_COLUMNS}",
            post_id,
        )
        return result.rows[0] if result.row_count else None

    async def delete_post(self, post_id: int) -> dict[str, Any] | None:
        if not self._is_storable_id(post_id):
            return None
        result = await self._database.execute(
            f"DELETE FROM {self._table} WHERE id = $1 RETURNING {POST_COLUMNS}",
            post_id,
        )
        return result.rows[0] if result.row_count else None

    def _is_storable_id(self, post_id: int) -> bool:
        if 1 <= post_id <= SERIAL_MAX:
            return True
        self._logger.debug(f"Skipping lookup of out of range {post_id=}")
        return False

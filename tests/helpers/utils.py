import itertools
from typing import Any


class InMemoryPostRepository:
    """Stand-in for PostRepository that keeps rows in a dict.

    No method awaits while touching the rows, so every call is atomic on the
    event loop the same way a single SQL statement is.
    """

    def __init__(self):
        self.rows: dict[int, dict[str, Any]] = {}
        self._ids = itertools.count(1)

    async def get_posts(self) -> list[dict[str, Any]]:
        return [dict(row) for row in self.rows.values()]

    async def create_post(self, titulo: str, img: str, descripcion: str) -> dict[str, Any]:
        row = {
            "id": next(self._ids),
            "titulo": titulo,
            "img": img,
            "descripcion": descripcion,
            "likes": 0,
        }
        self.rows[row["id"]] = row
        return dict(row)

    async def increment_likes(self, post_id: int) -> dict[str, Any] | None:
        row = self.rows.get(post_id)
        if not row:
            return None
        row["likes"] += 1
        return dict(row)

    async def delete_post(self, post_id: int) -> dict[str, Any] | None:
        return self.rows.pop(post_id, None)

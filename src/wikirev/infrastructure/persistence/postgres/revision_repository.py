"""PostgreSQL revision repository implementation."""

from psycopg import AsyncConnection
from psycopg.errors import ForeignKeyViolation

from wikirev.domain.entities import Revision
from wikirev.domain.exceptions import NotFound

_COLUMNS = "id, short_id, title, source, revision_count, created_at, created_by"


def _row_to_revision(r: tuple) -> Revision:
    return Revision(
        id=r[0],
        short_id=r[1],
        title=r[2],
        source=r[3],
        revision_count=r[4],
        created_at=r[5],
        created_by=r[6],
    )


class PostgresRevisionRepository:
    """Revision repository implementation. Insert and read only."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, revision: Revision) -> Revision:
        """Append revision."""
        try:
            cur = await self._conn.execute(
                "INSERT INTO revision (short_id, title, source, revision_count, "
                f"created_at, created_by) VALUES (%s, %s, %s, %s, %s, %s) RETURNING {_COLUMNS}",
                (
                    revision.short_id,
                    revision.title,
                    revision.source,
                    revision.revision_count,
                    revision.created_at,
                    revision.created_by,
                ),
            )
        except ForeignKeyViolation as e:
            raise NotFound("Document", revision.short_id) from e
        r = await cur.fetchone()
        return _row_to_revision(r)

    async def get(self, short_id: str, revision_id: int) -> Revision | None:
        """Get revision by id within a document."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM revision WHERE short_id = %s AND id = %s",
            (short_id, revision_id),
        )
        r = await cur.fetchone()
        return _row_to_revision(r) if r else None

    async def list_by_short_id(self, short_id: str) -> list[Revision]:
        """List revisions of a document, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM revision WHERE short_id = %s ORDER BY id DESC",
            (short_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_revision(r) for r in rows]

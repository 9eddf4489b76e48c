"""PostgreSQL document repository implementation."""

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from wikirev.domain.entities import Document
from wikirev.domain.exceptions import Conflict

_COLUMNS = (
    "short_id, title, source, revision_count, "
    "created_at, created_by, updated_at, updated_by"
)


def _row_to_document(r: tuple) -> Document:
    return Document(
        short_id=r[0],
        title=r[1],
        source=r[2],
        revision_count=r[3],
        created_at=r[4],
        created_by=r[5],
        updated_at=r[6],
        updated_by=r[7],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_short_id(self, short_id: str) -> Document | None:
        """Get document by short id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE short_id = %s",
            (short_id,),
        )
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def get_for_update(self, short_id: str) -> Document | None:
        """Get document and lock its row until commit/rollback."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE short_id = %s FOR UPDATE",
            (short_id,),
        )
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def create(self, document: Document) -> Document:
        """Create document."""
        try:
            cur = await self._conn.execute(
                f"INSERT INTO document ({_COLUMNS}) "
                f"VALUES (%s, %s, %s, %s, %s, %s, %s, %s) RETURNING {_COLUMNS}",
                (
                    document.short_id,
                    document.title,
                    document.source,
                    document.revision_count,
                    document.created_at,
                    document.created_by,
                    document.updated_at,
                    document.updated_by,
                ),
            )
        except UniqueViolation as e:
            raise Conflict(f"Document id already exists: {document.short_id}") from e
        r = await cur.fetchone()
        return _row_to_document(r)

    async def update(self, document: Document) -> Document:
        """Update document content and metadata."""
        cur = await self._conn.execute(
            "UPDATE document SET title=%s, source=%s, revision_count=%s, "
            f"updated_at=%s, updated_by=%s WHERE short_id=%s RETURNING {_COLUMNS}",
            (
                document.title,
                document.source,
                document.revision_count,
                document.updated_at,
                document.updated_by,
                document.short_id,
            ),
        )
        r = await cur.fetchone()
        return _row_to_document(r)

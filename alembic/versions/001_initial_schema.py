"""Initial schema - document and revision tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "document",
        sa.Column("short_id", sa.Text(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("source", sa.Text(), nullable=True),
        sa.Column("revision_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("created_by", sa.Text(), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("updated_by", sa.Text(), nullable=True),
        sa.CheckConstraint("revision_count >= 0", name="ck_document_revision_count"),
    )

    op.create_table(
        "revision",
        sa.Column("id", sa.Integer(), sa.Identity(), primary_key=True),
        sa.Column(
            "short_id",
            sa.Text(),
            sa.ForeignKey("document.short_id"),
            nullable=False,
        ),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("source", sa.Text(), nullable=True),
        sa.Column("revision_count", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("created_by", sa.Text(), nullable=True),
    )
    op.create_index("ix_revision_short_id", "revision", ["short_id"])
    op.create_index("ix_revision_created_at", "revision", ["created_at"])

    # Revisions are append-only.
    op.execute("""
        CREATE OR REPLACE FUNCTION reject_revision_change() RETURNS trigger AS $$
        BEGIN
            RAISE EXCEPTION 'revision rows are immutable';
        END;
        $$ LANGUAGE plpgsql
    """)
    op.execute("""
        CREATE TRIGGER revision_immutable
            BEFORE UPDATE OR DELETE ON revision
            FOR EACH ROW EXECUTE FUNCTION reject_revision_change()
    """)


def downgrade() -> None:
    op.execute("DROP TRIGGER IF EXISTS revision_immutable ON revision")
    op.execute("DROP FUNCTION IF EXISTS reject_revision_change()")
    op.drop_index("ix_revision_created_at", table_name="revision")
    op.drop_index("ix_revision_short_id", table_name="revision")
    op.drop_table("revision")
    op.drop_table("document")

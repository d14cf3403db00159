"""Create resources table."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_resources_table"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "resources",
        sa.Column("pk", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("collection", sa.String(length=64), nullable=False),
        sa.Column("record_id", sa.String(length=64), nullable=False),
        sa.Column("document", sa.JSON(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            onupdate=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "collection", "record_id", name="uq_resources_collection_record"
        ),
    )

    op.create_index("ix_resources_collection", "resources", ["collection"])


def downgrade() -> None:
    op.drop_index("ix_resources_collection", table_name="resources")
    op.drop_table("resources")

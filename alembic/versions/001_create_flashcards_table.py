"""Create flashcards table.

Revision ID: 001
Revises:
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "flashcards",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_flashcards_id", "flashcards", ["id"])
    op.create_index("ix_flashcards_created_at", "flashcards", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_flashcards_created_at", table_name="flashcards")
    op.drop_index("ix_flashcards_id", table_name="flashcards")
    op.drop_table("flashcards")

"""journal entries and mood logs

Revision ID: 20261019_journal_initial
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_journal_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "entry",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False, index=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("mood", sa.Integer()),
        sa.Column("mood_emoji", sa.String(length=16)),
        sa.Column("tags", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("attachments", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("is_voice_note", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("word_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("ai_insights", sa.JSON()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_entry_user_created_at", "entry", ["user_id", "created_at"])
    op.create_index("ix_entry_user_mood", "entry", ["user_id", "mood"])

    op.create_table(
        "mood_log",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False, index=True),
        sa.Column("entry_id", sa.Integer(), sa.ForeignKey("entry.id", ondelete="SET NULL")),
        sa.Column("mood", sa.Integer(), nullable=False),
        sa.Column("mood_emoji", sa.String(length=16), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("notes", sa.Text()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_mood_log_user_created_at", "mood_log", ["user_id", "created_at"])


def downgrade():
    op.drop_index("ix_mood_log_user_created_at", table_name="mood_log")
    op.drop_table("mood_log")
    op.drop_index("ix_entry_user_mood", table_name="entry")
    op.drop_index("ix_entry_user_created_at", table_name="entry")
    op.drop_table("entry")

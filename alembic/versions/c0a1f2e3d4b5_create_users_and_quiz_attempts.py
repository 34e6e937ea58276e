"""create users and quiz_attempts tables

Revision ID: c0a1f2e3d4b5
Revises:
Create Date: 2026-02-26 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "c0a1f2e3d4b5"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_table(name: str) -> bool:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    return name in inspector.get_table_names()


def upgrade() -> None:
    if not _has_table("users"):
        op.create_table(
            "users",
            sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
            sa.Column("name", sa.String(length=120), nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("password_hash", sa.String(length=128), nullable=False),
            sa.Column("xp", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("streak", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("last_quiz_date", sa.DateTime(timezone=True), nullable=True),
            sa.Column("version", sa.Integer(), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.CheckConstraint("xp >= 0", name="check_users_xp_non_negative"),
            sa.CheckConstraint("streak >= 0", name="check_users_streak_non_negative"),
        )
        op.create_index("ix_users_email", "users", ["email"], unique=True)

    if not _has_table("quiz_attempts"):
        op.create_table(
            "quiz_attempts",
            sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
            sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
            sa.Column("subject", sa.String(length=64), nullable=False),
            sa.Column("score", sa.Integer(), nullable=False),
            sa.Column("total", sa.Integer(), nullable=False),
            sa.Column("percentage", sa.Integer(), nullable=False),
            sa.Column("xp_earned", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("date", sa.DateTime(timezone=True), nullable=False),
            sa.CheckConstraint("total > 0", name="check_quiz_attempts_total_positive"),
            sa.CheckConstraint("score >= 0", name="check_quiz_attempts_score_non_negative"),
            sa.CheckConstraint("percentage >= 0 AND percentage <= 100", name="check_quiz_attempts_percentage_range"),
        )
        op.create_index("ix_quiz_attempts_user_id", "quiz_attempts", ["user_id"], unique=False)
        op.create_index("ix_quiz_attempts_date", "quiz_attempts", ["date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_quiz_attempts_date", table_name="quiz_attempts")
    op.drop_index("ix_quiz_attempts_user_id", table_name="quiz_attempts")
    op.drop_table("quiz_attempts")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")

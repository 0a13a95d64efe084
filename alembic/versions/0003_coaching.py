"""coaching sessions, messages and feedback

Revision ID: 0003
Revises: 0002
Create Date: 2025-02-10 09:15:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0003"
down_revision = "0002"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "coaching_sessions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("job_position", sa.String(255), nullable=False),
        sa.Column("company_name", sa.String(255), nullable=True),
        sa.Column("interview_stage", sa.String(50), nullable=False),
        sa.Column("primary_industry", sa.String(100), nullable=True),
        sa.Column("specializations", sa.JSON()),
        sa.Column("experience_level", sa.String(20)),
        sa.Column("company_context", sa.JSON(), nullable=True),
        sa.Column("status", sa.String(20)),
        sa.Column("total_questions", sa.Integer()),
        sa.Column("current_question", sa.Integer()),
        sa.Column("overall_progress", sa.Float()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_coaching_sessions_id", "coaching_sessions", ["id"])
    op.create_index("ix_coaching_sessions_user_id", "coaching_sessions", ["user_id"])

    op.create_table(
        "coaching_messages",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.Integer(), sa.ForeignKey("coaching_sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("message_type", sa.String(20), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("coaching_type", sa.String(20), nullable=False),
        sa.Column("question_number", sa.Integer()),
        sa.Column("ai_metadata", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_coaching_messages_id", "coaching_messages", ["id"])
    op.create_index("ix_coaching_messages_session_id", "coaching_messages", ["session_id"])

    op.create_table(
        "coaching_feedback",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.Integer(), sa.ForeignKey("coaching_sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("question_number", sa.Integer(), nullable=False),
        sa.Column("star_analysis", sa.JSON(), nullable=False),
        sa.Column("model_answer", sa.JSON(), nullable=True),
        sa.Column("tips", sa.JSON()),
        sa.Column("learning_points", sa.JSON()),
        sa.Column("next_steps", sa.JSON()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_coaching_feedback_id", "coaching_feedback", ["id"])
    op.create_index("ix_coaching_feedback_session_id", "coaching_feedback", ["session_id"])


def downgrade() -> None:
    op.drop_table("coaching_feedback")
    op.drop_table("coaching_messages")
    op.drop_table("coaching_sessions")

"""study plans, company research and preparation resources

Revision ID: 0002
Revises: 0001
Create Date: 2025-02-03 10:30:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "study_plans",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.Integer(), sa.ForeignKey("ai_prepare_sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("total_weeks", sa.Integer()),
        sa.Column("target_skills", sa.JSON()),
        sa.Column("daily_time_commitment", sa.Integer()),
        sa.Column("milestones", sa.JSON()),
        sa.Column("generated_content", sa.JSON(), nullable=True),
        sa.Column("ai_generated", sa.Boolean()),
        sa.Column("is_active", sa.Boolean()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_study_plans_id", "study_plans", ["id"])
    op.create_index("ix_study_plans_session_id", "study_plans", ["session_id"])

    op.create_table(
        "company_research",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("industry", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("key_products", sa.JSON()),
        sa.Column("culture", sa.JSON(), nullable=True),
        sa.Column("competitors", sa.JSON()),
        sa.Column("industry_trends", sa.JSON()),
        sa.Column("recent_news", sa.JSON()),
        sa.Column("interview_insights", sa.JSON(), nullable=True),
        sa.Column("ai_generated", sa.Boolean()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("last_updated", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_company_research_id", "company_research", ["id"])
    op.create_index("ix_company_research_user_id", "company_research", ["user_id"])
    op.create_index("ix_company_research_company_name", "company_research", ["company_name"])

    op.create_table(
        "preparation_resources",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("resource_type", sa.String(30), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("interview_stage", sa.String(50), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("language", sa.String(10)),
        sa.Column("tags", sa.JSON()),
        sa.Column("difficulty", sa.String(20)),
        sa.Column("estimated_read_time", sa.Integer()),
        sa.Column("ai_generated", sa.Boolean()),
        sa.Column("is_active", sa.Boolean()),
        sa.Column("created_by", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_preparation_resources_id", "preparation_resources", ["id"])
    op.create_index("ix_preparation_resources_category", "preparation_resources", ["category"])


def downgrade() -> None:
    op.drop_table("preparation_resources")
    op.drop_table("company_research")
    op.drop_table("study_plans")

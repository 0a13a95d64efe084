"""initial schema

Revision ID: 0001
Revises:
Create Date: 2025-01-15 09:00:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "interview_scenarios",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("interview_stage", sa.String(50), nullable=False),
        sa.Column("industry", sa.String(100), nullable=False),
        sa.Column("job_role", sa.String(255), nullable=False),
        sa.Column("company_background", sa.Text(), nullable=False),
        sa.Column("role_description", sa.Text(), nullable=False),
        sa.Column("candidate_background", sa.Text(), nullable=False),
        sa.Column("key_objectives", sa.Text(), nullable=False),
        sa.Column("interviewer_name", sa.String(255), nullable=False),
        sa.Column("interviewer_title", sa.String(255), nullable=False),
        sa.Column("interviewer_style", sa.Text(), nullable=False),
        sa.Column("personality_traits", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("created_by", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        *_timestamps(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_interview_scenarios_id", "interview_scenarios", ["id"])
    op.create_index("ix_interview_scenarios_interview_stage", "interview_scenarios", ["interview_stage"])
    op.create_index("ix_interview_scenarios_industry", "interview_scenarios", ["industry"])

    op.create_table(
        "interview_sessions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("scenario_id", sa.Integer(), sa.ForeignKey("interview_scenarios.id"), nullable=True),
        sa.Column("module", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("current_question", sa.Integer()),
        sa.Column("total_questions", sa.Integer()),
        sa.Column("user_job_position", sa.String(255), nullable=True),
        sa.Column("user_company_name", sa.String(255), nullable=True),
        sa.Column("interview_language", sa.String(10)),
        sa.Column("started_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("overall_score", sa.Float(), nullable=True),
        sa.Column("situation_score", sa.Float(), nullable=True),
        sa.Column("task_score", sa.Float(), nullable=True),
        sa.Column("action_score", sa.Float(), nullable=True),
        sa.Column("result_score", sa.Float(), nullable=True),
        sa.Column("flow_score", sa.Float(), nullable=True),
        sa.Column("qualitative_feedback", sa.Text(), nullable=True),
        sa.Column("strengths", sa.JSON(), nullable=True),
        sa.Column("improvements", sa.JSON(), nullable=True),
        sa.Column("recommendations", sa.Text(), nullable=True),
        sa.Column("transcript", sa.JSON(), nullable=True),
        sa.Column("auto_saved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("archived_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_interview_sessions_id", "interview_sessions", ["id"])
    op.create_index("ix_interview_sessions_user_id", "interview_sessions", ["user_id"])

    op.create_table(
        "interview_messages",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.Integer(), sa.ForeignKey("interview_sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("message_type", sa.String(10), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("question_number", sa.Integer(), nullable=True),
        sa.Column("input_method", sa.String(10)),
        sa.Column("feedback", sa.Text(), nullable=True),
        sa.Column("timestamp", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_interview_messages_id", "interview_messages", ["id"])
    op.create_index("ix_interview_messages_session_id", "interview_messages", ["session_id"])

    op.create_table(
        "practice_reports",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.Integer(), sa.ForeignKey("interview_sessions.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("overall_score", sa.Float(), nullable=False),
        sa.Column("situation_score", sa.Float(), nullable=True),
        sa.Column("task_score", sa.Float(), nullable=True),
        sa.Column("action_score", sa.Float(), nullable=True),
        sa.Column("result_score", sa.Float(), nullable=True),
        sa.Column("communication_score", sa.Float(), nullable=True),
        sa.Column("relevance_score", sa.Float(), nullable=True),
        sa.Column("overall_rating", sa.String(30), nullable=True),
        sa.Column("strengths", sa.JSON()),
        sa.Column("weaknesses", sa.JSON()),
        sa.Column("improvements", sa.JSON()),
        sa.Column("detailed_feedback", sa.Text(), nullable=True),
        sa.Column("key_insights", sa.JSON()),
        sa.Column("recommended_actions", sa.JSON()),
        sa.Column("rubric_scores", sa.JSON(), nullable=True),
        sa.Column("evaluated_by", sa.String(20)),
        *_timestamps(),
    )
    op.create_index("ix_practice_reports_id", "practice_reports", ["id"])
    op.create_index("ix_practice_reports_user_id", "practice_reports", ["user_id"])

    op.create_table(
        "ai_evaluation_results",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.Integer(), sa.ForeignKey("interview_sessions.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("overall_score", sa.Float(), nullable=False),
        sa.Column("overall_rating", sa.String(50), nullable=True),
        sa.Column("communication_score", sa.Float(), nullable=True),
        sa.Column("empathy_score", sa.Float(), nullable=True),
        sa.Column("problem_solving_score", sa.Float(), nullable=True),
        sa.Column("cultural_alignment_score", sa.Float(), nullable=True),
        sa.Column("qualitative_observations", sa.Text(), nullable=True),
        sa.Column("strengths", sa.JSON()),
        sa.Column("improvement_areas", sa.JSON()),
        sa.Column("actionable_insights", sa.JSON()),
        sa.Column("personalized_drills", sa.JSON()),
        sa.Column("reflection_prompts", sa.JSON()),
        sa.Column("badge_earned", sa.String(100), nullable=True),
        sa.Column("points_earned", sa.Integer()),
        sa.Column("evaluation_language", sa.String(10)),
        sa.Column("cultural_context", sa.String(20)),
        sa.Column("shared_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_ai_evaluation_results_id", "ai_evaluation_results", ["id"])

    op.create_table(
        "assessments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.Integer(), sa.ForeignKey("interview_sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("communication_score", sa.Float(), nullable=False),
        sa.Column("empathy_score", sa.Float(), nullable=False),
        sa.Column("problem_solving_score", sa.Float(), nullable=False),
        sa.Column("cultural_alignment_score", sa.Float(), nullable=False),
        sa.Column("overall_score", sa.Float(), nullable=False),
        sa.Column("overall_rating", sa.String(30), nullable=False),
        sa.Column("strengths", sa.JSON()),
        sa.Column("improvement_areas", sa.JSON()),
        sa.Column("qualitative_observations", sa.Text(), nullable=True),
        sa.Column("actionable_insights", sa.JSON()),
        sa.Column("star_method_recommendations", sa.JSON()),
        sa.Column("self_reflection_prompts", sa.JSON()),
        sa.Column("progress_level", sa.Integer()),
        sa.Column("performance_badge", sa.String(100), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_assessments_id", "assessments", ["id"])
    op.create_index("ix_assessments_session_id", "assessments", ["session_id"])
    op.create_index("ix_assessments_user_id", "assessments", ["user_id"])

    op.create_table(
        "learning_drills",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("assessment_id", sa.Integer(), sa.ForeignKey("assessments.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("drill_type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("scenario", sa.Text(), nullable=True),
        sa.Column("target_skill", sa.String(50), nullable=False),
        sa.Column("estimated_duration", sa.Integer()),
        sa.Column("completed", sa.Boolean()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_learning_drills_id", "learning_drills", ["id"])
    op.create_index("ix_learning_drills_user_id", "learning_drills", ["user_id"])

    op.create_table(
        "ai_prepare_sessions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("job_position", sa.String(255), nullable=False),
        sa.Column("company_name", sa.String(255), nullable=True),
        sa.Column("interview_stage", sa.String(50), nullable=False),
        sa.Column("experience_level", sa.String(50), nullable=False),
        sa.Column("preferred_language", sa.String(10)),
        sa.Column("voice_enabled", sa.Boolean()),
        sa.Column("speech_rate", sa.String(10)),
        sa.Column("difficulty_level", sa.String(20)),
        sa.Column("focus_areas", sa.JSON()),
        sa.Column("question_categories", sa.JSON()),
        sa.Column("status", sa.String(20)),
        sa.Column("questions_answered", sa.Integer()),
        sa.Column("total_time_spent", sa.Integer()),
        sa.Column("average_star_score", sa.Float(), nullable=True),
        sa.Column("session_progress", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_ai_prepare_sessions_id", "ai_prepare_sessions", ["id"])
    op.create_index("ix_ai_prepare_sessions_user_id", "ai_prepare_sessions", ["user_id"])

    op.create_table(
        "ai_prepare_questions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.Integer(), sa.ForeignKey("ai_prepare_sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("question_text_translated", sa.Text(), nullable=True),
        sa.Column("question_category", sa.String(50), nullable=False),
        sa.Column("question_type", sa.String(50), nullable=False),
        sa.Column("difficulty_level", sa.String(20), nullable=False),
        sa.Column("expected_answer_time", sa.Integer()),
        sa.Column("cultural_context", sa.Text(), nullable=True),
        sa.Column("question_number", sa.Integer(), nullable=False),
        sa.Column("star_method_relevant", sa.Boolean()),
        sa.Column("generated_by", sa.String(20)),
        *_timestamps(),
    )
    op.create_index("ix_ai_prepare_questions_id", "ai_prepare_questions", ["id"])
    op.create_index("ix_ai_prepare_questions_session_id", "ai_prepare_questions", ["session_id"])

    op.create_table(
        "ai_prepare_responses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.Integer(), sa.ForeignKey("ai_prepare_sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("question_id", sa.Integer(), sa.ForeignKey("ai_prepare_questions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("response_text", sa.Text(), nullable=False),
        sa.Column("response_language", sa.String(10)),
        sa.Column("input_method", sa.String(10)),
        sa.Column("audio_duration", sa.Integer(), nullable=True),
        sa.Column("transcription_confidence", sa.Float(), nullable=True),
        sa.Column("star_scores", sa.JSON(), nullable=True),
        sa.Column("detailed_feedback", sa.JSON(), nullable=True),
        sa.Column("model_answer", sa.Text(), nullable=True),
        sa.Column("relevance_score", sa.Float(), nullable=True),
        sa.Column("communication_score", sa.Float(), nullable=True),
        sa.Column("completeness_score", sa.Float(), nullable=True),
        sa.Column("time_taken", sa.Integer(), nullable=True),
        sa.Column("word_count", sa.Integer(), nullable=True),
        sa.Column("evaluated_by", sa.String(20)),
        *_timestamps(),
    )
    op.create_index("ix_ai_prepare_responses_id", "ai_prepare_responses", ["id"])
    op.create_index("ix_ai_prepare_responses_session_id", "ai_prepare_responses", ["session_id"])
    op.create_index("ix_ai_prepare_responses_question_id", "ai_prepare_responses", ["question_id"])


def downgrade() -> None:
    op.drop_table("ai_prepare_responses")
    op.drop_table("ai_prepare_questions")
    op.drop_table("ai_prepare_sessions")
    op.drop_table("learning_drills")
    op.drop_table("assessments")
    op.drop_table("ai_evaluation_results")
    op.drop_table("practice_reports")
    op.drop_table("interview_messages")
    op.drop_table("interview_sessions")
    op.drop_table("interview_scenarios")
    op.drop_table("users")

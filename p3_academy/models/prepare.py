from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from p3_academy.db.session import Base


class AiPrepareSession(Base):
    __tablename__ = "ai_prepare_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    job_position = Column(String(255), nullable=False)
    company_name = Column(String(255), nullable=True)
    interview_stage = Column(String(50), nullable=False)
    experience_level = Column(String(50), nullable=False)
    preferred_language = Column(String(10), default="en")
    voice_enabled = Column(Boolean, default=True)
    speech_rate = Column(String(10), default="1.0")
    difficulty_level = Column(String(20), default="adaptive")
    focus_areas = Column(JSON, default=list)
    question_categories = Column(JSON, default=list)

    status = Column(String(20), default="active")
    questions_answered = Column(Integer, default=0)
    total_time_spent = Column(Integer, default=0)
    average_star_score = Column(Float, nullable=True)
    session_progress = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship("User", back_populates="prepare_sessions")
    questions = relationship(
        "AiPrepareQuestion",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="AiPrepareQuestion.question_number",
    )
    responses = relationship(
        "AiPrepareResponse",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="AiPrepareResponse.id",
    )
    study_plans = relationship(
        "StudyPlan",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="StudyPlan.id",
    )


class AiPrepareQuestion(Base):
    __tablename__ = "ai_prepare_questions"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("ai_prepare_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    question_text_translated = Column(Text, nullable=True)
    question_category = Column(String(50), nullable=False)
    question_type = Column(String(50), nullable=False)
    difficulty_level = Column(String(20), nullable=False)
    expected_answer_time = Column(Integer, default=180)
    cultural_context = Column(Text, nullable=True)
    question_number = Column(Integer, nullable=False)
    star_method_relevant = Column(Boolean, default=True)
    generated_by = Column(String(20), default="template")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    session = relationship("AiPrepareSession", back_populates="questions")
    responses = relationship("AiPrepareResponse", back_populates="question", cascade="all, delete-orphan")


class AiPrepareResponse(Base):
    __tablename__ = "ai_prepare_responses"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("ai_prepare_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("ai_prepare_questions.id", ondelete="CASCADE"), nullable=False, index=True)
    response_text = Column(Text, nullable=False)
    response_language = Column(String(10), default="en")
    input_method = Column(String(10), default="text")
    audio_duration = Column(Integer, nullable=True)
    transcription_confidence = Column(Float, nullable=True)

    star_scores = Column(JSON, nullable=True)
    detailed_feedback = Column(JSON, nullable=True)
    model_answer = Column(Text, nullable=True)
    relevance_score = Column(Float, nullable=True)
    communication_score = Column(Float, nullable=True)
    completeness_score = Column(Float, nullable=True)
    time_taken = Column(Integer, nullable=True)
    word_count = Column(Integer, nullable=True)
    evaluated_by = Column(String(20), default="rules")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    session = relationship("AiPrepareSession", back_populates="responses")
    question = relationship("AiPrepareQuestion", back_populates="responses")


class StudyPlan(Base):
    __tablename__ = "study_plans"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("ai_prepare_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    total_weeks = Column(Integer, default=2)
    target_skills = Column(JSON, default=list)
    daily_time_commitment = Column(Integer, default=60)  # minutes
    milestones = Column(JSON, default=list)
    generated_content = Column(JSON, nullable=True)
    ai_generated = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    session = relationship("AiPrepareSession", back_populates="study_plans")


class CompanyResearch(Base):
    __tablename__ = "company_research"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    company_name = Column(String(255), nullable=False, index=True)
    industry = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    key_products = Column(JSON, default=list)
    culture = Column(JSON, nullable=True)
    competitors = Column(JSON, default=list)
    industry_trends = Column(JSON, default=list)
    recent_news = Column(JSON, default=list)
    interview_insights = Column(JSON, nullable=True)
    ai_generated = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_updated = Column(DateTime(timezone=True), server_default=func.now())


class PreparationResource(Base):
    __tablename__ = "preparation_resources"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    resource_type = Column(String(30), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    interview_stage = Column(String(50), nullable=True)
    content = Column(Text, nullable=False)
    language = Column(String(10), default="en")
    tags = Column(JSON, default=list)
    difficulty = Column(String(20), default="intermediate")
    estimated_read_time = Column(Integer, default=1)  # minutes
    ai_generated = Column(Boolean, default=True)
    is_active = Column(Boolean, default=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

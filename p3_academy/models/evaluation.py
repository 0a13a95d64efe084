from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from p3_academy.db.session import Base


class PracticeReport(Base):
    __tablename__ = "practice_reports"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("interview_sessions.id", ondelete="CASCADE"), unique=True, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    overall_score = Column(Float, nullable=False)
    situation_score = Column(Float, nullable=True)
    task_score = Column(Float, nullable=True)
    action_score = Column(Float, nullable=True)
    result_score = Column(Float, nullable=True)
    communication_score = Column(Float, nullable=True)
    relevance_score = Column(Float, nullable=True)
    overall_rating = Column(String(30), nullable=True)

    strengths = Column(JSON, default=list)
    weaknesses = Column(JSON, default=list)
    improvements = Column(JSON, default=list)
    detailed_feedback = Column(Text, nullable=True)
    key_insights = Column(JSON, default=list)
    recommended_actions = Column(JSON, default=list)
    rubric_scores = Column(JSON, nullable=True)
    evaluated_by = Column(String(20), default="ai")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    session = relationship("InterviewSession", back_populates="report")


class AiEvaluationResult(Base):
    __tablename__ = "ai_evaluation_results"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("interview_sessions.id", ondelete="CASCADE"), unique=True, nullable=False)

    overall_score = Column(Float, nullable=False)
    overall_rating = Column(String(50), nullable=True)
    communication_score = Column(Float, nullable=True)
    empathy_score = Column(Float, nullable=True)
    problem_solving_score = Column(Float, nullable=True)
    cultural_alignment_score = Column(Float, nullable=True)

    qualitative_observations = Column(Text, nullable=True)
    strengths = Column(JSON, default=list)
    improvement_areas = Column(JSON, default=list)
    actionable_insights = Column(JSON, default=list)
    personalized_drills = Column(JSON, default=list)
    reflection_prompts = Column(JSON, default=list)

    badge_earned = Column(String(100), nullable=True)
    points_earned = Column(Integer, default=0)
    evaluation_language = Column(String(10), default="en")
    cultural_context = Column(String(20), default="SEA")
    shared_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    session = relationship("InterviewSession", back_populates="evaluation")

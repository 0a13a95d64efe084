from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from p3_academy.db.session import Base


class Assessment(Base):
    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("interview_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    communication_score = Column(Float, nullable=False)
    empathy_score = Column(Float, nullable=False)
    problem_solving_score = Column(Float, nullable=False)
    cultural_alignment_score = Column(Float, nullable=False)
    overall_score = Column(Float, nullable=False)
    overall_rating = Column(String(30), nullable=False)

    strengths = Column(JSON, default=list)
    improvement_areas = Column(JSON, default=list)
    qualitative_observations = Column(Text, nullable=True)
    actionable_insights = Column(JSON, default=list)
    star_method_recommendations = Column(JSON, default=list)
    self_reflection_prompts = Column(JSON, default=list)

    progress_level = Column(Integer, default=1)
    performance_badge = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    drills = relationship("LearningDrill", back_populates="assessment", cascade="all, delete-orphan")


class LearningDrill(Base):
    __tablename__ = "learning_drills"

    id = Column(Integer, primary_key=True, index=True)
    assessment_id = Column(Integer, ForeignKey("assessments.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    drill_type = Column(String(50), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    scenario = Column(Text, nullable=True)
    target_skill = Column(String(50), nullable=False)
    estimated_duration = Column(Integer, default=10)
    completed = Column(Boolean, default=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    assessment = relationship("Assessment", back_populates="drills")

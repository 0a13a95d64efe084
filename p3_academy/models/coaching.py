from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from p3_academy.db.session import Base


class CoachingSession(Base):
    __tablename__ = "coaching_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    job_position = Column(String(255), nullable=False)
    company_name = Column(String(255), nullable=True)
    interview_stage = Column(String(50), nullable=False)
    primary_industry = Column(String(100), nullable=True)
    specializations = Column(JSON, default=list)
    experience_level = Column(String(20), default="intermediate")
    company_context = Column(JSON, nullable=True)

    status = Column(String(20), default="active")
    total_questions = Column(Integer, default=15)
    current_question = Column(Integer, default=0)
    overall_progress = Column(Float, default=0.0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship("User", back_populates="coaching_sessions")
    messages = relationship(
        "CoachingMessage",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="CoachingMessage.id",
    )
    feedback = relationship(
        "CoachingFeedback",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="CoachingFeedback.id",
    )


class CoachingMessage(Base):
    __tablename__ = "coaching_messages"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("coaching_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    message_type = Column(String(20), nullable=False)  # coach | user
    content = Column(Text, nullable=False)
    coaching_type = Column(String(20), nullable=False)  # introduction | question | response | summary
    question_number = Column(Integer, default=0)
    ai_metadata = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    session = relationship("CoachingSession", back_populates="messages")


class CoachingFeedback(Base):
    __tablename__ = "coaching_feedback"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("coaching_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    question_number = Column(Integer, nullable=False)
    star_analysis = Column(JSON, nullable=False)
    model_answer = Column(JSON, nullable=True)
    tips = Column(JSON, default=list)
    learning_points = Column(JSON, default=list)
    next_steps = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    session = relationship("CoachingSession", back_populates="feedback")

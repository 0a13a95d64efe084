from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from p3_academy.db.session import Base


class InterviewSession(Base):
    __tablename__ = "interview_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    scenario_id = Column(Integer, ForeignKey("interview_scenarios.id"), nullable=True)
    module = Column(String(20), default="practice", nullable=False)
    status = Column(String(20), default="setup", nullable=False)
    current_question = Column(Integer, default=1)
    total_questions = Column(Integer, default=15)

    user_job_position = Column(String(255), nullable=True)
    user_company_name = Column(String(255), nullable=True)
    interview_language = Column(String(10), default="en")

    started_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)
    duration = Column(Integer, nullable=True)

    overall_score = Column(Float, nullable=True)
    situation_score = Column(Float, nullable=True)
    task_score = Column(Float, nullable=True)
    action_score = Column(Float, nullable=True)
    result_score = Column(Float, nullable=True)
    flow_score = Column(Float, nullable=True)

    qualitative_feedback = Column(Text, nullable=True)
    strengths = Column(JSON, nullable=True)
    improvements = Column(JSON, nullable=True)
    recommendations = Column(Text, nullable=True)

    transcript = Column(JSON, nullable=True)
    auto_saved_at = Column(DateTime(timezone=True), nullable=True)
    archived_at = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="sessions")
    scenario = relationship("InterviewScenario", back_populates="sessions")
    messages = relationship(
        "InterviewMessage",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="InterviewMessage.id",
    )
    report = relationship("PracticeReport", back_populates="session", uselist=False, cascade="all, delete-orphan")
    evaluation = relationship("AiEvaluationResult", back_populates="session", uselist=False, cascade="all, delete-orphan")


class InterviewMessage(Base):
    __tablename__ = "interview_messages"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("interview_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    message_type = Column(String(10), nullable=False)
    content = Column(Text, nullable=False)
    question_number = Column(Integer, nullable=True)
    input_method = Column(String(10), default="text")
    feedback = Column(Text, nullable=True)
    timestamp = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    session = relationship("InterviewSession", back_populates="messages")

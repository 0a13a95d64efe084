from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from p3_academy.db.session import Base


class InterviewScenario(Base):
    __tablename__ = "interview_scenarios"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    interview_stage = Column(String(50), nullable=False, index=True)
    industry = Column(String(100), nullable=False, index=True)
    job_role = Column(String(255), nullable=False)
    company_background = Column(Text, nullable=False)
    role_description = Column(Text, nullable=False)
    candidate_background = Column(Text, nullable=False)
    key_objectives = Column(Text, nullable=False)
    interviewer_name = Column(String(255), nullable=False)
    interviewer_title = Column(String(255), nullable=False)
    interviewer_style = Column(Text, nullable=False)
    personality_traits = Column(Text, nullable=False)
    status = Column(String(20), default="active", nullable=False)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    sessions = relationship("InterviewSession", back_populates="scenario")

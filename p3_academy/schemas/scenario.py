from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

INTERVIEW_STAGES = ["phone-screening", "functional-team", "hiring-manager", "subject-matter-expertise", "executive-final"]


class ScenarioBase(BaseModel):
    title: str = Field(..., min_length=1)
    interview_stage: str
    industry: str
    job_role: str
    company_background: str
    role_description: str
    candidate_background: str
    key_objectives: str
    interviewer_name: str
    interviewer_title: str
    interviewer_style: str
    personality_traits: str
    status: str = Field("active", pattern="^(active|draft|inactive)$")


class ScenarioCreate(ScenarioBase):
    pass


class ScenarioUpdate(BaseModel):
    title: Optional[str] = None
    interview_stage: Optional[str] = None
    industry: Optional[str] = None
    job_role: Optional[str] = None
    company_background: Optional[str] = None
    role_description: Optional[str] = None
    candidate_background: Optional[str] = None
    key_objectives: Optional[str] = None
    interviewer_name: Optional[str] = None
    interviewer_title: Optional[str] = None
    interviewer_style: Optional[str] = None
    personality_traits: Optional[str] = None
    status: Optional[str] = Field(None, pattern="^(active|draft|inactive)$")


class ScenarioResponse(ScenarioBase):
    id: int
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

STAGE_PATTERN = "^(phone-screening|functional-team|hiring-manager|subject-matter-expertise|executive-final)$"


class CompanyContext(BaseModel):
    type: str = Field("enterprise", pattern="^(startup|enterprise|consulting|agency)$")
    business_model: str = ""
    technical_stack: List[str] = []


class CoachingSessionCreate(BaseModel):
    job_position: str = Field(..., min_length=1)
    company_name: Optional[str] = None
    interview_stage: str = Field(..., pattern=STAGE_PATTERN)
    primary_industry: Optional[str] = None
    specializations: List[str] = []
    experience_level: str = Field("intermediate", pattern="^(intermediate|senior|expert)$")
    company_context: CompanyContext = CompanyContext()
    total_questions: int = Field(15, ge=1, le=30)


class CoachingRespond(BaseModel):
    response: str = Field(..., min_length=1)


class CoachingMessageResponse(BaseModel):
    id: int
    session_id: int
    message_type: str
    content: str
    coaching_type: str
    question_number: int
    ai_metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CoachingFeedbackResponse(BaseModel):
    id: int
    question_number: int
    star_analysis: Dict[str, Any]
    model_answer: Optional[Dict[str, Any]] = None
    tips: List[str] = []
    learning_points: List[str] = []
    next_steps: List[str] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CoachingSessionResponse(BaseModel):
    id: int
    user_id: int
    job_position: str
    company_name: Optional[str] = None
    interview_stage: str
    primary_industry: Optional[str] = None
    specializations: List[str] = []
    experience_level: str
    company_context: Optional[Dict[str, Any]] = None
    status: str
    total_questions: int
    current_question: int
    overall_progress: float
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CoachingSessionDetail(CoachingSessionResponse):
    messages: List[CoachingMessageResponse] = []
    feedback: List[CoachingFeedbackResponse] = []


class CoachingTurn(BaseModel):
    question: Optional[str] = None
    feedback: Optional[CoachingFeedbackResponse] = None
    conversation_complete: bool = False


class CoachingCompletion(BaseModel):
    session_id: int
    summary: str
    questions_answered: int
    average_star_score: Optional[float] = None


class IndustryKnowledge(BaseModel):
    industry: str
    overview: str
    key_insights: List[str] = []
    current_trends: List[str] = []
    challenges: List[str] = []
    interview_focus: List[str] = []
    common_scenarios: List[str] = []
    key_terminology: Dict[str, str] = {}
    cultural_norms: str = ""
    ai_generated: bool = False

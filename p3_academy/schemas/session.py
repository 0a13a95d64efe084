from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

SESSION_STATUSES = ["setup", "in_progress", "completed", "paused"]


class InterviewSessionCreate(BaseModel):
    scenario_id: int
    user_job_position: Optional[str] = None
    user_company_name: Optional[str] = None
    interview_language: str = "en"
    total_questions: int = Field(15, ge=1, le=30)


class InterviewSessionUpdate(BaseModel):
    user_job_position: Optional[str] = None
    user_company_name: Optional[str] = None
    interview_language: Optional[str] = None
    current_question: Optional[int] = Field(None, ge=1)
    transcript: Optional[List[Dict[str, Any]]] = None


class SessionStatusUpdate(BaseModel):
    status: str = Field(..., pattern="^(setup|in_progress|completed|paused)$")


class InterviewMessageResponse(BaseModel):
    id: int
    session_id: int
    message_type: str
    content: str
    question_number: Optional[int] = None
    input_method: Optional[str] = None
    feedback: Optional[str] = None
    timestamp: Optional[datetime] = None

    class Config:
        from_attributes = True


class InterviewSessionResponse(BaseModel):
    id: int
    user_id: int
    scenario_id: Optional[int] = None
    module: str
    status: str
    current_question: int
    total_questions: int
    user_job_position: Optional[str] = None
    user_company_name: Optional[str] = None
    interview_language: str
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    duration: Optional[int] = None
    overall_score: Optional[float] = None
    situation_score: Optional[float] = None
    task_score: Optional[float] = None
    action_score: Optional[float] = None
    result_score: Optional[float] = None
    flow_score: Optional[float] = None
    qualitative_feedback: Optional[str] = None
    strengths: Optional[List[str]] = None
    improvements: Optional[List[str]] = None
    recommendations: Optional[str] = None
    auto_saved_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class InterviewSessionDetail(InterviewSessionResponse):
    messages: List[InterviewMessageResponse] = []


class UserResponseCreate(BaseModel):
    content: str = Field(..., min_length=1)
    question_number: Optional[int] = None
    input_method: str = Field("text", pattern="^(text|voice)$")


class AIQuestionResponse(BaseModel):
    content: str
    question_number: int
    message_id: int


class PracticeQuestion(BaseModel):
    id: str
    question_number: int
    question_text: str
    category: str


class PracticeResponseItem(BaseModel):
    id: int
    session_id: int
    question_id: str
    response_text: str
    response_type: str
    created_at: Optional[datetime] = None


class PracticeReportResponse(BaseModel):
    id: int
    session_id: int
    overall_score: float
    situation_score: Optional[float] = None
    task_score: Optional[float] = None
    action_score: Optional[float] = None
    result_score: Optional[float] = None
    communication_score: Optional[float] = None
    relevance_score: Optional[float] = None
    overall_rating: Optional[str] = None
    strengths: List[str] = []
    weaknesses: List[str] = []
    improvements: List[str] = []
    detailed_feedback: Optional[str] = None
    key_insights: List[str] = []
    recommended_actions: List[str] = []
    rubric_scores: Optional[Dict[str, Any]] = None
    evaluated_by: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SessionStatusInfo(BaseModel):
    status: str
    time_remaining: Optional[int] = None
    last_activity: Optional[datetime] = None
    message: str


class SessionRecovery(BaseModel):
    can_recover: bool
    message: str
    session: Optional[InterviewSessionResponse] = None


class SessionStats(BaseModel):
    total_sessions: int
    active_sessions: int
    completed_sessions: int
    abandoned_sessions: int
    average_session_duration: float


class SessionCompletion(BaseModel):
    session: InterviewSessionResponse
    report: Optional[PracticeReportResponse] = None


class PracticeOverview(BaseModel):
    total_sessions: int
    completed_sessions: int
    in_progress_sessions: int
    average_score: Optional[float] = None
    best_score: Optional[float] = None
    total_practice_time: int
    recent_sessions: List[InterviewSessionResponse] = []

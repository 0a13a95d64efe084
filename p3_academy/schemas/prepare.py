from datetime import date, datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class PrepareSessionCreate(BaseModel):
    job_position: str = Field(..., min_length=1)
    company_name: Optional[str] = None
    interview_stage: str = "phone-screening"
    experience_level: str = "intermediate"
    preferred_language: str = "en"
    voice_enabled: bool = True
    speech_rate: str = "1.0"
    difficulty_level: str = Field("adaptive", pattern="^(adaptive|beginner|intermediate|advanced)$")
    focus_areas: List[str] = ["behavioral", "situational"]
    question_categories: List[str] = ["general"]


class PrepareStatusUpdate(BaseModel):
    status: str = Field(..., pattern="^(active|paused|completed)$")


class PrepareResponseCreate(BaseModel):
    question_id: int
    response_text: str = Field(..., min_length=1)
    response_language: str = "en"
    input_method: str = Field("text", pattern="^(text|voice)$")
    audio_duration: Optional[int] = None
    transcription_confidence: Optional[float] = None
    time_taken: Optional[int] = None


class PrepareQuestionResponse(BaseModel):
    id: int
    session_id: int
    question_text: str
    question_text_translated: Optional[str] = None
    question_category: str
    question_type: str
    difficulty_level: str
    expected_answer_time: int
    cultural_context: Optional[str] = None
    question_number: int
    star_method_relevant: bool
    generated_by: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PrepareAnswerResponse(BaseModel):
    id: int
    session_id: int
    question_id: int
    response_text: str
    response_language: str
    input_method: str
    star_scores: Optional[Dict[str, Any]] = None
    detailed_feedback: Optional[Dict[str, Any]] = None
    model_answer: Optional[str] = None
    relevance_score: Optional[float] = None
    communication_score: Optional[float] = None
    completeness_score: Optional[float] = None
    time_taken: Optional[int] = None
    word_count: Optional[int] = None
    evaluated_by: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PrepareSessionResponse(BaseModel):
    id: int
    user_id: int
    job_position: str
    company_name: Optional[str] = None
    interview_stage: str
    experience_level: str
    preferred_language: str
    voice_enabled: bool
    speech_rate: str
    difficulty_level: str
    focus_areas: List[str] = []
    question_categories: List[str] = []
    status: str
    questions_answered: int
    total_time_spent: int
    average_star_score: Optional[float] = None
    session_progress: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PrepareSessionDetail(PrepareSessionResponse):
    questions: List[PrepareQuestionResponse] = []
    responses: List[PrepareAnswerResponse] = []


class PrepareProgress(BaseModel):
    session_id: int
    total_questions: int
    questions_answered: int
    average_star_score: float
    completion_percentage: float
    current_question_number: int
    time_spent: int


class StudyPlanCreate(BaseModel):
    job_position: Optional[str] = None
    company_name: Optional[str] = None
    interview_date: Optional[date] = None
    time_available: int = Field(60, ge=10, le=600)  # minutes per day
    focus_areas: List[str] = []
    language: str = "en"


class StudyPlanResponse(BaseModel):
    id: int
    session_id: int
    title: str
    description: Optional[str] = None
    total_weeks: int
    target_skills: List[str] = []
    daily_time_commitment: int
    milestones: List[Dict[str, Any]] = []
    generated_content: Optional[Dict[str, Any]] = None
    ai_generated: bool
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CompanyResearchCreate(BaseModel):
    company_name: str = Field(..., min_length=1)
    job_position: Optional[str] = None


class CompanyResearchResponse(BaseModel):
    id: int
    company_name: str
    industry: Optional[str] = None
    description: Optional[str] = None
    key_products: List[Any] = []
    culture: Optional[Dict[str, Any]] = None
    competitors: List[Any] = []
    industry_trends: List[Any] = []
    recent_news: List[Any] = []
    interview_insights: Optional[Dict[str, Any]] = None
    ai_generated: bool
    last_updated: Optional[datetime] = None

    class Config:
        from_attributes = True


class ResourceGenerate(BaseModel):
    topic: str = Field(..., min_length=1)
    resource_type: str = Field(..., pattern="^(article|template|checklist|example)$")
    interview_stage: Optional[str] = None
    language: str = "en"


class PreparationResourceResponse(BaseModel):
    id: int
    title: str
    resource_type: str
    category: str
    interview_stage: Optional[str] = None
    content: str
    language: str
    tags: List[str] = []
    difficulty: str
    estimated_read_time: int
    ai_generated: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BankQuestion(BaseModel):
    id: str
    question: str
    category: str
    difficulty: str
    interview_stage: str
    tags: List[str] = []
    expected_answer_time: int  # minutes
    star_method_relevant: bool
    cultural_context: Optional[str] = None


class StageQuestionSet(BaseModel):
    interview_stage: str
    questions: List[BankQuestion]
    total_questions: int
    average_difficulty: float


class QuestionBankStatistics(BaseModel):
    total_questions: int
    questions_by_stage: Dict[str, int]
    questions_by_category: Dict[str, int]
    questions_by_difficulty: Dict[str, int]

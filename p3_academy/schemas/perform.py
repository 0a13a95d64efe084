from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class PerformSessionCreate(BaseModel):
    job_position: str = Field(..., min_length=1)
    company_name: str = Field(..., min_length=1)
    interview_language: str = "en"


class PerformMessageCreate(BaseModel):
    content: str = Field(..., min_length=1)
    input_method: str = Field("text", pattern="^(text|voice)$")


class AIResponseResult(BaseModel):
    message: Optional[str] = None
    message_id: Optional[int] = None
    question_number: Optional[int] = None
    is_completed: bool = False


class EvaluationResponse(BaseModel):
    id: int
    session_id: int
    overall_score: float
    overall_rating: Optional[str] = None
    communication_score: Optional[float] = None
    empathy_score: Optional[float] = None
    problem_solving_score: Optional[float] = None
    cultural_alignment_score: Optional[float] = None
    qualitative_observations: Optional[str] = None
    strengths: List[str] = []
    improvement_areas: List[str] = []
    actionable_insights: List[str] = []
    personalized_drills: List[str] = []
    reflection_prompts: List[str] = []
    badge_earned: Optional[str] = None
    points_earned: int = 0
    evaluation_language: Optional[str] = None
    cultural_context: Optional[str] = None
    shared_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AssessmentCreate(BaseModel):
    session_id: int


class LearningDrillResponse(BaseModel):
    id: int
    assessment_id: int
    drill_type: str
    title: str
    description: str
    scenario: Optional[str] = None
    target_skill: str
    estimated_duration: int
    completed: bool
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AssessmentResponse(BaseModel):
    id: int
    session_id: int
    communication_score: float
    empathy_score: float
    problem_solving_score: float
    cultural_alignment_score: float
    overall_score: float
    overall_rating: str
    strengths: List[str] = []
    improvement_areas: List[str] = []
    qualitative_observations: Optional[str] = None
    actionable_insights: List[str] = []
    star_method_recommendations: List[str] = []
    self_reflection_prompts: List[str] = []
    progress_level: int
    performance_badge: Optional[str] = None
    created_at: Optional[datetime] = None
    drills: List[LearningDrillResponse] = []

    class Config:
        from_attributes = True


class PerformanceOverview(BaseModel):
    total_assessments: int
    average_score: float
    current_rating: str
    strongest_indicator: str
    weakest_indicator: str
    recent_trend: str
    progress_level: int
    completed_drills: int
    available_drills: int
    badges: List[str]

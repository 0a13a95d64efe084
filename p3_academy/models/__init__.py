# Import all models here for SQLAlchemy discovery
from p3_academy.models.user import User
from p3_academy.models.scenario import InterviewScenario
from p3_academy.models.interview_session import InterviewSession, InterviewMessage
from p3_academy.models.evaluation import PracticeReport, AiEvaluationResult
from p3_academy.models.assessment import Assessment, LearningDrill
from p3_academy.models.prepare import (
    AiPrepareSession,
    AiPrepareQuestion,
    AiPrepareResponse,
    StudyPlan,
    CompanyResearch,
    PreparationResource,
)
from p3_academy.models.coaching import CoachingSession, CoachingMessage, CoachingFeedback

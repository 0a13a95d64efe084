from typing import Any, List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from p3_academy.api.deps import get_current_user, get_db
from p3_academy.models.user import User
from p3_academy.schemas.perform import (
    AIResponseResult,
    AssessmentCreate,
    AssessmentResponse,
    EvaluationResponse,
    LearningDrillResponse,
    PerformanceOverview,
    PerformMessageCreate,
    PerformSessionCreate,
)
from p3_academy.schemas.response import BaseResponseModel
from p3_academy.schemas.session import InterviewMessageResponse, InterviewSessionDetail
from p3_academy.services.perform_service import perform_service

router = APIRouter()


@router.post("/sessions", response_model=BaseResponseModel[InterviewSessionDetail], status_code=status.HTTP_201_CREATED)
async def create_session(
    *,
    db: Session = Depends(get_db),
    session_in: PerformSessionCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Start a Perform interview; the interviewer's greeting is stored as the first message."""
    session = await perform_service.create_session(db, current_user, session_in)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="Perform session created",
        data=InterviewSessionDetail.model_validate(session),
    )


@router.get("/sessions/{session_id}", response_model=BaseResponseModel[InterviewSessionDetail])
async def get_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = perform_service.get_session(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Perform session retrieved",
        data=InterviewSessionDetail.model_validate(session),
    )


@router.get("/sessions/{session_id}/messages", response_model=BaseResponseModel[List[InterviewMessageResponse]])
async def get_messages(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = perform_service.get_session(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Messages retrieved",
        data=[InterviewMessageResponse.model_validate(m) for m in session.messages],
    )


@router.post("/sessions/{session_id}/messages", response_model=BaseResponseModel[InterviewMessageResponse])
async def add_message(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    message_in: PerformMessageCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    message = perform_service.add_user_message(db, session_id, current_user, message_in)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Message recorded",
        data=InterviewMessageResponse.model_validate(message),
    )


@router.post("/sessions/{session_id}/ai-response", response_model=BaseResponseModel[AIResponseResult])
async def generate_ai_response(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    result = await perform_service.generate_ai_response(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Interview completed" if result["is_completed"] else "Question generated",
        data=AIResponseResult(**result),
    )


@router.post("/sessions/{session_id}/complete", response_model=BaseResponseModel[EvaluationResponse])
async def complete_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    evaluation = await perform_service.complete_session(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Interview evaluated",
        data=EvaluationResponse.model_validate(evaluation),
    )


@router.get("/sessions/{session_id}/evaluation", response_model=BaseResponseModel[EvaluationResponse])
async def get_evaluation(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    evaluation = perform_service.get_evaluation(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Evaluation retrieved",
        data=EvaluationResponse.model_validate(evaluation),
    )


@router.post("/sessions/{session_id}/share", response_model=BaseResponseModel[EvaluationResponse])
async def share_progress(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    evaluation = perform_service.share_progress(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Progress shared",
        data=EvaluationResponse.model_validate(evaluation),
    )


@router.post("/assessment", response_model=BaseResponseModel[AssessmentResponse], status_code=status.HTTP_201_CREATED)
async def create_assessment(
    *,
    db: Session = Depends(get_db),
    assessment_in: AssessmentCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Score a finished Practice or Perform session against the four performance indicators."""
    session = perform_service.get_session(db, assessment_in.session_id, current_user, module=None)
    assessment = await perform_service.create_performance_assessment(db, session, current_user)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="Assessment created",
        data=AssessmentResponse.model_validate(assessment),
    )


@router.get("/assessment", response_model=BaseResponseModel[List[AssessmentResponse]])
async def list_assessments(
    *,
    db: Session = Depends(get_db),
    limit: int = Query(10, ge=1, le=100),
    current_user: User = Depends(get_current_user),
) -> Any:
    assessments = perform_service.get_user_assessments(db, current_user.id, limit)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Assessments retrieved",
        data=[AssessmentResponse.model_validate(a) for a in assessments],
    )


@router.get("/overview", response_model=BaseResponseModel[PerformanceOverview])
async def get_overview(
    *,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    overview = perform_service.get_user_performance_overview(db, current_user.id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Performance overview retrieved",
        data=PerformanceOverview(**overview),
    )


@router.get("/drills", response_model=BaseResponseModel[List[LearningDrillResponse]])
async def list_drills(
    *,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    drills = perform_service.get_user_learning_drills(db, current_user.id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Learning drills retrieved",
        data=[LearningDrillResponse.model_validate(d) for d in drills],
    )


@router.post("/drills/{drill_id}/complete", response_model=BaseResponseModel[LearningDrillResponse])
async def complete_drill(
    *,
    db: Session = Depends(get_db),
    drill_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    drill = perform_service.complete_learning_drill(db, drill_id, current_user.id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Learning drill completed",
        data=LearningDrillResponse.model_validate(drill),
    )

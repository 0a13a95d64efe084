from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from p3_academy.api.deps import get_current_user, get_db
from p3_academy.models.user import User
from p3_academy.schemas.coaching import (
    STAGE_PATTERN,
    CoachingCompletion,
    CoachingFeedbackResponse,
    CoachingMessageResponse,
    CoachingRespond,
    CoachingSessionCreate,
    CoachingSessionDetail,
    CoachingSessionResponse,
    CoachingTurn,
    IndustryKnowledge,
)
from p3_academy.schemas.prepare import BankQuestion
from p3_academy.schemas.response import BaseResponseModel
from p3_academy.services.coaching_service import coaching_service

router = APIRouter()


@router.post("/sessions", response_model=BaseResponseModel[CoachingSessionResponse], status_code=status.HTTP_201_CREATED)
async def create_session(
    *,
    db: Session = Depends(get_db),
    session_in: CoachingSessionCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = coaching_service.create_session(db, current_user.id, session_in)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="Coaching session created",
        data=CoachingSessionResponse.model_validate(session),
    )


@router.get("/sessions", response_model=BaseResponseModel[List[CoachingSessionResponse]])
async def list_sessions(
    *,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    sessions = coaching_service.get_user_sessions(db, current_user.id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Coaching sessions retrieved",
        data=[CoachingSessionResponse.model_validate(s) for s in sessions],
        meta={"total": len(sessions)},
    )


@router.get("/sessions/{session_id}", response_model=BaseResponseModel[CoachingSessionDetail])
async def get_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = coaching_service.get_session(db, session_id, current_user.id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Coaching session retrieved",
        data=CoachingSessionDetail.model_validate(session),
    )


@router.get("/sessions/{session_id}/messages", response_model=BaseResponseModel[List[CoachingMessageResponse]])
async def get_messages(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = coaching_service.get_session(db, session_id, current_user.id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Coaching messages retrieved",
        data=[CoachingMessageResponse.model_validate(m) for m in session.messages],
    )


@router.post("/sessions/{session_id}/start", response_model=BaseResponseModel[CoachingTurn])
async def start_conversation(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Open the conversation with an introduction and the first question."""
    session = coaching_service.get_session(db, session_id, current_user.id)
    question = await coaching_service.start_conversation(db, session)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Coaching conversation started",
        data=CoachingTurn(question=question),
    )


@router.post("/sessions/{session_id}/respond", response_model=BaseResponseModel[CoachingTurn])
async def respond(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    respond_in: CoachingRespond,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = coaching_service.get_session(db, session_id, current_user.id)
    turn = await coaching_service.respond(db, session, respond_in.response)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Coaching session completed" if turn["conversation_complete"] else "Response coached",
        data=CoachingTurn(
            question=turn["question"],
            feedback=CoachingFeedbackResponse.model_validate(turn["feedback"]),
            conversation_complete=turn["conversation_complete"],
        ),
    )


@router.post("/sessions/{session_id}/complete", response_model=BaseResponseModel[CoachingCompletion])
async def complete_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = coaching_service.get_session(db, session_id, current_user.id)
    completion = await coaching_service.complete_session(db, session)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Coaching session completed",
        data=CoachingCompletion(**completion),
    )


@router.get("/industry/{industry}/knowledge", response_model=BaseResponseModel[IndustryKnowledge])
async def get_industry_knowledge(
    *,
    industry: str,
    current_user: User = Depends(get_current_user),
) -> Any:
    knowledge = await coaching_service.get_industry_knowledge(industry)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Industry knowledge retrieved",
        data=IndustryKnowledge(**knowledge),
    )


@router.get("/industry/{industry}/questions", response_model=BaseResponseModel[List[BankQuestion]])
async def get_industry_questions(
    *,
    industry: str,
    stage: Optional[str] = Query(None, pattern=STAGE_PATTERN),
    experience_level: Optional[str] = Query(None, pattern="^(intermediate|senior|expert)$"),
    limit: int = Query(10, ge=1, le=50),
    current_user: User = Depends(get_current_user),
) -> Any:
    questions = coaching_service.get_industry_questions(industry, stage, experience_level, limit)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Industry questions retrieved",
        data=[BankQuestion(**q) for q in questions],
        meta={"industry": industry, "count": len(questions)},
    )

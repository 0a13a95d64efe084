from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from p3_academy.api.deps import get_current_user, get_db
from p3_academy.models.user import User
from p3_academy.schemas.response import BaseResponseModel
from p3_academy.schemas.session import (
    AIQuestionResponse,
    InterviewMessageResponse,
    InterviewSessionCreate,
    InterviewSessionDetail,
    InterviewSessionResponse,
    InterviewSessionUpdate,
    PracticeOverview,
    PracticeQuestion,
    PracticeReportResponse,
    PracticeResponseItem,
    SessionCompletion,
    SessionRecovery,
    SessionStats,
    SessionStatusInfo,
    SessionStatusUpdate,
    UserResponseCreate,
)
from p3_academy.services import sealion_service
from p3_academy.services.practice_service import practice_service
from p3_academy.services.session_management import session_manager

router = APIRouter()


@router.post("/sessions", response_model=BaseResponseModel[InterviewSessionResponse], status_code=status.HTTP_201_CREATED)
async def create_session(
    *,
    db: Session = Depends(get_db),
    session_in: InterviewSessionCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = practice_service.create_session(db, current_user, session_in)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="Practice session created",
        data=InterviewSessionResponse.model_validate(session),
    )


@router.get("/sessions", response_model=BaseResponseModel[List[InterviewSessionResponse]])
async def list_sessions(
    *,
    db: Session = Depends(get_db),
    status_filter: Optional[str] = Query(None, alias="status"),
    current_user: User = Depends(get_current_user),
) -> Any:
    sessions = practice_service.list_sessions(db, current_user, status_filter)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Practice sessions retrieved",
        data=[InterviewSessionResponse.model_validate(s) for s in sessions],
        meta={"total": len(sessions)},
    )


@router.get("/sessions/{session_id}", response_model=BaseResponseModel[InterviewSessionDetail])
async def get_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = practice_service.get_session(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Practice session retrieved",
        data=InterviewSessionDetail.model_validate(session),
    )


@router.put("/sessions/{session_id}", response_model=BaseResponseModel[InterviewSessionResponse])
async def update_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    session_in: InterviewSessionUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = practice_service.update_session(db, session_id, current_user, session_in)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Practice session updated",
        data=InterviewSessionResponse.model_validate(session),
    )


@router.patch("/sessions/{session_id}/status", response_model=BaseResponseModel[InterviewSessionResponse])
async def update_session_status(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    status_in: SessionStatusUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = practice_service.update_status(db, session_id, current_user, status_in.status)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message=f"Session status set to {session.status}",
        data=InterviewSessionResponse.model_validate(session),
    )


@router.post("/sessions/{session_id}/auto-save", response_model=BaseResponseModel[InterviewSessionResponse])
async def auto_save_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    session_in: InterviewSessionUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = practice_service.update_session(db, session_id, current_user, session_in, auto_save=True)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Session auto-saved",
        data=InterviewSessionResponse.model_validate(session),
        meta={"auto_saved_at": session.auto_saved_at.isoformat() if session.auto_saved_at else None},
    )


@router.post("/sessions/{session_id}/ai-question", response_model=BaseResponseModel[AIQuestionResponse])
async def generate_ai_question(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Ask the next interviewer question for a practice session.

    The first call moves a session out of ``setup``.
    """
    message = await practice_service.generate_ai_question(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Question generated",
        data=AIQuestionResponse(
            content=message.content,
            question_number=message.question_number,
            message_id=message.id,
        ),
    )


@router.post("/sessions/{session_id}/user-response", response_model=BaseResponseModel[InterviewMessageResponse])
async def submit_user_response(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    response_in: UserResponseCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    safety = await sealion_service.check_content_safety(response_in.content)
    if not safety["safe"]:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=safety["reason"] or "Response was flagged by the content filter")

    message = practice_service.record_user_response(
        db,
        session_id,
        current_user,
        response_in.content,
        input_method=response_in.input_method,
        question_number=response_in.question_number,
    )
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Response recorded",
        data=InterviewMessageResponse.model_validate(message),
    )


@router.post("/sessions/{session_id}/complete", response_model=BaseResponseModel[SessionCompletion])
async def complete_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session, report = await practice_service.complete_session(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Practice session completed",
        data=SessionCompletion(
            session=InterviewSessionResponse.model_validate(session),
            report=PracticeReportResponse.model_validate(report) if report else None,
        ),
    )


@router.get("/sessions/{session_id}/questions", response_model=BaseResponseModel[List[PracticeQuestion]])
async def get_questions(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    questions = practice_service.get_questions(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Questions retrieved",
        data=[PracticeQuestion(**q) for q in questions],
    )


@router.get("/sessions/{session_id}/responses", response_model=BaseResponseModel[List[PracticeResponseItem]])
async def get_responses(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    responses = practice_service.get_responses(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Responses retrieved",
        data=[PracticeResponseItem(**r) for r in responses],
    )


@router.get("/sessions/{session_id}/transcript", response_class=PlainTextResponse)
async def download_transcript(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    transcript = practice_service.get_transcript(db, session_id, current_user)
    return PlainTextResponse(
        transcript,
        headers={"Content-Disposition": f"attachment; filename=interview-transcript-{session_id}.txt"},
    )


@router.get("/sessions/{session_id}/report", response_model=BaseResponseModel[PracticeReportResponse])
async def get_report(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    report = practice_service.get_report(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Report retrieved",
        data=PracticeReportResponse.model_validate(report),
    )


@router.get("/sessions/{session_id}/status", response_model=BaseResponseModel[SessionStatusInfo])
async def get_session_status(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = practice_service.get_session(db, session_id, current_user)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Session status retrieved",
        data=SessionStatusInfo(**session_manager.get_session_status(session)),
    )


@router.post("/sessions/{session_id}/extend", response_model=BaseResponseModel[SessionStatusInfo])
async def extend_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = practice_service.get_session(db, session_id, current_user)
    session = session_manager.extend_session(db, session)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Session extended",
        data=SessionStatusInfo(**session_manager.get_session_status(session)),
    )


@router.post("/sessions/{session_id}/recover", response_model=BaseResponseModel[SessionRecovery])
async def recover_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = practice_service.get_session(db, session_id, current_user)
    result = session_manager.recover_session(db, session)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message=result["message"],
        data=SessionRecovery(
            can_recover=result["can_recover"],
            message=result["message"],
            session=InterviewSessionResponse.model_validate(result["session"]),
        ),
    )


@router.get("/overview", response_model=BaseResponseModel[PracticeOverview])
async def get_overview(
    *,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    overview = practice_service.get_overview(db, current_user)
    overview["recent_sessions"] = [InterviewSessionResponse.model_validate(s) for s in overview["recent_sessions"]]
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Practice overview retrieved",
        data=PracticeOverview(**overview),
    )


@router.get("/stats", response_model=BaseResponseModel[SessionStats])
async def get_stats(
    *,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Session statistics retrieved",
        data=SessionStats(**session_manager.get_user_session_stats(db, current_user.id)),
    )

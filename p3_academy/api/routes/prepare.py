from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from p3_academy.api.deps import get_current_user, get_db
from p3_academy.models.user import User
from p3_academy.prompts.question_bank import INTERVIEW_STAGES, QUESTION_CATEGORIES
from p3_academy.schemas.prepare import (
    BankQuestion,
    CompanyResearchCreate,
    CompanyResearchResponse,
    PrepareAnswerResponse,
    PrepareProgress,
    PrepareQuestionResponse,
    PrepareResponseCreate,
    PrepareSessionCreate,
    PrepareSessionDetail,
    PrepareSessionResponse,
    PrepareStatusUpdate,
    PreparationResourceResponse,
    QuestionBankStatistics,
    ResourceGenerate,
    StageQuestionSet,
    StudyPlanCreate,
    StudyPlanResponse,
)
from p3_academy.schemas.response import BaseResponseModel
from p3_academy.services.prepare_service import prepare_service
from p3_academy.services.prepare_toolkit_service import prepare_toolkit_service
from p3_academy.services.question_bank_service import question_bank_service

router = APIRouter()


@router.post("/sessions", response_model=BaseResponseModel[PrepareSessionResponse], status_code=status.HTTP_201_CREATED)
async def create_session(
    *,
    db: Session = Depends(get_db),
    session_in: PrepareSessionCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = prepare_service.create_session(db, current_user.id, session_in)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="Prepare session created",
        data=PrepareSessionResponse.model_validate(session),
    )


@router.get("/sessions", response_model=BaseResponseModel[List[PrepareSessionResponse]])
async def list_sessions(
    *,
    db: Session = Depends(get_db),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(get_current_user),
) -> Any:
    sessions = prepare_service.get_user_sessions(db, current_user.id, limit, offset)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Prepare sessions retrieved",
        data=[PrepareSessionResponse.model_validate(s) for s in sessions],
        meta={"limit": limit, "offset": offset},
    )


@router.get("/sessions/{session_id}", response_model=BaseResponseModel[PrepareSessionDetail])
async def get_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = prepare_service.get_session(db, session_id, current_user.id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Prepare session retrieved",
        data=PrepareSessionDetail.model_validate(session),
    )


@router.delete("/sessions/{session_id}", response_model=BaseResponseModel[None])
async def delete_session(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    prepare_service.delete_session(db, session_id, current_user.id)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Prepare session deleted")


@router.post("/sessions/{session_id}/question", response_model=BaseResponseModel[PrepareQuestionResponse])
async def generate_question(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    adaptive_difficulty: bool = True,
    current_user: User = Depends(get_current_user),
) -> Any:
    question = await prepare_service.generate_next_question(db, session_id, current_user.id, adaptive_difficulty)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Question generated",
        data=PrepareQuestionResponse.model_validate(question),
        meta={"generated_by": question.generated_by},
    )


@router.post("/sessions/{session_id}/respond", response_model=BaseResponseModel[PrepareAnswerResponse])
async def submit_response(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    response_in: PrepareResponseCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Evaluate an answer with STAR scoring and return the stored feedback."""
    response = await prepare_service.process_response(db, session_id, current_user.id, response_in)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Response evaluated",
        data=PrepareAnswerResponse.model_validate(response),
    )


@router.get("/sessions/{session_id}/progress", response_model=BaseResponseModel[PrepareProgress])
async def get_progress(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    progress = prepare_service.get_session_progress(db, session_id, current_user.id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Progress retrieved",
        data=PrepareProgress(**progress),
    )


@router.patch("/sessions/{session_id}/status", response_model=BaseResponseModel[PrepareSessionResponse])
async def update_status(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    status_in: PrepareStatusUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    session = prepare_service.update_session_status(db, session_id, current_user.id, status_in.status)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message=f"Session status set to {session.status}",
        data=PrepareSessionResponse.model_validate(session),
    )


@router.post("/sessions/{session_id}/study-plan", response_model=BaseResponseModel[StudyPlanResponse], status_code=status.HTTP_201_CREATED)
async def generate_study_plan(
    *,
    db: Session = Depends(get_db),
    session_id: int,
    plan_in: StudyPlanCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Build a week-by-week study plan for a prepare session.

    Job position and company default to the session's own.
    """
    session = prepare_service.get_session(db, session_id, current_user.id)
    plan = await prepare_toolkit_service.generate_study_plan(db, session, plan_in)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="Study plan generated",
        data=StudyPlanResponse.model_validate(plan),
    )


@router.get("/study-plans/{plan_id}", response_model=BaseResponseModel[StudyPlanResponse])
async def get_study_plan(
    *,
    db: Session = Depends(get_db),
    plan_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    plan = prepare_toolkit_service.get_study_plan(db, plan_id, current_user.id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Study plan retrieved",
        data=StudyPlanResponse.model_validate(plan),
    )


@router.post("/company-research", response_model=BaseResponseModel[CompanyResearchResponse])
async def research_company(
    *,
    db: Session = Depends(get_db),
    research_in: CompanyResearchCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    research = await prepare_toolkit_service.generate_company_research(
        db, current_user.id, research_in.company_name.strip(), research_in.job_position
    )
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Company research ready",
        data=CompanyResearchResponse.model_validate(research),
    )


@router.get("/company-research", response_model=BaseResponseModel[CompanyResearchResponse])
async def get_company_research(
    *,
    db: Session = Depends(get_db),
    company_name: str = Query(..., min_length=1),
    current_user: User = Depends(get_current_user),
) -> Any:
    research = prepare_toolkit_service.get_company_research(db, current_user.id, company_name.strip())
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Company research retrieved",
        data=CompanyResearchResponse.model_validate(research),
    )


@router.post("/resources/generate", response_model=BaseResponseModel[PreparationResourceResponse], status_code=status.HTTP_201_CREATED)
async def generate_resource(
    *,
    db: Session = Depends(get_db),
    resource_in: ResourceGenerate,
    current_user: User = Depends(get_current_user),
) -> Any:
    resource = await prepare_toolkit_service.generate_resource(db, current_user.id, resource_in)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="Resource generated",
        data=PreparationResourceResponse.model_validate(resource),
    )


@router.get("/resources", response_model=BaseResponseModel[List[PreparationResourceResponse]])
async def list_resources(
    *,
    db: Session = Depends(get_db),
    category: Optional[str] = None,
    interview_stage: Optional[str] = None,
    resource_type: Optional[str] = None,
    language: Optional[str] = None,
    current_user: User = Depends(get_current_user),
) -> Any:
    resources = prepare_toolkit_service.list_resources(db, category, interview_stage, resource_type, language)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Resources retrieved",
        data=[PreparationResourceResponse.model_validate(r) for r in resources],
        meta={"total": len(resources)},
    )


@router.get("/questions/stage/{stage}", response_model=BaseResponseModel[List[BankQuestion]])
async def get_stage_questions(
    *,
    stage: str,
    count: int = Query(15, ge=1, le=50),
    difficulty: Optional[str] = Query(None, pattern="^(beginner|intermediate|advanced)$"),
    language: str = "en",
    current_user: User = Depends(get_current_user),
) -> Any:
    if stage not in INTERVIEW_STAGES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid interview stage")

    questions = await question_bank_service.get_questions_for_stage(stage, count, difficulty, language)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Questions retrieved",
        data=[BankQuestion(**q) for q in questions],
        meta={"stage": stage, "count": len(questions), "difficulty": difficulty, "language": language},
    )


@router.get("/questions/category/{category}", response_model=BaseResponseModel[List[BankQuestion]])
async def get_category_questions(
    *,
    category: str,
    limit: int = Query(10, ge=1, le=50),
    current_user: User = Depends(get_current_user),
) -> Any:
    if category not in QUESTION_CATEGORIES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid question category")

    questions = question_bank_service.get_questions_by_category(category, limit)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Questions retrieved",
        data=[BankQuestion(**q) for q in questions],
        meta={"category": category, "count": len(questions), "limit": limit},
    )


@router.get("/questions/star-method", response_model=BaseResponseModel[List[BankQuestion]])
async def get_star_method_questions(
    *,
    limit: int = Query(15, ge=1, le=50),
    current_user: User = Depends(get_current_user),
) -> Any:
    questions = question_bank_service.get_star_method_questions(limit)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="STAR method questions retrieved",
        data=[BankQuestion(**q) for q in questions],
        meta={"count": len(questions), "limit": limit},
    )


@router.get("/questions/all-stages", response_model=BaseResponseModel[Dict[str, StageQuestionSet]])
async def get_all_stage_questions(
    *,
    current_user: User = Depends(get_current_user),
) -> Any:
    stages = question_bank_service.get_all_stage_questions()
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Question bank retrieved",
        data={stage: StageQuestionSet(**question_set) for stage, question_set in stages.items()},
        meta={
            "total_stages": len(stages),
            "total_questions": sum(s["total_questions"] for s in stages.values()),
        },
    )


@router.get("/questions/statistics", response_model=BaseResponseModel[QuestionBankStatistics])
async def get_question_statistics(
    *,
    current_user: User = Depends(get_current_user),
) -> Any:
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Question bank statistics retrieved",
        data=QuestionBankStatistics(**question_bank_service.get_question_statistics()),
    )

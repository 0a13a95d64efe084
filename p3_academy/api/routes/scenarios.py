from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from p3_academy.api.deps import get_current_admin_user, get_current_user, get_db
from p3_academy.models.user import User
from p3_academy.schemas.response import BaseResponseModel
from p3_academy.schemas.scenario import ScenarioCreate, ScenarioResponse, ScenarioUpdate
from p3_academy.services.practice_service import scenario_service

router = APIRouter()


@router.get("", response_model=BaseResponseModel[List[ScenarioResponse]])
async def list_scenarios(
    *,
    db: Session = Depends(get_db),
    interview_stage: Optional[str] = None,
    industry: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    current_user: User = Depends(get_current_user),
) -> Any:
    scenarios = scenario_service.list_scenarios(db, interview_stage, industry, status_filter)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Scenarios retrieved",
        data=[ScenarioResponse.model_validate(s) for s in scenarios],
        meta={"total": len(scenarios)},
    )


@router.post("", response_model=BaseResponseModel[ScenarioResponse], status_code=status.HTTP_201_CREATED)
async def create_scenario(
    *,
    db: Session = Depends(get_db),
    scenario_in: ScenarioCreate,
    current_user: User = Depends(get_current_admin_user),
) -> Any:
    scenario = scenario_service.create_scenario(db, scenario_in, created_by=current_user.id)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="Scenario created",
        data=ScenarioResponse.model_validate(scenario),
    )


@router.get("/{scenario_id}", response_model=BaseResponseModel[ScenarioResponse])
async def get_scenario(
    *,
    db: Session = Depends(get_db),
    scenario_id: int,
    current_user: User = Depends(get_current_user),
) -> Any:
    scenario = scenario_service.get_scenario(db, scenario_id)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Scenario retrieved",
        data=ScenarioResponse.model_validate(scenario),
    )


@router.put("/{scenario_id}", response_model=BaseResponseModel[ScenarioResponse])
async def update_scenario(
    *,
    db: Session = Depends(get_db),
    scenario_id: int,
    scenario_in: ScenarioUpdate,
    current_user: User = Depends(get_current_admin_user),
) -> Any:
    scenario = scenario_service.update_scenario(db, scenario_id, scenario_in)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Scenario updated",
        data=ScenarioResponse.model_validate(scenario),
    )


@router.delete("/{scenario_id}", response_model=BaseResponseModel[None])
async def delete_scenario(
    *,
    db: Session = Depends(get_db),
    scenario_id: int,
    current_user: User = Depends(get_current_admin_user),
) -> Any:
    scenario_service.delete_scenario(db, scenario_id)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Scenario deleted")

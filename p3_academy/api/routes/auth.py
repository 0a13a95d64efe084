from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from p3_academy.api.deps import get_current_user, get_db
from p3_academy.core.config import settings
from p3_academy.core.security import create_access_token
from p3_academy.models.user import User
from p3_academy.schemas.response import BaseResponseModel
from p3_academy.schemas.user import TokenResponse, UserCreate, UserResponse
from p3_academy.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=BaseResponseModel[UserResponse], status_code=status.HTTP_201_CREATED)
async def register(
    user_in: UserCreate,
    db: Session = Depends(get_db)
) -> Any:
    """Register a new user."""
    if await UserService.get_user_by_email(db, user_in.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    if await UserService.get_user_by_username(db, user_in.username):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken")

    user = await UserService.create_user(db, user_in)
    return BaseResponseModel(
        code=status.HTTP_201_CREATED,
        message="User registered successfully",
        data=UserResponse.model_validate(user),
        meta={"created_at": datetime.now(timezone.utc).timestamp()},
    )


@router.post("/login", response_model=BaseResponseModel[TokenResponse])
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
) -> Any:
    """Login for access token."""
    user = await UserService.authenticate(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User account is disabled")

    access_token = create_access_token(user.id, [user.role])
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Login successful",
        data=TokenResponse(access_token=access_token),
        meta={
            "user": {"id": user.id, "username": user.username, "email": user.email, "role": user.role},
            "expires_in": settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        },
    )


@router.get("/user", response_model=BaseResponseModel[UserResponse])
async def read_current_user(
    current_user: User = Depends(get_current_user),
) -> Any:
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Current user",
        data=UserResponse.model_validate(current_user),
    )

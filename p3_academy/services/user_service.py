from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from p3_academy.core.security import get_password_hash, verify_password
from p3_academy.models.user import User
from p3_academy.schemas.user import UserCreate


class UserService:
    @staticmethod
    async def get_user(db: Session, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    async def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email."""
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    async def get_user_by_username(db: Session, username: str) -> Optional[User]:
        """Get user by username."""
        return db.query(User).filter(User.username == username).first()

    @staticmethod
    async def create_user(db: Session, user_in: UserCreate, role: str = "user") -> User:
        """Create new user."""
        db_user = User(
            email=user_in.email,
            username=user_in.username,
            first_name=user_in.first_name,
            last_name=user_in.last_name,
            hashed_password=get_password_hash(user_in.password),
            role=role,
        )
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        return db_user

    @staticmethod
    async def authenticate(db: Session, username: str, password: str) -> Optional[User]:
        """Authenticate by email or username."""
        user = db.query(User).filter(
            or_(User.email == username, User.username == username)
        ).first()
        if not user or not verify_password(password, user.hashed_password):
            return None
        return user

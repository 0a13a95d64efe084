from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union
import uuid

from jose import JWTError, jwt
from passlib.context import CryptContext

from p3_academy.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate password hash from plain password."""
    return pwd_context.hash(password)


def create_token(
    subject: Union[str, Any],
    token_type: str,
    expires_delta: Optional[timedelta] = None,
    roles: Optional[List[str]] = None,
) -> str:
    """Create a signed JWT."""
    current_time = datetime.now(timezone.utc)
    expire = current_time + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    to_encode = {
        "sub": str(subject),
        "type": token_type,
        "exp": int(expire.timestamp()),
        "iat": int(current_time.timestamp()),
        "jti": str(uuid.uuid4()),
        "roles": roles or [],
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str, token_type: str = "access") -> Dict[str, Any]:
    """Decode a JWT and check its type. Expiry is enforced by jose."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])
        if payload.get("type") != token_type:
            raise JWTError("Invalid token type")
        if not payload.get("sub"):
            raise JWTError("Token has no subject")
        return payload
    except JWTError as e:
        raise ValueError(f"Could not validate credentials: {str(e)}")


def create_access_token(subject: Union[str, Any], roles: List[str]) -> str:
    """Create access token."""
    expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return create_token(subject, "access", expires_delta, roles)

"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token creation/verification
- FastAPI dependencies for protected routes
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pymongo.database import Database

from app.core.config import get_settings
from app.core.exceptions import ForbiddenError, UnauthenticatedError
from app.core.permissions import Caller, Role, UserIdentity
from app.db.mongodb import get_mongo_db
from app.services.user_service import UserService

settings = get_settings()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bearer token extractor (missing header handled below so it renders as 401)
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Database = Depends(get_mongo_db),
) -> Caller:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @router.get("/protected")
        async def route(user: Caller = Depends(get_current_user)):
            return user
    """
    if credentials is None:
        raise UnauthenticatedError("Access token required")

    payload = decode_token(credentials.credentials)
    if not payload:
        raise UnauthenticatedError("Invalid or expired token")

    identity = UserIdentity.parse(payload.get("sub"))
    if identity is None:
        raise UnauthenticatedError("Invalid or expired token")

    # Verify user exists
    user = await run_in_threadpool(UserService(db).get_by_id, identity)
    if not user:
        raise UnauthenticatedError("Invalid or expired token")

    if not user.get("is_active", True):
        raise ForbiddenError("Account deactivated")

    try:
        role = Role(user.get("role"))
    except ValueError:
        raise ForbiddenError("Unknown account role")

    return Caller(
        identity=identity,
        role=role,
        name=user.get("name", ""),
        email=user.get("email", ""),
    )

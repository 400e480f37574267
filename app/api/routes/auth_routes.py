"""
Authentication Routes

POST /auth/register - Register new user
POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.db.mongodb import get_mongo_db
from app.core.auth import hash_password, verify_password, create_access_token, get_current_user
from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError, UnauthenticatedError
from app.core.permissions import Caller
from app.services.user_service import UserService, public_user
from app.schemas.schemas import RegisterRequest, LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", status_code=201)
async def register(request: RegisterRequest, db: Database = Depends(get_mongo_db)):
    """
    Register a new user account.

    Admin accounts cannot be self-registered.
    """
    users = UserService(db)

    if await run_in_threadpool(users.get_by_email, request.email):
        raise ConflictError("Email already registered")

    try:
        user = await run_in_threadpool(
            users.create,
            request.name,
            request.email,
            hash_password(request.password),
            request.role.value,
        )
    except DuplicateKeyError:
        # lost a race with a concurrent registration
        raise ConflictError("Email already registered")

    logger.info("Registered user %s as %s", user["_id"], request.role.value)
    return {
        "success": True,
        "message": f"Registered successfully as {request.role.value}. Please login.",
        "data": {"user": public_user(user)},
    }


@router.post("/login")
async def login(request: LoginRequest, db: Database = Depends(get_mongo_db)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = await run_in_threadpool(UserService(db).get_by_email, request.email)

    if not user or not user.get("password_hash") or not verify_password(request.password, user["password_hash"]):
        raise UnauthenticatedError("Invalid email or password")

    if not user.get("is_active", True):
        raise ForbiddenError("Account deactivated")

    token = create_access_token(data={"sub": str(user["_id"]), "role": user.get("role")})

    return {
        "success": True,
        "message": "Login successful",
        "data": {"token": token, "token_type": "bearer", "user": public_user(user)},
    }


@router.get("/me")
async def get_me(user: Caller = Depends(get_current_user), db: Database = Depends(get_mongo_db)):
    """Get current authenticated user's info."""
    doc = await run_in_threadpool(UserService(db).get_by_id, user.identity)
    if not doc:
        raise NotFoundError("User not found")
    return {"success": True, "data": {"user": public_user(doc)}}

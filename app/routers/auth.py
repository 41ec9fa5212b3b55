from fastapi import APIRouter, Depends
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.core.deps import CurrentUser, get_current_user
from app.crud import user as crud_user
from app.db.redis_client import get_redis
from app.db.session import get_db
from app.schemas.auth import ForgotPasswordRequest, LoginRequest, LoginResponse, ResetPasswordRequest
from app.schemas.common import MessageResponse
from app.schemas.user import UserRead
from app.services.auth_services import AuthServices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in",
    description="Authenticates a username or email with a password and returns a bearer token and the user record."
)
async def login(request: LoginRequest, db: AsyncSession = Depends(get_db)):
    return await AuthServices.login(request.username, request.password, db)


@router.post("/logout", response_model=MessageResponse, summary="Log out")
async def logout(user: CurrentUser = Depends(get_current_user)):
    # Tokens are stateless; the client discards it.
    logger.info("User %s logged out", user.id)
    return {"message": "Logout successful"}


@router.post(
    "/forgot-password",
    response_model=MessageResponse,
    summary="Request a password reset link",
)
async def forgot_password(
    request: ForgotPasswordRequest,
    db: AsyncSession = Depends(get_db),
    redis: Redis = Depends(get_redis),
):
    message = await AuthServices.forgot_password(request.email, db, redis)
    return {"message": message}


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    summary="Redeem a password reset token",
)
async def reset_password(
    request: ResetPasswordRequest,
    db: AsyncSession = Depends(get_db),
    redis: Redis = Depends(get_redis),
):
    message = await AuthServices.reset_password(request.token, request.password, db, redis)
    return {"message": message}


@router.get("/me", response_model=UserRead, summary="Current user")
async def me(user: CurrentUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await crud_user.repository.get(db, user.id)

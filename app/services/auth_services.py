import logging
import secrets

from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from app.core import config
from app.core.errors import UnauthenticatedError, UpstreamError, ValidationError
from app.core.security import create_access_token, hash_password, verify_password
from app.crud import user as crud_user
from app.schemas.auth import LoginResponse
from app.schemas.user import UserRead
from app.services.email_service import send_email

logger = logging.getLogger(__name__)

RESET_KEY_PREFIX = "password_reset:"
RESET_SENT_MESSAGE = "Password reset link sent to your email."


class AuthServices:
    """
        Credential verification and the password-reset flow.

        Tokens are stateless: validity is signature + expiry only, so logout has
        nothing to revoke. Reset tokens are the one piece of server-side auth state
        and live in Redis with a TTL.
    """

    @staticmethod
    async def login(identifier: str, password: str, db: AsyncSession) -> LoginResponse:
        """
        Authenticate a username-or-email / password pair.

        Raises:
            UnauthenticatedError: unknown identifier or wrong password; the message
            is identical for both.
        """
        user = await crud_user.get_by_login(db, identifier)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", identifier)
            raise UnauthenticatedError("Authentication failed")

        token = create_access_token(user.id, user.role)
        logger.info("User %s logged in", user.id)
        return LoginResponse(token=token, user=UserRead.model_validate(user))

    @staticmethod
    async def forgot_password(email: str, db: AsyncSession, redis: Redis) -> str:
        """
        Start a password reset.

        Workflow:
        1. Look up the user by email; unknown addresses get the same answer
           and no email.
        2. Store `password_reset:<token> -> user_id` in Redis with a TTL.
        3. Email the reset link built from FRONTEND_URL. A provider failure is
           logged, the token dropped, and the caller still gets the generic answer.
        """
        user = await crud_user.get_by_email(db, email)
        if user is None:
            logger.info("Password reset requested for unknown email")
            return RESET_SENT_MESSAGE

        reset_token = secrets.token_urlsafe(32)
        await redis.set(f"{RESET_KEY_PREFIX}{reset_token}", user.id, ex=config.PASSWORD_RESET_TTL_SECONDS)

        reset_link = f"{config.FRONTEND_URL}/reset-password?token={reset_token}"
        try:
            await send_email(
                to_email=email,
                subject="Password Reset Instructions",
                text=f"Please click the following link to reset your password: {reset_link}",
                html=f'<p>Please click <a href="{reset_link}">here</a> to reset your password.</p>',
            )
        except UpstreamError as e:
            # same answer as for an unknown address
            logger.error("Password reset email for user %s failed: %s", user.id, e.message)
            await redis.delete(f"{RESET_KEY_PREFIX}{reset_token}")
        return RESET_SENT_MESSAGE

    @staticmethod
    async def reset_password(token: str, password: str, db: AsyncSession, redis: Redis) -> str:
        """Redeem a reset token once and store the new password hash."""
        key = f"{RESET_KEY_PREFIX}{token}"
        # taken atomically: a token redeems at most once
        user_id = await redis.getdel(key)
        if not user_id:
            raise ValidationError("Invalid or expired reset token")

        await crud_user.repository.update(
            db, user_id, {"password_hash": hash_password(password)}
        )
        logger.info("Password reset for user %s", user_id)
        return "Password has been reset successfully."

"""FastAPI dependencies for authentication and authorization."""

import logging
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.errors import ForbiddenError, UnauthenticatedError
from app.core.policy import Action, authorize
from app.core.security import decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    id: str
    role: str


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CurrentUser:
    """Resolve the bearer token into the calling user. No storage lookup."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Authentication required")
    payload = decode_access_token(credentials.credentials)
    return CurrentUser(id=payload["sub"], role=payload["role"])


def require(action: Action):
    """Dependency factory: authenticate, then check ``action`` against the policy table."""

    async def dependency(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        try:
            authorize(user.role, action)
        except ForbiddenError:
            logger.warning("Role %s denied %s (user %s)", user.role, action.value, user.id)
            raise
        return user

    return dependency

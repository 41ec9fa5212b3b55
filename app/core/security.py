"""Password hashing and JWT session tokens."""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.core import config
from app.core.errors import UnauthenticatedError


# =============================================================================
# Passwords
# =============================================================================

def hash_password(password: str) -> str:
    """One-way bcrypt hash of a plaintext password."""
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Compare a plaintext password with a stored hash.

    bcrypt.checkpw compares in constant time. A stored value that is not a
    bcrypt hash (e.g. legacy seed data) is treated as a mismatch.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


# =============================================================================
# Session Token (JWT bearer)
# =============================================================================

def create_access_token(user_id: str, role: str) -> str:
    """Create a signed, time-limited token binding the user id and role."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "role": role,
        "iat": now,
        "exp": now + timedelta(minutes=config.JWT_EXPIRES_MINUTES),
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Decode and verify a session token.

    Raises:
        UnauthenticatedError: expired, tampered or malformed token.
    """
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise UnauthenticatedError("Token expired")
    except jwt.InvalidTokenError:
        raise UnauthenticatedError("Invalid token")

    if not payload.get("sub") or not payload.get("role"):
        raise UnauthenticatedError("Invalid token")
    return payload

"""Shared pytest fixtures and configuration.

Provides:
- An isolated in-memory SQLite database (aiosqlite) per test
- An in-memory stand-in for the Redis dependency
- HTTPX AsyncClient bound to the ASGI app
- Users of every role with matching bearer tokens
"""

import os
from typing import AsyncGenerator, Dict, Optional

# Set test environment variables before the app reads its config
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ["SENDGRID_API_KEY"] = ""
os.environ.setdefault("FRONTEND_URL", "https://crm.estatehub.co.uk")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token, hash_password
from app.db.base_class import Base
from app.db.redis_client import get_redis
from app.db.session import get_db
from app.main import app as fastapi_app
from app.models import User

from tests.utils.factories import TEST_PASSWORD, user_data


class InMemoryRedis:
    """Implements the handful of redis.asyncio calls the app makes."""

    def __init__(self):
        self.store: Dict[str, str] = {}
        self.ttls: Dict[str, Optional[int]] = {}

    async def get(self, key: str):
        return self.store.get(key)

    async def set(self, key: str, value, ex: Optional[int] = None):
        self.store[key] = str(value)
        self.ttls[key] = ex
        return True

    async def getdel(self, key: str):
        self.ttls.pop(key, None)
        return self.store.pop(key, None)

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed


# =============================================================================
# Database
# =============================================================================

@pytest.fixture
async def session_maker() -> AsyncGenerator[async_sessionmaker, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
def fake_redis() -> InMemoryRedis:
    return InMemoryRedis()


# =============================================================================
# HTTP client
# =============================================================================

@pytest.fixture
async def client(session_maker, fake_redis) -> AsyncGenerator[AsyncClient, None]:
    # One session per request, as in production
    async def override_get_db():
        async with session_maker() as session:
            yield session

    async def override_get_redis():
        yield fake_redis

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_redis] = override_get_redis

    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as ac:
        yield ac

    fastapi_app.dependency_overrides.clear()


# =============================================================================
# Users and tokens
# =============================================================================

@pytest.fixture
def create_user(session_maker):
    """Insert a user directly and return it."""

    async def _create(role: str = "agent", password: str = TEST_PASSWORD, **overrides) -> User:
        data = user_data(role=role, **overrides)
        async with session_maker() as session:
            user = User(
                id=data["id"],
                username=data["username"],
                email=data["email"],
                password_hash=hash_password(password),
                role=role,
            )
            session.add(user)
            await session.commit()
            return user

    return _create


def bearer(user: User) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}


@pytest.fixture
async def admin_user(create_user) -> User:
    return await create_user(role="admin")


@pytest.fixture
async def agent_user(create_user) -> User:
    return await create_user(role="agent")


@pytest.fixture
def admin_headers(admin_user) -> Dict[str, str]:
    return bearer(admin_user)


@pytest.fixture
def agent_headers(agent_user) -> Dict[str, str]:
    return bearer(agent_user)


@pytest.fixture
async def support_headers(create_user) -> Dict[str, str]:
    return bearer(await create_user(role="support"))


@pytest.fixture
async def manager_headers(create_user) -> Dict[str, str]:
    return bearer(await create_user(role="manager"))

"""
Test infrastructure for the Blog API.

Strategy
--------
- SQLite in-memory via aiosqlite; StaticPool keeps every session on the one
  connection that holds the in-memory database.
- ``enable_sqlite_foreign_keys`` is installed on the test engine so the
  ON DELETE CASCADE rules behave as they do on PostgreSQL.
- The app's ``get_db`` dependency is overridden with the test session
  factory; tables are created before and dropped after every test.
- ``register`` creates a user through the public endpoint and returns the
  user's id together with ready-made bearer headers.
"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blogapi.database import Base, enable_sqlite_foreign_keys, get_db
from blogapi.main import app
from blogapi.middleware import install_query_counter
from blogapi.models import User
from blogapi.security import create_access_token, hash_password

# ---------------------------------------------------------------------------
# Test database engine
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)
enable_sqlite_foreign_keys(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


def auth_headers(user_id: int) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """A live session for service- and repository-level tests."""
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def register(async_client: AsyncClient):
    """
    Factory: ``await register("alice")`` -> ``{"id": ..., "headers": {...}}``.
    """

    async def _register(name: str) -> dict:
        resp = await async_client.post("/api/v1/users", json={
            "name": name,
            "email": f"{name.lower()}@example.com",
            "password": "s3cret-pass",
        })
        assert resp.status_code == 201, resp.text
        user_id = resp.json()["id"]
        return {"id": user_id, "headers": auth_headers(user_id)}

    return _register


@pytest_asyncio.fixture
async def alice(register) -> dict:
    return await register("alice")


@pytest_asyncio.fixture
async def bob(register) -> dict:
    return await register("bob")


@pytest_asyncio.fixture
async def make_user(db_session: AsyncSession):
    """Factory inserting a User straight through the ORM session."""

    async def _make_user(name: str = "svc") -> User:
        user = User(name=name, email=f"{name}@example.com", password_hash=hash_password("pw"))
        db_session.add(user)
        await db_session.flush()
        return user

    return _make_user

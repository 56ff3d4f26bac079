"""
Test configuration for pytest
"""

import os

# Test environment variables, set before the application reads its settings
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import tradequote.models  # noqa: F401
from tradequote.core.database import get_session
from tradequote.main import app


@pytest.fixture
async def engine():
    """In-memory SQLite engine shared by the app and the test"""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    """A database session for seeding and inspecting rows"""
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    """HTTP client talking to the app over ASGI"""

    async def override_get_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a company through the API and return the parsed response"""

    async def _register(
        email: str = "a@acme.test",
        company_name: str = "Acme Worktops",
        password: str = "secret123",
    ) -> dict:
        response = await client.post("/api/register", json={
            "companyName": company_name,
            "email": email,
            "password": password,
            "firstName": "Alice",
            "lastName": "Stone",
            "phone": "01234 567890",
            "postcode": "LS1 4AB",
        })
        assert response.status_code == 200, response.text
        body = response.json()
        body["headers"] = {"Authorization": f"Bearer {body['token']}"}
        return body

    return _register


@pytest.fixture
async def acme(register):
    return await register()


@pytest.fixture
async def rival(register):
    return await register(email="b@granite.test", company_name="Granite Direct")

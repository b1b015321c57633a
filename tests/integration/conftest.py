import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from invitapp.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from invitapp.api.app import create_app
from invitapp.depends import get_unit_of_work
from tests.fixtures.app_config import API, TestConfig
from tests.fixtures.fake_storage import FakeObjectStorage
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TestConfig.DB_URI)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def fake_storage():
    return FakeObjectStorage()


async def _client_for(app, db_session):
    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest_asyncio.fixture
async def client(db_session, fake_storage):
    app = create_app(TestConfig, object_storage=fake_storage)
    async with await _client_for(app, db_session) as ac:
        yield ac


@pytest_asyncio.fixture
async def client_without_storage(db_session):
    """App started without S3 settings: upload endpoints are disabled"""
    app = create_app(TestConfig)
    async with await _client_for(app, db_session) as ac:
        yield ac


@pytest.fixture
def login(test_data):
    """Sign up (if needed) and log in; returns Authorization headers"""

    async def _login(client: AsyncClient, user_key: str = "user") -> dict:
        user = test_data.get(user_key)
        await client.post(f"{API}/auth/signup", json=user)
        response = await client.post(
            f"{API}/auth/login",
            json={"email": user["email"], "password": user["password"]},
        )
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login

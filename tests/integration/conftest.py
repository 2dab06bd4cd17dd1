import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from mall_access.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from mall_access.app.services.passwords import hash_password
from mall_access.depends import get_unit_of_work
from mall_access.domain.entities import AdminUser
from mall_access.scripts.seed_catalog import seed_catalog
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
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
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def seeded(db_session, test_data):
    """Permission catalog, default roles, a super admin and a read-only viewer"""
    admin = test_data.account("admin")
    viewer = test_data.account("viewer")
    await seed_catalog(SqlAlchemyUnitOfWork(db_session), admin["email"], admin["password"])

    uow = SqlAlchemyUnitOfWork(db_session)
    async with uow:
        viewer_role = await uow.roles.get_by_name(viewer["role"])
        user = await uow.users.create(
            AdminUser(
                email=viewer["email"],
                full_name=viewer["full_name"],
                password_hash=hash_password(viewer["password"]),
            )
        )
        await uow.user_roles.replace_for_user(user.id, [viewer_role.id], None)
        await uow.commit()


@pytest_asyncio.fixture
async def client(db_session, seeded):
    from mall_access.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _login(client: AsyncClient, account: dict) -> dict:
    response = await client.post(
        "/api/auth/login",
        json={"email": account["email"], "password": account["password"]},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest_asyncio.fixture
async def admin_headers(client, test_data):
    return await _login(client, test_data.account("admin"))


@pytest_asyncio.fixture
async def viewer_headers(client, test_data):
    return await _login(client, test_data.account("viewer"))

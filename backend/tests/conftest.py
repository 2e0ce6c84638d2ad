"""
GymHub - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from faker import Faker

# Set testing environment
os.environ['ENVIRONMENT'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///./test_gymhub.db'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['LOG_FILE'] = ''

from gymhub.main import app
from gymhub.core.database import Base, get_db
from gymhub.core.security import create_access_token
from gymhub.models import Account, AccountRole

fake = Faker()

TEST_PASSWORD = 'password123'

# Test database setup
TEST_DATABASE_URL = 'sqlite+aiosqlite:///./test_gymhub.db'
test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
TestSessionLocal = async_sessionmaker(
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


@pytest.fixture(scope='function')
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


async def make_account(db_session: AsyncSession, role: AccountRole, username: str = None) -> Account:
    account = Account(username=username or fake.unique.user_name(), role=role)
    account.set_password(TEST_PASSWORD)
    db_session.add(account)
    await db_session.commit()
    return account


def bearer(account: Account) -> dict:
    return {'Authorization': f'Bearer {create_access_token(str(account.id))}'}


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> Account:
    """Create an administrator"""
    return await make_account(db_session, AccountRole.ADMIN)


@pytest.fixture
async def member_user(db_session: AsyncSession) -> Account:
    """Create a member"""
    return await make_account(db_session, AccountRole.MEMBER)


@pytest.fixture
async def plain_user(db_session: AsyncSession) -> Account:
    """Create a plain (self-registered) user"""
    return await make_account(db_session, AccountRole.USER)


@pytest.fixture
def admin_auth_headers(admin_user: Account) -> dict:
    return bearer(admin_user)


@pytest.fixture
def member_auth_headers(member_user: Account) -> dict:
    return bearer(member_user)


@pytest.fixture
def user_auth_headers(plain_user: Account) -> dict:
    return bearer(plain_user)


@pytest.fixture
def signup_data() -> dict:
    return {
        'username': fake.unique.user_name(),
        'password': 'SecurePassword123',
    }

"""Test configuration and fixtures for the code checkpoint API."""

from typing import Any, Dict, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# mypy: disable-error-code="import-untyped"
from testcontainers.core.docker_client import DockerClient
from testcontainers.postgres import PostgresContainer

from checkpoint_api.infrastructure.database.session import Base, async_session
from checkpoint_api.interfaces.main import app
from checkpoint_api.modules.checkpoint.models import CodeCheckpoint
from checkpoint_api.modules.checkpoint.schemas import CheckpointCreate

SAMPLE_CHECKPOINTS: List[Dict[str, Any]] = [
    {
        "title": "React Hook Implementation",
        "summary": "Custom React hook for data fetching with TypeScript",
        "code_snippet": "const useData = <T>(url: string): { data: T | null, loading: boolean } => { ... }",
        "user_feedback": "Works great for API calls",
        "programming_language": "TypeScript",
        "tags": ["react", "hooks", "typescript", "api"],
        "embedding": [0.1, 0.2, 0.3, 0.4, 0.5],
    },
    {
        "title": "Python Data Processing",
        "summary": "Efficient pandas DataFrame manipulation for large datasets",
        "code_snippet": 'df = pd.read_csv("data.csv").groupby("category").agg({"value": "sum"})',
        "user_feedback": "Significantly improved performance",
        "programming_language": "Python",
        "tags": ["python", "pandas", "data-processing"],
        "embedding": [0.9, 0.8, 0.7, 0.6, 0.5],
    },
    {
        "title": "JavaScript Array Methods",
        "summary": "Advanced array manipulation techniques using modern JavaScript",
        "code_snippet": "const result = data.filter(item => item.active).map(item => ({ ...item, processed: true }))",
        "user_feedback": "Clean and readable solution",
        "programming_language": "JavaScript",
        "tags": ["javascript", "arrays", "functional-programming"],
        "embedding": [0.2, 0.4, 0.6, 0.8, 1.0],
    },
    {
        "title": "SQL Query Optimization",
        "summary": "Complex JOIN operations with proper indexing strategy",
        "code_snippet": "SELECT u.name, COUNT(o.id) FROM users u LEFT JOIN orders o ON u.id = o.user_id GROUP BY u.id",
        "user_feedback": "Query time reduced by 80%",
        "programming_language": "SQL",
        "tags": ["sql", "optimization", "joins", "performance"],
        "embedding": [0.3, 0.1, 0.9, 0.2, 0.8],
    },
]


def is_docker_running() -> bool:
    """Check if Docker daemon is running."""
    try:
        DockerClient()
        return True
    except Exception:
        return False


@pytest.fixture(scope="session")
def pg_container():
    """Create a PostgreSQL container for testing."""
    if not is_docker_running():
        pytest.skip("Docker is required, but not running")

    with PostgresContainer("postgres:16-alpine") as pg:
        yield pg


@pytest.fixture(scope="session")
def test_db_url(pg_container) -> str:
    """Build an asyncpg URL for the PostgreSQL container."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    user = getattr(pg_container, "username", "test")
    password = getattr(pg_container, "password", "test")
    db = getattr(pg_container, "dbname", "test")

    return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db}"


@pytest_asyncio.fixture(scope="function")
async def test_db_engine(test_db_url):
    """Create a SQLAlchemy engine with a fresh schema for each test."""
    engine = create_async_engine(test_db_url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(test_db_engine):
    """Create a test client where every request gets its own database session."""
    app.dependency_overrides = {}

    test_session_factory = async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[async_session] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest.fixture
def checkpoint_payload() -> Dict[str, Any]:
    """A valid creation payload."""
    return dict(SAMPLE_CHECKPOINTS[0])


@pytest.fixture
def checkpoint_create(checkpoint_payload: Dict[str, Any]) -> CheckpointCreate:
    return CheckpointCreate(**checkpoint_payload)


@pytest_asyncio.fixture
async def sample_checkpoints(db_session: AsyncSession) -> List[Dict[str, Any]]:
    """Insert the four sample checkpoints, one commit each, in list order."""
    created = []
    for data in SAMPLE_CHECKPOINTS:
        checkpoint = CodeCheckpoint(**data)
        db_session.add(checkpoint)
        await db_session.commit()
        created.append(
            {
                "id": checkpoint.id,
                "title": checkpoint.title,
                "programming_language": checkpoint.programming_language,
                "tags": checkpoint.tags,
                "embedding": checkpoint.embedding,
                "created_at": checkpoint.created_at,
            }
        )
    return created

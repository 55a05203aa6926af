from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

from ..config.settings import settings

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    future=True,
    pool_size=settings.POSTGRES_POOL_SIZE,
    max_overflow=settings.POSTGRES_MAX_OVERFLOW,
)

local_session = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase, MappedAsDataclass):
    """Base class for all database models.

    Combines SQLAlchemy's DeclarativeBase with MappedAsDataclass so that
    models get dataclass ``__init__``/``__repr__``/``__eq__`` generated from
    their ``Mapped`` annotations. Columns declared with ``init=False`` are
    server- or factory-populated and cannot be passed to the constructor.
    """

    pass


async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for the lifetime of one request.

    Used as a FastAPI dependency via ``Depends(async_session)``; tests
    override it to point at their own engine.
    """
    async with local_session() as db:
        yield db


async def create_tables() -> None:
    """Create all tables that don't exist yet.

    Idempotent: existing tables are left unchanged.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

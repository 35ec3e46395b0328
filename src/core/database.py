from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.core.config import settings


def build_engine(db_url: str, **kwargs):
    # aiosqlite connections are bound to the loop that opened them
    if db_url.startswith("sqlite"):
        kwargs.setdefault("poolclass", NullPool)
    return create_async_engine(db_url, **kwargs)


engine = build_engine(
    settings.ASYNC_DATABASE_URL,
    #  echo=True,
)


@asynccontextmanager
async def get_session():
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


async def create_tables() -> None:
    """Create every table registered on the SQLModel metadata."""
    import src.shared.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def drop_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


class BaseModel(SQLModel):
    """Base model with common fields."""

    id: Optional[int] = Field(default=None, primary_key=True)
    # sa_type, not sa_column: a Column can belong to one table only
    created_at: datetime = Field(
        default_factory=settings.get_now, sa_type=DateTime(timezone=True)
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": settings.get_now},
    )

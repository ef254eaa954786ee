"""Pytest configuration and shared fixtures.

This module provides:
- A throwaway SQLite database per test (via aiosqlite) with tables created
- A session maker bound to it, the storage handle repositories expect
"""

# Set environment variables BEFORE any imports that trigger Settings validation
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from todo_store.core.config import Settings, clear_settings_cache
from todo_store.core.database import (
    create_engine,
    create_session_maker,
    create_tables,
    dispose_engine,
)


@pytest.fixture(autouse=True)
def _clear_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh SQLite file for this test."""
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'todo.db'}")


@pytest_asyncio.fixture
async def test_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine]:
    engine = create_engine(test_settings)
    await create_tables(engine)
    yield engine
    await dispose_engine(engine)


@pytest.fixture
def session_maker(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_maker(test_engine)

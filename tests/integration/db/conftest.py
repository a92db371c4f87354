from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from token_store.settings import AppSettings, DBSettings


@pytest.fixture()
def file_db_url(tmp_path: Path) -> str:
    """SQLite в файле: несколько соединений видят одни и те же данные."""
    return f"sqlite+aiosqlite:///{tmp_path / 'tokens.db'}"


@pytest.fixture()
def test_settings(file_db_url: str) -> AppSettings:
    return AppSettings(DB=DBSettings(URL=file_db_url))


@pytest.fixture()
async def file_engine(file_db_url: str) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(file_db_url)
    yield engine
    await engine.dispose()

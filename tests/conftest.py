"""
Общие фикстуры для тестов.

Этот файл автоматически загружается pytest.
Фикстуры доступны во всех тестах без импорта.
"""

import os
import secrets
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Устанавливаем тестовые переменные окружения ДО импорта settings,
# чтобы глобальные app_settings смотрели на SQLite, а не на PostgreSQL
os.environ.setdefault("DB__URL", "sqlite+aiosqlite:///:memory:")

from token_store.domain.entities import RefreshTokenEntity  # noqa: E402
from token_store.infrastructure.db.models import BaseModel  # noqa: E402
from token_store.infrastructure.db.repositories import RefreshTokenRepository  # noqa: E402


def make_token_value() -> str:
    return secrets.token_urlsafe(32)


@pytest.fixture
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Создаёт in-memory SQLite сессию для тестов.

    Использует SQLite в памяти — быстро и не требует внешней БД.
    Таблицы создаются заново для каждого теста.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)

    await engine.dispose()


# =============================================================================
# Фикстуры для RefreshTokenRepository
# =============================================================================


@pytest.fixture
def refresh_token_repo(async_session: AsyncSession) -> RefreshTokenRepository:
    """Репозиторий refresh-токенов."""
    return RefreshTokenRepository(async_session)


@pytest.fixture
async def sample_refresh_token(
    refresh_token_repo: RefreshTokenRepository,
) -> RefreshTokenEntity:
    """
    Базовый тестовый refresh-токен, уже сохранённый в БД.

    НЕ используй в тестах, которые проверяют создание
    или работу с пустым хранилищем.
    """
    return await refresh_token_repo.save(RefreshTokenEntity(token=make_token_value()))


@pytest.fixture
def refresh_token_factory(
    refresh_token_repo: RefreshTokenRepository,
) -> Callable[..., Awaitable[RefreshTokenEntity]]:
    """
    Фабрика для сохранения токенов с кастомными данными.

    Пример использования:
        async def test_something(refresh_token_factory):
            first = await refresh_token_factory(token="tok-A")
            second = await refresh_token_factory()
    """

    async def _create(**kwargs) -> RefreshTokenEntity:
        kwargs.setdefault("token", make_token_value())
        return await refresh_token_repo.save(RefreshTokenEntity(**kwargs))

    return _create

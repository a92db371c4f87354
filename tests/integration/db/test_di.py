import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from token_store.application.repositories import IRefreshTokenRepository
from token_store.domain.entities import RefreshTokenEntity
from token_store.infrastructure.db.models import BaseModel
from token_store.infrastructure.db.repositories import RefreshTokenRepository
from token_store.infrastructure.di import container_factory
from token_store.settings import AppSettings


async def test_container_provides_repository(test_settings: AppSettings):
    container = container_factory(test_settings)
    try:
        async with container() as request_container:
            token_repo = await request_container.get(IRefreshTokenRepository)

        assert isinstance(token_repo, RefreshTokenRepository)
    finally:
        await container.close()


async def test_request_scope_commits(test_settings: AppSettings):
    """Данные, сохранённые в одном request scope, видны в следующем."""
    container = container_factory(test_settings)
    try:
        engine = await container.get(AsyncEngine)
        async with engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

        async with container() as request_container:
            token_repo = await request_container.get(IRefreshTokenRepository)
            saved = await token_repo.save(RefreshTokenEntity(token="tok-A"))

        async with container() as request_container:
            token_repo = await request_container.get(IRefreshTokenRepository)
            found = await token_repo.find_by_token("tok-A")
            missing = await token_repo.find_by_token("tok-B")

        assert found is not None
        assert found.id == saved.id
        assert missing is None
    finally:
        await container.close()


async def test_request_scope_rolls_back_on_error(test_settings: AppSettings):
    """Исключение внутри request scope откатывает записанное в нём."""

    class Boom(Exception):
        pass

    container = container_factory(test_settings)
    try:
        engine = await container.get(AsyncEngine)
        async with engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

        with pytest.raises(Boom):
            async with container() as request_container:
                token_repo = await request_container.get(IRefreshTokenRepository)
                await token_repo.save(RefreshTokenEntity(token="tok-X"))
                raise Boom()

        async with container() as request_container:
            token_repo = await request_container.get(IRefreshTokenRepository)
            assert await token_repo.find_by_token("tok-X") is None
            assert await token_repo.count() == 0
    finally:
        await container.close()

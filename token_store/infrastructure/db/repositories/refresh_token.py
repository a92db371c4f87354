import logging

from token_store.application.repositories.refresh_token import IRefreshTokenRepository
from token_store.domain.entities.refresh_token import RefreshTokenEntity
from token_store.infrastructure.db.models.refresh_token import RefreshTokenModel
from token_store.infrastructure.db.repositories.base import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class RefreshTokenRepository(
    SQLAlchemyRepository[RefreshTokenEntity, RefreshTokenModel],
    IRefreshTokenRepository,
):
    model_class = RefreshTokenModel
    entity_class = RefreshTokenEntity

    async def find_by_token(self, token: str) -> RefreshTokenEntity | None:
        if token is None:
            raise ValueError("Значение токена не может быть None")
        # значение токена в лог не пишем
        logger.debug("Get refresh token by value")
        return await self._find_one(token=token)

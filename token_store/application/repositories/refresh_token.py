from abc import ABC, abstractmethod

from token_store.application.repositories.base import ISQLRepository
from token_store.domain.entities.refresh_token import RefreshTokenEntity


class IRefreshTokenRepository(ISQLRepository[RefreshTokenEntity], ABC):
    @abstractmethod
    async def find_by_token(self, token: str) -> RefreshTokenEntity | None:
        """
        Ищет запись по точному значению токена.

        Args:
            token: Значение токена (точное совпадение, с учётом регистра)

        Returns:
            RefreshTokenEntity или None если не найден
        """

from token_store.domain.entities.base import BaseEntity
from token_store.domain.entities.refresh_token import RefreshTokenEntity

__all__ = ["BaseEntity", "RefreshTokenEntity"]

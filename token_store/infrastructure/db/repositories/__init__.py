"""
Реализации репозиториев на SQLAlchemy.

Используют AsyncSession и только делают flush:
commit/rollback остаются за владельцем сессии (UnitOfWork или DI).
"""

from token_store.infrastructure.db.repositories.base import SQLAlchemyRepository
from token_store.infrastructure.db.repositories.refresh_token import RefreshTokenRepository

__all__ = ["SQLAlchemyRepository", "RefreshTokenRepository"]

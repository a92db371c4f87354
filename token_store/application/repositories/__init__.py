from token_store.application.repositories.base import ICrudRepository, ISQLRepository, IUnitOfWork
from token_store.application.repositories.refresh_token import IRefreshTokenRepository

__all__ = [
    "ICrudRepository",
    "ISQLRepository",
    "IUnitOfWork",
    "IRefreshTokenRepository",
]

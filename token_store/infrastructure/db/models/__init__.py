"""
ORM модели SQLAlchemy.

Все модели наследуются от BaseModel, который предоставляет:
- id: первичный ключ
- created_at: дата создания
"""

from token_store.infrastructure.db.models.base import BaseModel
from token_store.infrastructure.db.models.refresh_token import RefreshTokenModel

__all__ = [
    "BaseModel",
    "RefreshTokenModel",
]

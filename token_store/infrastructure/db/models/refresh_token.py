from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from token_store.infrastructure.db.models.base import BaseModel


class RefreshTokenModel(BaseModel):
    __tablename__ = "refresh_tokens"

    # длина не ограничена; индекс для поиска по значению, уникальность не гарантируется
    token: Mapped[str] = mapped_column(Text, index=True)

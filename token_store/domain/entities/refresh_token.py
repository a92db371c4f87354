from token_store.domain.entities.base import BaseEntity


class RefreshTokenEntity(BaseEntity):
    """
    Refresh-токен как непрозрачная запись.

    Выпуск, срок жизни и отзыв токена — забота внешних сервисов,
    здесь хранится только само значение.
    """

    token: str

    def __str__(self):
        return f"RefreshToken(id={self.id})"

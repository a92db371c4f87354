"""
Инициализация DI контейнера Dishka.

Использование:
    from token_store.infrastructure.di import container_factory

    container = container_factory()
    async with container() as request_container:
        repo = await request_container.get(IRefreshTokenRepository)
        token = await repo.find_by_token(value)
    await container.close()
"""

from dishka import AsyncContainer, make_async_container

from token_store.infrastructure.di.providers import DatabaseProvider
from token_store.settings import AppSettings, app_settings

__all__ = [
    "DatabaseProvider",
    "container_factory",
]


def container_factory(settings: AppSettings = app_settings) -> AsyncContainer:
    """
    Создаёт DI контейнер со всеми провайдерами.

    Args:
        settings: Настройки приложения. По умолчанию глобальные app_settings,
                  в тестах передаются свои.

    Returns:
        AsyncContainer: Готовый контейнер для внедрения зависимостей
    """
    return make_async_container(
        DatabaseProvider(),
        context={AppSettings: settings},
    )

"""
Конфигурация подключения к БД.

Engine и фабрика сессий создаются функциями, а не при импорте модуля:
DI контейнер, миграции и тесты передают сюда свои настройки.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from token_store.settings import DBSettings


def create_engine(db_settings: DBSettings) -> AsyncEngine:
    # echo=True — логировать SQL запросы (включается через DB__ECHO)
    return create_async_engine(db_settings.db_url, echo=db_settings.ECHO)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False — объекты остаются доступны после commit
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

"""
DI провайдеры для Dishka.

Scope (область жизни):
- APP — создаётся один раз на весь контейнер (engine, фабрика сессий)
- REQUEST — создаётся на каждую единицу работы (сессия, репозитории)
"""

import logging
from collections.abc import AsyncGenerator

from dishka import Provider, Scope, from_context, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from token_store.application.repositories.refresh_token import IRefreshTokenRepository
from token_store.infrastructure.db.engine import create_engine, create_session_factory
from token_store.infrastructure.db.repositories.refresh_token import RefreshTokenRepository
from token_store.settings import AppSettings

logger = logging.getLogger(__name__)


class DatabaseProvider(Provider):
    """
    Провайдер для работы с базой данных.

    Сессии создаются в scope REQUEST — новая сессия на каждый запрос.
    Это обеспечивает изоляцию транзакций между запросами.

    Репозитории также в scope REQUEST, т.к. зависят от сессии.
    """

    settings = from_context(provides=AppSettings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: AppSettings) -> AsyncGenerator[AsyncEngine, None]:
        """
        Создаёт AsyncEngine по настройкам DB__*.

        При закрытии контейнера пул соединений освобождается.
        """
        engine = create_engine(settings.DB)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncGenerator[AsyncSession, Exception | None]:
        """
        Создаёт AsyncSession для работы с БД.

        Жизненный цикл:
        1. Создаётся новая сессия из фабрики
        2. yield — сессия используется внутри request scope
        3. commit() — если scope закрылся без исключения
        4. rollback() — если было исключение
        5. close() — всегда закрываем сессию

        Dishka не выбрасывает исключение внутрь генератора, а передаёт его
        значением yield (asend), поэтому смотрим на результат yield.
        Само исключение dishka пробрасывает дальше после финализации.

        Yields:
            AsyncSession: Сессия SQLAlchemy для текущего запроса
        """
        async with session_factory() as session:
            exc = yield session
            if exc is not None:
                logger.debug("Request scope failed, rollback: %s", exc)
                await session.rollback()
            else:
                await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_refresh_token_repository(self, session: AsyncSession) -> IRefreshTokenRepository:
        return RefreshTokenRepository(session)

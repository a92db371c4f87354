import logging

from sqlalchemy.ext.asyncio import AsyncSession

from token_store.application.repositories.base import IUnitOfWork

logger = logging.getLogger(__name__)


class UnitOfWork(IUnitOfWork):
    """
    Граница транзакции для нескольких вызовов репозиториев.

    Сессия могла уже начать транзакцию сама (autobegin после любого чтения),
    поэтому явный begin() не вызываем: на выходе делаем commit или rollback
    того, что накопилось в сессии.

    Example:
        ```python
        async with UnitOfWork(session) as session:
            repo = RefreshTokenRepository(session)
            await repo.delete_by_id(old_id)
            await repo.save(RefreshTokenEntity(token=new_value))
        # commit, либо rollback если внутри блока было исключение
        ```
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def __aenter__(self) -> AsyncSession:
        logger.debug("Enter unit of work, in_transaction=%s", self._session.in_transaction())
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            await self._session.rollback()
            logger.debug("Rollback transaction: exc_type=%s, exc_val=%s", exc_type, exc_val)
            return
        await self._session.commit()
        logger.debug("Commit transaction")

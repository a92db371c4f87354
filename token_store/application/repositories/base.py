from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, Protocol, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from token_store.domain.entities.base import BaseEntity

ET = TypeVar("ET", bound=BaseEntity)


class ICrudRepository(ABC, Generic[ET]):
    """
    Типовой CRUD контракт.

    Отсутствие записи — нормальный исход: None, пустой список или False,
    но не исключение. Ошибки хранилища пробрасываются как есть.
    """

    @abstractmethod
    async def save(self, entity: ET) -> ET: ...

    @abstractmethod
    async def save_all(self, entities: Iterable[ET]) -> list[ET]: ...

    @abstractmethod
    async def find_by_id(self, entity_id: int) -> ET | None: ...

    @abstractmethod
    async def exists_by_id(self, entity_id: int) -> bool: ...

    @abstractmethod
    async def find_all(self) -> list[ET]: ...

    @abstractmethod
    async def find_all_by_id(self, ids: Iterable[int]) -> list[ET]: ...

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def delete_by_id(self, entity_id: int) -> None: ...

    @abstractmethod
    async def delete(self, entity: ET) -> None: ...

    @abstractmethod
    async def delete_all_by_id(self, ids: Iterable[int]) -> None: ...

    @abstractmethod
    async def delete_all(self, entities: Iterable[ET] | None = None) -> None: ...


class ISQLRepository(ICrudRepository[ET], ABC):
    def __init__(self, session: AsyncSession):
        self.session = session


class IUnitOfWork(Protocol):
    async def __aenter__(self): ...

    async def __aexit__(self, exc_type, exc_val, exc_tb): ...

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from sqlalchemy import func, select

from token_store.application.repositories.base import ISQLRepository
from token_store.domain.entities.base import BaseEntity
from token_store.infrastructure.db.models.base import BaseModel

logger = logging.getLogger(__name__)

ET = TypeVar("ET", bound=BaseEntity)
DBModel = TypeVar("DBModel", bound=BaseModel)


class SQLAlchemyRepository(ISQLRepository[ET], Generic[ET, DBModel]):
    """
    Базовый репозиторий с типовыми CRUD операциями.

    Наружу отдаёт только сущности (entity_class), ORM модели не покидают репозиторий.

    Example:
        ```python
        class RefreshTokenRepository(
            SQLAlchemyRepository[RefreshTokenEntity, RefreshTokenModel],
            IRefreshTokenRepository,
        ):
            model_class = RefreshTokenModel
            entity_class = RefreshTokenEntity

        repo = RefreshTokenRepository(session)
        token = await repo.find_by_id(42)
        ```
    """

    model_class: type[DBModel]
    entity_class: type[ET]

    def _to_entity(self, model_instance: DBModel) -> ET:
        return self.entity_class.model_validate(model_instance)

    def _to_model(self, entity: ET) -> DBModel:
        return self.model_class(**entity.model_dump())

    def _require_id(self, entity_id: int | None) -> int:
        if entity_id is None:
            msg = f"Идентификатор {self.entity_class.__name__} не может быть None"
            raise ValueError(msg)
        return entity_id

    async def _find_one(self, **filters) -> ET | None:
        """
        Получает одну сущность по фильтрам.

        Если под фильтр попадает несколько строк, возвращается строка с наименьшим id.

        Args:
            **filters: Поля для фильтрации (field=value)

        Returns:
            Сущность или None
        """
        # только имена полей: значения могут быть секретами
        logger.debug("Selecting instance %s by fields=%s", self.model_class, list(filters))
        stmt = (
            select(self.model_class)
            .filter_by(**filters)
            .order_by(self.model_class.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model_instance = result.scalars().first()
        if model_instance:
            logger.debug("Return instance %s", self.model_class)
            return self._to_entity(model_instance)
        logger.debug("Instance %s not found", self.model_class)
        return None

    async def _select_by_ids(self, ids: Iterable[int]) -> list[DBModel]:
        ids = [self._require_id(entity_id) for entity_id in ids]
        if not ids:
            return []
        stmt = (
            select(self.model_class)
            .where(self.model_class.id.in_(ids))
            .order_by(self.model_class.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def save(self, entity: ET) -> ET:
        """
        Создаёт новую запись или обновляет существующую.

        Без id — INSERT, id присваивается после flush.
        С id — merge: обновление существующей строки или вставка с этим id.
        """
        if entity.id is None:
            logger.debug("Create instance %s from entity=%s", self.model_class, entity)
            model_instance = self._to_model(entity)
            self.session.add(model_instance)
        else:
            logger.debug("Merge instance %s id=%s", self.model_class, entity.id)
            model_instance = await self.session.merge(self._to_model(entity))

        await self.session.flush()
        logger.debug("Saved %s id=%s", self.model_class, model_instance.id)
        return self._to_entity(model_instance)

    async def save_all(self, entities: Iterable[ET]) -> list[ET]:
        return [await self.save(entity) for entity in entities]

    async def find_by_id(self, entity_id: int) -> ET | None:
        self._require_id(entity_id)
        logger.debug("Get %s by id=%s", self.model_class, entity_id)
        model_instance = await self.session.get(self.model_class, entity_id)
        if model_instance is None:
            logger.debug("Instance %s not found", self.model_class)
            return None
        return self._to_entity(model_instance)

    async def exists_by_id(self, entity_id: int) -> bool:
        self._require_id(entity_id)
        stmt = select(self.model_class.id).where(self.model_class.id == entity_id).limit(1)
        return await self.session.scalar(stmt) is not None

    async def find_all(self) -> list[ET]:
        logger.debug("Get all %s", self.model_class)
        stmt = select(self.model_class).order_by(self.model_class.id)
        result = await self.session.execute(stmt)
        return [self._to_entity(model_instance) for model_instance in result.scalars().all()]

    async def find_all_by_id(self, ids: Iterable[int]) -> list[ET]:
        model_instances = await self._select_by_ids(ids)
        logger.debug("Found %s instances of %s", len(model_instances), self.model_class)
        return [self._to_entity(model_instance) for model_instance in model_instances]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.model_class)
        return await self.session.scalar(stmt)

    async def delete_by_id(self, entity_id: int) -> None:
        self._require_id(entity_id)
        model_instance = await self.session.get(self.model_class, entity_id)
        if model_instance is None:
            logger.debug("Instance %s id=%s not found", self.model_class, entity_id)
            return
        await self.session.delete(model_instance)
        await self.session.flush()
        logger.debug("Instance %s id=%s deleted", self.model_class, entity_id)

    async def delete(self, entity: ET) -> None:
        await self.delete_by_id(entity.id)

    async def delete_all_by_id(self, ids: Iterable[int]) -> None:
        model_instances = await self._select_by_ids(ids)
        await self._delete_instances(model_instances)

    async def delete_all(self, entities: Iterable[ET] | None = None) -> None:
        if entities is not None:
            await self.delete_all_by_id(entity.id for entity in entities)
            return

        result = await self.session.execute(select(self.model_class))
        await self._delete_instances(list(result.scalars().all()))

    async def _delete_instances(self, model_instances: list[DBModel]) -> None:
        for model_instance in model_instances:
            await self.session.delete(model_instance)
        await self.session.flush()
        logger.debug("Deleted %s instances of %s", len(model_instances), self.model_class)

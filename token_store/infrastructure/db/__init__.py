"""
Модуль для работы с базой данных.

Содержит:
- engine.py — подключение к БД
- models/ — ORM модели SQLAlchemy
- repositories/ — реализации репозиториев
- uow.py — граница транзакции
- migrations/ — миграции Alembic
"""

from token_store.infrastructure.db.engine import create_engine, create_session_factory

__all__ = [
    "create_engine",
    "create_session_factory",
]

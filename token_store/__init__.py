"""
Хранилище refresh-токенов.

Слои:
- domain/ — сущности (pydantic)
- application/ — абстрактные контракты репозиториев
- infrastructure/ — реализация на SQLAlchemy, миграции, DI
"""

from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class DBSettings(BaseModel):
    """
    Настройки подключения к базе данных.

    Использует BaseModel (не BaseSettings), чтобы переменные загружались
    через родительский AppSettings с правильным префиксом DB__

    Если задан URL, он используется как есть (например, sqlite+aiosqlite для тестов),
    иначе строка подключения собирается из отдельных полей.
    """

    DRIVER: str = "postgresql+asyncpg"
    USER: str = "postgres"
    PASS: str = "postgres"
    HOST: str = "localhost"
    PORT: int = 5432
    NAME: str = "token_store"
    ECHO: bool = False
    URL: str | None = None

    @property
    def db_url(self) -> str:
        if self.URL:
            return self.URL
        return f"{self.DRIVER}://{self.USER}:{self.PASS}@{self.HOST}:{self.PORT}/{self.NAME}"


class AppSettings(BaseSettings):
    """
    Главные настройки приложения.

    Загружает все переменные из .env файла.
    Вложенные модели используют двойное подчеркивание (__) как разделитель.

    Пример переменных окружения:
    - LOG_LEVEL=DEBUG
    - DB__USER=postgres
    - DB__PASS=secret
    - DB__HOST=localhost
    - DB__URL=sqlite+aiosqlite:///./tokens.db
    """

    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Path = Path(__file__).resolve().parent / "logs"

    DB: DBSettings = DBSettings()

    model_config = SettingsConfigDict(
        env_file=f"{BASE_DIR}/.env",
        extra="ignore",
        env_nested_delimiter="__",
    )


app_settings = AppSettings()

import logging
import logging.config
from pathlib import Path

from token_store.settings import app_settings


def setup_logging(
    root_log_level: str | int = app_settings.LOG_LEVEL,
    log_dir: str | Path = app_settings.LOG_DIR,
):
    Path(log_dir).mkdir(parents=True, exist_ok=True)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s [%(levelname)-8s] %(name)40s:%(lineno)-3d - %(message)s"
            }
        },
        "handlers": {
            "console_stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",  # Вывод не в stderr, а в stdout
                "level": root_log_level,
                "formatter": "default",
            },
            "general_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": f"{log_dir}/app.log",
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
                "formatter": "default",
            },
            "error_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": f"{log_dir}/errors.log",
                "maxBytes": 10485760,
                "backupCount": 5,
                "level": "ERROR",
                "formatter": "default",
            },
        },
        "loggers": {
            # SQL запросы пишет сам engine при DB__ECHO=true
            "sqlalchemy.engine": {"level": "WARNING"},
            "aiosqlite": {"level": "WARNING"},
        },
        "root": {
            "level": root_log_level,
            "handlers": ["console_stdout", "general_file", "error_file"],
        },
    }

    logging.config.dictConfig(config)
    logging.info("Logging configured with dictConfig")

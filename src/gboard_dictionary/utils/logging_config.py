"""Настройка логирования приложения.

Модули библиотеки только получают логгеры через :func:`get_logger`;
обработчики устанавливает точка входа вызовом :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from gboard_dictionary.utils.constants import APP_NAME, USER_DATA_DIR

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_dir: Path | None = None,
    log_to_file: bool = True,
) -> None:
    """Настроить дерево логгеров ``gboard_dictionary``.

    Аргументы:
        level: Уровень логгера пакета и его консольного обработчика.
        log_dir: Каталог для ротируемого лог-файла. По умолчанию
            ~/.gboard_dictionary/logs.
        log_to_file: Дополнительно вести лог-файл уровня DEBUG.

    Повторный вызов только обновляет уровни; обработчики ставятся один раз.
    """
    root_logger = logging.getLogger(APP_NAME)
    root_logger.setLevel(level)

    if root_logger.handlers:
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(
                handler, logging.FileHandler
            ):
                handler.setLevel(level)
        return

    fmt = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    root_logger.addHandler(console)

    if not log_to_file:
        return

    log_dir = log_dir or (USER_DATA_DIR / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    # Ротируемый файловый обработчик (5 МБ, 3 резервные копии)
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / f"{APP_NAME}.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Получить дочерний логгер в пространстве имён приложения."""
    return logging.getLogger(f"{APP_NAME}.{name}")

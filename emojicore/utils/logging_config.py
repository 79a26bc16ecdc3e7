"""
Модуль настройки логирования через loguru
Конфигурирует обработчики логов для emoji-core
"""

import sys
from pathlib import Path

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="logging_config")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level: <8} | "
    "{extra[module]} | "
    "{message}"
)


def _ensure_module(record) -> bool:
    """Подставить имя модуля для записей без привязки"""
    record["extra"].setdefault("module", record["name"])
    return True


def setup_logging(
    log_level: str = "INFO",
    log_rotation: str = "10 MB",
    log_retention: str = "30 days",
    log_dir: str = "logs"
) -> None:
    """
    Настройка логирования через loguru

    Args:
        log_level: Уровень логирования
        log_rotation: Размер файла для ротации
        log_retention: Время хранения логов
        log_dir: Директория для файлов логов
    """

    # Создаем директорию для логов
    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Удаляем стандартный handler
    logger.remove()

    # Console handler с цветной подсветкой
    logger.add(
        sys.stderr,
        level=log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
        enqueue=True,
        filter=_ensure_module
    )

    # File handler для всех логов
    logger.add(
        logs_dir / "emojicore.log",
        level="DEBUG",
        format=FILE_FORMAT,
        rotation=log_rotation,
        retention=log_retention,
        compression="zip",
        encoding="utf-8",
        enqueue=True,
        filter=_ensure_module
    )

    # Отдельный файл для ошибок
    logger.add(
        logs_dir / "errors.log",
        level="ERROR",
        format=FILE_FORMAT + " | {exception}",
        rotation="5 MB",
        retention="60 days",
        compression="zip",
        encoding="utf-8",
        enqueue=True,
        filter=_ensure_module
    )

    logger.info("Логирование настроено успешно")
    logger.debug("Уровень логирования: {}", log_level)
    logger.debug("Ротация файлов: {}", log_rotation)
    logger.debug("Время хранения: {}", log_retention)


def setup_logging_from_config() -> None:
    """Настройка логирования из конфигурации"""
    try:
        # Импортируем здесь чтобы избежать циклических импортов
        from emojicore.utils.config import get_config

        config = get_config()
        setup_logging(
            log_level=config.LOG_LEVEL,
            log_rotation=config.LOG_ROTATION,
            log_retention=config.LOG_RETENTION,
            log_dir=config.LOG_DIR
        )

    except Exception as e:
        # Используем базовую настройку при ошибке загрузки конфигурации
        setup_logging()
        logger.error("Ошибка загрузки конфигурации для логирования: {}", str(e))


def get_module_logger(module_name: str):
    """
    Получить логгер для конкретного модуля

    Args:
        module_name: Имя модуля

    Returns:
        Настроенный логгер с привязкой к модулю
    """
    return logger.bind(module=module_name)

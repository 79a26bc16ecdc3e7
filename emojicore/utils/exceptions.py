"""
Модуль кастомных исключений emoji-core
Содержит специализированные исключения для загрузки датасета
"""

from typing import Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="exceptions")


class EmojiCoreError(Exception):
    """Базовое исключение для всех ошибок emoji-core"""

    # Уровень лога при создании; None - логирует тот, кто перехватывает
    log_level: Optional[str] = "ERROR"

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

        if self.log_level is None:
            return

        # Логируем все исключения
        if details:
            logger.log(self.log_level, "EmojiCoreError: {} | Детали: {}", message, details)
        else:
            logger.log(self.log_level, "EmojiCoreError: {}", message)


# ==============================================
# ИСКЛЮЧЕНИЯ ДАТАСЕТА ЭМОДЗИ
# ==============================================

class DatasetError(EmojiCoreError):
    """Базовое исключение для ошибок датасета"""
    pass


class DatasetParseError(DatasetError):
    """Датасет целиком не разобран, загрузка прерывается"""

    def __init__(self, source: str, details: Optional[str] = None):
        message = f"Не удалось разобрать датасет эмодзи: {source}"
        super().__init__(message, details)
        self.source = source


class CodepointParseError(DatasetError):
    """Строка кодпоинтов записи не разбирается, запись отбрасывается"""

    log_level = None

    def __init__(self, code: Optional[str], details: Optional[str] = None):
        message = f"Некорректная строка кодпоинтов: {code!r}"
        super().__init__(message, details)
        self.code = code


class ToneResolutionError(DatasetError):
    """Ключ вариации тона не дал ни одного имени тона"""

    log_level = None

    def __init__(self, tone_key: str):
        message = f"Ключ вариации тона не распознан: {tone_key}"
        super().__init__(message)
        self.tone_key = tone_key

"""
Модуль конфигурации emoji-core
Загружает и валидирует переменные окружения
"""

from typing import Optional
from pathlib import Path

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Сторонние библиотеки
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Локальные импорты
from emojicore.models.emoji import Platform

# Настройка логгера модуля
logger = logger.bind(module="config")


class Config(BaseSettings):
    """Конфигурация приложения с валидацией"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Набор изображений эмодзи
    EMOJI_SET: Platform = Platform.TWITTER

    # Датасет
    EMOJI_DATASET_PATH: str = "./data/emoji.json"

    # CDN изображений
    EMOJI_CDN_BASE_URL: str = "https://pajbot.com/static/emoji-v2/img/"
    EMOJI_IMAGE_SIZE: int = 64
    EMOJI_IMAGE_SCALE: float = 0.35

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "30 days"
    LOG_DIR: str = "logs"

    @field_validator("EMOJI_SET", mode="before")
    @classmethod
    def validate_emoji_set(cls, v) -> Platform:
        """Валидация набора эмодзи (без учета регистра)"""
        return Platform.parse(v)

    @field_validator("EMOJI_CDN_BASE_URL")
    @classmethod
    def validate_cdn_base_url(cls, v: str) -> str:
        """Валидация адреса CDN"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("EMOJI_CDN_BASE_URL должен начинаться с http:// или https://")
        return v if v.endswith("/") else v + "/"

    @field_validator("EMOJI_IMAGE_SIZE")
    @classmethod
    def validate_image_size(cls, v: int) -> int:
        """Валидация размера изображений"""
        if v not in (16, 32, 64):
            raise ValueError("EMOJI_IMAGE_SIZE должен быть одним из: 16, 32, 64")
        return v

    @field_validator("EMOJI_IMAGE_SCALE")
    @classmethod
    def validate_image_scale(cls, v: float) -> float:
        """Валидация масштаба изображений"""
        if v <= 0:
            raise ValueError("EMOJI_IMAGE_SCALE должен быть положительным")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Валидация уровня логирования"""
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL должен быть одним из: {', '.join(valid_levels)}")
        return v.upper()

    def get_dataset_path(self) -> Path:
        """Получить путь к датасету"""
        return Path(self.EMOJI_DATASET_PATH)

    def validate_all(self) -> bool:
        """Проверка окружения после загрузки конфигурации"""
        if not self.get_dataset_path().is_file():
            logger.warning("Файл датасета не найден: {}", self.EMOJI_DATASET_PATH)

        logger.info("Конфигурация успешно валидирована")
        logger.debug("Набор эмодзи: {}", self.EMOJI_SET.value)
        logger.debug("CDN: {} ({}px)", self.EMOJI_CDN_BASE_URL, self.EMOJI_IMAGE_SIZE)

        return True


# Глобальный экземпляр конфигурации
_config: Optional[Config] = None


def get_config() -> Config:
    """Получить глобальный экземпляр конфигурации"""
    global _config
    if _config is None:
        _config = Config()
        _config.validate_all()
    return _config


def reload_config() -> Config:
    """Перезагрузить конфигурацию"""
    global _config
    _config = None
    return get_config()

"""
Хэндлы эмодзи для рендера
Выбор набора изображений по платформе и построение адресов картинок
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojicore.models.emoji import EmojiHandle, EmojiRecord, Platform
from .index import EmojiIndex

# Настройка логгера модуля
logger = logger.bind(module="emoji_handles")

DEFAULT_CDN_BASE_URL = "https://pajbot.com/static/emoji-v2/img/"
DEFAULT_IMAGE_SIZE = 64
DEFAULT_IMAGE_SCALE = 0.35

# Платформа, если у эмодзи нет изображения для выбранной
FALLBACK_PLATFORM = Platform.TWITTER

# Адрес, если платформы нет в таблице адресов
DEFAULT_URL_PREFIX = "https://pajbot.com/static/emoji-v2/img/twitter/64/"


def build_emoji_set_urls(
    base_url: str = DEFAULT_CDN_BASE_URL,
    size: int = DEFAULT_IMAGE_SIZE
) -> Dict[Platform, str]:
    """
    Построить таблицу адресов наборов изображений

    Args:
        base_url: Корень CDN, например https://pajbot.com/static/emoji-v2/img/
        size: Размер изображений в пикселях

    Returns:
        Словарь {платформа: префикс адреса}
    """
    if not base_url.endswith("/"):
        base_url += "/"

    return {
        platform: f"{base_url}{platform.value.lower()}/{size}/"
        for platform in Platform
    }


EMOJI_SET_URLS: Mapping[Platform, str] = MappingProxyType(build_emoji_set_urls())


def build_handle(
    record: EmojiRecord,
    emoji_set: Platform,
    url_prefixes: Mapping[Platform, str] = EMOJI_SET_URLS,
    scale: float = DEFAULT_IMAGE_SCALE
) -> EmojiHandle:
    """
    Построить хэндл для одной записи

    Args:
        record: Запись эмодзи
        emoji_set: Выбранная платформа
        url_prefixes: Таблица адресов наборов изображений
        scale: Масштаб изображения

    Returns:
        EmojiHandle
    """
    platform = emoji_set if record.supports(emoji_set) else FALLBACK_PLATFORM
    prefix = url_prefixes.get(platform, DEFAULT_URL_PREFIX)

    return EmojiHandle(
        name=record.text,
        url=f"{prefix}{record.unified_code.lower()}.png",
        tooltip=f":{record.primary_short_code}:<br/>Emoji",
        scale=scale
    )


def resolve_handles(
    index: EmojiIndex,
    emoji_set: Platform,
    url_prefixes: Optional[Mapping[Platform, str]] = None,
    scale: float = DEFAULT_IMAGE_SCALE
) -> Mapping[int, EmojiHandle]:
    """
    Построить новый снимок хэндлов для всех записей индекса

    Записи не изменяются: результат - отдельное неизменяемое отображение,
    которое вызывающий код подменяет целиком.

    Args:
        index: Индекс эмодзи
        emoji_set: Выбранная платформа
        url_prefixes: Таблица адресов (по умолчанию EMOJI_SET_URLS)
        scale: Масштаб изображений

    Returns:
        Отображение {id записи: EmojiHandle}
    """
    prefixes = EMOJI_SET_URLS if url_prefixes is None else url_prefixes

    handles = {
        record_id: build_handle(record, emoji_set, prefixes, scale)
        for record_id, record in enumerate(index.records)
    }

    logger.debug("Построено {} хэндлов для набора {}", len(handles), emoji_set.value)

    return MappingProxyType(handles)

"""
Вариации тона кожи
Создание отдельных записей для эмодзи с модификаторами тона
"""

from typing import List, Mapping

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojicore.models.dataset import EmojiEntry
from emojicore.models.emoji import EmojiRecord
from emojicore.utils.exceptions import ToneResolutionError
from .records import build_record, validate_entry

# Настройка логгера модуля
logger = logger.bind(module="emoji_variants")

# Модификатор тона -> имя тона в алиасе
TONE_NAMES: Mapping[str, str] = {
    "1F3FB": "tone1",
    "1F3FC": "tone2",
    "1F3FD": "tone3",
    "1F3FE": "tone4",
    "1F3FF": "tone5",
}


def get_tone_names(tones: str, tone_names: Mapping[str, str] = TONE_NAMES) -> str:
    """
    Перевести ключ вариации в имена тонов в том же порядке

    Args:
        tones: Ключ вида "1F3FB" или "1F3FB-1F3FC"
        tone_names: Таблица модификатор -> имя тона

    Returns:
        "tone1" или "tone1-tone2"

    Raises:
        ToneResolutionError: ни одна часть ключа не распознана
    """
    results = []
    for part in tones.split("-"):
        name = tone_names.get(part.strip().upper())
        if name is None:
            logger.debug("Тон {} отсутствует в таблице имен тонов", part)
            continue
        results.append(name)

    if not results:
        raise ToneResolutionError(tones)

    return "-".join(results)


def expand_variants(
    base: EmojiRecord,
    entry: EmojiEntry,
    tone_names: Mapping[str, str] = TONE_NAMES
) -> List[EmojiRecord]:
    """
    Построить записи вариаций тона для базового эмодзи

    Каждая вариация получает алиас "<основной алиас>_<тоны>" и собирается
    тем же построителем, что и базовые записи.

    Args:
        base: Базовая запись
        entry: Запись датасета базового эмодзи
        tone_names: Таблица модификатор -> имя тона

    Returns:
        Список независимых записей вариаций
    """
    variants = []

    for tones, raw_variation in entry.skin_variations.items():
        try:
            tone_name = get_tone_names(tones, tone_names)
        except ToneResolutionError as e:
            logger.warning("Вариация {} эмодзи :{}: отброшена: {}", tones, base.primary_short_code, e.message)
            continue

        variation = validate_entry(raw_variation)
        if variation is None:
            continue

        record = build_record(variation, f"{base.primary_short_code}_{tone_name}")
        if record is not None:
            variants.append(record)

    return variants

"""
Построение записей эмодзи из записей датасета
Разбор кодпоинтов и декодирование текста эмодзи
"""

from typing import List, Optional, Union, Dict, Any

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger
from pydantic import ValidationError

# Локальные импорты
from emojicore.models.dataset import EmojiEntry
from emojicore.models.emoji import EmojiRecord
from emojicore.utils.exceptions import CodepointParseError

# Настройка логгера модуля
logger = logger.bind(module="emoji_records")

# Максимальное число кодпоинтов в одном эмодзи
MAX_CODEPOINTS = 9

MAX_CODEPOINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)


def parse_codepoints(code: Optional[str]) -> List[int]:
    """
    Разобрать строку кодпоинтов вида "1F468-200D-1F469"

    Args:
        code: Шестнадцатеричные кодпоинты через дефис

    Returns:
        Список кодпоинтов

    Raises:
        CodepointParseError: строка пустая, некорректная или слишком длинная
    """
    if not code or not code.strip():
        raise CodepointParseError(code, "пустая строка кодпоинтов")

    codepoints = []
    for part in code.strip().split("-"):
        try:
            value = int(part, 16)
        except ValueError:
            raise CodepointParseError(code, f"не шестнадцатеричное число: {part!r}")

        if value < 0 or value > MAX_CODEPOINT or value in SURROGATE_RANGE:
            raise CodepointParseError(code, f"недопустимый кодпоинт: {part}")

        codepoints.append(value)

    if len(codepoints) > MAX_CODEPOINTS:
        raise CodepointParseError(
            code, f"больше {MAX_CODEPOINTS} кодпоинтов: {len(codepoints)}"
        )

    return codepoints


def decode_text(entry: EmojiEntry) -> str:
    """
    Декодировать текст эмодзи

    non_qualified (без селекторов вариаций) имеет приоритет над unified.
    """
    code = entry.non_qualified or entry.unified
    return "".join(chr(codepoint) for codepoint in parse_codepoints(code))


def validate_entry(raw: Union[EmojiEntry, Dict[str, Any]]) -> Optional[EmojiEntry]:
    """Проверить сырую запись датасета, None если запись некорректна"""
    if isinstance(raw, EmojiEntry):
        return raw

    if not isinstance(raw, dict):
        logger.warning("Запись датасета не является объектом: {}", type(raw).__name__)
        return None

    try:
        return EmojiEntry.model_validate(raw)
    except ValidationError as e:
        logger.warning("Запись датасета отброшена: {}", e.errors()[0].get("msg", str(e)))
        return None


def build_record(entry: EmojiEntry, short_code: Optional[str] = None) -> Optional[EmojiRecord]:
    """
    Построить запись эмодзи из записи датасета

    Args:
        entry: Проверенная запись датасета
        short_code: Алиас, заменяющий алиасы записи (для вариаций тона)

    Returns:
        EmojiRecord или None, если запись отброшена
    """
    if short_code:
        short_codes = (short_code,)
    else:
        short_codes = tuple(name for name in entry.short_names if name)

    if not short_codes:
        logger.warning("Эмодзи {} без алиасов, пропускаем", entry.unified)
        return None

    try:
        text = decode_text(entry)
    except CodepointParseError as e:
        logger.warning("Эмодзи :{}: отброшен: {} ({})", short_codes[0], e.message, e.details)
        return None

    return EmojiRecord(
        short_codes=short_codes,
        unified_code=(entry.unified or entry.non_qualified or "").upper(),
        text=text,
        non_qualified_code=entry.non_qualified,
        supported_platforms=frozenset(entry.platforms)
    )

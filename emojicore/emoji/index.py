"""
Индексы эмодзи
Неизменяемый набор записей и трех индексов поиска по нему
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojicore.models.emoji import EmojiRecord

# Настройка логгера модуля
logger = logger.bind(module="emoji_index")


class EmojiIndex:
    """
    Набор записей эмодзи с индексами

    Записи хранятся в кортеже, индексы ссылаются на позиции (id) записей.
    После построения объект не изменяется.
    """

    __slots__ = ("_records", "_by_leading_unit", "_by_short_code", "_by_unified_code", "_short_codes")

    def __init__(
        self,
        records: Tuple[EmojiRecord, ...],
        by_leading_unit: Mapping[str, Tuple[int, ...]],
        by_short_code: Mapping[str, int],
        by_unified_code: Mapping[str, int],
        short_codes: Tuple[str, ...]
    ):
        self._records = records
        self._by_leading_unit = MappingProxyType(dict(by_leading_unit))
        self._by_short_code = MappingProxyType(dict(by_short_code))
        self._by_unified_code = MappingProxyType(dict(by_unified_code))
        self._short_codes = short_codes

    @classmethod
    def empty(cls) -> "EmojiIndex":
        """Пустой индекс (ничего не находит)"""
        return cls((), {}, {}, {}, ())

    @property
    def records(self) -> Tuple[EmojiRecord, ...]:
        """Все записи, id записи = позиция"""
        return self._records

    @property
    def by_leading_unit(self) -> Mapping[str, Tuple[int, ...]]:
        """Первый символ -> id записей по убыванию длины"""
        return self._by_leading_unit

    @property
    def by_short_code(self) -> Mapping[str, int]:
        """Алиас в нижнем регистре -> id записи"""
        return self._by_short_code

    @property
    def by_unified_code(self) -> Mapping[str, int]:
        """unified -> id записи"""
        return self._by_unified_code

    @property
    def short_codes(self) -> Tuple[str, ...]:
        """Отсортированный список всех алиасов"""
        return self._short_codes

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: int) -> EmojiRecord:
        return self._records[record_id]

    def candidates(self, unit: str) -> Tuple[int, ...]:
        """id записей, текст которых начинается с unit"""
        return self._by_leading_unit.get(unit, ())

    def get_by_short_code(self, short_code: str) -> Optional[EmojiRecord]:
        """
        Найти запись по алиасу

        Args:
            short_code: Алиас без двоеточий, регистр не важен

        Returns:
            EmojiRecord или None
        """
        record_id = self._by_short_code.get(short_code.lower())
        return None if record_id is None else self._records[record_id]

    def get_by_unified_code(self, unified_code: str) -> Optional[EmojiRecord]:
        """Найти запись по unified коду"""
        record_id = self._by_unified_code.get(unified_code.upper())
        return None if record_id is None else self._records[record_id]

    def complete_short_code(self, prefix: str, limit: int = 10) -> List[str]:
        """
        Алиасы, начинающиеся с префикса (для автодополнения)

        Args:
            prefix: Начало алиаса без двоеточия
            limit: Максимум результатов

        Returns:
            Отсортированный список алиасов
        """
        prefix = prefix.lower()
        return [code for code in self._short_codes if code.startswith(prefix)][:limit]


def build_index(records: Iterable[EmojiRecord]) -> EmojiIndex:
    """
    Построить индексы за один проход по записям

    Args:
        records: Базовые записи и вариации в порядке обнаружения

    Returns:
        Готовый неизменяемый EmojiIndex
    """
    arena: List[EmojiRecord] = []
    buckets: Dict[str, List[int]] = {}
    by_short_code: Dict[str, int] = {}
    by_unified_code: Dict[str, int] = {}

    for record in records:
        if not record.text:
            logger.warning("Запись {} без текста не индексируется", record.unified_code)
            continue

        record_id = len(arena)
        arena.append(record)

        buckets.setdefault(record.text[0], []).append(record_id)

        for short_code in record.short_codes:
            by_short_code[short_code.lower()] = record_id

        by_unified_code[record.unified_code] = record_id

    # Сортировка устойчивая: при равной длине сохраняется порядок обнаружения
    by_leading_unit = {
        unit: tuple(sorted(ids, key=lambda record_id: len(arena[record_id].text), reverse=True))
        for unit, ids in buckets.items()
    }

    index = EmojiIndex(
        records=tuple(arena),
        by_leading_unit=by_leading_unit,
        by_short_code=by_short_code,
        by_unified_code=by_unified_code,
        short_codes=tuple(sorted(by_short_code))
    )

    logger.info(
        "Построен индекс: {} записей, {} алиасов, {} первых символов",
        len(arena), len(by_short_code), len(by_leading_unit)
    )

    return index

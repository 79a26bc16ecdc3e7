"""
Сканер эмодзи в тексте
Разбивает текст на обычные фрагменты и найденные эмодзи
"""

from typing import List, Mapping, Optional

# Локальные импорты
from emojicore.models.emoji import EmojiHandle, EmojiRecord
from emojicore.models.segment import EmojiSegment, Segment, TextSegment
from .index import EmojiIndex

# Младшие суррогаты: продолжение символа, с них совпадение не начинается
TRAILING_UNITS = range(0xDC00, 0xE000)


def is_trailing_unit(unit: str) -> bool:
    """Является ли символ продолжением (младшим суррогатом)"""
    return ord(unit) in TRAILING_UNITS


class EmojiScanner:
    """
    Сканер текста по индексу первых символов

    Кандидаты в корзине отсортированы по убыванию длины, поэтому первое
    совпадение в позиции и есть самое длинное.
    """

    def __init__(self, index: EmojiIndex, handles: Optional[Mapping[int, EmojiHandle]] = None):
        """
        Инициализация сканера

        Args:
            index: Индекс эмодзи
            handles: Снимок хэндлов {id записи: EmojiHandle}
        """
        self.index = index
        self.handles = handles or {}

    def match_at(self, text: str, position: int) -> Optional[int]:
        """
        Найти самое длинное эмодзи, начинающееся в позиции

        Args:
            text: Текст
            position: Позиция начала

        Returns:
            id записи или None
        """
        remaining = len(text) - position

        for record_id in self.index.candidates(text[position]):
            value = self.index.get(record_id).text
            if len(value) > remaining:
                continue
            if text.startswith(value, position):
                return record_id

        return None

    def parse(self, text: str) -> List[Segment]:
        """
        Разобрать текст на сегменты

        Склейка текста всех сегментов в порядке выдачи равна исходному тексту.

        Args:
            text: Исходный текст

        Returns:
            Список TextSegment и EmojiSegment
        """
        segments: List[Segment] = []
        last_end = 0
        position = 0
        length = len(text)

        while position < length:
            if is_trailing_unit(text[position]):
                position += 1
                continue

            record_id = self.match_at(text, position)
            if record_id is None:
                position += 1
                continue

            if position > last_end:
                # Текст между эмодзи
                segments.append(TextSegment(text[last_end:position]))

            record = self.index.get(record_id)
            segments.append(EmojiSegment(record, self.handles.get(record_id)))

            position += len(record.text)
            last_end = position

        if last_end < length:
            segments.append(TextSegment(text[last_end:]))

        return segments

    def find_emojis(self, text: str) -> List[EmojiRecord]:
        """Найти все эмодзи в тексте в порядке появления"""
        return [
            segment.record
            for segment in self.parse(text)
            if isinstance(segment, EmojiSegment)
        ]

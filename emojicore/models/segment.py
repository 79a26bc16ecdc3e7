"""
Сегменты результата разбора текста
Текст разбивается на обычные фрагменты и найденные эмодзи
"""

from typing import Optional, Union
from dataclasses import dataclass

from .emoji import EmojiRecord, EmojiHandle


@dataclass(frozen=True)
class TextSegment:
    """Фрагмент обычного текста"""
    text: str


@dataclass(frozen=True)
class EmojiSegment:
    """Найденный эмодзи"""
    record: EmojiRecord
    handle: Optional[EmojiHandle] = None

    @property
    def text(self) -> str:
        """Исходный текст эмодзи"""
        return self.record.text


Segment = Union[TextSegment, EmojiSegment]

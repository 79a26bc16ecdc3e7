"""
Модуль распознавания эмодзи
Загрузка датасета, индексы, разбор текста и замена :shortcode:
"""

from .records import parse_codepoints, build_record
from .loader import load_entries, load_dataset_file
from .variants import TONE_NAMES, get_tone_names, expand_variants
from .index import EmojiIndex, build_index
from .scanner import EmojiScanner
from .shortcodes import ShortCodeReplacer, SHORT_CODE_PATTERN
from .handles import EMOJI_SET_URLS, build_emoji_set_urls, build_handle, resolve_handles
from .engine import EmojiEngine, EngineState, get_emoji_engine, reload_emoji_engine

__all__ = [
    "parse_codepoints",
    "build_record",
    "load_entries",
    "load_dataset_file",
    "TONE_NAMES",
    "get_tone_names",
    "expand_variants",
    "EmojiIndex",
    "build_index",
    "EmojiScanner",
    "ShortCodeReplacer",
    "SHORT_CODE_PATTERN",
    "EMOJI_SET_URLS",
    "build_emoji_set_urls",
    "build_handle",
    "resolve_handles",
    "EmojiEngine",
    "EngineState",
    "get_emoji_engine",
    "reload_emoji_engine"
]

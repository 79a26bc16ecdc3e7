"""Общие фикстуры тестов emoji-core."""

import json

import pytest

from emojicore.emoji import EmojiEngine, build_index, load_entries
from tests.helpers import sample_entries


@pytest.fixture
def entries():
    """Сырые записи датасета."""
    return sample_entries()


@pytest.fixture
def dataset_json(entries):
    """Датасет в виде JSON-строки."""
    return json.dumps(entries)


@pytest.fixture
def records(entries):
    """Загруженные записи."""
    return load_entries(entries)


@pytest.fixture
def index(records):
    """Построенный индекс."""
    return build_index(records)


@pytest.fixture
def engine(dataset_json):
    """Загруженный движок с набором Twitter."""
    engine = EmojiEngine()
    assert engine.load(dataset_json)
    return engine

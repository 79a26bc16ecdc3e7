"""Тесты загрузки датасета и построения записей эмодзи."""

import json

import pytest
from loguru import logger

from emojicore.emoji.loader import load_dataset_file, load_entries
from emojicore.emoji.records import MAX_CODEPOINTS, build_record, parse_codepoints, validate_entry
from emojicore.models import EmojiEntry, Platform
from emojicore.utils.exceptions import CodepointParseError, DatasetParseError
from tests.helpers import FAMILY, HEART, LOADED_SHORT_CODES, SMILE, make_entry


class TestParseCodepoints:
    """Разбор строки кодпоинтов."""

    def test_single_codepoint(self):
        assert parse_codepoints("1F604") == [0x1F604]

    def test_sequence(self):
        assert parse_codepoints("1F468-200D-1F469") == [0x1F468, 0x200D, 0x1F469]

    def test_exported_from_package(self):
        from emojicore.emoji import parse_codepoints as exported
        assert exported is parse_codepoints

    def test_lowercase_hex(self):
        assert parse_codepoints("1f44d-1f3fb") == [0x1F44D, 0x1F3FB]

    @pytest.mark.parametrize(
        "code",
        [None, "", "   ", "XYZ", "1F604-", "1F604--200D", "D83D", "110000"],
    )
    def test_malformed(self, code):
        with pytest.raises(CodepointParseError):
            parse_codepoints(code)

    def test_too_many_codepoints(self):
        code = "-".join(["1F604"] * (MAX_CODEPOINTS + 1))
        with pytest.raises(CodepointParseError):
            parse_codepoints(code)

    def test_max_codepoints_allowed(self):
        code = "-".join(["1F604"] * MAX_CODEPOINTS)
        assert len(parse_codepoints(code)) == MAX_CODEPOINTS


class TestBuildRecord:
    """Построение одной записи."""

    def test_basic_record(self):
        record = build_record(EmojiEntry(**make_entry(["smile", "happy"], "1F604")))

        assert record.short_codes == ("smile", "happy")
        assert record.primary_short_code == "smile"
        assert record.unified_code == "1F604"
        assert record.text == SMILE
        assert record.supported_platforms == frozenset(Platform)

    def test_non_qualified_preferred(self):
        entry = EmojiEntry(**make_entry(["heart"], "2764-FE0F", non_qualified="2764", platforms=("apple",)))
        record = build_record(entry)

        assert record.text == HEART
        assert record.unified_code == "2764-FE0F"
        assert record.non_qualified_code == "2764"
        assert record.supported_platforms == frozenset({Platform.APPLE})

    def test_zwj_sequence(self):
        record = build_record(EmojiEntry(**make_entry(["family"], "1F468-200D-1F469-200D-1F466")))
        assert record.text == FAMILY
        assert len(record.text) == 5

    def test_override_short_code(self):
        entry = EmojiEntry(**make_entry(["ignored"], "1F44D-1F3FB"))
        record = build_record(entry, "+1_tone1")
        assert record.short_codes == ("+1_tone1",)

    def test_unparsable_codepoints_dropped(self):
        assert build_record(EmojiEntry(**make_entry(["broken"], "NOT-HEX"))) is None

    def test_missing_unified_dropped(self):
        assert build_record(EmojiEntry(short_names=["nothing"])) is None

    def test_no_short_codes_dropped(self):
        assert build_record(EmojiEntry(**make_entry([], "1F600"))) is None

    def test_dropped_record_logged_once_as_warning(self):
        messages = []
        handler_id = logger.add(messages.append, level="INFO", format="{level}|{message}")
        try:
            assert build_record(EmojiEntry(**make_entry(["broken"], "NOT-HEX"))) is None
        finally:
            logger.remove(handler_id)

        assert [message.split("|", 1)[0] for message in messages] == ["WARNING"]
        assert ":broken:" in messages[0]

    def test_validate_entry_rejects_non_object(self):
        assert validate_entry(["smile"]) is None
        assert validate_entry({"short_names": 5, "unified": "1F604"}) is None


class TestLoadEntries:
    """Загрузка датасета целиком."""

    def test_loads_from_list(self, entries):
        records = load_entries(entries)
        assert [r.primary_short_code for r in records] == LOADED_SHORT_CODES

    def test_loads_from_json_text(self, dataset_json):
        records = load_entries(dataset_json)
        assert [r.primary_short_code for r in records] == LOADED_SHORT_CODES

    def test_loads_from_bytes(self, dataset_json):
        records = load_entries(dataset_json.encode("utf-8"))
        assert len(records) == len(LOADED_SHORT_CODES)

    def test_variants_follow_base(self, records):
        codes = [r.primary_short_code for r in records]
        base = codes.index("+1")
        assert codes[base + 1:base + 3] == ["+1_tone1", "+1_tone2"]

    def test_bad_entries_are_skipped(self):
        records = load_entries([
            "not an entry",
            {"short_names": "smile", "unified": 42, "has_img_apple": "maybe"},
            make_entry(["smile"], "1F604"),
        ])
        assert [r.primary_short_code for r in records] == ["smile"]

    def test_null_variation_keeps_base(self):
        records = load_entries([
            make_entry(
                ["+1"], "1F44D",
                skin_variations={"1F3FB": make_entry([], "1F44D-1F3FB"), "1F3FC": None},
            ),
        ])
        assert [r.primary_short_code for r in records] == ["+1", "+1_tone1"]

    def test_null_skin_variations_keeps_base(self):
        records = load_entries([make_entry(["smile"], "1F604", skin_variations=None)])
        assert [r.primary_short_code for r in records] == ["smile"]

    def test_empty_dataset(self):
        assert load_entries("[]") == []

    @pytest.mark.parametrize("data", ["{not json", '{"smile": "1F604"}', "42", b"\x80\x81"])
    def test_malformed_container(self, data):
        with pytest.raises(DatasetParseError):
            load_entries(data)


class TestLoadDatasetFile:
    """Загрузка датасета из файла."""

    def test_reads_file(self, tmp_path, entries):
        path = tmp_path / "emoji.json"
        path.write_text(json.dumps(entries), encoding="utf-8")

        records = load_dataset_file(path)
        assert len(records) == len(LOADED_SHORT_CODES)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetParseError) as exc_info:
            load_dataset_file(tmp_path / "missing.json")
        assert "missing.json" in exc_info.value.source

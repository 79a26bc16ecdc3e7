"""Тесты вариаций тона кожи."""

import pytest
from loguru import logger

from emojicore.emoji.records import build_record
from emojicore.emoji.variants import TONE_NAMES, expand_variants, get_tone_names
from emojicore.models import EmojiEntry
from emojicore.utils.exceptions import ToneResolutionError
from tests.helpers import HANDSHAKE_TONE1_TONE2, THUMBSUP, TONE1, TONE2, make_entry


class TestGetToneNames:
    """Перевод ключа вариации в имена тонов."""

    def test_table_has_five_tones(self):
        assert sorted(TONE_NAMES.values()) == ["tone1", "tone2", "tone3", "tone4", "tone5"]

    def test_single_tone(self):
        assert get_tone_names("1F3FB") == "tone1"
        assert get_tone_names("1F3FF") == "tone5"

    def test_two_tones_keep_order(self):
        assert get_tone_names("1F3FD-1F3FB") == "tone3-tone1"

    def test_unknown_segment_skipped(self):
        assert get_tone_names("1F3FC-ABCDE") == "tone2"

    @pytest.mark.parametrize("key", ["ABCDE", "ABCDE-12345", ""])
    def test_no_known_tone_is_fatal(self, key):
        with pytest.raises(ToneResolutionError) as exc_info:
            get_tone_names(key)
        assert exc_info.value.tone_key == key

    def test_custom_table(self):
        assert get_tone_names("X1", {"X1": "light"}) == "light"


class TestExpandVariants:
    """Построение записей вариаций."""

    def _base(self, **variations):
        entry = EmojiEntry(**make_entry(["+1", "thumbsup"], "1F44D", skin_variations=variations))
        return build_record(entry), entry

    def test_each_variation_is_a_record(self):
        base, entry = self._base(**{
            "1F3FB": make_entry([], "1F44D-1F3FB"),
            "1F3FC": make_entry([], "1F44D-1F3FC"),
        })

        variants = expand_variants(base, entry)

        assert [v.short_codes for v in variants] == [("+1_tone1",), ("+1_tone2",)]
        assert [v.text for v in variants] == [THUMBSUP + TONE1, THUMBSUP + TONE2]
        assert [v.unified_code for v in variants] == ["1F44D-1F3FB", "1F44D-1F3FC"]

    def test_two_tone_alias(self):
        entry = EmojiEntry(**make_entry(
            ["handshake"], "1F91D",
            skin_variations={"1F3FB-1F3FC": make_entry([], "1FAF1-1F3FB-200D-1FAF2-1F3FC")},
        ))
        base = build_record(entry)

        (variant,) = expand_variants(base, entry)

        assert variant.primary_short_code == "handshake_tone1-tone2"
        assert variant.text == HANDSHAKE_TONE1_TONE2

    def test_unresolvable_key_drops_only_that_variation(self):
        base, entry = self._base(**{
            "ABCDE": make_entry([], "1F44D-1F3FD"),
            "1F3FB": make_entry([], "1F44D-1F3FB"),
        })

        variants = expand_variants(base, entry)

        assert [v.primary_short_code for v in variants] == ["+1_tone1"]

    def test_unresolvable_key_logged_once_as_warning(self):
        base, entry = self._base(**{"ABCDE": make_entry([], "1F44D-1F3FD")})

        messages = []
        handler_id = logger.add(messages.append, level="INFO", format="{level}|{message}")
        try:
            assert expand_variants(base, entry) == []
        finally:
            logger.remove(handler_id)

        assert [message.split("|", 1)[0] for message in messages] == ["WARNING"]
        assert "ABCDE" in messages[0]

    def test_broken_variation_codepoints_dropped(self):
        base, entry = self._base(**{
            "1F3FB": make_entry([], "ZZZZ"),
            "1F3FC": make_entry([], "1F44D-1F3FC"),
        })

        variants = expand_variants(base, entry)

        assert [v.primary_short_code for v in variants] == ["+1_tone2"]

    def test_invalid_variation_entry_dropped(self):
        base, entry = self._base(**{"1F3FB": {"unified": ["not", "a", "string"]}})
        assert expand_variants(base, entry) == []

    def test_null_variation_dropped(self):
        base, entry = self._base(**{
            "1F3FB": make_entry([], "1F44D-1F3FB"),
            "1F3FC": None,
        })

        variants = expand_variants(base, entry)

        assert [v.primary_short_code for v in variants] == ["+1_tone1"]

    def test_null_skin_variations(self):
        entry = EmojiEntry(**make_entry(["+1"], "1F44D", skin_variations=None))

        assert entry.skin_variations == {}
        assert expand_variants(build_record(entry), entry) == []

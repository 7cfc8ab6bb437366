"""
Тесты моделей: StructuredInput, PronounTable, HistoricalContextRecord.
"""

import pytest

from nlu.models import (
    Category,
    DEFAULT_PRONOUNS,
    HistoricalContextRecord,
    PronounTable,
    StructuredInput,
)


class TestStructuredInput:

    def test_mentions_returns_live_list(self):
        si = StructuredInput(objects=["it"])
        si.mentions(Category.OBJECTS).append("shoes")
        assert si.objects == ["it", "shoes"]

    def test_mentions_accepts_category_value(self):
        si = StructuredInput(times=["then"])
        assert si.mentions("times") == ["then"]

    def test_replace_mention_exact_match_only(self):
        si = StructuredInput(objects=["it", "item", "it"])
        replaced = si.replace_mention(Category.OBJECTS, "it", "the red shirt")
        assert replaced == 2
        assert si.objects == ["the red shirt", "item", "the red shirt"]

    def test_replace_does_not_touch_other_categories(self):
        si = StructuredInput(objects=["it"], actors=["it"])
        si.replace_mention(Category.OBJECTS, "it", "the lamp")
        assert si.actors == ["it"]


class TestPronounTable:

    def test_default_vocabulary(self):
        assert DEFAULT_PRONOUNS["it"] == Category.OBJECTS
        assert DEFAULT_PRONOUNS["him"] == Category.ACTORS
        assert DEFAULT_PRONOUNS["then"] == Category.TIMES
        assert DEFAULT_PRONOUNS["there"] == Category.PLACES

    def test_lookup_is_case_insensitive(self):
        assert DEFAULT_PRONOUNS.category_of("It") == Category.OBJECTS

    def test_unknown_word(self):
        assert DEFAULT_PRONOUNS.category_of("banana") is None
        with pytest.raises(KeyError):
            DEFAULT_PRONOUNS["banana"]

    def test_table_is_immutable(self):
        table = PronounTable({"it": "objects"})
        with pytest.raises(TypeError):
            table["that"] = Category.OBJECTS
        assert dict(table) == {"it": Category.OBJECTS}

    def test_rejects_unknown_category(self):
        with pytest.raises(ValueError):
            PronounTable({"it": "colors"})


class TestHistoricalContextRecord:

    def test_from_row_decodes_json_columns(self):
        record = HistoricalContextRecord.from_row({
            "id": 7,
            "user_id": 1,
            "objects": '["shoes", "the red shirt"]',
            "actors": "[]",
            "times": None,
            "places": '["Boston"]',
            "created_at": "2024-05-01T12:00:00",
        })
        assert record.id == 7
        assert record.last(Category.OBJECTS) == "the red shirt"
        assert record.last(Category.TIMES) == ""
        assert record.places == ["Boston"]
        assert record.is_qualifying()

    def test_turn_without_objects_does_not_qualify(self):
        record = HistoricalContextRecord(user_id=1, actors=["Bob"])
        assert not record.is_qualifying()

    def test_from_row_rejects_non_array_column(self):
        with pytest.raises(ValueError):
            HistoricalContextRecord.from_row({
                "user_id": 1,
                "objects": '{"a": 1}',
                "created_at": "2024-05-01T12:00:00",
            })

    def test_from_row_requires_created_at(self):
        with pytest.raises(ValueError):
            HistoricalContextRecord.from_row({"user_id": 1, "objects": '["x"]'})

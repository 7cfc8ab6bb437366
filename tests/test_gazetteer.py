"""
Тесты извлечения мест по газеттиру.
"""

import aiosqlite
import pytest
import pytest_asyncio

from database.place_store import PlaceStore
from nlu.errors import StorageError
from nlu.gazetteer import GazetteerMatcher, bigrams, location_start, place_candidates
from nlu.models import PlaceRecord
from nlu.tokenizer import Tokenizer
from tests.conftest import insert_places


class TestCandidates:

    def test_bigrams_from_start(self):
        assert bigrams(["a", "b", "c", "d"], 1) == ["b c", "c d"]
        assert bigrams(["a"], 0) == []

    def test_first_preposition_is_start(self):
        assert location_start(["dinner", "at", "home", "in", "Paris"]) == 1

    def test_no_preposition_scans_everything(self):
        assert location_start(["New", "York", "is", "big"]) == 0

    def test_candidates_after_preposition(self):
        candidates = place_candidates("meet me in New York city")
        assert candidates == [
            "in", "New", "York", "city",
            "in New", "New York", "York city",
        ]

    def test_punctuation_is_stripped(self):
        assert place_candidates("On St. Louis's side!") == [
            "On", "St", "Louiss", "side",
            "On St", "St Louiss", "Louiss side",
        ]

    def test_candidates_without_preposition_cover_full_text(self):
        assert place_candidates("Boston please") == ["Boston", "please", "Boston please"]

    def test_empty_text(self):
        assert place_candidates("?!") == []


@pytest_asyncio.fixture
async def matcher(conn):
    await insert_places(conn, [
        ("New York", "US"),
        ("York", "US"),
        ("York", "GB"),
        ("Boston", "US"),
        ("Paris", "FR"),
    ])
    return GazetteerMatcher(PlaceStore(conn), country_code="US")


class TestExtractPlaces:

    @pytest.mark.asyncio
    async def test_longest_name_first(self, matcher):
        places = await matcher.extract_places("meet me in New York city")
        assert places == [PlaceRecord("New York", "US"), PlaceRecord("York", "US")]

    @pytest.mark.asyncio
    async def test_accepts_utterance(self, matcher):
        utterance = Tokenizer().tokenize("Flights to Boston?")
        places = await matcher.extract_places(utterance)
        assert [p.name for p in places] == ["Boston"]

    @pytest.mark.asyncio
    async def test_match_is_case_sensitive(self, matcher):
        assert await matcher.extract_places("meet me in new york") == []

    @pytest.mark.asyncio
    async def test_restricted_to_country(self, matcher):
        assert await matcher.extract_places("weekend in Paris") == []

    @pytest.mark.asyncio
    async def test_words_before_preposition_ignored(self, matcher):
        places = await matcher.extract_places("Boston friends are at home")
        assert places == []

    @pytest.mark.asyncio
    async def test_no_candidates(self, matcher):
        assert await matcher.extract_places("") == []

    @pytest.mark.asyncio
    async def test_storage_error(self):
        async with aiosqlite.connect(":memory:") as empty:
            matcher = GazetteerMatcher(PlaceStore(empty))
            with pytest.raises(StorageError):
                await matcher.extract_places("in Boston")

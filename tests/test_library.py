"""
Pattern Library Tests — Construction, Validation, Immutability

The library is the only configurable surface of the engine. These tests
pin down what a valid library looks like and that a broken one fails at
construction rather than mid-analysis.
"""

from __future__ import annotations

import dataclasses

import pytest

from porkscan.library import (
    DEFAULT_LIBRARY,
    ITEM_PATTERNS,
    SUSPICIOUS_PATTERNS,
    PatternLibrary,
    PatternLibraryError,
    SpendingPattern,
)


class TestDefaultLibrary:

    def test_core_keywords_present(self):
        for kw in ("earmark", "memorial", "stadium", "bridge to nowhere",
                   "naming rights", "hometown", "various districts"):
            assert kw in DEFAULT_LIBRARY.keywords

    def test_keywords_are_lowercase_and_unique(self):
        kws = DEFAULT_LIBRARY.keywords
        assert all(kw == kw.lower() for kw in kws)
        assert len(kws) == len(set(kws))

    def test_item_categories_in_order(self):
        assert [p.category for p in DEFAULT_LIBRARY.item_patterns] == [
            "Memorial/Bridge",
            "Stadium/Arena",
            "Museum/Cultural Center",
            "Tourism/Visitor Center",
            "Research/University",
            "Community/Miscellaneous",
        ]

    def test_pattern_ids_unique(self):
        ids = [p.id for p in SUSPICIOUS_PATTERNS + ITEM_PATTERNS]
        assert len(ids) == len(set(ids))

    def test_every_pattern_compiled(self):
        assert len(DEFAULT_LIBRARY.suspicious_regexes) == len(SUSPICIOUS_PATTERNS)
        assert len(DEFAULT_LIBRARY.item_regexes) == len(ITEM_PATTERNS)
        assert len(DEFAULT_LIBRARY.keyword_regexes) == len(DEFAULT_LIBRARY.keywords)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_LIBRARY.keywords = ("earmark",)


class TestValidation:

    def test_bad_regex_raises(self):
        bad = SpendingPattern(id="BAD", category="Broken", pattern="(unclosed")
        with pytest.raises(PatternLibraryError, match="BAD"):
            PatternLibrary(suspicious_patterns=(bad,))

    def test_bad_item_regex_raises(self):
        bad = SpendingPattern(id="BAD_ITEM", category="Broken", pattern="[a-")
        with pytest.raises(PatternLibraryError):
            PatternLibrary(item_patterns=(bad,))

    def test_error_is_a_value_error(self):
        assert issubclass(PatternLibraryError, ValueError)

    def test_empty_keyword_raises(self):
        with pytest.raises(PatternLibraryError):
            PatternLibrary(keywords=("earmark", "   "))

    def test_empty_location_indicator_raises(self):
        with pytest.raises(PatternLibraryError):
            PatternLibrary(location_indicators=("",))

    def test_keywords_normalized(self):
        lib = PatternLibrary(keywords=("Earmark", "earmark", " Memorial "))
        assert lib.keywords == ("earmark", "memorial")


class TestCustomLibrary:

    def test_empty_registries_allowed(self):
        lib = PatternLibrary(
            keywords=(), suspicious_patterns=(), location_indicators=(),
            item_patterns=(), benefit_keywords=(),
        )
        assert lib.keyword_regexes == ()
        assert lib.location_regex is None

    def test_keyword_regex_is_whole_word(self):
        lib = PatternLibrary(keywords=("earmark",))
        _, regex = lib.keyword_regexes[0]
        assert regex.search("An EARMARK appears")
        assert not regex.search("earmarked funds")

    def test_equal_libraries_compare_equal(self):
        assert PatternLibrary(keywords=("a",)) == PatternLibrary(keywords=("A",))


class TestLocationRegex:

    def test_captures_capitalized_place(self):
        m = DEFAULT_LIBRARY.location_regex.search(
            "for the stadium in the district of Springfield."
        )
        assert m.group(1) == "Springfield"

    def test_multiword_place(self):
        m = DEFAULT_LIBRARY.location_regex.search("a clinic serving Lake Wallace County")
        assert m.group(1) == "Lake Wallace County"

    def test_phrase_case_insensitive(self):
        m = DEFAULT_LIBRARY.location_regex.search("LOCATED IN Dayton")
        assert m.group(1) == "Dayton"

    def test_lowercase_place_ignored(self):
        assert DEFAULT_LIBRARY.location_regex.search("located in a small town") is None


class TestDescribe:

    def test_fields(self):
        info = DEFAULT_LIBRARY.describe()
        assert set(info) == {
            "keywords", "suspicious_patterns", "item_patterns",
            "location_indicators", "benefit_keywords",
        }
        assert info["suspicious_patterns"][0]["id"] == "MEMORIAL_PROJECT"
        assert "description" in info["suspicious_patterns"][0]
        assert info["item_patterns"][0] == {
            "id": "ITEM_MEMORIAL_BRIDGE", "category": "Memorial/Bridge",
        }

"""
Tests for pork item identification and beneficiary/justification inference.
"""

from __future__ import annotations

from porkscan.identifier import (
    NO_JUSTIFICATION,
    UNKNOWN_BENEFICIARY,
    identify_items,
    infer_beneficiary,
    infer_justification,
)
from porkscan.library import PatternLibrary, SpendingPattern
from porkscan.models import SuspicionLevel


SCENARIO = (
    "This bill appropriates $50 million for the Hometown Memorial Stadium "
    "renovation in the district of Springfield."
)


class TestScenarioItems:

    def test_overlapping_categories_not_merged(self):
        items = identify_items(SCENARIO)
        assert [i.category for i in items] == [
            "Memorial/Bridge", "Stadium/Arena", "Community/Miscellaneous",
        ]

    def test_item_fields(self):
        item = identify_items(SCENARIO)[0]
        assert item.description == (
            "$50 million for the Hometown Memorial Stadium renovation "
            "in the district of Springfield"
        )
        assert item.monetary_value == 50_000_000
        assert item.amount == "$50.0M"
        assert item.beneficiary == "Springfield"
        assert item.justification == NO_JUSTIFICATION
        # memorial 3 + hometown 3 + stadium 2; $50M is not above the threshold
        assert item.suspicion_score == 8
        assert item.suspicion_level is SuspicionLevel.HIGH


class TestItemRules:

    def test_amounts_in_span_are_summed(self):
        items = identify_items("$5 million for the county museum and $2 million for its annex.")
        assert len(items) == 1
        assert items[0].category == "Museum/Cultural Center"
        assert items[0].monetary_value == 7_000_000
        assert items[0].amount == "$7.0M"
        assert items[0].suspicion_level is SuspicionLevel.LOW
        assert items[0].beneficiary == UNKNOWN_BENEFICIARY

    def test_nearest_amount_opens_the_item(self):
        items = identify_items("$5 million and $2 million for the county museum.")
        assert len(items) == 1
        assert items[0].description == "$2 million for the county museum"
        assert items[0].monetary_value == 2_000_000

    def test_decimal_point_does_not_end_the_span(self):
        items = identify_items(
            "$10 million for the Lakeside Stadium renovation and $2.5 million "
            "for parking in Springfield."
        )
        assert len(items) == 1
        item = items[0]
        assert item.category == "Stadium/Arena"
        assert item.description == (
            "$10 million for the Lakeside Stadium renovation and $2.5 million "
            "for parking in Springfield"
        )
        assert item.monetary_value == 12_500_000
        assert item.amount == "$12.5M"
        assert item.beneficiary == "Springfield"
        assert item.suspicion_score == 2
        assert item.suspicion_level is SuspicionLevel.LOW

    def test_match_without_amount_discarded(self):
        lib = PatternLibrary(
            item_patterns=(
                SpendingPattern(id="X", category="Misc", pattern=r"stadium[^.]*"),
            ),
        )
        assert identify_items("A stadium shall be built.", lib) == []
        assert len(identify_items("A stadium costing $4 million.", lib)) == 1

    def test_nouns_must_share_the_sentence(self):
        assert identify_items("We spend $9 million on roads. The museum is old.") == []

    def test_no_items_in_clean_text(self):
        assert identify_items("This bill updates filing deadlines for small businesses.") == []

    def test_every_item_has_positive_value(self):
        text = (
            "$12 million is provided for a targeted research initiative at "
            "Northfield University. An additional $80 million shall be "
            "distributed among various districts."
        )
        items = identify_items(text)
        assert items
        assert all(i.monetary_value > 0 for i in items)
        assert all(i.beneficiary for i in items)


class TestBeneficiary:

    def test_location_indicator(self):
        assert infer_beneficiary("a park in the state of Ohio") == "Ohio"

    def test_sponsor(self):
        assert infer_beneficiary("funds sponsored by Senator Jane Doe") == "Senator Jane Doe"

    def test_in_place(self):
        assert infer_beneficiary("a new center in Lake County") == "Lake County"

    def test_for_name(self):
        assert infer_beneficiary("grants for the Springfield Zoo") == "Springfield Zoo"

    def test_location_beats_for_name(self):
        assert infer_beneficiary("for Acme Corp located in Dayton") == "Dayton"

    def test_falls_back_to_later_text(self):
        assert infer_beneficiary("no names here", "built in Toledo") == "Toledo"

    def test_first_text_wins(self):
        assert infer_beneficiary("built in Akron", "built in Toledo") == "Akron"

    def test_unknown_sentinel(self):
        assert infer_beneficiary("nothing capitalized here") == UNKNOWN_BENEFICIARY
        assert infer_beneficiary("") == UNKNOWN_BENEFICIARY

    def test_library_without_locations(self):
        lib = PatternLibrary(location_indicators=())
        assert infer_beneficiary("located in Dayton", library=lib) == "Dayton"


class TestJustification:

    def test_claims_listed_in_library_order(self):
        span = "$20 million for the campus to support research, education and job creation"
        assert infer_justification(span) == "Claimed: job creation, education, research"

    def test_case_insensitive(self):
        assert infer_justification("Improves SAFETY") == "Claimed: safety"

    def test_sentinel(self):
        assert infer_justification("$5 million for a fountain") == NO_JUSTIFICATION

    def test_claim_carried_on_item(self):
        items = identify_items(
            "$20 million for the university research campus to support job "
            "creation and education."
        )
        assert items[0].category == "Research/University"
        assert items[0].justification == "Claimed: job creation, education, research"

"""Tests for the interactive collector."""

import logging

import pytest

from restaurant_entry.errors import RequiredInputMissingError
from restaurant_entry.models import PriceTier
from restaurant_entry.services.collector import (
    InteractiveCollector,
    parse_bool,
    parse_list,
)

AREA_KEYS = ["fenwick-island", "ocean-city"]
CUISINES = ["Seafood", "BBQ"]


class TestParseList:
    """Tests for parse_list()."""

    def test_trims_and_drops_empty_items(self):
        assert parse_list(" BBQ , Seafood,, ,Pizza ") == ["BBQ", "Seafood", "Pizza"]

    def test_keeps_order_and_inner_spaces(self):
        assert parse_list("Waterfront / View, Casual") == ["Waterfront / View", "Casual"]

    @pytest.mark.parametrize("text", ["", "   ", ",,", None])
    def test_empty(self, text):
        assert parse_list(text) == []


class TestParseBool:
    """Tests for parse_bool()."""

    @pytest.mark.parametrize("text", ["y", "YES", "1", "true", " Yes "])
    def test_true_words(self, text):
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["", "n", "No", "0", "FALSE", "maybe", None])
    def test_false_by_default(self, text):
        assert parse_bool(text) is False

    def test_default_applies_to_blank_and_unknown(self):
        assert parse_bool("", default=True) is True
        assert parse_bool("sure", default=True) is True
        assert parse_bool("no", default=True) is False


class TestInteractiveCollector:
    """Tests for InteractiveCollector.collect()."""

    @pytest.fixture
    def collect(self, config, make_prompt, echoed):
        """Run the collector against scripted answers."""

        def run(answers, area_keys=AREA_KEYS, cuisine_names=CUISINES):
            prompt = make_prompt(answers)
            collector = InteractiveCollector(config, prompt=prompt, echo=echoed.append)
            return collector.collect(area_keys, cuisine_names), prompt.asked

        return run

    def test_collects_all_fields(self, collect, answers):
        draft, asked = collect(answers())

        assert len(asked) == 14
        assert draft.name == "Crabby Bill's"
        assert draft.slug == ""
        assert draft.area_key == "fenwick-island"
        assert draft.address == "Fenwick Island, DE"
        assert draft.price == PriceTier.MODERATE
        assert draft.cuisines == ["Seafood", "Crabs"]
        assert draft.vibes == ["Casual", "Waterfront / View"]
        assert draft.good_for == ["Groups"]
        assert draft.short_blurb == "Steamed crabs by the bay."
        assert draft.long_blurb == "A local institution."
        assert draft.must_try == ["Crab cakes"]
        assert draft.website == "https://crabbybills.example"
        assert draft.menu_url == ""
        assert draft.featured is True

    def test_prompt_order(self, collect, answers):
        _, asked = collect(answers())

        assert asked[0] == "Restaurant name: "
        assert asked[1] == 'Slug (Enter to auto: "crabby-bills"): '
        assert asked[2].startswith("areaKey")
        assert asked[4].startswith("Price")
        assert asked[5].startswith("Cuisines")
        assert asked[-1] == "Featured on homepage? (y/N): "

    def test_answers_are_trimmed(self, collect, answers):
        draft, _ = collect(answers(name="  Fish Tales  ", address="  Route 1 "))

        assert draft.name == "Fish Tales"
        assert draft.address == "Route 1"

    def test_blank_optional_fields_use_defaults(self, collect, answers):
        draft, _ = collect(
            answers(
                address="",
                vibes="",
                good_for=" ",
                short_blurb="",
                long_blurb="",
                must_try="",
                website="",
                featured="",
            )
        )

        assert draft.address == ""
        assert draft.vibes == []
        assert draft.good_for == []
        assert draft.must_try == []
        assert draft.website == ""
        assert draft.featured is False

    def test_explicit_price(self, collect, answers):
        draft, _ = collect(answers(price="$$$"))
        assert draft.price == PriceTier.UPSCALE

    def test_unknown_price_falls_back(self, collect, answers, echoed):
        draft, _ = collect(answers(price="pricey"))

        assert draft.price == PriceTier.MODERATE
        assert any("unknown price" in line for line in echoed)

    def test_suggestions_are_shown(self, collect, answers, echoed):
        collect(answers())

        assert "  fenwick-island, ocean-city" in echoed
        assert "  Seafood, BBQ" in echoed

    def test_no_suggestions_available(self, collect, answers, echoed):
        collect(answers(area_key="anywhere"), area_keys=[], cuisine_names=[])

        assert any("Could not detect area keys" in line for line in echoed)
        assert any("No cuisine names detected" in line for line in echoed)
        assert not any("Warning" in line for line in echoed)

    def test_unknown_area_warns_but_proceeds(self, collect, answers, echoed):
        draft, _ = collect(answers(area_key="bethany-beach"))

        assert draft.area_key == "bethany-beach"
        assert any('"bethany-beach" not found' in line for line in echoed)

    def test_unknown_area_not_logged_as_warning(self, collect, answers, caplog):
        """Test that the operator only sees the echoed warning."""
        collect(answers(area_key="bethany-beach"))

        assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []

    def test_missing_name_is_fatal(self, collect, answers):
        with pytest.raises(RequiredInputMissingError, match="Name is required"):
            collect(answers(name="   "))

    def test_missing_area_key_is_fatal(self, collect, answers):
        with pytest.raises(RequiredInputMissingError, match="areaKey is required"):
            collect(answers(area_key=""))

    def test_missing_cuisines_is_fatal(self, collect, answers):
        with pytest.raises(RequiredInputMissingError) as exc_info:
            collect(answers(cuisines=" , "))

        assert exc_info.value.field == "cuisines"

    def test_fatal_error_stops_prompting(self, collect, make_prompt, config, answers):
        prompt = make_prompt(answers(name=""))
        collector = InteractiveCollector(config, prompt=prompt, echo=lambda _: None)

        with pytest.raises(RequiredInputMissingError):
            collector.collect()

        assert prompt.asked == ["Restaurant name: "]

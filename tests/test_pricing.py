from crop_helper.sample_data import LOCATIONS, TODAY_PRICES
from crop_helper.screens.pricing import PricingState, filter_prices


def _crops(prices) -> list[str]:
    return [price.crop for price in prices]


def test_filter_matches_substring_case_insensitively() -> None:
    assert _crops(filter_prices(TODAY_PRICES, "wh")) == ["Wheat"]
    assert _crops(filter_prices(TODAY_PRICES, "RICE")) == ["Rice (Basmati)"]
    assert _crops(filter_prices(TODAY_PRICES, "basmati")) == ["Rice (Basmati)"]


def test_empty_query_keeps_all_prices_in_order() -> None:
    assert filter_prices(TODAY_PRICES, "") == list(TODAY_PRICES)
    assert len(filter_prices(TODAY_PRICES, "")) == 6


def test_filter_keeps_input_order_for_multiple_matches() -> None:
    assert _crops(filter_prices(TODAY_PRICES, "a")) == [
        "Wheat",
        "Rice (Basmati)",
        "Sugarcane",
        "Maize",
        "Mustard",
    ]


def test_no_match_returns_empty_list() -> None:
    assert filter_prices(TODAY_PRICES, "zzz") == []


def test_state_typing_and_erasing_updates_filter() -> None:
    state = PricingState()

    state.type_text("Co")
    assert _crops(state.filtered_prices()) == ["Cotton"]

    state.erase()
    state.erase()
    state.erase()
    assert state.query == ""
    assert len(state.filtered_prices()) == len(TODAY_PRICES)


def test_location_cycles_and_wraps() -> None:
    state = PricingState()
    assert state.location.name == "Punjab"

    seen = [state.cycle_location().name for _ in range(len(LOCATIONS))]

    assert seen == ["Haryana", "Uttar Pradesh", "Rajasthan", "Gujarat", "Punjab"]
    assert state.cycle_location(-1).name == "Gujarat"


def test_location_does_not_change_prices() -> None:
    state = PricingState()
    before = state.filtered_prices()

    state.cycle_location()

    assert state.filtered_prices() == before

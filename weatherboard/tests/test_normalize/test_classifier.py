"""Tests for WMO weather code classification."""

import pytest

from weatherboard.models.conditions import WeatherCondition
from weatherboard.normalize.classifier import (
    EXACT_CODES,
    RANGE_BOUNDS,
    classify,
    condition_info,
    describe,
)

C = WeatherCondition


def _range_only(code: int) -> WeatherCondition:
    for upper, condition in RANGE_BOUNDS:
        if code <= upper:
            return condition
    return C.THUNDER


class TestClassify:
    @pytest.mark.parametrize(
        "code,expected",
        [
            (0, C.CLEAR),
            (2, C.CLEAR),
            (45, C.CLOUDY),
            (53, C.DRIZZLE),
            (61, C.RAIN),
            (65, C.RAIN),
            (77, C.SNOW),
            (81, C.SHOWERS),
            (86, C.SNOW),
            (95, C.THUNDER),
            (99, C.THUNDER),
        ],
    )
    def test_known_codes(self, code: int, expected: WeatherCondition):
        assert classify(code) == expected

    def test_exact_table_covers_known_codes(self):
        assert len(EXACT_CODES) == 24
        assert {0, 1, 2, 3, 45, 48, 95, 96, 99} <= set(EXACT_CODES)

    def test_exact_and_range_tables_agree(self):
        for code, condition in EXACT_CODES.items():
            assert _range_only(code) == condition, code

    def test_range_fallback_for_unlisted_codes(self):
        assert classify(10) == C.CLOUDY
        assert classify(57) == C.DRIZZLE
        assert classify(67) == C.RAIN
        assert classify(79) == C.SNOW
        assert classify(90) == C.THUNDER

    def test_integral_float(self):
        assert classify(61.0) == C.RAIN

    @pytest.mark.parametrize("code", [None, -1, 100, 250, 61.5, "61", True, float("nan")])
    def test_unknown(self, code):
        assert classify(code) == C.UNKNOWN

    def test_total_over_wmo_range(self):
        for code in range(-5, 120):
            assert isinstance(classify(code), WeatherCondition)

    def test_deterministic(self):
        assert [classify(c) for c in range(100)] == [classify(c) for c in range(100)]


class TestConditionInfo:
    def test_icons(self):
        assert condition_info(C.CLEAR).icon == "wb_sunny"
        assert condition_info(C.RAIN).icon == "rainy"
        assert condition_info(C.SNOW).icon == "ac_unit"
        assert condition_info(C.THUNDER).icon == "thunderstorm"
        assert condition_info(C.UNKNOWN).icon == "help_outline"

    def test_every_condition_has_info(self):
        for condition in WeatherCondition:
            assert condition_info(condition).label


class TestDescribe:
    def test_known_code(self):
        assert describe(2) == "Partly cloudy"
        assert describe(99) == "Thunderstorm with heavy hail"

    def test_falls_back_to_category_label(self):
        assert describe(57) == "Drizzle"
        assert describe(None) == "Unknown"

"""Tests for per-metric color classification."""

from __future__ import annotations

import math

import pytest

from scoreboard.domain import IndustryThreshold
from scoreboard.scoring.classifiers import (
    SmaCrossStrategy,
    get_cash_sdebt_color,
    get_current_ratio_color,
    get_irr_color,
    get_leverage_f2_color,
    get_munger_quality_score_color,
    get_pe_percentage_color,
    get_ro40_color,
    get_sma_color,
    get_sma_cross_color,
    get_tb_s_price_color,
    get_value_creation_color,
)
from scoreboard.scoring.colors import ColorType, display_label
from scoreboard.scoring.thresholds import resolve_threshold


INDUSTRY = "Test Industry"


class TestResolveThreshold:
    """Tests for resolve_threshold."""

    def test_case_insensitive_match(self, thresholds):
        """Industry names match regardless of case."""
        assert resolve_threshold("test industry", thresholds) is thresholds[0]
        assert resolve_threshold("TEST INDUSTRY", thresholds) is thresholds[0]

    def test_first_match_wins(self, test_threshold):
        """Duplicate industries resolve to the first record."""
        duplicate = IndustryThreshold(industry="test industry", irr=99)
        assert resolve_threshold(INDUSTRY, [test_threshold, duplicate]) is test_threshold

    def test_blank_industry(self, thresholds):
        """Blank industry resolves to nothing."""
        assert resolve_threshold("", thresholds) is None
        assert resolve_threshold("   ", thresholds) is None
        assert resolve_threshold(None, thresholds) is None

    def test_unknown_industry(self, thresholds):
        """Industries missing from the table resolve to nothing."""
        assert resolve_threshold("Unknown", thresholds) is None


class TestIrrColor:
    """Tests for get_irr_color."""

    def test_at_cutoff_is_green(self, thresholds):
        """IRR equal to the cutoff is GREEN."""
        assert get_irr_color(25, INDUSTRY, thresholds) == ColorType.GREEN

    def test_below_cutoff_is_red(self, thresholds):
        """IRR below the cutoff is RED."""
        assert get_irr_color(24.9, INDUSTRY, thresholds) == ColorType.RED

    def test_missing_value_is_blank(self, thresholds):
        """Missing and non-finite values are BLANK."""
        assert get_irr_color(None, INDUSTRY, thresholds) == ColorType.BLANK
        assert get_irr_color(math.nan, INDUSTRY, thresholds) == ColorType.BLANK
        assert get_irr_color(math.inf, INDUSTRY, thresholds) == ColorType.BLANK

    def test_unknown_industry_is_blank(self, thresholds):
        """No threshold record means BLANK."""
        assert get_irr_color(50, "Unknown", thresholds) == ColorType.BLANK


class TestRo40Color:
    """Tests for get_ro40_color (percent values vs decimal thresholds)."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (15, ColorType.RED),
            (10, ColorType.RED),
            (20, ColorType.ORANGE),
            (25, ColorType.GREEN),
            (40, ColorType.GREEN),
        ],
    )
    def test_bands(self, thresholds, value, expected):
        """Percentages are divided by 100 before comparison."""
        assert get_ro40_color(value, INDUSTRY, thresholds) == expected

    def test_missing(self, thresholds):
        """Missing value is BLANK."""
        assert get_ro40_color(None, INDUSTRY, thresholds) == ColorType.BLANK


class TestLeverageF2Color:
    """Tests for get_leverage_f2_color (lower is better)."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1.0, ColorType.GREEN),
            (2.0, ColorType.GREEN),
            (2.5, ColorType.ORANGE),
            (3.0, ColorType.ORANGE),
            (3.1, ColorType.RED),
        ],
    )
    def test_bands(self, thresholds, value, expected):
        """Boundaries are inclusive on the good side."""
        assert get_leverage_f2_color(value, INDUSTRY, thresholds) == expected


class TestCashSdebtColor:
    """Tests for get_cash_sdebt_color."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.5, ColorType.RED),
            (0.7, ColorType.RED),
            (1.0, ColorType.ORANGE),
            (1.2, ColorType.GREEN),
            (5.0, ColorType.GREEN),
        ],
    )
    def test_bands(self, thresholds, value, expected):
        """RED up to min, GREEN from max."""
        assert get_cash_sdebt_color(value, False, INDUSTRY, thresholds) == expected

    def test_div_zero_wins(self, thresholds):
        """Division by zero is GREEN even without a value or industry."""
        assert get_cash_sdebt_color(None, True, INDUSTRY, thresholds) == ColorType.GREEN
        assert get_cash_sdebt_color(0.1, True, INDUSTRY, thresholds) == ColorType.GREEN
        assert get_cash_sdebt_color(None, True, "Unknown", []) == ColorType.GREEN

    def test_missing_without_div_zero(self, thresholds):
        """Missing value without the flag is BLANK."""
        assert get_cash_sdebt_color(None, False, INDUSTRY, thresholds) == ColorType.BLANK


class TestCurrentRatioColor:
    """Tests for get_current_ratio_color."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1.0, ColorType.RED),
            (1.1, ColorType.GREEN),
            (1.99, ColorType.GREEN),
            (2.0, ColorType.ORANGE),
            (3.5, ColorType.ORANGE),
        ],
    )
    def test_bands(self, thresholds, value, expected):
        """Excess liquidity above max is ORANGE, not RED."""
        assert get_current_ratio_color(value, INDUSTRY, thresholds) == expected


class TestStaticColors:
    """Tests for classifiers with fixed thresholds."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (39.9, ColorType.RED),
            (40, ColorType.ORANGE),
            (60, ColorType.ORANGE),
            (60.1, ColorType.GREEN),
            (None, ColorType.BLANK),
        ],
    )
    def test_munger_quality_score(self, value, expected):
        """Munger Quality Score bands at 40 and 60."""
        assert get_munger_quality_score_color(value) == expected

    def test_value_creation(self):
        """Zero value creation counts as GREEN."""
        assert get_value_creation_color(0) == ColorType.GREEN
        assert get_value_creation_color(-0.1) == ColorType.RED
        assert get_value_creation_color(None) == ColorType.BLANK

    def test_pe_percentage(self):
        """P/E at or below the industry median is GREEN."""
        assert get_pe_percentage_color(0) == ColorType.GREEN
        assert get_pe_percentage_color(-20) == ColorType.GREEN
        assert get_pe_percentage_color(0.5) == ColorType.RED
        assert get_pe_percentage_color(None) == ColorType.BLANK

    def test_tb_s_price(self):
        """(TB/S)/Price of 1.0 or more is GREEN."""
        assert get_tb_s_price_color(1.0) == ColorType.GREEN
        assert get_tb_s_price_color(0.99) == ColorType.RED
        assert get_tb_s_price_color(None) == ColorType.BLANK


class TestSmaColor:
    """Tests for get_sma_color."""

    def test_bands(self):
        """Above is GREEN, below RED, equal ORANGE."""
        assert get_sma_color(110, 100) == ColorType.GREEN
        assert get_sma_color(90, 100) == ColorType.RED
        assert get_sma_color(100, 100) == ColorType.ORANGE

    def test_missing_inputs(self):
        """Missing price or SMA is BLANK."""
        assert get_sma_color(None, 100) == ColorType.BLANK
        assert get_sma_color(100, None) == ColorType.BLANK


class TestSmaCrossColor:
    """Tests for both SMA-cross strategies."""

    def test_standard(self):
        """Standard reading: exact, case-insensitive match."""
        assert get_sma_cross_color("GOLDEN") == ColorType.GREEN
        assert get_sma_cross_color("golden") == ColorType.GREEN
        assert get_sma_cross_color("Death") == ColorType.RED
        assert get_sma_cross_color("GOLDEN CROSS") == ColorType.BLANK
        assert get_sma_cross_color(None) == ColorType.BLANK
        assert get_sma_cross_color("") == ColorType.BLANK

    def test_inverted(self):
        """Inverted reading: substring match with swapped colors."""
        inverted = SmaCrossStrategy.INVERTED
        assert get_sma_cross_color("GOLDEN", inverted) == ColorType.RED
        assert get_sma_cross_color("Golden Cross", inverted) == ColorType.RED
        assert get_sma_cross_color("death cross", inverted) == ColorType.GREEN
        assert get_sma_cross_color("NONE", inverted) == ColorType.BLANK

    def test_strategy_by_value(self):
        """Strategy can be given by its string value."""
        assert get_sma_cross_color("DEATH", "inverted") == ColorType.GREEN


class TestColorLabels:
    """Tests for display_label."""

    def test_orange_can_render_as_blue(self):
        """The middle band takes the preset's label."""
        assert display_label(ColorType.ORANGE) == "ORANGE"


NON_FINITE = [math.nan, math.inf, -math.inf]


class TestNonFiniteValues:
    """NaN and infinities classify as BLANK for every metric."""

    @pytest.mark.parametrize("value", NON_FINITE)
    def test_threshold_metrics(self, thresholds, value):
        """Threshold-dependent metrics are BLANK before any comparison."""
        assert get_irr_color(value, INDUSTRY, thresholds) == ColorType.BLANK
        assert get_ro40_color(value, INDUSTRY, thresholds) == ColorType.BLANK
        assert get_leverage_f2_color(value, INDUSTRY, thresholds) == ColorType.BLANK
        assert get_cash_sdebt_color(value, False, INDUSTRY, thresholds) == ColorType.BLANK
        assert get_current_ratio_color(value, INDUSTRY, thresholds) == ColorType.BLANK

    @pytest.mark.parametrize("value", NON_FINITE)
    def test_div_zero_still_wins(self, thresholds, value):
        """The division-by-zero flag beats a non-finite Cash/SDebt."""
        assert get_cash_sdebt_color(value, True, INDUSTRY, thresholds) == ColorType.GREEN

    @pytest.mark.parametrize("value", NON_FINITE)
    def test_static_metrics(self, value):
        """Static-threshold metrics are BLANK."""
        assert get_munger_quality_score_color(value) == ColorType.BLANK
        assert get_value_creation_color(value) == ColorType.BLANK
        assert get_pe_percentage_color(value) == ColorType.BLANK
        assert get_tb_s_price_color(value) == ColorType.BLANK

    @pytest.mark.parametrize("value", NON_FINITE)
    def test_sma(self, value):
        """A non-finite price or SMA is BLANK."""
        assert get_sma_color(value, 100) == ColorType.BLANK
        assert get_sma_color(100, value) == ColorType.BLANK

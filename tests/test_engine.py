"""Unit tests for the BMI engine."""

import pytest

from src.bmi import (
    KG_PER_LB,
    CM_PER_INCH,
    Category,
    round2,
    cm_to_meters,
    lb_to_kg,
    kg_to_lb,
    cm_to_inches,
    inches_to_cm,
    inches_to_meters,
    compute_bmi,
    categorize,
    healthy_weight_range_kg,
)


class TestConversions:
    """Test unit conversions."""

    def test_constants_are_exact(self):
        """Test conversion constants match their legal definitions."""
        assert KG_PER_LB == 0.45359237
        assert CM_PER_INCH == 2.54

    @pytest.mark.parametrize("height_cm", [100, 175, 182.5, 250])
    def test_cm_to_meters(self, height_cm):
        """Test cm to meters is a plain division by 100."""
        assert cm_to_meters(height_cm) == height_cm / 100

    def test_lb_to_kg(self):
        """Test lb to kg conversion."""
        assert lb_to_kg(1) == 0.45359237
        assert lb_to_kg(154) == pytest.approx(69.85322498)

    @pytest.mark.parametrize("weight_lb", [44, 100.5, 154, 660])
    def test_lb_kg_round_trip(self, weight_lb):
        """Test kg_to_lb inverts lb_to_kg."""
        assert kg_to_lb(lb_to_kg(weight_lb)) == pytest.approx(weight_lb)

    def test_cm_inches_round_trip(self):
        """Test cm_to_inches inverts inches_to_cm."""
        assert cm_to_inches(2.54) == 1
        assert inches_to_cm(cm_to_inches(175)) == pytest.approx(175)

    def test_inches_to_meters(self):
        """Test inches to meters conversion."""
        assert inches_to_meters(69) == pytest.approx(1.7526)


class TestRounding:
    """Test two-decimal rounding."""

    def test_round_half_up(self):
        """Test halves round away from zero."""
        assert round2(0.125) == 0.13
        assert round2(56.65625) == 56.66

    def test_round_down(self):
        """Test values below the half round down."""
        assert round2(22.857142) == 22.86
        assert round2(1.7526) == 1.75

    def test_negative_rounds_away_from_zero(self):
        """Test negative halves round away from zero."""
        assert round2(-0.125) == -0.13

    def test_already_rounded(self):
        """Test values with two decimals are unchanged."""
        assert round2(69.85) == 69.85


class TestComputeBmi:
    """Test BMI formula."""

    def test_reference_value(self):
        """Test 70 kg at 1.75 m."""
        assert compute_bmi(70, 1.75) == 22.86

    def test_imperial_converted_inputs(self):
        """Test BMI from rounded imperial conversions."""
        assert compute_bmi(69.85, 1.75) == 22.81

    def test_result_has_two_decimals(self):
        """Test the result is rounded to two decimals."""
        bmi = compute_bmi(80, 1.8)
        assert bmi == 24.69
        assert round(bmi, 2) == bmi


class TestCategorize:
    """Test WHO category thresholds."""

    @pytest.mark.parametrize("bmi,expected", [
        (10.0, Category.UNDERWEIGHT),
        (18.49, Category.UNDERWEIGHT),
        (18.5, Category.NORMAL),
        (22.86, Category.NORMAL),
        (24.99, Category.NORMAL),
        (25.0, Category.OVERWEIGHT),
        (29.99, Category.OVERWEIGHT),
        (30.0, Category.OBESITY),
        (45.0, Category.OBESITY),
    ])
    def test_thresholds(self, bmi, expected):
        """Test each band includes its lower bound."""
        assert categorize(bmi) == expected

    def test_category_values(self):
        """Test category display strings."""
        assert categorize(18.5) == "Normal weight"
        assert categorize(18.49) == "Underweight"
        assert categorize(25.0) == "Overweight"
        assert categorize(30.0) == "Obesity"


class TestHealthyWeightRange:
    """Test healthy weight range."""

    def test_reference_height(self):
        """Test range at 1.75 m follows the literal formula."""
        assert healthy_weight_range_kg(1.75) == (56.66, 76.26)

    def test_range_is_ordered(self):
        """Test minimum is below maximum."""
        low, high = healthy_weight_range_kg(1.6)
        assert low < high
        assert (low, high) == (47.36, 63.74)

    def test_range_bmi_bounds(self):
        """Test range endpoints map back to the healthy BMI band."""
        low, high = healthy_weight_range_kg(1.8)
        assert compute_bmi(low, 1.8) == pytest.approx(18.5, abs=0.01)
        assert compute_bmi(high, 1.8) == pytest.approx(24.9, abs=0.01)

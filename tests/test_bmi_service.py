"""Tests for BmiService"""
from unittest.mock import patch

import pytest

from src.bmi import BmiResult, BmiService, Category
from src.normalization import NormalizedInput, parse_body


@pytest.fixture
def service():
    return BmiService()


class TestBmiService:
    """Test suite for BmiService"""

    def test_calculate_metric(self, service):
        """Test calculation for 70 kg at 1.75 m"""
        result = service.calculate(NormalizedInput(weight_kg=70, height_m=1.75))
        assert isinstance(result, BmiResult)
        assert result.bmi == 22.86
        assert result.category == Category.NORMAL
        assert result.healthy_range == (56.66, 76.26)

    def test_calculate_from_imperial_body(self, service):
        """Test calculation from a normalized imperial body"""
        normalized = parse_body(b'{"units": "imperial", "weight": 154, "height": 69}').value
        result = service.calculate(normalized)
        assert result.bmi == 22.81
        assert result.category == "Normal weight"

    def test_category_uses_rounded_bmi(self, service):
        """Test a raw BMI just under 25 that rounds to 25.0 is Overweight"""
        # 76.5624 / 1.75^2 = 24.99997 -> 25.0
        result = service.calculate(NormalizedInput(weight_kg=76.5624, height_m=1.75))
        assert result.bmi == 25.0
        assert result.category == Category.OVERWEIGHT

    def test_category_computed_once_from_rounded(self, service):
        """Test categorize receives the returned BMI value"""
        with patch("src.bmi.service.categorize", return_value=Category.OBESITY) as mock_categorize:
            result = service.calculate(NormalizedInput(weight_kg=70, height_m=1.75))
        mock_categorize.assert_called_once_with(22.86)
        assert result.category == Category.OBESITY

    def test_obesity(self, service):
        """Test heavy input classified as Obesity"""
        result = service.calculate(NormalizedInput(weight_kg=120, height_m=1.7))
        assert result.bmi == 41.52
        assert result.category == Category.OBESITY

    def test_underweight(self, service):
        """Test light input classified as Underweight"""
        result = service.calculate(NormalizedInput(weight_kg=45, height_m=1.75))
        assert result.bmi == 14.69
        assert result.category == Category.UNDERWEIGHT

    def test_notes(self, service):
        """Test WHO note"""
        assert service.notes == ["Adult BMI categories per WHO"]

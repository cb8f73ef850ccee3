"""Unit conversions and BMI arithmetic."""

import math
from enum import Enum
from typing import Tuple

# Exact by definition (international yard and pound agreement)
KG_PER_LB = 0.45359237
CM_PER_INCH = 2.54

UNDERWEIGHT_MAX = 18.5
NORMAL_MAX = 25.0
OVERWEIGHT_MAX = 30.0

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9


class Category(str, Enum):
    """WHO adult BMI category."""
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESITY = "Obesity"


def round2(n: float) -> float:
    """Round to 2 decimal places, halves away from zero.

    Operates on the value scaled by 100 so results match
    ``Math.round(n * 100) / 100`` for the positive values used here.
    """
    scaled = math.floor(abs(n) * 100 + 0.5)
    return math.copysign(scaled, n) / 100


def cm_to_meters(height_cm: float) -> float:
    return height_cm / 100


def lb_to_kg(weight_lb: float) -> float:
    return weight_lb * KG_PER_LB


def kg_to_lb(weight_kg: float) -> float:
    return weight_kg / KG_PER_LB


def cm_to_inches(height_cm: float) -> float:
    return height_cm / CM_PER_INCH


def inches_to_cm(height_in: float) -> float:
    return height_in * CM_PER_INCH


def inches_to_meters(height_in: float) -> float:
    return inches_to_cm(height_in) / 100


def compute_bmi(weight_kg: float, height_m: float) -> float:
    """Compute BMI rounded to 2 decimals.

    Args:
        weight_kg: Body weight in kilograms
        height_m: Height in meters

    Returns:
        weight / height², rounded with :func:`round2`
    """
    return round2(weight_kg / (height_m * height_m))


def categorize(bmi: float) -> Category:
    """Classify a BMI value. Each band includes its lower bound."""
    if bmi < UNDERWEIGHT_MAX:
        return Category.UNDERWEIGHT
    if bmi < NORMAL_MAX:
        return Category.NORMAL
    if bmi < OVERWEIGHT_MAX:
        return Category.OVERWEIGHT
    return Category.OBESITY


def healthy_weight_range_kg(height_m: float) -> Tuple[float, float]:
    """Weight interval (kg) whose BMI lies in [18.5, 24.9] for this height."""
    low = HEALTHY_BMI_MIN * height_m * height_m
    high = HEALTHY_BMI_MAX * height_m * height_m
    return (round2(low), round2(high))

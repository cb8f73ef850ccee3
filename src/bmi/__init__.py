"""BMI engine and calculation service."""

from .engine import (
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
from .service import BmiService, BmiResult

__all__ = [
    'KG_PER_LB',
    'CM_PER_INCH',
    'Category',
    'round2',
    'cm_to_meters',
    'lb_to_kg',
    'kg_to_lb',
    'cm_to_inches',
    'inches_to_cm',
    'inches_to_meters',
    'compute_bmi',
    'categorize',
    'healthy_weight_range_kg',
    'BmiService',
    'BmiResult',
]

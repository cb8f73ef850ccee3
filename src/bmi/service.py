"""BMI calculation service."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

from src.bmi.engine import Category, categorize, compute_bmi, healthy_weight_range_kg

if TYPE_CHECKING:
    from src.normalization.normalizer import NormalizedInput

logger = logging.getLogger(__name__)

WHO_NOTE = "Adult BMI categories per WHO"


@dataclass
class BmiResult:
    """Outcome of a single BMI calculation."""
    bmi: float
    category: Category
    healthy_range: Tuple[float, float]


class BmiService:
    """Composes the engine functions over a normalized input."""

    @property
    def notes(self) -> List[str]:
        return [WHO_NOTE]

    def calculate(self, normalized: "NormalizedInput") -> BmiResult:
        """Calculate BMI, category and healthy weight range.

        The category is derived from the rounded BMI so the value returned
        to the caller and its category always agree at band boundaries.

        Args:
            normalized: Validated input in kilograms and meters

        Returns:
            BmiResult
        """
        bmi = compute_bmi(normalized.weight_kg, normalized.height_m)
        category = categorize(bmi)
        healthy_range = healthy_weight_range_kg(normalized.height_m)

        logger.debug(
            f"BMI {bmi} ({category.value}) for {normalized.weight_kg} kg / "
            f"{normalized.height_m} m"
        )
        return BmiResult(bmi=bmi, category=category, healthy_range=healthy_range)

"""Input normalization and validation for BMI requests.

Raw input arrives in one of two shapes:

* ``QueryForm`` - string query parameters, either ``weight_kg``/``height_cm``
  or ``weight_lb``/``height_in``
* ``BodyForm`` - a JSON object ``{units, weight, height}``

Both are decoded, range checked in their original units and converted to
kilograms and meters. Failures are returned as values inside a
``NormalizationResult`` rather than raised.
"""

import json
import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt
from pydantic import ValidationError as SchemaError

from src.bmi.engine import cm_to_meters, inches_to_meters, lb_to_kg, round2

logger = logging.getLogger(__name__)

Units = Literal["metric", "imperial"]

MISSING_PAIR_MESSAGE = "Provide either (weight_kg,height_cm) or (weight_lb,height_in)"
INVALID_JSON_MESSAGE = "Invalid JSON body"
INVALID_UNITS_MESSAGE = 'Missing/invalid "units": "metric" | "imperial"'
NOT_NUMBERS_MESSAGE = '"weight" and "height" must be numbers'
NOT_FINITE_MESSAGE = "Inputs must be finite numbers"

# Plain decimal notation only: no digit separators, no non-ASCII digits
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class RangeLimit:
    """Inclusive bounds for one input field, in that field's own unit."""
    name: str
    minimum: int
    maximum: int

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


# units -> (weight limit, height limit)
LIMITS: Dict[str, Tuple[RangeLimit, RangeLimit]] = {
    "metric": (
        RangeLimit("weight_kg", 20, 300),
        RangeLimit("height_cm", 100, 250),
    ),
    "imperial": (
        RangeLimit("weight_lb", 44, 660),
        RangeLimit("height_in", 39, 98),
    ),
}


@dataclass(frozen=True)
class ValidationError:
    """A client error. Terminal for the request."""
    message: str
    kind: str = "bad_request"


@dataclass(frozen=True)
class NormalizedInput:
    """Request data in kilograms and meters."""
    weight_kg: float
    height_m: float
    inputs_echo: Dict[str, Union[int, float, str]] = field(default_factory=dict)


@dataclass(frozen=True)
class NormalizationResult:
    """Either a normalized input or a validation error, never both."""
    value: Optional[NormalizedInput] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: NormalizedInput) -> "NormalizationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> "NormalizationResult":
        logger.info(f"Rejected BMI input: {message}")
        return cls(error=ValidationError(message))


@dataclass(frozen=True)
class QueryForm:
    """Query-string input. Absent parameters are None."""
    weight_kg: Optional[str] = None
    height_cm: Optional[str] = None
    weight_lb: Optional[str] = None
    height_in: Optional[str] = None

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "QueryForm":
        return cls(
            weight_kg=params.get("weight_kg"),
            height_cm=params.get("height_cm"),
            weight_lb=params.get("weight_lb"),
            height_in=params.get("height_in"),
        )


class BodyForm(BaseModel):
    """JSON body input. Booleans and numeric strings are not numbers."""
    units: Units
    weight: Union[StrictInt, StrictFloat]
    height: Union[StrictInt, StrictFloat]

    model_config = ConfigDict(extra="ignore")


RawInput = Union[QueryForm, BodyForm]


class _Rejected(Exception):
    """Internal short-circuit, always converted to a NormalizationResult."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _as_float(value: Union[int, float]) -> float:
    try:
        return float(value)
    except OverflowError:
        # integers too large for a double
        return math.inf


def _parse_number(raw: str, name: str) -> float:
    text = raw.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise _Rejected(f"{name} must be a number")
    number = float(text)
    if not math.isfinite(number):
        raise _Rejected(f"{name} must be a number")
    return number


def _echo_number(value: float) -> Union[int, float]:
    return int(value) if value.is_integer() else value


def _check_ranges(units: str, weight: float, height: float) -> None:
    if not math.isfinite(weight) or not math.isfinite(height):
        raise _Rejected(NOT_FINITE_MESSAGE)

    weight_limit, height_limit = LIMITS[units]
    for limit, value in ((weight_limit, weight), (height_limit, height)):
        if not limit.contains(value):
            raise _Rejected(
                f"{limit.name} must be between {limit.minimum} and {limit.maximum}"
            )


def validate_ranges(units: str, weight: float, height: float) -> Optional[ValidationError]:
    """Check original-unit values against the limits for ``units``.

    Args:
        units: "metric" (kg, cm) or "imperial" (lb, in)
        weight: Weight in the given units
        height: Height in the given units

    Returns:
        None if the values are acceptable, otherwise the ValidationError
    """
    try:
        _check_ranges(units, weight, height)
    except _Rejected as e:
        return ValidationError(e.message)
    return None


def _convert(units: str, weight: float, height: float, echo_weight: Any, echo_height: Any) -> NormalizedInput:
    weight_limit, height_limit = LIMITS[units]
    echo = {weight_limit.name: echo_weight, height_limit.name: echo_height, "units": units}

    if units == "metric":
        return NormalizedInput(
            weight_kg=weight,
            height_m=cm_to_meters(height),
            inputs_echo=echo,
        )

    return NormalizedInput(
        weight_kg=round2(lb_to_kg(weight)),
        height_m=round2(inches_to_meters(height)),
        inputs_echo=echo,
    )


def _normalize_query(form: QueryForm) -> NormalizedInput:
    if form.weight_kg and form.height_cm:
        units = "metric"
        weight = _parse_number(form.weight_kg, "weight_kg")
        height = _parse_number(form.height_cm, "height_cm")
    elif form.weight_lb and form.height_in:
        units = "imperial"
        weight = _parse_number(form.weight_lb, "weight_lb")
        height = _parse_number(form.height_in, "height_in")
    else:
        raise _Rejected(MISSING_PAIR_MESSAGE)

    _check_ranges(units, weight, height)
    return _convert(units, weight, height, _echo_number(weight), _echo_number(height))


def _normalize_body(form: BodyForm) -> NormalizedInput:
    weight = _as_float(form.weight)
    height = _as_float(form.height)
    _check_ranges(form.units, weight, height)
    return _convert(form.units, weight, height, form.weight, form.height)


def normalize(raw: RawInput) -> NormalizationResult:
    """Validate and convert a decoded input to kilograms and meters.

    Args:
        raw: QueryForm or BodyForm

    Returns:
        NormalizationResult holding a NormalizedInput or a ValidationError
    """
    try:
        if isinstance(raw, QueryForm):
            normalized = _normalize_query(raw)
        elif isinstance(raw, BodyForm):
            normalized = _normalize_body(raw)
        else:
            raise TypeError(f"Unsupported input type: {type(raw).__name__}")
    except _Rejected as e:
        return NormalizationResult.failure(e.message)

    return NormalizationResult.success(normalized)


def parse_query(params: Mapping[str, str]) -> NormalizationResult:
    """Normalize query-string parameters.

    The metric pair takes precedence when both pairs are supplied.

    Args:
        params: Mapping of query parameter names to raw string values

    Returns:
        NormalizationResult
    """
    return normalize(QueryForm.from_params(params))


def _reject_constant(token: str) -> float:
    # NaN and Infinity are not valid JSON
    raise ValueError(f"Unsupported JSON constant: {token}")


def decode_body(payload: Union[bytes, str]) -> Union[BodyForm, ValidationError]:
    """Decode a JSON payload into a BodyForm.

    Errors are reported in order: malformed JSON, then units, then the
    numeric fields.
    """
    try:
        data = json.loads(payload, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return ValidationError(INVALID_JSON_MESSAGE)

    try:
        return BodyForm.model_validate(data)
    except SchemaError as e:
        locations = [err["loc"][:1] for err in e.errors()]
        if () in locations or ("units",) in locations:
            return ValidationError(INVALID_UNITS_MESSAGE)
        return ValidationError(NOT_NUMBERS_MESSAGE)


def parse_body(payload: Union[bytes, str]) -> NormalizationResult:
    """Normalize a JSON request body.

    Args:
        payload: Raw request body

    Returns:
        NormalizationResult
    """
    decoded = decode_body(payload)
    if isinstance(decoded, ValidationError):
        return NormalizationResult.failure(decoded.message)
    return normalize(decoded)

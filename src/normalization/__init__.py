"""Normalization module for BMI request inputs."""

from .normalizer import (
    LIMITS,
    RangeLimit,
    ValidationError,
    NormalizedInput,
    NormalizationResult,
    QueryForm,
    BodyForm,
    RawInput,
    normalize,
    parse_query,
    parse_body,
    decode_body,
    validate_ranges,
)

__all__ = [
    'LIMITS',
    'RangeLimit',
    'ValidationError',
    'NormalizedInput',
    'NormalizationResult',
    'QueryForm',
    'BodyForm',
    'RawInput',
    'normalize',
    'parse_query',
    'parse_body',
    'decode_body',
    'validate_ranges',
]

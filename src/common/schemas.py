"""Pydantic schemas for API responses"""
from typing import Dict, List, Tuple, Union

from pydantic import BaseModel, Field

from src.bmi.engine import Category


class BmiResponse(BaseModel):
    """BMI calculation response"""
    bmi: float
    category: Category
    inputs: Dict[str, Union[int, float, str]]
    healthy_weight_range_kg: Tuple[float, float]
    notes: List[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Standard error response"""
    error: str


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "ok"

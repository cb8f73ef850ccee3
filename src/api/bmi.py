"""API endpoints for BMI calculation."""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.requests import ClientDisconnect

from src.bmi import BmiService
from src.common.schemas import BmiResponse, ErrorResponse
from src.normalization import NormalizationResult, parse_body, parse_query
from src.normalization.normalizer import INVALID_JSON_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["bmi"])

BMI_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid or out-of-range input"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}


def get_bmi_service() -> BmiService:
    """Get BMI service instance."""
    return BmiService()


def build_response(result: NormalizationResult, service: BmiService):
    """Map a normalization result to a 400 error or a BMI response.

    Args:
        result: Output of the normalizer
        service: BmiService instance

    Returns:
        JSONResponse with status 400, or BmiResponse
    """
    if not result.ok:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=result.error.message).model_dump(),
        )

    normalized = result.value
    calculation = service.calculate(normalized)
    return BmiResponse(
        bmi=calculation.bmi,
        category=calculation.category,
        inputs=normalized.inputs_echo,
        healthy_weight_range_kg=calculation.healthy_range,
        notes=service.notes,
    )


@router.get(
    "/bmi",
    response_model=BmiResponse,
    responses=BMI_RESPONSES,
    summary="Calculate BMI from query parameters",
    description=(
        "Supply either weight_kg and height_cm, or weight_lb and height_in. "
        "The metric pair wins when both are present."
    ),
)
async def calculate_bmi_from_query(
    request: Request,
    service: BmiService = Depends(get_bmi_service),
):
    result = parse_query(request.query_params)
    return build_response(result, service)


@router.post(
    "/bmi",
    response_model=BmiResponse,
    responses=BMI_RESPONSES,
    summary="Calculate BMI from a JSON body",
    description='Body: {"units": "metric" | "imperial", "weight": number, "height": number}',
)
async def calculate_bmi_from_body(
    request: Request,
    service: BmiService = Depends(get_bmi_service),
):
    try:
        payload = await request.body()
    except ClientDisconnect:
        logger.warning("Client disconnected before the request body was read")
        return build_response(NormalizationResult.failure(INVALID_JSON_MESSAGE), service)

    result = parse_body(payload)
    return build_response(result, service)

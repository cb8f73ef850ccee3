"""BMI Calculator API - Main Application"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.bmi import router as bmi_router
from src.api.pages import router as pages_router
from src.common.config import settings
from src.common.schemas import ErrorResponse, HealthResponse

logging.basicConfig(
    level=settings.app.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="BMI Calculator API",
    description="BMI calculation with WHO categories and healthy weight ranges",
    version=settings.app.version,
    debug=settings.app.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.app.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(bmi_router)
app.include_router(pages_router)


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    message = str(exc) or "Internal error"
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse()

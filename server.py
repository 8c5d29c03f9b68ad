"""
Creciendo Sano Web Server

FastAPI-based API for the child BMI estimator.
"""

import logging
import math
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field, field_validator

from creciendo import __version__
from creciendo.config import get_config
from creciendo.engines import BMIEstimator, coerce_gender
from creciendo.exporters import export_markdown, export_text
from creciendo.logging_config import setup_logging
from creciendo.models import Gender, Language, PercentileBand, Result
from knowledge.growth import MAX_AGE, MIN_AGE, get_reference, get_reference_curve

setup_logging()
logger = logging.getLogger(__name__)

config = get_config()

# Create FastAPI app
app = FastAPI(
    title="Creciendo Sano",
    description="Creciendo Sano - Child BMI Estimator API",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

estimator = BMIEstimator(language=config.language)


# Request/Response models
class EstimateRequest(BaseModel):
    """Request model for a BMI estimate."""
    age: int = Field(..., ge=0, le=120, description="Child age in whole years")
    gender: Gender = Field(..., description="Child gender (boy/girl)")
    height_cm: float = Field(..., gt=0, allow_inf_nan=False, description="Height in centimeters")
    weight_kg: float = Field(..., gt=0, allow_inf_nan=False, description="Weight in kilograms")
    language: Optional[Language] = Field(None, description="Language for status and advice (en/es)")

    @field_validator("gender", mode="before")
    @classmethod
    def _normalize_gender(cls, value):
        return coerce_gender(value)


class GrowthCurve(BaseModel):
    """Reference bands for one gender, for charting."""
    gender: Gender
    ages: list[int]
    curve: list[PercentileBand]


@app.exception_handler(RequestValidationError)
async def log_validation_error(request: Request, exc: RequestValidationError):
    """Log rejected input, then return a 422 listing the errors."""
    fields = sorted({".".join(str(p) for p in err["loc"][1:]) or err["loc"][0] for err in exc.errors()})
    logger.warning("Rejected %s %s: invalid %s", request.method, request.url.path, ", ".join(fields))
    return JSONResponse(
        status_code=422,
        content={"detail": _json_safe(jsonable_encoder(exc.errors()))},
    )


def _json_safe(value):
    """Replace Infinity/NaN (echoed back from rejected bodies) with strings."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


def _run_estimate(
    age: int,
    gender: Gender,
    height_cm: float,
    weight_kg: float,
    language: Optional[Language],
) -> Result:
    """Run the estimator, reporting unusable measurements as 422."""
    try:
        return estimator.estimate(age, gender, height_cm, weight_kg, language)
    except ValueError as e:
        logger.warning("Rejected estimate: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


# Routes
@app.get("/", response_class=HTMLResponse)
async def root():
    """Landing page pointing at the API docs."""
    return HTMLResponse(
        content="<h1>Creciendo Sano API</h1><p>Use /docs for API documentation.</p>"
    )


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@app.post("/api/bmi", response_model=Result)
async def estimate_bmi(request: EstimateRequest):
    """
    Estimate a child's BMI and classify it against the reference band.

    Ages outside 2-17 still get a BMI but are returned unclassified.
    """
    result = _run_estimate(
        request.age,
        request.gender,
        request.height_cm,
        request.weight_kg,
        request.language,
    )
    logger.info(
        "BMI estimate: %s age %d -> %s",
        result.gender.value, result.age, result.classification.value,
    )
    return result


@app.get("/api/bmi/summary")
async def estimate_summary(
    age: int = Query(..., ge=0, le=120),
    gender: Gender = Query(...),
    height_cm: float = Query(..., gt=0, allow_inf_nan=False),
    weight_kg: float = Query(..., gt=0, allow_inf_nan=False),
    language: Optional[Language] = Query(None),
    format: str = Query("text", pattern="^(text|markdown)$"),
):
    """
    Get a printable summary of an estimate.

    Supports two output formats: text, markdown.
    """
    result = _run_estimate(age, gender, height_cm, weight_kg, language)
    if format == "markdown":
        return {"markdown": export_markdown(result)}
    return {"text": export_text(result)}


@app.get("/api/growth/{gender}", response_model=GrowthCurve)
async def growth_curve(gender: Gender):
    """Get the healthy BMI band for every covered age, for charting."""
    curve = get_reference_curve(gender.value)
    return GrowthCurve(
        gender=gender,
        ages=[MIN_AGE, MAX_AGE],
        curve=[PercentileBand.from_entry(entry) for entry in curve],
    )


@app.get("/api/growth/{gender}/{age}", response_model=PercentileBand)
async def growth_band(gender: Gender, age: int):
    """Get the healthy BMI band for a single age."""
    entry = get_reference(gender.value, age)
    if entry is None:
        raise HTTPException(
            status_code=404,
            detail=f"No reference band for age {age} (covered ages: {MIN_AGE}-{MAX_AGE})",
        )
    return PercentileBand.from_entry(entry)


def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """Run the server."""
    import uvicorn
    uvicorn.run(app, host=host or config.host, port=port or config.port)


if __name__ == "__main__":
    run_server()

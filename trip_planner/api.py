"""FastAPI application exposing the travel plan generator."""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config import get_settings
from .errors import (
    BackendError,
    MalformedResponseError,
    TransportError,
    TravelPlanError,
    ValidationError,
)
from .models import TripRequest, travel_plan_to_dict
from .planner import create_travel_plan


logger = logging.getLogger(__name__)

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

ERROR_STATUS = {
    ValidationError: 400,
    BackendError: 502,
    MalformedResponseError: 502,
    TransportError: 503,
}


app = FastAPI(title="Trip Planner", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class TravelPlanPayload(BaseModel):
    source: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    start_date: str = Field(..., pattern=ISO_DATE_PATTERN)
    end_date: str = Field(..., pattern=ISO_DATE_PATTERN)
    budget: str = ""
    travelers: int = Field(1, ge=1, le=20)
    interests: str = ""


def _error_detail(exc: TravelPlanError) -> Dict[str, Any]:
    detail: Dict[str, Any] = {"kind": exc.kind, "message": exc.user_message()}
    if isinstance(exc, ValidationError):
        detail["missing_fields"] = exc.missing_fields
    if isinstance(exc, BackendError):
        detail["upstream_status"] = exc.status_code
    return detail


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/travel-plan")
async def create_plan(
    payload: TravelPlanPayload,
    x_gemini_api_key: Optional[str] = Header(default=None),
) -> Dict[str, Any]:
    req = TripRequest(
        origin=payload.source,
        destination=payload.destination,
        start_date=payload.start_date,
        end_date=payload.end_date,
        budget=payload.budget,
        travelers_count=payload.travelers,
        interests=payload.interests,
        api_key=x_gemini_api_key,
    )
    try:
        plan = await create_travel_plan(req)
    except TravelPlanError as exc:
        status_code = ERROR_STATUS.get(type(exc), 500)
        logger.info("Travel plan request failed with %s", exc.kind)
        raise HTTPException(status_code=status_code, detail=_error_detail(exc)) from exc
    return travel_plan_to_dict(plan)

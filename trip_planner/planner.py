"""Core orchestration logic for generating travel plans."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import Settings, get_settings
from .errors import ValidationError
from .llm import generate_content
from .models import TravelPlan, TripRequest
from .prompts import build_travel_prompt
from .utils import missing_fields


logger = logging.getLogger(__name__)


def resolve_api_key(request: TripRequest, settings: Settings) -> Optional[str]:
    return request.api_key or settings.gemini_api_key


def validate_trip_request(request: TripRequest, api_key: Optional[str]) -> None:
    missing = missing_fields(
        {
            "origin": request.origin,
            "destination": request.destination,
            "start_date": request.start_date,
            "end_date": request.end_date,
            "api_key": api_key,
        }
    )
    if missing:
        raise ValidationError(missing)


async def generate_travel_plan(
    request: TripRequest,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Build the itinerary prompt for ``request`` and return Gemini's text.

    Raises ``ValidationError`` before touching the network when a required
    field or the credential is blank. Backend, transport and response-shape
    failures propagate from :func:`trip_planner.llm.generate_content`.
    """

    settings = settings or get_settings()
    api_key = resolve_api_key(request, settings)
    validate_trip_request(request, api_key)

    prompt = build_travel_prompt(request)
    logger.info(
        "Generating travel plan %s -> %s (%s to %s)",
        request.origin,
        request.destination,
        request.start_date,
        request.end_date,
    )
    return await generate_content(prompt, api_key, settings=settings, client=client)


async def create_travel_plan(
    request: TripRequest,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> TravelPlan:
    settings = settings or get_settings()
    text = await generate_travel_plan(request, settings=settings, client=client)
    return TravelPlan(request=request, text=text, model=settings.gemini_model)

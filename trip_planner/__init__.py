"""Trip planner: turns trip parameters into a Gemini-generated itinerary."""

from .errors import (
    BackendError,
    MalformedResponseError,
    TransportError,
    TravelPlanError,
    ValidationError,
)
from .models import GenerationConfig, TravelPlan, TripRequest
from .planner import create_travel_plan, generate_travel_plan

__all__ = [
    "BackendError",
    "GenerationConfig",
    "MalformedResponseError",
    "TransportError",
    "TravelPlan",
    "TravelPlanError",
    "TripRequest",
    "ValidationError",
    "create_travel_plan",
    "generate_travel_plan",
]

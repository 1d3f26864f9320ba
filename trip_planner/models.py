"""Core data models for the trip planner."""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional


TEMPERATURE = 0.7
TOP_K = 40
TOP_P = 0.95
MAX_OUTPUT_TOKENS = 8192


@dataclass
class TripRequest:
    origin: str
    destination: str
    start_date: str
    end_date: str
    budget: str = ""
    travelers_count: int = 1
    interests: str = ""
    api_key: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class GenerationConfig:
    temperature: float = TEMPERATURE
    top_k: int = TOP_K
    top_p: float = TOP_P
    max_output_tokens: int = MAX_OUTPUT_TOKENS

    def to_payload(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
        }


DEFAULT_GENERATION_CONFIG = GenerationConfig()


@dataclass
class TravelPlan:
    request: TripRequest
    text: str
    model: str


def travel_plan_to_dict(plan: TravelPlan) -> Dict[str, Any]:
    """Convenience helper for serializing travel plans in APIs.

    The credential is dropped so it never leaves the process in a response.
    """

    data = asdict(plan)
    data["request"].pop("api_key", None)
    return data

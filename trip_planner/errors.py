"""Error taxonomy for travel plan generation."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional


GENERIC_FAILURE_MESSAGE = (
    "Failed to generate travel plan. Please check your API key and try again."
)
MISSING_FIELDS_MESSAGE = "Please fill in all required fields."


class TravelPlanError(RuntimeError):
    """Base class for every failure raised while generating a plan."""

    kind = "travel_plan_error"

    def user_message(self) -> str:
        return GENERIC_FAILURE_MESSAGE


class ValidationError(TravelPlanError, ValueError):
    """Raised before any network call when required inputs are blank or unusable."""

    kind = "validation_error"

    def __init__(self, missing_fields: Iterable[str], message: Optional[str] = None):
        self.missing_fields: List[str] = list(missing_fields)
        self.detail = message
        super().__init__(message or f"Missing required fields: {', '.join(self.missing_fields)}")

    def user_message(self) -> str:
        if self.detail:
            return GENERIC_FAILURE_MESSAGE
        return MISSING_FIELDS_MESSAGE


class BackendError(TravelPlanError):
    """Raised when the generation backend answers with a non-2xx status."""

    kind = "backend_error"

    def __init__(self, status_code: int, payload: Any = None):
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"API request failed: {status_code}")


class MalformedResponseError(TravelPlanError):
    """Raised when a successful response lacks the generated text."""

    kind = "malformed_response"

    def __init__(self, message: str = "Invalid response format from Gemini API", payload: Optional[Any] = None):
        self.payload = payload
        super().__init__(message)


class TransportError(TravelPlanError):
    """Raised on network-level failures (DNS, refused connection, TLS, timeouts)."""

    kind = "transport_error"

"""Simple CLI entry to exercise the travel plan generator."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from trip_planner import TravelPlanError, TripRequest, generate_travel_plan


def load_trip_request(path: Path) -> TripRequest:
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    try:
        return TripRequest(**data)
    except TypeError as exc:
        raise ValueError(str(exc)) from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a travel plan from a JSON request.")
    parser.add_argument("request_file", type=Path, help="Path to a JSON file describing the trip request")
    parser.add_argument("--api-key", help="Gemini API key (defaults to GEMINI_API_KEY)")
    parser.add_argument("--output", type=Path, help="Optional path to save the itinerary text")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        trip_request = load_trip_request(args.request_file)
    except (OSError, ValueError) as exc:
        parser.error(f"invalid trip request {args.request_file}: {exc}")
    if args.api_key:
        trip_request.api_key = args.api_key

    try:
        text = asyncio.run(generate_travel_plan(trip_request))
    except TravelPlanError as exc:
        print(f"{exc.user_message()} ({exc})", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.output:
        args.output.write_text(text)
        print(f"Travel plan saved to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    main()

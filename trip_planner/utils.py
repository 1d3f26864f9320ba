"""Utility helpers."""

from typing import Dict, List, Optional


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def missing_fields(values: Dict[str, Optional[str]]) -> List[str]:
    """Return the names whose values are empty or whitespace only, in order."""

    return [name for name, value in values.items() if is_blank(value)]


def mask_secret(secret: Optional[str], visible: int = 4) -> str:
    """Return a log-safe rendering like '****abcd' for an API key."""

    if not secret:
        return "<none>"
    if len(secret) <= visible:
        return "*" * len(secret)
    return "*" * (len(secret) - visible) + secret[-visible:]

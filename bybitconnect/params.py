"""Checks on request parameters before they are sent."""

from __future__ import annotations

from typing import Any, Mapping


def validate_params(params: Mapping[str, Any] | None) -> None:
    """Raise ``ValueError`` if a key is empty or a value is missing."""
    for key, value in (params or {}).items():
        if key == "":
            raise ValueError("empty key found in parameters")
        if value is None:
            raise ValueError(f"parameter for key '{key}' is nil")
"""HTTP status code resolution for problem responses."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi import status

# Informational (1xx) codes are interim responses and cannot carry a problem body.
_FINAL_STATUS_CODES = frozenset(code.value for code in HTTPStatus if code.value >= status.HTTP_200_OK)


def is_defined_status(value: Any) -> bool:
    """Return whether ``value`` is a defined, final (non-1xx) HTTP status code."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in _FINAL_STATUS_CODES


def resolve_status_code(value: Any) -> int:
    """Return ``value`` when it is a defined final status code, 500 otherwise."""
    if is_defined_status(value):
        return int(value)
    return status.HTTP_500_INTERNAL_SERVER_ERROR

"""Problem media type selection."""

from __future__ import annotations

from collections.abc import Collection

PROBLEM_JSON = "application/problem+json"
PROBLEM_XML = "application/problem+xml"

_XML_SIGNAL = "application/xml"
_JSON_MEDIA_TYPE = "application/json"


def select_problem_media_type(header_keys: Collection[str], accept: Collection[str]) -> str:
    """Pick the problem media type for a request.

    XML is chosen only when ``application/xml`` appears among the request's
    header keys and ``application/json`` is not an accepted media type. Every
    other combination falls back to JSON.
    """
    if _XML_SIGNAL in header_keys and _JSON_MEDIA_TYPE not in accept:
        return PROBLEM_XML
    return PROBLEM_JSON

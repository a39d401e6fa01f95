"""Serialization of problem details into response bodies."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from starlette.background import BackgroundTask
from starlette.responses import Response

from problem_details.core.finalizer import FinalizedResponse
from problem_details.core.negotiation import PROBLEM_JSON
from problem_details.core.negotiation import PROBLEM_XML
from problem_details.schemas.problem import ProblemDetails

PROBLEM_XML_NAMESPACE = "urn:ietf:rfc:7807"

_XML_FIELDS = ("type", "title", "status", "detail", "instance")

# Complement of the XML 1.0 Char production; lone surrogates included.
_XML_INVALID_CHARS = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
_REPLACEMENT_CHAR = "\ufffd"


class UnsupportedMediaTypeError(ValueError):
    """Raised when a problem is rendered for a media type with no serializer."""


def render_problem(problem: ProblemDetails, media_type: str) -> bytes:
    """Serialize ``problem`` for ``media_type``."""
    if media_type == PROBLEM_JSON:
        return problem.model_dump_json().encode("utf-8")
    if media_type == PROBLEM_XML:
        return _render_xml(problem)
    raise UnsupportedMediaTypeError(f"No problem serializer for media type {media_type!r}")


def xml_safe_text(value: str) -> str:
    """Replace characters that cannot appear in an XML 1.0 document."""
    return _XML_INVALID_CHARS.sub(_REPLACEMENT_CHAR, value)


def _render_xml(problem: ProblemDetails) -> bytes:
    root = ET.Element("problem", xmlns=PROBLEM_XML_NAMESPACE)
    values = problem.model_dump()
    for name in _XML_FIELDS:
        ET.SubElement(root, name).text = xml_safe_text(str(values[name]))
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


class ProblemResponse(Response):
    """Response carrying a rendered problem with its finalized shape."""

    def __init__(
        self,
        problem: ProblemDetails,
        finalized: FinalizedResponse,
        headers: dict[str, str] | None = None,
        background: BackgroundTask | None = None,
    ) -> None:
        self.problem = problem
        super().__init__(
            content=render_problem(problem, finalized.content_type),
            status_code=finalized.status_code,
            headers=headers,
            media_type=finalized.content_type,
            background=background,
        )

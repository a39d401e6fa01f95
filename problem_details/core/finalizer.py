"""Response shape selection for mapped problems."""

from __future__ import annotations

from dataclasses import dataclass

from problem_details.core.context import RequestContext
from problem_details.core.negotiation import select_problem_media_type
from problem_details.core.status import resolve_status_code
from problem_details.schemas.problem import ProblemDetails


@dataclass(frozen=True)
class FinalizedResponse:
    """Content type and status code to apply to the outgoing response."""

    content_type: str
    status_code: int


class ResponseFinalizer:
    """Choose the media type and a valid status code for a problem response."""

    def finalize(self, context: RequestContext, problem: ProblemDetails) -> FinalizedResponse:
        return FinalizedResponse(
            content_type=select_problem_media_type(context.header_keys, context.accept),
            status_code=resolve_status_code(problem.status),
        )

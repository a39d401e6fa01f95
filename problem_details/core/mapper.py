"""Exception to problem details mapping."""

from __future__ import annotations

import logging

from fastapi import status

from problem_details.core.context import RequestContext
from problem_details.core.errors import StructuredFailure
from problem_details.core.errors import UnstructuredFailure
from problem_details.core.errors import classify_failure
from problem_details.core.observers import NO_OP_OBSERVER
from problem_details.core.observers import ProblemObserver
from problem_details.schemas.problem import ProblemDetails

logger = logging.getLogger(__name__)

GENERIC_TITLE = "An error occurred while processing your request."


def describe_failure(kind: str, message: str) -> str:
    """Build the ``detail`` text for an unclassified error."""
    if message and not message.isspace():
        return f"{kind} - '{message}'."
    return f"{kind} - No Message."


class ProblemMapper:
    """Translate errors raised during request processing into problem details.

    Errors carrying their own payload (``HttpProblemDetailsError``) are passed
    through untouched. Anything else becomes a generic 500 problem whose
    ``type`` and ``instance`` are the request URL.
    """

    def __init__(self, observer: ProblemObserver = NO_OP_OBSERVER) -> None:
        self._observer = observer

    @property
    def observer(self) -> ProblemObserver:
        return self._observer

    def map_error(self, context: RequestContext, error: BaseException) -> ProblemDetails:
        """Return the problem details for ``error``; never raises."""
        failure = classify_failure(error)
        if isinstance(failure, StructuredFailure):
            problem = failure.problem_details
        else:
            problem = self._synthesize(context, failure)

        self._notify(context, error, problem)
        return problem

    def _synthesize(self, context: RequestContext, failure: UnstructuredFailure) -> ProblemDetails:
        return ProblemDetails(
            type=context.url,
            title=GENERIC_TITLE,
            detail=describe_failure(failure.kind, failure.message),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            instance=context.url,
        )

    def _notify(self, context: RequestContext, error: BaseException, problem: ProblemDetails) -> None:
        try:
            self._observer(context, error, problem)
        except Exception:
            logger.exception("Problem observer %r failed for %s", self._observer, context.url)

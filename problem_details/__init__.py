"""Translate unhandled request errors into RFC 7807 problem details responses."""

from problem_details.api.handlers import register_problem_handlers
from problem_details.core.context import RequestContext
from problem_details.core.errors import HttpProblemDetailsError
from problem_details.core.finalizer import FinalizedResponse
from problem_details.core.finalizer import ResponseFinalizer
from problem_details.core.mapper import ProblemMapper
from problem_details.core.observers import NO_OP_OBSERVER
from problem_details.core.observers import LoggingObserver
from problem_details.core.observers import ProblemObserver
from problem_details.schemas.problem import ProblemDetails

__all__ = [
    "FinalizedResponse",
    "HttpProblemDetailsError",
    "LoggingObserver",
    "NO_OP_OBSERVER",
    "ProblemDetails",
    "ProblemMapper",
    "ProblemObserver",
    "RequestContext",
    "ResponseFinalizer",
    "register_problem_handlers",
]

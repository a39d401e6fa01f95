"""Problem details exception handler registration."""

from __future__ import annotations

from collections.abc import Awaitable
from collections.abc import Callable

from fastapi import FastAPI
from fastapi import Request

from problem_details.core.config import ProblemSettings
from problem_details.core.config import get_settings
from problem_details.core.context import RequestContext
from problem_details.core.errors import HttpProblemDetailsError
from problem_details.core.finalizer import ResponseFinalizer
from problem_details.core.mapper import ProblemMapper
from problem_details.core.observers import NO_OP_OBSERVER
from problem_details.core.observers import LoggingObserver
from problem_details.core.rendering import ProblemResponse


def build_default_mapper(settings: ProblemSettings | None = None) -> ProblemMapper:
    """Create a mapper whose observer follows the ``log_errors`` setting."""
    settings = settings or get_settings()
    if settings.log_errors:
        return ProblemMapper(observer=LoggingObserver())
    return ProblemMapper(observer=NO_OP_OBSERVER)


def build_problem_handler(
    mapper: ProblemMapper,
    finalizer: ResponseFinalizer,
) -> Callable[[Request, Exception], Awaitable[ProblemResponse]]:
    """Return an exception handler translating any error into a problem response."""

    async def problem_exception_handler(request: Request, exc: Exception) -> ProblemResponse:
        context = RequestContext.from_request(request)
        problem = mapper.map_error(context, exc)
        return ProblemResponse(problem, finalizer.finalize(context, problem))

    return problem_exception_handler


def register_problem_handlers(
    app: FastAPI,
    *,
    mapper: ProblemMapper | None = None,
    finalizer: ResponseFinalizer | None = None,
) -> None:
    """Attach problem details handlers to a FastAPI app instance."""

    handler = build_problem_handler(mapper or build_default_mapper(), finalizer or ResponseFinalizer())
    app.add_exception_handler(HttpProblemDetailsError, handler)
    app.add_exception_handler(Exception, handler)

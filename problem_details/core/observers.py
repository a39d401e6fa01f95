"""Observation hooks invoked after an error has been mapped to a problem."""

from __future__ import annotations

import logging
from typing import Protocol

from problem_details.core.context import RequestContext
from problem_details.schemas.problem import ProblemDetails


class ProblemObserver(Protocol):
    """Side-effect-only callback receiving each mapped error."""

    def __call__(self, context: RequestContext, error: BaseException, problem: ProblemDetails) -> None: ...


class NoOpObserver:
    """Observer used when no hook is configured."""

    def __call__(self, context: RequestContext, error: BaseException, problem: ProblemDetails) -> None:
        return None

    def __repr__(self) -> str:
        return "NoOpObserver()"


NO_OP_OBSERVER = NoOpObserver()


class LoggingObserver:
    """Log every mapped error together with its problem payload."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.ERROR) -> None:
        self._logger = logger or logging.getLogger("problem_details.errors")
        self._level = level

    def __call__(self, context: RequestContext, error: BaseException, problem: ProblemDetails) -> None:
        self._logger.log(
            self._level,
            "Failed to handle a request to %s; exception of type %s was thrown: %s",
            context.url,
            type(error).__name__,
            problem.detail,
            exc_info=(type(error), error, error.__traceback__),
            extra={"problem": problem.model_dump()},
        )

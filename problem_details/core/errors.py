"""Structured error type and failure classification for the problem mapper."""

from __future__ import annotations

from dataclasses import dataclass

from problem_details.schemas.problem import ProblemDetails


class HttpProblemDetailsError(Exception):
    """Error carrying a pre-built problem details payload used verbatim."""

    def __init__(self, problem_details: ProblemDetails) -> None:
        super().__init__(problem_details.detail)
        self.problem_details = problem_details

    @classmethod
    def build(
        cls,
        *,
        type: str,
        title: str,
        detail: str,
        status: int,
        instance: str,
    ) -> HttpProblemDetailsError:
        """Construct the error and its payload in one call."""
        return cls(ProblemDetails(type=type, title=title, detail=detail, status=status, instance=instance))


@dataclass(frozen=True)
class StructuredFailure:
    """A failure that already knows its problem details."""

    error: BaseException
    problem_details: ProblemDetails


@dataclass(frozen=True)
class UnstructuredFailure:
    """Any other failure; described only by its class name and message."""

    error: BaseException
    kind: str
    message: str


Failure = StructuredFailure | UnstructuredFailure


def classify_failure(error: BaseException) -> Failure:
    """Resolve a raised error into the structured or unstructured variant."""
    if isinstance(error, HttpProblemDetailsError):
        return StructuredFailure(error=error, problem_details=error.problem_details)
    return UnstructuredFailure(error=error, kind=type(error).__name__, message=_safe_message(error))


def _safe_message(error: BaseException) -> str:
    # str() runs arbitrary __str__ code; a broken one must not escape the mapper.
    try:
        return str(error)
    except Exception:
        return ""

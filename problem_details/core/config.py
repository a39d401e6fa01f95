"""Application configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_LOG_ERRORS = True
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SERVICE_NAME = "problem-details"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class ProblemSettings:
    """Runtime settings for the error translation layer."""

    log_errors: bool
    log_level: str
    service_name: str

    def safe_for_logging(self) -> dict[str, str | bool]:
        """Return settings safe for logs."""
        return {
            "log_errors": self.log_errors,
            "log_level": self.log_level,
            "service_name": self.service_name,
        }


@lru_cache(maxsize=1)
def get_settings() -> ProblemSettings:
    """Load settings from the environment."""
    return ProblemSettings(
        log_errors=_get_bool_env("PROBLEM_DETAILS_LOG_ERRORS", DEFAULT_LOG_ERRORS),
        log_level=os.getenv("PROBLEM_DETAILS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=os.getenv("PROBLEM_DETAILS_SERVICE_NAME", DEFAULT_SERVICE_NAME),
    )

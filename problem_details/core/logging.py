"""Logging setup for services serving problem details responses."""

from __future__ import annotations

import logging
import sys

from problem_details.core.config import ProblemSettings

HANDLER_NAME = "problem_details"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | {service} | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _format_for(service_name: str) -> str:
    return LOG_FORMAT.format(service=service_name.replace("%", "%%"))


def configure_logging(settings: ProblemSettings) -> logging.Handler:
    """Attach the service's stdout handler to the root logger and apply its level.

    Other root handlers are left in place, and calling this again reuses the
    handler it installed the first time.
    """
    root = logging.getLogger()
    handler = next((item for item in root.handlers if item.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)

    handler.setFormatter(logging.Formatter(_format_for(settings.service_name), datefmt=LOG_DATE_FORMAT))
    root.setLevel(getattr(logging, settings.log_level, logging.INFO))
    return handler

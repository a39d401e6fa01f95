"""Unit tests for mapped-error observers."""

from __future__ import annotations

import logging

import pytest

from problem_details.core.context import RequestContext
from problem_details.core.mapper import ProblemMapper
from problem_details.core.observers import NO_OP_OBSERVER
from problem_details.core.observers import LoggingObserver


def test_no_op_observer_returns_none() -> None:
    problem = ProblemMapper().map_error(RequestContext(url="/x"), RuntimeError("boom"))

    assert NO_OP_OBSERVER(RequestContext(url="/x"), RuntimeError("boom"), problem) is None


def test_logging_observer_logs_error_with_problem(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.observers")
    mapper = ProblemMapper(observer=LoggingObserver(logger=logger, level=logging.WARNING))

    with caplog.at_level(logging.WARNING, logger="tests.observers"):
        problem = mapper.map_error(RequestContext(url="/orders/42"), TimeoutError("upstream slow"))

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert "exception of type TimeoutError" in record.getMessage()
    assert "/orders/42" in record.getMessage()
    assert record.exc_info is not None
    assert record.problem == problem.model_dump()


def test_logging_observer_defaults_to_error_level(caplog: pytest.LogCaptureFixture) -> None:
    mapper = ProblemMapper(observer=LoggingObserver())

    with caplog.at_level(logging.ERROR, logger="problem_details.errors"):
        mapper.map_error(RequestContext(url="/x"), KeyError())

    assert [record.levelno for record in caplog.records] == [logging.ERROR]

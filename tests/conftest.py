"""
Pytest fixtures for the contract guards test suite.

Provides:
- Structured logging configured for every test session
- A ``captured_logs`` fixture returning contract_guards records as dicts
- A sample person schema/value pair covering every descriptor kind
"""

import json
import logging

import pytest

from contract_guards.logging_config import (
    ROOT_LOGGER_NAME,
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from contract_guards.structure import ANY, ConstructorMarker, InstanceMarker


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _structured_logging():
    """Route contract_guards records through the JSON formatter at DEBUG."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _empty_log_context():
    LogContext.clear()
    yield
    LogContext.clear()


class _RecordCollector(logging.Handler):
    """Keeps every record as the dict StructuredFormatter would emit."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.setFormatter(StructuredFormatter())
        self.records: list[dict] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(json.loads(self.format(record)))


@pytest.fixture
def captured_logs():
    """
    Collect contract_guards records as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            check_object_structure({"a": 1}, "obj", {"a": 0})
            assert captured_logs()[-1]["message"] == "structure_check_passed"
    """
    collector = _RecordCollector()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_level = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(collector)
    yield lambda: list(collector.records)
    logger.removeHandler(collector)
    logger.setLevel(saved_level)


# =============================================================================
# Sample classes
# =============================================================================


class Hobby:
    def __init__(self, name):
        self.name = name


class Money:
    def __init__(self, amount=0):
        self.amount = amount


@pytest.fixture
def person_schema():
    """Schema exercising every descriptor kind."""
    return {
        "name": "",
        "age": 0,
        "friends": [],
        "hair": {"color": ""},
        "hobby": InstanceMarker(Hobby),
        "make_money": ConstructorMarker(Money),
        "notes": ANY,
    }


@pytest.fixture
def person():
    return {
        "name": "Jack",
        "age": 30,
        "friends": ["John", "Ben"],
        "hair": {"color": "black"},
        "hobby": Hobby("tennis"),
        "make_money": Money,
        "notes": None,
    }

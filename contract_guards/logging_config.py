"""
Structured JSON logging for contract guards.

Every record under the ``contract_guards`` logger is rendered as one JSON
line: a fixed envelope (ts, level, logger, message), the active
``LogContext`` fields, any ``extra=`` fields, and, when an exception is
attached, its class, message, ``code`` and public attributes.

Guards only emit records; nothing is printed unless the application calls
``configure_logging`` or attaches its own handler.
"""

__all__ = [
    "ROOT_LOGGER_NAME",
    "StructuredFormatter",
    "LogContext",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import json
import logging
import sys
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, TextIO

ROOT_LOGGER_NAME = "contract_guards"

_EMPTY: Mapping[str, str] = MappingProxyType({})


# ---------------------------------------------------------------------------
# Call-scoped context
# ---------------------------------------------------------------------------


class LogContext:
    """
    Fields attached to every record emitted in the current context.

    Backed by a single ``ContextVar`` so values follow threads and asyncio
    tasks. Unknown field names passed to ``bind`` are ignored.
    """

    FIELDS = ("caller", "operation", "schema_name", "trace_id")

    _fields: ContextVar[Mapping[str, str]] = ContextVar(
        "contract_guards_log_fields", default=_EMPTY
    )

    @classmethod
    def _merged(cls, updates: Mapping[str, str | None]) -> Mapping[str, str]:
        fields = dict(cls._fields.get())
        for name, value in updates.items():
            if name in cls.FIELDS and value is not None:
                fields[name] = value
        return MappingProxyType(fields)

    @classmethod
    def set(
        cls,
        *,
        caller: str | None = None,
        operation: str | None = None,
        schema_name: str | None = None,
        trace_id: str | None = None,
    ) -> None:
        """Update the given fields; ``None`` leaves a field untouched."""
        cls._fields.set(
            cls._merged(
                {
                    "caller": caller,
                    "operation": operation,
                    "schema_name": schema_name,
                    "trace_id": trace_id,
                }
            )
        )

    @classmethod
    def get_all(cls) -> dict[str, str]:
        return dict(cls._fields.get())

    @classmethod
    def clear(cls) -> None:
        cls._fields.set(_EMPTY)

    @classmethod
    @contextmanager
    def bind(cls, **fields: str | None) -> Iterator[type["LogContext"]]:
        """Set fields for the duration of a ``with`` block."""
        token = cls._fields.set(cls._merged(fields))
        try:
            yield cls
        finally:
            cls._fields.reset(token)


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "taskName"}


class _JSONEncoder(json.JSONEncoder):
    """Enums by value, classes by name, Decimal as text; repr() otherwise."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, type):
            return obj.__qualname__
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, (set, frozenset)):
            return list(obj)
        return repr(obj)


class StructuredFormatter(logging.Formatter):
    """Render a record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = self._envelope(record)
        payload.update(LogContext.get_all())
        for key, value in self._extras(record):
            payload.setdefault(key, value)
        if record.exc_info and record.exc_info[1] is not None:
            payload.update(self._exception_fields(record.exc_info[1]))
            payload["traceback"] = self.formatException(record.exc_info)
        return json.dumps(payload, cls=_JSONEncoder)

    @staticmethod
    def _envelope(record: logging.LogRecord) -> dict[str, Any]:
        return {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

    @staticmethod
    def _extras(record: logging.LogRecord) -> Iterator[tuple[str, Any]]:
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS:
                yield key, value

    @staticmethod
    def _exception_fields(exc: BaseException) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "exc_type": type(exc).__name__,
            "exc_message": str(exc),
        }
        code = getattr(exc, "code", None)
        if code is not None:
            fields["exc_code"] = code
        # GuardError subclasses expose their context as public attributes.
        for name, value in vars(exc).items():
            if not name.startswith("_"):
                fields[f"exc_{name}"] = value
        return fields


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def get_logger(name: str) -> logging.Logger:
    """Return the ``contract_guards.<name>`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


_setup_lock = threading.Lock()
_setup_done = False


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: TextIO | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """
    Attach a JSON handler to the ``contract_guards`` logger.

    Only the first call has an effect. ``handler`` wins over ``stream``;
    with neither, records go to stderr.
    """
    global _setup_done
    with _setup_lock:
        if _setup_done:
            return

        if handler is None:
            handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())

        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(level)
        root.propagate = False
        root.addHandler(handler)
        _setup_done = True


def reset_logging() -> None:
    """Undo ``configure_logging``. Intended for tests."""
    global _setup_done
    with _setup_lock:
        _setup_done = False
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.WARNING)
    root.propagate = True

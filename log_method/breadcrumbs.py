"""
Breadcrumb recorders.

A breadcrumb is a small structured note (name, category, metadata) kept around
so a later fault report can show what the process was doing beforehand. The
host normally plugs in its error-reporting client; the in-memory recorder is
the default so breadcrumbs are never silently dropped.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Mapping, Protocol, runtime_checkable


LOG_BREADCRUMB_TYPE = "log"


@runtime_checkable
class BreadcrumbRecorder(Protocol):
    def leave_breadcrumb(self, name: str, metadata: Mapping[str, Any], category: str) -> None:
        ...


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Breadcrumb:
    name: str
    category: str
    metadata: Mapping[str, Any]
    timestamp: datetime = field(default_factory=_utc_now)


class InMemoryBreadcrumbRecorder:
    """
    Bounded ring buffer of breadcrumbs; the oldest entry is dropped once full.
    """

    def __init__(self, max_breadcrumbs: int = 25) -> None:
        if int(max_breadcrumbs) < 1:
            raise ValueError(f"max_breadcrumbs must be >= 1 (got {max_breadcrumbs})")
        self._max = int(max_breadcrumbs)
        self._lock = threading.Lock()
        self._buf: Deque[Breadcrumb] = deque(maxlen=self._max)

    @property
    def max_breadcrumbs(self) -> int:
        return self._max

    def leave_breadcrumb(self, name: str, metadata: Mapping[str, Any], category: str) -> None:
        crumb = Breadcrumb(name=str(name), category=str(category), metadata=dict(metadata or {}))
        with self._lock:
            self._buf.append(crumb)

    def snapshot(self) -> list[Breadcrumb]:
        with self._lock:
            return list(self._buf)

    def clear(self) -> None:
        with self._lock:
            self._buf.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buf)


class LoggingBreadcrumbRecorder:
    """
    Forward breadcrumbs to a stdlib logger as DEBUG records.

    Metadata travels in `extra`, so a structured formatter can pick it up.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def leave_breadcrumb(self, name: str, metadata: Mapping[str, Any], category: str) -> None:
        self._logger.debug(
            name,
            extra={
                "event_type": "breadcrumb",
                "breadcrumb_category": category,
                "breadcrumb_metadata": dict(metadata or {}),
            },
        )

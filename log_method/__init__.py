"""
Method-call logging mixin.

One call, one line: who logged (class + method), what it was about (subject),
who was acting (current actor), which request (trace id), and the message.
Each line is mirrored as a breadcrumb for later fault reports.
"""

from __future__ import annotations

from .breadcrumbs import (
    LOG_BREADCRUMB_TYPE,
    Breadcrumb,
    BreadcrumbRecorder,
    InMemoryBreadcrumbRecorder,
    LoggingBreadcrumbRecorder,
)
from .context import (
    bind_current_actor,
    bind_trace_id,
    get_current_actor_id,
    get_trace_id,
    set_current_actor_id,
    set_trace_id,
)
from .config import LogMethodConfig, configure, default_config, get_config, reset, use_config
from .event import LogEvent
from .log import Log, log_call
from .sinks import Sink, init_logging
from .subject import ExternalIdentifier, PlainObject, RecordIdentifier, resolve_subject

__all__ = [
    "LOG_BREADCRUMB_TYPE",
    "Breadcrumb",
    "BreadcrumbRecorder",
    "InMemoryBreadcrumbRecorder",
    "LoggingBreadcrumbRecorder",
    "bind_current_actor",
    "bind_trace_id",
    "get_current_actor_id",
    "get_trace_id",
    "set_current_actor_id",
    "set_trace_id",
    "LogMethodConfig",
    "configure",
    "default_config",
    "get_config",
    "reset",
    "use_config",
    "LogEvent",
    "Log",
    "log_call",
    "Sink",
    "init_logging",
    "ExternalIdentifier",
    "PlainObject",
    "RecordIdentifier",
    "resolve_subject",
]

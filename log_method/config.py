"""
Configuration for log_method.

There is one process-wide default configuration (`get_config()`), meant to be
set once at boot:

    from log_method import configure
    configure(current_actor_proc=lambda: current_user_id(), current_actor_id_label="user_id")

Code that needs different settings can hand a `LogMethodConfig` instance to
`log_call(..., config=cfg)`, set a `log_method_config` attribute on the host
object, or bind one for a scope with `use_config(cfg)`.

Mutating the process default while other threads are logging is not
synchronized; treat it as set-once.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, Optional

from log_method.breadcrumbs import BreadcrumbRecorder, InMemoryBreadcrumbRecorder
from log_method.settings import get_settings
from log_method.sinks import Sink, default_sink


logger = logging.getLogger(__name__)

IdProc = Callable[[], Optional[str]]
AfterLogProc = Callable[[str, str, Any, Optional[str], Optional[str], Optional[str]], Any]

_PROC_OPTIONS = frozenset({"trace_id_proc", "current_actor_proc", "after_log_proc"})


class LogMethodConfig:
    __slots__ = (
        "trace_id_proc",
        "current_actor_proc",
        "current_actor_id_label",
        "external_identifier_method",
        "after_log_proc",
        "sink",
        "breadcrumb_recorder",
    )

    def __init__(self, **options: Any) -> None:
        self.reset()
        if options:
            self.configure(**options)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _PROC_OPTIONS and value is not None and not callable(value):
            raise TypeError(f"{name} must be callable or None (got {type(value).__name__})")
        super().__setattr__(name, value)

    def reset(self) -> None:
        """
        Restore every option to its default (environment-seeded where applicable).
        """
        settings = get_settings()
        self.trace_id_proc: Optional[IdProc] = None
        self.current_actor_proc: Optional[IdProc] = None
        self.current_actor_id_label: str = settings.current_actor_id_label
        self.external_identifier_method: Optional[str] = settings.external_identifier_method
        self.after_log_proc: Optional[AfterLogProc] = None
        self.sink: Sink = default_sink()
        self.breadcrumb_recorder: BreadcrumbRecorder = InMemoryBreadcrumbRecorder(settings.max_breadcrumbs)

    def configure(self, **options: Any) -> "LogMethodConfig":
        unknown = sorted(set(options) - set(self.__slots__))
        if unknown:
            raise TypeError(f"Unknown log_method option(s): {', '.join(unknown)}")
        for name, value in options.items():
            setattr(self, name, value)
        return self

    def copy(self, **overrides: Any) -> "LogMethodConfig":
        out = LogMethodConfig.__new__(LogMethodConfig)
        for name in self.__slots__:
            object.__setattr__(out, name, getattr(self, name))
        return out.configure(**overrides)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.__slots__)
        return f"LogMethodConfig({fields})"


_default_config: Optional[LogMethodConfig] = None
_BOUND_CONFIG: ContextVar[Optional[LogMethodConfig]] = ContextVar("log_method_config", default=None)


def default_config() -> LogMethodConfig:
    """
    The process-wide configuration (created lazily on first use).
    """
    global _default_config
    if _default_config is None:
        _default_config = LogMethodConfig()
    return _default_config


def get_config() -> LogMethodConfig:
    """
    The configuration in effect here: a `use_config` binding, else the process default.
    """
    bound = _BOUND_CONFIG.get()
    if bound is not None:
        return bound
    return default_config()


def configure(**options: Any) -> LogMethodConfig:
    return default_config().configure(**options)


def reset() -> None:
    default_config().reset()
    logger.debug("log_method.config.reset")


@contextmanager
def use_config(config: LogMethodConfig) -> Iterator[LogMethodConfig]:
    if not isinstance(config, LogMethodConfig):
        raise TypeError(f"use_config expects a LogMethodConfig (got {type(config).__name__})")
    token = _BOUND_CONFIG.set(config)
    try:
        yield config
    finally:
        _BOUND_CONFIG.reset(token)

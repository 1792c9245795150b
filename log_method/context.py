"""
Context propagation for trace ids and the current actor.

Hosts that do not already carry these values can bind them here and wire the
getters straight into the configuration:

    from log_method import configure, get_current_actor_id, get_trace_id

    configure(trace_id_proc=get_trace_id, current_actor_proc=get_current_actor_id)

Values live in ContextVars, so each thread / asyncio task sees its own binding.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Optional


_TRACE_ID: ContextVar[Optional[str]] = ContextVar("log_method_trace_id", default=None)
_CURRENT_ACTOR_ID: ContextVar[Optional[str]] = ContextVar("log_method_current_actor_id", default=None)

_MAX_ID_LEN = 128


def _clean_id(value: Any) -> Optional[str]:
    if value is None:
        return None
    s = str(value).replace("\n", " ").replace("\r", " ").strip()
    if not s:
        return None
    return s[:_MAX_ID_LEN]


def generate_trace_id() -> str:
    return uuid.uuid4().hex


def get_trace_id() -> Optional[str]:
    return _TRACE_ID.get()


def set_trace_id(value: Any) -> None:
    _TRACE_ID.set(_clean_id(value))


@contextmanager
def bind_trace_id(*, trace_id: Any = None) -> Iterator[str]:
    """
    Bind a trace id for the scope lifetime, generating one when none is given.
    """
    tid = _clean_id(trace_id) or generate_trace_id()
    token = _TRACE_ID.set(tid)
    try:
        yield tid
    finally:
        _TRACE_ID.reset(token)


def get_current_actor_id() -> Optional[str]:
    return _CURRENT_ACTOR_ID.get()


def set_current_actor_id(value: Any) -> None:
    _CURRENT_ACTOR_ID.set(_clean_id(value))


@contextmanager
def bind_current_actor(actor_id: Any) -> Iterator[Optional[str]]:
    token = _CURRENT_ACTOR_ID.set(_clean_id(actor_id))
    try:
        yield get_current_actor_id()
    finally:
        _CURRENT_ACTOR_ID.reset(token)

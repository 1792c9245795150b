"""
The `Log` mixin.

    class InvoiceMailer(Log):
        def deliver(self, invoice):
            self.log("deliver", invoice, "sending invoice")
            ...

Each call writes one line to the configured sink, leaves one "log" breadcrumb,
and then runs the optional after-log callback. Nothing here catches exceptions:
a failing sink, recorder, provider or callback fails the call.
"""

from __future__ import annotations

from typing import Any, Optional

from log_method.breadcrumbs import LOG_BREADCRUMB_TYPE
from log_method.config import LogMethodConfig, get_config
from log_method.event import LogEvent
from log_method.subject import resolve_subject


_NO_MESSAGE = object()


def _provided(proc: Any) -> Optional[str]:
    if proc is None:
        return None
    value = proc()
    if value is None or value == "":
        return None
    return value


def build_event(
    class_name: str,
    method_name: Any,
    subject: Any,
    message: Any,
    *,
    config: LogMethodConfig,
) -> LogEvent:
    return LogEvent(
        class_name=class_name,
        method_name=str(method_name),
        message=str(message),
        subject=resolve_subject(subject, external_identifier_method=config.external_identifier_method),
        current_actor_id=_provided(config.current_actor_proc),
        trace_id=_provided(config.trace_id_proc),
        current_actor_id_label=config.current_actor_id_label,
    )


def log_call(
    class_name: str,
    method_name: Any,
    subject: Any,
    message: Any,
    *,
    config: Optional[LogMethodConfig] = None,
) -> LogEvent:
    """
    Format and dispatch one log event; returns the event that was emitted.
    """
    cfg = config or get_config()
    event = build_event(class_name, method_name, subject, message, config=cfg)

    cfg.sink.info(event.line())
    cfg.breadcrumb_recorder.leave_breadcrumb(event.breadcrumb_name, event.breadcrumb_metadata(), LOG_BREADCRUMB_TYPE)

    if cfg.after_log_proc is not None:
        cfg.after_log_proc(*event.after_log_args())
    return event


class Log:
    """
    Mixin adding `log(method_name, [subject,] message)`.

    Set `log_method_config` on the class or instance to use a specific
    configuration instead of the one in effect at call time.
    """

    log_method_config: Optional[LogMethodConfig] = None

    def log(self, method_name: Any, subject_or_message: Any, message: Any = _NO_MESSAGE) -> None:
        if message is _NO_MESSAGE:
            subject, message = None, subject_or_message
        else:
            subject = subject_or_message
        log_call(type(self).__name__, method_name, subject, message, config=self.log_method_config)

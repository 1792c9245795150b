from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from log_method.subject import SubjectDescriptor


SEPARATOR = " | "


@dataclass(frozen=True)
class LogEvent:
    """
    Everything known about one `log` call. Built once, formatted, then dropped.
    """

    class_name: str
    method_name: str
    message: str
    subject: Optional[SubjectDescriptor] = None
    trace_id: Optional[str] = None
    current_actor_id: Optional[str] = None
    current_actor_id_label: str = "current_actor_id"

    @property
    def object_id(self) -> Any:
        return self.subject.object_id if self.subject is not None else None

    @property
    def object_class(self) -> Optional[str]:
        return self.subject.object_class if self.subject is not None else None

    @property
    def breadcrumb_name(self) -> str:
        return f"{self.class_name}#{self.method_name}"

    def line(self) -> str:
        """
        Human-readable line: class, method, subject, actor, trace id, message.
        Missing segments are skipped.
        """
        parts = [self.class_name, self.method_name]
        if self.subject is not None:
            parts.append(self.subject.display)
        if self.current_actor_id is not None:
            parts.append(f"{self.current_actor_id_label}:{self.current_actor_id}")
        if self.trace_id is not None:
            parts.append(str(self.trace_id))
        parts.append(self.message)
        return SEPARATOR.join(parts)

    def breadcrumb_metadata(self) -> dict[str, Any]:
        meta: dict[str, Any] = {
            "class": self.class_name,
            "method_name": self.method_name,
            "message": self.message,
        }
        if self.object_id is not None:
            meta["object_id"] = self.object_id
        if self.object_class is not None:
            meta["object_class"] = self.object_class
        if self.trace_id is not None:
            meta["trace_id"] = self.trace_id
        if self.current_actor_id is not None:
            meta["current_actor_id"] = self.current_actor_id
        return meta

    def after_log_args(self) -> tuple[Any, ...]:
        return (
            self.class_name,
            self.method_name,
            self.object_id,
            self.object_class,
            self.trace_id,
            self.current_actor_id,
        )

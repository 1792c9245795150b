"""
Subject description: how an arbitrary object shows up in a log line.

Three capability variants, tried in this order:

- ExternalIdentifier: the subject exposes the configured external identifier
  attribute. Always wins when configured and present.
- RecordIdentifier: the subject looks like a persisted record (has `id`).
- PlainObject: anything else; described by its repr().

Only the first two carry a structured identifier / type pair. Callers that
already know what they hold can pass one of the variants directly and skip
the attribute probing.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union


# Type hint only; resolve_subject tests record-likeness with hasattr().
class HasRecordIdentifier(Protocol):
    id: Any


@dataclass(frozen=True)
class ExternalIdentifier:
    type_name: str
    value: Any

    @property
    def display(self) -> str:
        return f"{self.type_name}/{self.value}"

    @property
    def object_id(self) -> Any:
        return self.value

    @property
    def object_class(self) -> Optional[str]:
        return self.type_name


@dataclass(frozen=True)
class RecordIdentifier:
    type_name: str
    id: Any

    @property
    def display(self) -> str:
        return f"{self.type_name}/{self.id}"

    @property
    def object_id(self) -> Any:
        return self.id

    @property
    def object_class(self) -> Optional[str]:
        return self.type_name


@dataclass(frozen=True)
class PlainObject:
    type_name: str
    representation: str

    @property
    def display(self) -> str:
        return f"{self.type_name}/{self.representation}"

    @property
    def object_id(self) -> Any:
        return None

    @property
    def object_class(self) -> Optional[str]:
        return None


SubjectDescriptor = Union[ExternalIdentifier, RecordIdentifier, PlainObject]

_DESCRIPTOR_TYPES = (ExternalIdentifier, RecordIdentifier, PlainObject)


def _read(subject: Any, attr: str) -> Any:
    value = getattr(subject, attr)
    # Only methods bound to the subject are called; a class passed as the
    # subject yields plain functions, which are used as they are.
    if inspect.ismethod(value):
        return value()
    return value


def resolve_subject(subject: Any, *, external_identifier_method: Optional[str] = None) -> Optional[SubjectDescriptor]:
    """
    Describe `subject`, or return None when there is no subject.

    Errors raised while reading the subject's attributes propagate.
    """
    if subject is None:
        return None
    if isinstance(subject, _DESCRIPTOR_TYPES):
        return subject

    type_name = type(subject).__name__

    if external_identifier_method and hasattr(subject, external_identifier_method):
        return ExternalIdentifier(type_name=type_name, value=_read(subject, external_identifier_method))

    if hasattr(subject, "id"):
        return RecordIdentifier(type_name=type_name, id=_read(subject, "id"))

    return PlainObject(type_name=type_name, representation=repr(subject))

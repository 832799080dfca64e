"""Field enumeration for records.

A record declares, per field, a name, a way to read the current value and an
optional rule string. Three declaration styles are supported:

* dataclasses, with the rule stored in field metadata (see ``rule``)
* pydantic models, with the rule stored in ``json_schema_extra``
  (see ``rule_field``)
* any class with a ``__validate_fields__`` attribute listing ``FieldSpec``
  entries or ``(name, rule)`` pairs
"""

import dataclasses
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_TAG_KEY = "validate"
FIELDS_ATTRIBUTE = "__validate_fields__"


@dataclass(frozen=True)
class FieldSpec:
    """Explicit declaration of a validated field."""
    name: str
    rule: str | None = None
    accessor: Callable[[Any], Any] | None = None

    def read(self, record: Any) -> Any:
        if self.accessor is not None:
            return self.accessor(record)
        return getattr(record, self.name)


@dataclass(frozen=True)
class FieldDescriptor:
    """A field's name, current value and rule string, if any."""
    name: str
    value: Any
    rule: str | None


def rule(spec: str, *, tag_key: str = DEFAULT_TAG_KEY, **kwargs) -> Any:
    """Declare a dataclass field carrying a rule string.

    Extra keyword arguments are passed to ``dataclasses.field``.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[tag_key] = spec
    return dataclasses.field(metadata=metadata, **kwargs)


def rule_field(spec: str, *, tag_key: str = DEFAULT_TAG_KEY, **kwargs) -> Any:
    """Declare a pydantic model field carrying a rule string.

    Extra keyword arguments are passed to ``pydantic.Field``.
    """
    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[tag_key] = spec
    return Field(json_schema_extra=extra, **kwargs)


def is_record(value: Any) -> bool:
    """Whether a value is something fields can be enumerated from."""
    if isinstance(value, type):
        return False
    return (
        hasattr(type(value), FIELDS_ATTRIBUTE)
        or dataclasses.is_dataclass(value)
        or isinstance(value, BaseModel)
    )


def _explicit_fields(record: Any) -> Iterator[FieldDescriptor]:
    for entry in getattr(type(record), FIELDS_ATTRIBUTE):
        spec = entry if isinstance(entry, FieldSpec) else FieldSpec(*entry)
        yield FieldDescriptor(spec.name, spec.read(record), spec.rule)


def _dataclass_fields(record: Any, tag_key: str) -> Iterator[FieldDescriptor]:
    for f in dataclasses.fields(record):
        yield FieldDescriptor(f.name, getattr(record, f.name), f.metadata.get(tag_key))


def _model_fields(record: BaseModel, tag_key: str) -> Iterator[FieldDescriptor]:
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra
        spec = extra.get(tag_key) if isinstance(extra, dict) else None
        yield FieldDescriptor(name, getattr(record, name), spec)


def iter_fields(record: Any, tag_key: str = DEFAULT_TAG_KEY) -> Iterator[FieldDescriptor]:
    """Enumerate a record's fields in declaration order.

    Callers check ``is_record`` first; non-records yield nothing.
    """
    if hasattr(type(record), FIELDS_ATTRIBUTE):
        yield from _explicit_fields(record)
    elif dataclasses.is_dataclass(record) and not isinstance(record, type):
        yield from _dataclass_fields(record, tag_key)
    elif isinstance(record, BaseModel):
        yield from _model_fields(record, tag_key)

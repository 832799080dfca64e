"""Runtime value classification used to route values to evaluators."""

from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Closed set of value shapes the evaluators understand."""
    TEXT = "text"
    INTEGER = "integer"
    TEXT_SEQUENCE = "text_sequence"
    INTEGER_SEQUENCE = "integer_sequence"
    UNSUPPORTED = "unsupported"

    @property
    def element_kind(self) -> "ValueKind":
        """Scalar kind of a sequence kind's elements."""
        return _ELEMENT_KINDS.get(self, ValueKind.UNSUPPORTED)

    @property
    def is_sequence(self) -> bool:
        return self in _ELEMENT_KINDS


_ELEMENT_KINDS = {
    ValueKind.TEXT_SEQUENCE: ValueKind.TEXT,
    ValueKind.INTEGER_SEQUENCE: ValueKind.INTEGER,
}

_SEQUENCE_KINDS = {
    ValueKind.TEXT: ValueKind.TEXT_SEQUENCE,
    ValueKind.INTEGER: ValueKind.INTEGER_SEQUENCE,
}


def classify_scalar(value: Any) -> ValueKind:
    # bool is an int subclass but is not an integer for validation purposes
    if isinstance(value, bool):
        return ValueKind.UNSUPPORTED
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, int):
        return ValueKind.INTEGER
    return ValueKind.UNSUPPORTED


def classify(value: Any) -> ValueKind:
    """Classify a field value.

    Lists and tuples are sequences when every element has the same scalar
    kind. An empty sequence is reported as a text sequence; it has no
    elements to evaluate either way.
    """
    if isinstance(value, (list, tuple)):
        if not value:
            return ValueKind.TEXT_SEQUENCE
        element_kinds = {classify_scalar(item) for item in value}
        if len(element_kinds) != 1:
            return ValueKind.UNSUPPORTED
        return _SEQUENCE_KINDS.get(element_kinds.pop(), ValueKind.UNSUPPORTED)
    return classify_scalar(value)

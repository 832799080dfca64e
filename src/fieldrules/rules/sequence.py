"""Lift scalar evaluators over homogeneous sequences."""

from collections.abc import Sequence
from typing import Any

from ..errors import FailureKind, UnsupportedTypeError
from .evaluators import evaluator_for
from .kinds import ValueKind, classify
from .parser import RuleToken


def evaluate_sequence(values: Sequence[Any], token: RuleToken) -> FailureKind | None:
    """Apply a token to every element and return the first failure.

    Element failures are not aggregated: one failure stands for the whole
    sequence violating the rule.

    Raises:
        UnsupportedTypeError: If the elements are not a kind the rule accepts
    """
    if not values:
        return None

    kind = classify(values)
    evaluator = evaluator_for(token)
    if not kind.is_sequence or not evaluator.supports(kind.element_kind):
        raise UnsupportedTypeError(
            type(values),
            detail=f"rule '{evaluator.name}' does not apply to {kind.value} values",
        )

    for item in values:
        failure = evaluator.check(item, kind.element_kind, token)
        if failure is not None:
            return failure
    return None


def evaluate_token(value: Any, token: RuleToken) -> FailureKind | None:
    """Evaluate one token against a field value of any supported kind."""
    kind = classify(value)
    if kind in (ValueKind.TEXT, ValueKind.INTEGER):
        return evaluator_for(token).evaluate(value, token)
    if kind in (ValueKind.TEXT_SEQUENCE, ValueKind.INTEGER_SEQUENCE):
        return evaluate_sequence(value, token)
    raise UnsupportedTypeError(
        type(value),
        detail=f"cannot apply '{token.kind.value}' to {type(value).__name__}",
    )

"""Scalar evaluators, one per rule kind.

Each evaluator checks a single text or integer value against a parsed rule
token and returns the failure kind on violation, or None when the value
satisfies the rule.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..errors import FailureKind, UnsupportedTypeError, WrongValueError
from .kinds import ValueKind, classify_scalar
from .parser import (
    BoundDirection,
    BoundRule,
    LengthRule,
    MembershipRule,
    PatternRule,
    RuleKind,
    RuleToken,
    parse_decimal,
)


class ScalarEvaluator(ABC):
    """Base class for rule evaluators."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @property
    @abstractmethod
    def supported_kinds(self) -> frozenset[ValueKind]:
        """Scalar value kinds this evaluator accepts."""
        pass

    def supports(self, kind: ValueKind) -> bool:
        return kind in self.supported_kinds

    def evaluate(self, value: Any, token: RuleToken) -> FailureKind | None:
        """Check a scalar value against a token.

        Raises:
            UnsupportedTypeError: If the value kind is not supported
            WrongValueError: If the token cannot be applied to the value
        """
        kind = classify_scalar(value)
        if not self.supports(kind):
            raise UnsupportedTypeError(
                type(value),
                detail=f"rule '{self.name}' does not apply to {type(value).__name__}",
            )
        return self.check(value, kind, token)

    @abstractmethod
    def check(self, value: Any, kind: ValueKind, token: RuleToken) -> FailureKind | None:
        """Check a value whose kind is already known to be supported."""
        pass


class LengthEvaluator(ScalarEvaluator):
    """Exact length match on text values."""

    @property
    def name(self) -> str:
        return "len"

    @property
    def supported_kinds(self) -> frozenset[ValueKind]:
        return frozenset({ValueKind.TEXT})

    def check(self, value: str, kind: ValueKind, token: LengthRule) -> FailureKind | None:
        if len(value) != token.length:
            return FailureKind.LENGTH_MISMATCH
        return None


class MembershipEvaluator(ScalarEvaluator):
    """Value must equal one of the token's alternatives."""

    @property
    def name(self) -> str:
        return "in"

    @property
    def supported_kinds(self) -> frozenset[ValueKind]:
        return frozenset({ValueKind.TEXT, ValueKind.INTEGER})

    def check(self, value: Any, kind: ValueKind, token: MembershipRule) -> FailureKind | None:
        if kind == ValueKind.TEXT:
            return None if value in token.alternatives else FailureKind.OUT_OF_SET

        # Members after the first match are never parsed.
        for alternative in token.alternatives:
            number = parse_decimal(alternative)
            if number is None:
                raise WrongValueError(
                    f"in:{token.raw}",
                    f"set member {alternative!r} is not an integer",
                )
            if value == number:
                return None
        return FailureKind.OUT_OF_SET


class BoundEvaluator(ScalarEvaluator):
    """Inclusive lower or upper bound on integer values."""

    @property
    def name(self) -> str:
        return "min/max"

    @property
    def supported_kinds(self) -> frozenset[ValueKind]:
        return frozenset({ValueKind.INTEGER})

    def check(self, value: int, kind: ValueKind, token: BoundRule) -> FailureKind | None:
        if token.direction == BoundDirection.LOWER:
            within = value >= token.limit
        else:
            within = value <= token.limit
        return None if within else FailureKind.OUT_OF_BOUNDS


class PatternEvaluator(ScalarEvaluator):
    """Regular expression search on text values."""

    @property
    def name(self) -> str:
        return "regexp"

    @property
    def supported_kinds(self) -> frozenset[ValueKind]:
        return frozenset({ValueKind.TEXT})

    def check(self, value: str, kind: ValueKind, token: PatternRule) -> FailureKind | None:
        if token.pattern.search(value) is None:
            return FailureKind.PATTERN_MISMATCH
        return None


_EVALUATORS: dict[RuleKind, ScalarEvaluator] = {
    RuleKind.LENGTH: LengthEvaluator(),
    RuleKind.MEMBERSHIP: MembershipEvaluator(),
    RuleKind.MIN: BoundEvaluator(),
    RuleKind.MAX: BoundEvaluator(),
    RuleKind.PATTERN: PatternEvaluator(),
}


def evaluator_for(token: RuleToken) -> ScalarEvaluator:
    """Return the evaluator responsible for a token's kind."""
    return _EVALUATORS[token.kind]

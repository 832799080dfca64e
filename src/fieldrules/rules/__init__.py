"""Rule grammar, value classification and per-kind evaluators."""

from .evaluators import (
    BoundEvaluator,
    LengthEvaluator,
    MembershipEvaluator,
    PatternEvaluator,
    ScalarEvaluator,
    evaluator_for,
)
from .kinds import ValueKind, classify
from .parser import (
    BoundDirection,
    BoundRule,
    LengthRule,
    MembershipRule,
    PatternRule,
    RuleKind,
    RuleToken,
    parse_rules,
)
from .sequence import evaluate_sequence, evaluate_token

__all__ = [
    "RuleKind",
    "RuleToken",
    "LengthRule",
    "MembershipRule",
    "BoundRule",
    "BoundDirection",
    "PatternRule",
    "parse_rules",
    "ValueKind",
    "classify",
    "ScalarEvaluator",
    "LengthEvaluator",
    "MembershipEvaluator",
    "BoundEvaluator",
    "PatternEvaluator",
    "evaluator_for",
    "evaluate_sequence",
    "evaluate_token",
]

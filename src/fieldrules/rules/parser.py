"""Rule string parsing.

A rule string is a ``|`` separated list of ``kind:parameter`` tokens, for
example ``in:admin,staff|len:5``. Each token is split on its first colon only,
so pattern parameters may contain colons.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from ..errors import WrongValueError

logger = logging.getLogger(__name__)

RULE_SEPARATOR = "|"
PARAMETER_SEPARATOR = ":"
ALTERNATIVE_SEPARATOR = ","

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_LEGACY_OCTAL = re.compile(r"([+-]?)0([0-7]+)")


class RuleKind(str, Enum):
    """Recognized rule prefixes."""
    LENGTH = "len"
    MEMBERSHIP = "in"
    MIN = "min"
    MAX = "max"
    PATTERN = "regexp"


class BoundDirection(str, Enum):
    """Which side of the range a bound rule constrains."""
    LOWER = "min"
    UPPER = "max"


@dataclass(frozen=True)
class RuleToken:
    """A single parsed rule with its raw parameter string."""
    raw: str

    @property
    def kind(self) -> RuleKind:
        raise NotImplementedError


@dataclass(frozen=True)
class LengthRule(RuleToken):
    length: int

    @property
    def kind(self) -> RuleKind:
        return RuleKind.LENGTH


@dataclass(frozen=True)
class MembershipRule(RuleToken):
    alternatives: tuple[str, ...]

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MEMBERSHIP


@dataclass(frozen=True)
class BoundRule(RuleToken):
    direction: BoundDirection
    limit: int

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MIN if self.direction == BoundDirection.LOWER else RuleKind.MAX


@dataclass(frozen=True)
class PatternRule(RuleToken):
    source: str
    pattern: re.Pattern

    @property
    def kind(self) -> RuleKind:
        return RuleKind.PATTERN


def parse_decimal(text: str) -> int | None:
    """Parse a base-10 integer literal with an optional sign, or return None."""
    if not _DECIMAL_INT.fullmatch(text):
        return None
    return int(text)


def _parse_literal(text: str) -> int | None:
    """Parse an integer literal allowing base prefixes (0x, 0o, 0b).

    A leading zero followed by digits is octal, so ``010`` is 8.
    """
    if not text or not text.isascii() or text != text.strip():
        return None
    legacy = _LEGACY_OCTAL.fullmatch(text)
    if legacy:
        sign, digits = legacy.groups()
        return int(sign + digits, 8)
    try:
        return int(text, 0)
    except ValueError:
        return None


def parse_token(token: str, strict: bool = False) -> RuleToken | None:
    """Parse one ``kind:parameter`` token.

    Returns None for tokens with an unknown prefix in lenient mode.

    Raises:
        WrongValueError: If the parameter is malformed for its kind, or the
            prefix is unknown and ``strict`` is set.
    """
    prefix, sep, parameter = token.partition(PARAMETER_SEPARATOR)
    try:
        kind = RuleKind(prefix) if sep else None
    except ValueError:
        kind = None

    if kind is None:
        if strict:
            raise WrongValueError(token, f"unknown rule: {token!r}")
        logger.debug(f"Ignoring unknown rule token: {token!r}")
        return None

    if kind == RuleKind.LENGTH:
        length = parse_decimal(parameter)
        if length is None:
            raise WrongValueError(token, f"length must be an integer, got {parameter!r}")
        return LengthRule(raw=parameter, length=length)

    if kind == RuleKind.MEMBERSHIP:
        return MembershipRule(
            raw=parameter,
            alternatives=tuple(parameter.split(ALTERNATIVE_SEPARATOR)),
        )

    if kind in (RuleKind.MIN, RuleKind.MAX):
        limit = _parse_literal(parameter)
        if limit is None:
            raise WrongValueError(token, f"{kind.value} must be an integer, got {parameter!r}")
        return BoundRule(raw=parameter, direction=BoundDirection(kind.value), limit=limit)

    try:
        compiled = re.compile(parameter)
    except re.error as e:
        raise WrongValueError(token, f"invalid pattern {parameter!r}: {e}") from e
    return PatternRule(raw=parameter, source=parameter, pattern=compiled)


def parse_rules(rule: str, *, strict: bool = False) -> list[RuleToken]:
    """Split a rule string into ordered rule tokens.

    Args:
        rule: Rule string such as ``"min:18|max:50"``
        strict: Reject unknown rule prefixes instead of skipping them

    Returns:
        Parsed tokens in source order

    Raises:
        WrongValueError: If any token is malformed
    """
    tokens = []
    for raw_token in rule.split(RULE_SEPARATOR):
        token = parse_token(raw_token, strict=strict)
        if token is not None:
            tokens.append(token)
    return tokens

"""
Parse operator sentences into EditIntent objects.

Grammar (keywords are case-insensitive):

    onUPDATE <flagPath> to <value> [for <environment> environment] [and <region> region]

<flagPath>, <value>, <environment> and <region> are single non-whitespace tokens.
"""
from __future__ import annotations

import re
from typing import Optional

from flagpr.core.types import EditIntent, FlagValue


PROMPT_EXAMPLE = "onUPDATE volumeQuotaFlag to false for stage environment and delhi region"

PROMPT_RE = re.compile(
    r"onUPDATE\s+(?P<flag>\S+)\s+to\s+(?P<value>\S+)"
    r"(?:\s+for\s+(?P<environment>\S+)\s+environment)?"
    r"(?:\s+and\s+(?P<region>\S+)\s+region)?",
    re.IGNORECASE,
)

# Decimal literals only: no hex, no inf/nan, no digit separators.
NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

INTEGER_RE = re.compile(r"^[+-]?\d+$")

# Largest integer a float represents exactly.
_MAX_SAFE_INTEGER = 2**53

# Exponent zero padding: 1e-07 -> 1e-7
_EXPONENT_PAD_RE = re.compile(r"e([+-])0+(\d)")


def coerce_value(raw: str) -> FlagValue:
    """
    Decide the runtime type of a raw value token.

    First match wins: "true"/"false" (exact case) -> bool, an integer
    literal -> int (any size), a decimal literal -> float (int when it is
    integral and exactly representable), anything else -> the raw string.
    """
    if raw == "true":
        return True
    if raw == "false":
        return False

    candidate = raw.strip()
    if INTEGER_RE.match(candidate):
        try:
            return int(candidate)
        except ValueError:
            # longer than sys.get_int_max_str_digits()
            return raw
    if NUMBER_RE.match(candidate):
        number = float(candidate)
        if number.is_integer() and abs(number) < _MAX_SAFE_INTEGER:
            return int(number)
        return number

    return raw


def format_value(value: FlagValue) -> str:
    """Render a flag value the way it reads in commit messages and plain text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _MAX_SAFE_INTEGER:
            return str(int(value))
        return _EXPONENT_PAD_RE.sub(r"e\1\2", repr(value))
    return str(value)


def parse_prompt(text: str) -> Optional[EditIntent]:
    """
    Parse a sentence into an EditIntent.

    Returns None when the sentence does not follow the grammar. Never raises
    for malformed input.
    """
    match = PROMPT_RE.fullmatch(text.strip())
    if not match:
        return None

    flag_path = match.group("flag")
    if any(segment == "" for segment in flag_path.split(".")):
        return None

    return EditIntent(
        flag_path=flag_path,
        value=coerce_value(match.group("value")),
        environment=match.group("environment"),
        region=match.group("region"),
    )

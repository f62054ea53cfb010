"""
Declarative field validation.

A `ValidationRule` pairs one raw field value with the constraints it must
satisfy. Text constraints (`min_length`, `max_length`) only apply to text
values and numeric constraints (`min`, `max`) only apply to numbers; a
constraint that does not fit the value's kind is skipped, never an error.

Usage:
    from projboard.domain.validation import ValidationRule, validate

    validate(ValidationRule(value="Build API", required=True))        # True
    validate(ValidationRule(value=parse_number("abc"), min=1, max=10))  # False
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Union

Value = Union[str, int, float]


@dataclass(frozen=True)
class ValidationRule:
    """Constraints for a single field value."""

    value: Value
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min: Optional[float] = None
    max: Optional[float] = None


def _is_text(value: Value) -> bool:
    return isinstance(value, str)


def _is_number(value: Value) -> bool:
    # bool is an int subclass but never a field value we accept as numeric
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_present(value: Value) -> bool:
    if _is_number(value) and math.isnan(value):
        return False
    return len(str(value).strip()) != 0


# Plain decimal notation with ASCII digits only; no underscores, no "inf"/"nan"
_NUMBER_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")

# Integral values beyond this many digits are left as floats; they fail any
# sensible upper bound anyway.
_MAX_INTEGRAL_DIGITS = 18


def parse_number(raw: str) -> Union[int, float]:
    """
    Convert raw field text to a number.

    Integral text (``"3"``, ``"4.0"``, ``"1e1"``) yields an int. Fractional
    text yields a float, even when that float rounds to a whole number.
    Unparseable or blank text yields NaN, which fails every numeric bound.
    """
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return math.nan
    number = Decimal(text)
    if number.adjusted() < _MAX_INTEGRAL_DIGITS and number == number.to_integral_value():
        return int(number)
    return float(number)


def check(rule: ValidationRule) -> List[str]:
    """
    Return the names of the constraints `rule.value` violates.

    An empty list means the value is valid.
    """
    violations: List[str] = []
    value = rule.value

    if rule.required and not _is_present(value):
        violations.append("required")

    if _is_text(value):
        if rule.min_length is not None and len(value) < rule.min_length:
            violations.append("min_length")
        if rule.max_length is not None and len(value) > rule.max_length:
            violations.append("max_length")

    if _is_number(value):
        # NaN compares false against everything, so both bounds fail for it
        if rule.min is not None and not value >= rule.min:
            violations.append("min")
        if rule.max is not None and not value <= rule.max:
            violations.append("max")

    return violations


def validate(rule: ValidationRule) -> bool:
    """True when every applicable constraint of `rule` holds."""
    return not check(rule)


__all__ = ["ValidationRule", "check", "parse_number", "validate"]

"""
Domain package for the project board.

Exports the record model and the field validation engine. Keep this package
focused on data definitions and validation concerns.
"""

from projboard.domain.models import ALLOWED_TRANSITIONS, Record, RecordStatus
from projboard.domain.validation import ValidationRule, check, parse_number, validate

__all__ = [
    "ALLOWED_TRANSITIONS",
    "Record",
    "RecordStatus",
    "ValidationRule",
    "check",
    "parse_number",
    "validate",
]

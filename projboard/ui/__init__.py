"""
UI package for the project board.

Holds the host container and form elements that components mount into.
"""

from projboard.ui.elements import FormElement, InputElement, Screen, SubmitEvent

__all__ = [
    "FormElement",
    "InputElement",
    "Screen",
    "SubmitEvent",
]

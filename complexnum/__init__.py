"""Immutable complex numbers with a round-trippable "a + bi" text form."""

import logging

from complexnum.complex import Complex, ZERO, ONE, NEGATIVE_ONE, I
from complexnum.complex_text import format_complex, parse_complex
from complexnum.errors import (
    ComplexNumError, DivisionByZeroError, MalformedInputError,
    InvalidRangeError, RangeTooLargeError
)
from complexnum.range import Range

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Complex",
    "ZERO",
    "ONE",
    "NEGATIVE_ONE",
    "I",
    "format_complex",
    "parse_complex",
    "ComplexNumError",
    "DivisionByZeroError",
    "MalformedInputError",
    "InvalidRangeError",
    "RangeTooLargeError",
    "Range",
]

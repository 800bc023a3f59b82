"""
Text form of complex numbers: "a + bi", "a - bi", "a", "bi", "i", "- i", "0".

Both directions work on plain (real, imaginary) floats so this module has no
dependency on the Complex class itself.
"""
import logging
import math
import re
from typing import Tuple

from complexnum.errors import MalformedInputError

logger = logging.getLogger(__name__)

# A signed imaginary term such as "i", "- i", "+ 2i", "-1.5i" or "3e-05i".
_IMAGINARY_TERM = re.compile(r"[+-]?\s?(\d+(\.\d+)?([eE][+-]?\d+)?)?i")
_UNIT_TERM = re.compile(r"[+-]?i")
_WHITESPACE = re.compile(r"\s+")


# ---------- formatting ----------
def format_component(value: float) -> str:
    """
    Render one component, with a negative sign separated by a space.

    Integer-valued floats lose their trailing ".0"; everything else uses the
    shortest decimal form that reads back to the same float.
    """
    magnitude = abs(float(value))
    digits = str(int(magnitude)) if magnitude.is_integer() else repr(magnitude)
    return f"- {digits}" if value < 0 else digits


def format_complex(re_part: float, im_part: float) -> str:
    """
    Render a complex number as "a + bi".

    Parameters
    ----------
    re_part : real component
    im_part : imaginary component

    Returns
    -------
    str, e.g. "2 - 3i", "1.5 + 2i", "- i", "0".
    """
    real_str = "" if re_part == 0 else format_component(re_part)

    if im_part == 0:
        imag_str = ""
    elif abs(im_part) == 1:
        imag_str = "- i" if im_part < 0 else "i"
    else:
        imag_str = format_component(im_part) + "i"

    if not real_str and not imag_str:
        return "0"

    if real_str and imag_str:
        operator = " + " if im_part > 0 else " "
        return (real_str + operator + imag_str).strip()

    return (real_str or imag_str).strip()


# ---------- parsing ----------
def _parse_numeral(numeral: str, text: str) -> float:
    if not numeral:
        return 0.0

    if "_" in numeral:
        raise MalformedInputError(text)

    try:
        value = float(numeral)

    except ValueError as e:
        raise MalformedInputError(text) from e

    if not math.isfinite(value):
        raise MalformedInputError(text)

    return value


def parse_complex(text: str) -> Tuple[float, float]:
    """
    Parse the text form back into its (real, imaginary) components.

    The first signed imaginary term is peeled off; whatever remains is the
    real numeral. Blank numerals read as 0, and a bare "i" has coefficient 1.

    Args:
        text: String such as "3 - 4i", "-i" or "5"

    Returns:
        Tuple of (real, imaginary) floats

    Raises:
        MalformedInputError: If either numeral cannot be parsed as a finite number
    """
    stripped = text.strip()
    match = _IMAGINARY_TERM.search(stripped)
    if match is None:
        real_str = stripped
        imag_str = ""

    else:
        real_str = stripped[:match.start()] + stripped[match.end():]
        imag_str = match.group(0)

    real_str = _WHITESPACE.sub("", real_str)
    imag_str = _WHITESPACE.sub("", imag_str)
    if _UNIT_TERM.fullmatch(imag_str):
        imag_str = imag_str[:-1] + "1"

    elif imag_str:
        imag_str = imag_str[:-1]

    try:
        return _parse_numeral(real_str, text), _parse_numeral(imag_str, text)

    except MalformedInputError:
        logger.debug("Rejected complex number text %r", text)
        raise

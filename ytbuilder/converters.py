"""
ytbuilder converters: structural validation of raw values into token text.

Each converter is a plain callable taking one raw value and returning exactly one
token string, or raising an InputError refinement. Converters are pure and know
nothing about options: faults are raised without option/param context, and the
catalog layer re-raises them with that context attached (copy.replace).

Converters
- text:       non-empty string (after trimming); emitted untrimmed.
- verbatim:   any string, the empty string included (e.g. --proxy "").
- number():   factory; finite real >= minimum, optionally integral.
- limit():    factory; like number() but also accepts the literal "infinite".
- scalar:     number or non-empty string (sizes, qualities, sleep expressions).
- listing:    non-empty string, or non-empty sequence of non-empty strings joined by ",".
- span:       non-negative number, "MIN-MAX" string, or (min, max) pair with min <= max.

Path-like objects (os.PathLike) are accepted wherever a string is.

Quick examples
    >>> text("/path/to/ffmpeg")
    '/path/to/ffmpeg'
    >>> number(integral=True, minimum=1)(4)
    '4'
    >>> limit(integral=True)("infinite")
    'infinite'
    >>> listing(["sponsor", "intro"])
    'sponsor,intro'
    >>> span((10, 60))
    '10-60'
"""
import math
import os
import re
from collections.abc import Sequence

from .assembler import encode_list
from .faults import *
from .utils import Unset, rename, stringify


def _string(value, /):
    # str and path-like values; anything else is reported by the caller
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    return value if isinstance(value, str) else Unset


def _require(value, /):
    if value is None or value is Unset:
        raise MissingValueError("a value must be provided")


def text(value, /):
    """
    Accept a string that is not blank.

    The value is emitted exactly as given (no trimming): yt-dlp templates and
    paths may legitimately carry surrounding whitespace.
    """
    _require(value)
    if (string := _string(value)) is Unset:
        raise InvalidTypeError(f"expected a string, got {type(value).__name__}")
    if not string.strip():
        raise EmptyValueError("value cannot be empty")
    return string


def verbatim(value, /):
    """accept any string, including the empty one."""
    _require(value)
    if (string := _string(value)) is Unset:
        raise InvalidTypeError(f"expected a string, got {type(value).__name__}")
    return string


def _number(value, integral, minimum, /):
    _require(value)
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidNumberError(f"expected a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidNumberError("number must be finite")
    if integral and isinstance(value, float) and not value.is_integer():
        raise InvalidNumberError("number must be an integer")
    if minimum is not None and value < minimum:
        if minimum == 0:
            raise InvalidNumberError("number must be non-negative")
        raise InvalidNumberError(f"number must be greater than or equal to {minimum}")
    return stringify(value)


def number(*, integral=False, minimum=0):
    """
    Build a numeric converter.

    Parameters
    - integral: reject non-integral values (5.0 is accepted and written as "5").
    - minimum: inclusive lower bound; None disables the bound.

    The returned converter is named "integer" or "number" for help output.
    """
    if minimum is not None and (isinstance(minimum, bool) or not isinstance(minimum, int | float)):
        raise TypeError("number() 'minimum' must be a number or None")

    def converter(value, /):
        return _number(value, integral, minimum)

    return rename(converter, "integer" if integral else "number")


def limit(*, integral=False, minimum=0):
    """
    Build a retry-count style converter: a number, or the literal "infinite".
    """
    numeric = number(integral=integral, minimum=minimum)

    def converter(value, /):
        if value == "infinite":
            return value
        if isinstance(value, str):
            raise InvalidNumberError(f"expected a number or 'infinite', got {value!r}")
        return numeric(value)

    return rename(converter, "limit")


_natural = number(minimum=0)


def scalar(value, /):
    """accept a non-negative number or a non-empty string (e.g. "10M", "linear=1::2")."""
    _require(value)
    if isinstance(value, int | float) and not isinstance(value, bool):
        return _natural(value)
    return text(value)


def listing(value, /):
    """
    Accept a non-empty string, or a non-empty sequence of non-empty strings.

    Sequences are comma-joined; a string is taken as already joined.
    """
    _require(value)
    if (string := _string(value)) is not Unset:
        return text(string)
    if not isinstance(value, Sequence):
        raise InvalidTypeError(f"expected a string or a sequence of strings, got {type(value).__name__}")
    if not value:
        raise EmptyValueError("at least one item must be provided")
    for item in value:
        if not isinstance(item, str):
            raise InvalidTypeError(f"list items must be strings, got {type(item).__name__}")
        if not item.strip():
            raise EmptyValueError("list items cannot be empty")
    return encode_list(value)


def span(value, /):
    """
    Accept a wait duration or a MIN-MAX range.

    Forms
    - 30           -> "30"
    - "10-60"      -> "10-60"
    - (10, 60)     -> "10-60"
    """
    _require(value)
    if isinstance(value, str):
        if not (match := re.fullmatch(r"(\d+)-(\d+)", value)):
            raise InvalidRangeError(f"range must be in the form MIN-MAX, got {value!r}")
        if int(match.group(1)) > int(match.group(2)):
            raise InvalidRangeError("range minimum must not exceed its maximum")
        return value
    if isinstance(value, Sequence):
        if len(value) != 2:
            raise InvalidRangeError("range must be a (min, max) pair")
        lower, upper = map(_natural, value)
        if value[0] > value[1]:
            raise InvalidRangeError("range minimum must not exceed its maximum")
        return f"{lower}-{upper}"
    return _natural(value)


__all__ = (
    "text",
    "verbatim",
    "number",
    "limit",
    "scalar",
    "listing",
    "span",
)

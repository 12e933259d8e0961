"""
ytbuilder faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault the builder
  can raise. Codes are grouped by domain so logs and searches stay predictable.
- BuilderException: base type carrying a message + read-only options, able to
  render itself through rich in a short, actionable way.
- AlreadyUsedError: a single-use option was configured a second time.
- InputError (and its refinements): a value failed structural validation.
- Outcome: result record for callers that prefer inspecting over catching.

Contract
- Every fault is raised at the offending call, before the builder is touched,
  so catching one leaves the builder exactly as it was before the call.
- The library never prints nor logs faults; hosts decide (console.print(fault)
  renders it through __rich__).

Host configuration (read from __main__, all optional)
- __prog__:   program name shown in rendered headers.
- __codes__:  {FaultCode: label} to remap numeric codes.
- __styles__: {style-name: rich style} to override colors.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType
from typing import NamedTuple

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes used across the builder (stable identifiers).

    grouping
    - call-state (2110x)
      • ALREADY_USED
    - input (2111x / 2112x)
      • MISSING_VALUE, EMPTY_VALUE, INVALID_TYPE, INVALID_NUMBER,
        INVALID_RANGE, INVALID_CHOICE
    """
    # --- call-state errors (21xxx) ---
    ALREADY_USED                = 21101

    # --- input errors (21xxx) ---
    MISSING_VALUE               = 21111
    EMPTY_VALUE                 = 21112
    INVALID_TYPE                = 21113
    INVALID_NUMBER              = 21114
    INVALID_RANGE               = 21121
    INVALID_CHOICE              = 21122

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class BuilderException(Exception):
    """
    base class of every builder fault.

    attributes
    - message: one-sentence, lowercased description of what failed.
    - options: read-only mapping with context such as option, param, hint.
      title and code fall back to the class defaults below.
    """
    code = Unset
    title = "builder fault"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message if isinstance(self.message, str) else ""

    @property
    def option(self):
        """logical option name the fault belongs to, or None when not yet known."""
        return self.options.get("option")

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",

            # body
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        code = self.options.get("code", self.code)
        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", self.options.get("prog", "yt-dlp")), "prog-name"),
            " — ",
            text(code.normalize() if isinstance(code, FaultCode) else "", "code"),
            " | ",
            text(self.options.get("title", self.title).title(), "error-title"),
            " ]"
        )
        message = text(self.message, "error-message")
        renders = [message]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

        if self.options.get("fancy", False):
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class AlreadyUsedError(BuilderException):
    code = FaultCode.ALREADY_USED
    title = "already used"

    def __init__(self, message=Unset, /, **options):
        if message is Unset and "option" in options:
            message = f"cannot call {options['option']} more than once"
        options.setdefault("hint", "single-use options can be configured only once per builder")
        super().__init__(message, **options)


class InputError(BuilderException):
    code = FaultCode.MISSING_VALUE
    title = "invalid input"

    def __str__(self):
        if (option := self.option) is None:
            return super().__str__()
        if (param := self.options.get("param")) is None:
            return f"{option}: {super().__str__()}"
        return f"{option}({param}): {super().__str__()}"


class MissingValueError(InputError):
    code = FaultCode.MISSING_VALUE
    title = "missing value"


class EmptyValueError(InputError):
    code = FaultCode.EMPTY_VALUE
    title = "empty value"


class InvalidTypeError(InputError):
    code = FaultCode.INVALID_TYPE
    title = "invalid type"


class InvalidNumberError(InputError):
    code = FaultCode.INVALID_NUMBER
    title = "invalid number"


class InvalidRangeError(InputError):
    code = FaultCode.INVALID_RANGE
    title = "invalid range"


class InvalidChoiceError(InputError):
    code = FaultCode.INVALID_CHOICE
    title = "invalid choice"


class Outcome(NamedTuple):
    """
    result of CommandBuilder.attempt().

    - fault is None on success; otherwise the AlreadyUsedError/InputError that
      rejected the call (the builder was left untouched).
    """
    fault: BuilderException | None = None

    @property
    def ok(self):
        return self.fault is None

    def unwrap(self):
        """raise the carried fault, if any; return None otherwise."""
        if self.fault is not None:
            raise self.fault


__all__ = (
    "BuilderException",
    "AlreadyUsedError",
    "InputError",
    "MissingValueError",
    "EmptyValueError",
    "InvalidTypeError",
    "InvalidNumberError",
    "InvalidRangeError",
    "InvalidChoiceError",
    "Outcome",
    "FaultCode",
)

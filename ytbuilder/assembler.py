"""
Argument assembly: token encoding, the ordered token sequence, and its views.

What this module provides
- encode_compound(primary, parts, separators): the one rule behind every
  compound token (runtime:path, browser+keyring:profile::container,
  channel@tag, when:template, protocols:downloader, name:args, ...).
- encode_list(items, joiner=","): join a sequence, pass a scalar string through.
- Assembler: owns the executable reference and the append-only token sequence,
  and materializes it as a token list, a joined command line, or a Command record.
- Command: immutable record (base_command, args, complete_command).

Ordering
- Tokens are kept in exactly the order they were appended; a multi-token
  append keeps its tokens contiguous. yt-dlp is positional-argument sensitive,
  so nothing here ever sorts, deduplicates or rewrites tokens.

Quoting
- materialize_command_line() joins with single spaces and applies NO quoting or
  escaping. This keeps the string byte-identical to the argv tokens, at the cost
  of shell safety: a caller handing the string to a shell must quote it itself
  (or use materialize_shell_line(), or spawn with the argv from
  materialize_structured()).
"""
import shlex
from collections.abc import Sequence
from typing import NamedTuple

from rich.text import Text

from .utils import Unset, mirror


def _absent(object):
    return object is None or object is Unset


def encode_compound(primary, parts=(), separators=(), /):
    """
    Build a single token from a primary value and optional qualifiers.

    Each present part is appended preceded by its own separator; absent parts
    (None or Unset) are skipped together with their separator, so no dangling
    or doubled separator is ever produced. When the primary itself is absent,
    the first present part opens the token without its separator, which is how
    prefix forms such as "when:template" are written with the same rule.

    Examples
    - encode_compound("quickjs", ["/opt/qjs"], [":"])                  -> "quickjs:/opt/qjs"
    - encode_compound("firefox", [None, "Profile 1", None], ["+", ":", "::"]) -> "firefox:Profile 1"
    - encode_compound("stable", ["latest"], ["@"])                     -> "stable@latest"
    - encode_compound(None, ["%(title)s"], [":"])                      -> "%(title)s"

    Raises
    - ValueError when parts and separators differ in length, or nothing is present.
    - TypeError when a present segment or a separator is not a string.
    """
    parts = tuple(parts)
    separators = tuple(separators)
    if len(parts) != len(separators):
        raise ValueError("encode_compound() requires one separator per part")

    segments = []
    if not _absent(primary):
        if not isinstance(primary, str):
            raise TypeError("encode_compound() primary must be a string")
        segments.append(primary)

    for part, separator in zip(parts, separators):
        if not isinstance(separator, str):
            raise TypeError("encode_compound() separators must be strings")
        if _absent(part):
            continue
        if not isinstance(part, str):
            raise TypeError("encode_compound() parts must be strings")
        if segments:
            segments.append(separator)
        segments.append(part)

    if not segments:
        raise ValueError("encode_compound() requires at least one present segment")
    return "".join(segments)


def encode_list(items, joiner=",", /):
    """
    Encode a “comma-separated OR already comma-separated” value.

    A scalar string passes through unchanged; a sequence of strings is joined
    with joiner.

    Examples
    - encode_list(["en", "ja"]) -> "en,ja"
    - encode_list("en,ja")      -> "en,ja"
    """
    if isinstance(items, str):
        return items
    if not isinstance(items, Sequence):
        raise TypeError("encode_list() argument must be a string or a sequence of strings")
    if not all(isinstance(item, str) for item in items):
        raise TypeError("encode_list() items must be strings")
    return joiner.join(items)


class Command(NamedTuple):
    """
    Materialized command, ready for a process-execution layer.

    - base_command: the executable reference.
    - args: argv-style tokens (pass as a list; no shell interpretation needed).
    - complete_command: base_command and args joined by single spaces, unquoted.
    """
    base_command: str
    args: tuple[str, ...]
    complete_command: str

    def __rich__(self):
        return Text.assemble(
            (self.base_command, "bold"),
            *(part for arg in self.args for part in (" ", (arg, "cyan" if arg.startswith("-") else ""))),
        )


class Assembler:
    """
    Ordered token sequence plus the executable reference it belongs to.

    The sequence only grows; reads return fresh copies, so materializing is a
    pure projection that can be repeated any number of times.
    """

    __slots__ = ("_executable", "_tokens")

    executable = mirror("executable")
    tokens = mirror("tokens")

    encode_compound = staticmethod(encode_compound)
    encode_list = staticmethod(encode_list)

    def __init__(self, executable, /):
        if not isinstance(executable, str):
            raise TypeError("executable reference must be a string")
        self._executable = executable
        self._tokens = []

    def append(self, *tokens):
        """
        Push one or more literal tokens, in order, to the end of the sequence.

        All tokens are type-checked first; a rejected call appends nothing.
        """
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError(f"tokens must be strings, not {type(token).__name__}")
        self._tokens.extend(tokens)
        return self

    def materialize_tokens(self):
        """snapshot of the token sequence (a new list on every call)."""
        return list(self._tokens)

    def materialize_command_line(self):
        """executable and tokens joined by single spaces; no quoting or escaping."""
        return " ".join([self._executable, *self._tokens])

    def materialize_shell_line(self):
        """executable and tokens quoted for a POSIX shell."""
        return shlex.join([self._executable, *self._tokens])

    def materialize_structured(self):
        """fresh Command record reflecting the latest appends."""
        return Command(
            base_command=self._executable,
            args=tuple(self._tokens),
            complete_command=self.materialize_command_line(),
        )

    def __len__(self):
        return len(self._tokens)

    def __repr__(self):
        return f"Assembler({self._executable!r}, tokens={self._tokens!r})"


__all__ = (
    "encode_compound",
    "encode_list",
    "Command",
    "Assembler",
)

"""
Call-state tracking for single-use options.

A CallTracker remembers, per logical option name (the builder method name, not
the emitted flag text), whether that option has been configured already. Only
single-use options ever reach it; repeatable options append unconditionally.

The usage set is populated lazily: an option absent from it was never used.
"""
from types import MappingProxyType

from .faults import AlreadyUsedError


class CallTracker:
    """
    “at most once” bookkeeping for single-use options.

    check() and mark() are split so that callers can validate and encode a call
    between both steps; check_and_mark() is the one-shot form.
    """

    __slots__ = ("_used",)

    def __init__(self):
        self._used = {}

    def used(self, option, /):
        """return True when option has already been marked."""
        return self._used.get(option, False)

    def check(self, option, /):
        """raise AlreadyUsedError if option has already been marked; never mutates."""
        if not isinstance(option, str):
            raise TypeError("option identifier must be a string")
        if self._used.get(option, False):
            raise AlreadyUsedError(option=option)

    def mark(self, option, /):
        if not isinstance(option, str):
            raise TypeError("option identifier must be a string")
        self._used[option] = True

    def check_and_mark(self, option, /):
        """
        fail with AlreadyUsedError when option was already marked, otherwise mark it.

        a failed check leaves the usage set unchanged.
        """
        self.check(option)
        self.mark(option)

    @property
    def usage(self):
        """read-only snapshot of the usage set ({option: True, ...})."""
        return MappingProxyType(dict(self._used))

    def __len__(self):
        return len(self._used)

    def __contains__(self, option):
        return self.used(option)

    def __repr__(self):
        return f"CallTracker({sorted(self._used)!r})"


__all__ = ("CallTracker",)

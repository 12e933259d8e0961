"""
ytbuilder utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the catalog, the converters and the builder.

Overview
- UnsetType / Unset
  • Singleton sentinel for “argument not provided”, distinct from None.
  • Falsey, printable as "Unset", non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default; None and other falsey values are kept.

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated callables (clean tracebacks and help).

- mirror("attr")
  • Read-only property over a private backing field (self._attr), returning fresh
    container copies so callers cannot mutate internal state through it.

- stringify(number)
  • Render a real number as token text; integral floats lose their ".0".

Quick examples
    >>> coalesce(Unset, "yt-dlp")
    'yt-dlp'
    >>> coalesce(None, "yt-dlp") is None
    True
    >>> stringify(5.0), stringify(2.5), stringify(10)
    ('5', '2.5', '10')
"""
import builtins
import functools
import math
import types
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing an argument that was not provided.

    Catalog parameters use Unset as their default to mean “required”, while None
    means “optional and absent”. A single instance, Unset, is exposed.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a per-process singleton.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in isinstance checks (e.g., str | Unset).
        """
        if isinstance(other, type | types.UnionType):
            return other | type(self)
        return NotImplemented

    __ror__ = __or__

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __reduce__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Returns object unless it is Unset, in which case default is returned.
    Falsey values like None, 0, "" or [] are preserved as-is.

    Examples
    - coalesce("/opt/yt-dlp", "yt-dlp") -> "/opt/yt-dlp"
    - coalesce(Unset, "yt-dlp")         -> "yt-dlp"
    - coalesce(None, "yt-dlp")          -> None
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    doing so.

    Forms
    - rename(callable, name) -> callable (renamed in place)
    - rename(name)           -> decorator

    The builder uses this to give generated option methods their catalog name,
    so tracebacks read "CommandBuilder.cookies_from_browser" instead of a closure.
    """
    match parameters:
        case (str() as name,):
            def decorator(target):
                if not builtins.callable(target):
                    raise TypeError(f"@rename({name!r}) must decorate a callable")
                return rename(target, name)

            return rename(decorator, "rename")
        case (target, str() as name) if builtins.callable(target):
            try:
                target.__name__ = target.__qualname__ = name
            except (AttributeError, TypeError):
                raise TypeError(f"rename() cannot update the name of {target!r}") from None
            return target
        case (_,):
            raise TypeError("@rename() expects the new name as a string")
        case (_, _):
            raise TypeError("rename() expects a callable and a string name")
        case _:
            raise TypeError(f"rename() takes 1 or 2 arguments, {len(parameters)} given")


def _immortalize(object):
    """
    Recursively copy container values.

    - Sequence (non-string, non-tuple): new list.
    - tuple: new tuple (records such as layouts stay hashable).
    - Mapping: new dict with the same keys.
    - Set: new set.
    - Anything else: returned as-is.
    """
    if isinstance(object, tuple):
        return tuple(map(_immortalize, object))
    elif isinstance(object, Sequence) and not isinstance(object, str):
        return list(map(_immortalize, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_immortalize, object.values())))
    elif isinstance(object, Set) and not isinstance(object, frozenset):
        return set(map(_immortalize, object))
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors the private attribute "_{name}".

    Container values are copied on every read, so mutating the result never
    touches the owner's state.

    Example
    - Given self._tokens, declare tokens = mirror("tokens").
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _immortalize(getattr(self, "_" + name))

    return property(getter)


def stringify(number, /):
    """
    Render a finite real number as token text.

    Integral floats are written without a fractional part so that 5.0 and 5
    both become "5"; other floats use their shortest round-trip repr.
    """
    if isinstance(number, bool) or not isinstance(number, int | float):
        raise TypeError("stringify() argument must be an int or a float")
    if isinstance(number, float):
        if not math.isfinite(number):
            raise ValueError("stringify() argument must be finite")
        if number.is_integer():
            return str(int(number))
        return repr(number)
    return str(number)


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Notes
- Singleton: there is only one Unset instance.
- Distinct from None: catalog parameters treat None as “absent part”, Unset as “required”.
- Falsey: bool(Unset) is False.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "stringify",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)

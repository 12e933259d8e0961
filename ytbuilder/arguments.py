r"""
ytbuilder option declarations.

Overview
- Parameters
  • Param: one value of an option call (name, converter, default, choices).
  • Join: lays several params out as one compound token via encode_compound
    (e.g. browser+keyring:profile::container).

- Specs
  • Flag: zero-value option, emits [flag] (e.g. --write-info-json).
  • Option: value-bearing option, emits [flag, *tokens] (e.g. --js-runtimes quickjs:/opt/qjs).
  • Cardinal: positional value with no flag text (the source URL).

- Calling
  • Every spec is callable: spec(*args, **kwargs) binds the call against the
    declared params, validates and converts every value, and returns the tokens.
    Nothing is stored; a spec is a pure description.
  • The __call__ signature is generated per spec (inspect.Signature) so help and
    introspection show the real parameter names and defaults.

- Introspection & representation
  • ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes selected
    fields via read-only properties declared in __introspectable__/__displayable__.

Metadata (sanitized on construction)
- Shared (all specs)
  • group: Unset | str (defaults to the pluralized typename), non-empty when provided.
  • descr: Unset | str | Text (short help), non-empty when provided.
  • repeatable: bool. Single-use specs (the default) are tracked by the builder.
- Named (Option/Flag)
  • flag: str validated as a shell-style option name.
- Value-bearing (Option/Cardinal)
  • params: one or more Param; names unique; no required param after an optional one.
  • layout: Unset | sequence of param names and Joins; every param used exactly once.
    Defaults to one token per param, in declaration order.

Validation highlights
- Flag text must match r"--?[^\W\d_](-?[^\W_]+)*".
- Param names must be identifiers (they become keyword arguments of builder methods).
- Defaults other than Unset/None must pass the param's own converter and choices.

Quick example:
    >>> from ytbuilder.arguments import Param, Join, Option
    >>> runtime = Option(
    ...     "--js-runtimes",
    ...     Param("runtime", choices=("deno", "node", "quickjs", "bun")),
    ...     Param("path", default=None),
    ...     layout=(Join("runtime", (":", "path")),),
    ...     repeatable=True,
    ... )
    >>> runtime("quickjs", "/opt/qjs")
    ['--js-runtimes', 'quickjs:/opt/qjs']

Public API
- Classes: Param, Join, Flag, Option, Cardinal
"""
import builtins
import copy
import functools
import inspect
import keyword
import operator
import re
from collections.abc import Iterable, Sequence, Set

from rich.text import Text

from .assembler import encode_compound
from .converters import listing, text
from .faults import InputError, InvalidChoiceError
from .utils import *


def _invoker(signature, /):
    """
    Build a tailored __call__ method presenting the given parameter signature.

    The trampoline forwards everything to self.encode(); the advertised
    signature only shapes introspection, binding is done by encode itself.
    """
    @rename("__call__")
    def __call__(self, /, *args, **kwargs):
        return self.encode(*args, **kwargs)

    __call__.__signature__ = signature.replace(parameters=(
        inspect.Parameter("self", inspect.Parameter.POSITIONAL_ONLY),
        *signature.parameters.values(),
    ))
    __call__.__doc__ = "validate a call against the declared params and return its tokens."
    return __call__


class ArgumentType(type):
    """
    Metaclass that turns specs into callable, introspectable declarations.

    Responsibilities
    - Inject a tailored __call__ when constructing factory-backed spec classes.
      Its signature is derived from the spec's params.
    - Provide stable, readable __repr__/__rich_repr__ implementations for
      diagnostics and the catalog table.
    - Expose selected fields as read-only properties using mirror() for all
      names listed in __introspectable__.
    - Seal factory-backed spec classes against subclassing.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    - __displayable__ (if set) narrows which properties are shown by __rich_repr__;
      otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        if factory := options.get("factory", False):
            namespace["__call__"] = _invoker(options["signature"])
            namespace["__module__"] = "dynamic-factory::arguments"

        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - flag(flag='--write-info-json', repeatable=False, group='filesystem', ...)
            """
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        if factory:
            @rename("__init_subclass__")
            def __init_subclass__(cls, **options):  # NOQA: F-841
                raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
            self.__init_subclass__ = classmethod(__init_subclass__)

        return self


def _sanitize_choices(cls, choices, /):
    # Non-set collections reject duplicates and are frozen into a tuple for stable display.
    if not isinstance(choices, Iterable) or isinstance(choices, str):
        raise TypeError(f"{cls.__typename__} 'choices' must be a non-string iterable")
    if not isinstance(choices, Set):
        sanitized = []
        for choice in choices:
            if choice in sanitized:
                raise ValueError(f"{cls.__typename__} 'choices' cannot contain duplicates")
            sanitized.append(choice)
        choices = tuple(sanitized)
    if not all(isinstance(choice, str) for choice in choices):
        raise TypeError(f"{cls.__typename__} 'choices' must contain strings")
    return choices


def _sanitize_descr(cls, descr, /):
    if not isinstance(descr, str | Text | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    elif isinstance(descr, str) and not (descr := descr.strip()):
        raise ValueError(f"{cls.__typename__} 'descr' cannot be empty")
    return coalesce(descr)


class Param(metaclass=ArgumentType):
    """
    One parameter of an option call.

    - name: keyword name of the parameter on the generated builder method.
    - kind: converter turning the raw value into token text (see ytbuilder.converters).
    - default: Unset makes the param required; None makes it optional and, when
      omitted, absent from the emitted tokens; any other value is used as-is when
      the caller omits the argument.
    - choices: closed set of accepted token values (empty: unrestricted). For
      list-valued params every item is checked.
    """

    __introspectable__ = (
        "name",
        "kind",
        "default",
        "choices",
        "descr",
    )

    def __new__(cls, name, /, kind=text, default=Unset, choices=(), descr=Unset):
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} 'name' must be a string")
        elif not name.isidentifier() or keyword.iskeyword(name) or name == "self":
            raise ValueError(f"{cls.__typename__} 'name' must be a valid parameter name, not {name!r}")
        if not callable(kind):
            raise TypeError(f"{cls.__typename__} 'kind' must be callable")

        self = super().__new__(cls)
        self._name = name
        self._kind = kind
        self._default = default
        self._choices = _sanitize_choices(cls, choices)
        self._descr = _sanitize_descr(cls, descr)

        if default is not Unset and default is not None:
            try:
                self.convert(default)
            except InputError as fault:
                raise ValueError(f"{cls.__typename__} {name!r} has an invalid default: {fault}") from None
        return self

    @property
    def required(self):
        return self._default is Unset

    @property
    def optional(self):
        """True when the param may be absent from the emitted tokens."""
        return self._default is None

    def convert(self, value, /):
        """
        Convert a raw value into token text; return None for an absent optional.

        Raises an InputError refinement without option context.
        """
        if value is None and self._default is None:
            return None
        token = self._kind(value)
        if self._choices:
            for item in token.split(",") if self._kind is listing else (token,):
                if item not in self._choices:
                    raise InvalidChoiceError(
                        f"{item!r} is not one of {", ".join(map(repr, self._choices))}",
                        hint=f"choose from {", ".join(self._choices)}",
                    )
        return token

    def __param__(self):
        return self


class Join(metaclass=ArgumentType):
    """
    Compound token layout: a primary param followed by (separator, param) parts.

    Join("browser", ("+", "keyring"), (":", "profile"), ("::", "container"))
    encodes as browser+keyring:profile::container, skipping absent parts together
    with their separator.
    """

    __introspectable__ = (
        "primary",
        "parts",
    )

    def __new__(cls, primary, /, *parts):
        if not isinstance(primary, str):
            raise TypeError(f"{cls.__typename__} 'primary' must be a param name")
        if not parts:
            raise TypeError(f"{cls.__typename__} must specify at least one part")
        for part in parts:
            match part:
                case (str() as separator, str()) if separator:
                    pass
                case _:
                    raise TypeError(f"{cls.__typename__} parts must be (separator, name) pairs of strings")

        self = super().__new__(cls)
        self._primary = primary
        self._parts = tuple(map(tuple, parts))
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"{cls.__typename__} cannot reference a param twice")
        return self

    @property
    def names(self):
        """param names in token order."""
        return (self._primary, *(name for _, name in self._parts))

    def encode(self, values, /):
        """encode the already-converted values (name -> token text or None)."""
        return encode_compound(
            values[self._primary],
            [values[name] for _, name in self._parts],
            [separator for separator, _ in self._parts],
        )


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize and validate shared spec metadata.

    - group: optional category name. Defaults to the pluralized typename
      ("flags", "options", "cardinals"); non-empty after trimming when provided.
    - descr: optional short description. Unset becomes None.
    - repeatable: coerced to bool.

    Mutates metadata in place; raises TypeError/ValueError on malformed values.
    """
    if not isinstance(group := metadata["group"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'group' must be a string")
    elif isinstance(group, str) and not (group := group.strip()):
        raise ValueError(f"{cls.__typename__} 'group' cannot be empty")
    metadata["group"] = coalesce(group, cls.__typename__.replace("-", " ") + "s")

    metadata["descr"] = _sanitize_descr(cls, metadata["descr"])
    metadata["repeatable"] = bool(metadata["repeatable"])


def _sanitize_named_metadata(cls, metadata, /):
    r"""
    Internal: validate the flag text of named specs (Option, Flag).

    Name format regex: r"--?[^\W\d_](-?[^\W_]+)*"
    - Optional single or double hyphen prefix.
    - Segments separated by single hyphens (e.g. "--no-js-runtimes").
    - Segments start with a letter; digits are allowed afterwards ("--force-ipv4").
    """
    if not isinstance(flag := metadata["flag"], str):
        raise TypeError(f"{cls.__typename__} 'flag' must be a string")
    elif not re.fullmatch(r"--?[^\W\d_](-?[^\W_]+)*", flag):
        raise ValueError(f"{cls.__typename__} 'flag' must be a valid shell-style option name, not {flag!r}")


def _sanitize_parametric_metadata(cls, metadata, /):
    """
    Internal: validate and normalize params and layout of value-bearing specs.

    - params: at least one Param, unique names, no required param after an optional one.
    - layout: Unset (one token per param, declaration order) or a sequence of param
      names and Joins referencing every param exactly once.

    Also computes the call signature stored under metadata["signature"].
    """
    params = metadata["params"]
    if not params:
        raise TypeError(f"{cls.__typename__} must specify at least one param")
    names = []
    for param in params:
        if not hasattr(type(param), "__param__"):
            raise TypeError(f"{cls.__typename__} params must be Param instances")
        if param.name in names:
            raise ValueError(f"{cls.__typename__} params cannot contain duplicates ({param.name!r})")
        names.append(param.name)

    # inspect.Signature enforces "no required param after an optional one"
    try:
        metadata["signature"] = inspect.Signature([
            inspect.Parameter(
                param.name,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                default=inspect.Parameter.empty if param.required else param.default,
            )
            for param in params
        ])
    except ValueError:
        raise ValueError(f"{cls.__typename__} cannot declare a required param after an optional one") from None

    layout = coalesce(metadata["layout"], tuple(names))
    if isinstance(layout, str) or not isinstance(layout, Sequence):
        raise TypeError(f"{cls.__typename__} 'layout' must be a sequence of param names and joins")
    used = []
    for entry in layout:
        match entry:
            case str():
                used.append(entry)
            case Join():
                used.extend(entry.names)
            case _:
                raise TypeError(f"{cls.__typename__} 'layout' entries must be param names or joins")
    if unknown := set(used) - set(names):
        raise ValueError(f"{cls.__typename__} 'layout' names unknown params: {", ".join(sorted(unknown))}")
    if sorted(used) != sorted(names):
        raise ValueError(f"{cls.__typename__} 'layout' must use every param exactly once")

    metadata["params"] = tuple(params)
    metadata["layout"] = tuple(layout)


def _encode(self, args, kwargs, /):
    """
    Shared call path of value-bearing specs: bind, convert, lay out.

    Input faults are re-raised with the failing param attached; binding errors
    (wrong arity, unknown keyword) propagate as TypeError.
    """
    bound = self._signature.bind(*args, **kwargs)
    bound.apply_defaults()

    values = {}
    for param in self._params:
        try:
            values[param.name] = param.convert(bound.arguments[param.name])
        except InputError as fault:
            raise copy.replace(fault, param=param.name) from None

    tokens = []
    for entry in self._layout:
        if isinstance(entry, Join):
            tokens.append(entry.encode(values))
        elif (token := values[entry]) is not None:
            tokens.append(token)
    return tokens


def _construct(cls, metadata, /):
    # one sealed, factory-backed class per spec so that __call__ can carry its own signature
    self = super(cls, cls).__new__(builtins.type(cls)(
        cls.__name__,
        (cls,),
        {},
        factory=True,
        signature=metadata.get("signature", inspect.Signature()),
    ))
    for name, object in metadata.items():
        setattr(self, "_" + name, object)
    return self


class Cardinal(metaclass=ArgumentType):
    """
    Positional, value-bearing option (no flag text).

    Emits only its encoded tokens; used for the source URL.
    """

    __introspectable__ = (
        "params",
        "layout",
        "repeatable",
        "group",
        "descr",
    )

    def __new__(cls, *params, layout=Unset, repeatable=False, group=Unset, descr=Unset):
        metadata = {
            "params": params,
            "layout": layout,
            "repeatable": repeatable,
            "group": group,
            "descr": descr,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_parametric_metadata(cls, metadata)
        return _construct(cls, metadata)

    @property
    def flag(self):
        return None

    @property
    def signature(self):
        return self._signature

    def encode(self, /, *args, **kwargs):
        return _encode(self, args, kwargs)

    def __cardinal__(self):
        """
        Introspection hook: identify this spec as a Cardinal.
        """
        return self


class Option(metaclass=ArgumentType):
    """
    Named, value-bearing option.

    Highlights
    - Emits [flag, *tokens]; tokens follow the layout (default: one per param).
    - Optional params (default None) left out by the caller produce no token,
      or no segment inside a Join.
    - Single-use unless repeatable=True.
    """

    __introspectable__ = (
        "flag",
        "params",
        "layout",
        "repeatable",
        "group",
        "descr",
    )

    def __new__(cls, flag, /, *params, layout=Unset, repeatable=False, group=Unset, descr=Unset):
        metadata = {
            "flag": flag,
            "params": params,
            "layout": layout,
            "repeatable": repeatable,
            "group": group,
            "descr": descr,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_named_metadata(cls, metadata)
        _sanitize_parametric_metadata(cls, metadata)
        return _construct(cls, metadata)

    @property
    def signature(self):
        return self._signature

    def encode(self, /, *args, **kwargs):
        return [self._flag, *_encode(self, args, kwargs)]

    def __option__(self):
        """
        Introspection hook: identify this spec as an Option.
        """
        return self


class Flag(metaclass=ArgumentType):
    """
    Named, presence-only option: its presence is the signal (e.g. --no-update).
    """

    __introspectable__ = (
        "flag",
        "repeatable",
        "group",
        "descr",
    )

    def __new__(cls, flag, /, *, repeatable=False, group=Unset, descr=Unset):
        metadata = {
            "flag": flag,
            "repeatable": repeatable,
            "group": group,
            "descr": descr,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_named_metadata(cls, metadata)
        return _construct(cls, metadata)

    @property
    def params(self):
        return ()

    @property
    def signature(self):
        return inspect.Signature()

    def encode(self, /):
        return [self._flag]

    def __flag__(self):
        """
        Introspection hook: identify this spec as a Flag.
        """
        return self


__all__ = (
    # Parameters
    "Param",
    "Join",

    # Specs
    "Cardinal",
    "Option",
    "Flag",
)

# Remove the internal metaclass from the module namespace; not part of the public API.
del ArgumentType

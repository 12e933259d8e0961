"""
ytbuilder command builder.

Scope
- CommandBuilder: fluent builder producing a yt-dlp invocation. One method per
  catalog entry is generated when the class is created; each method validates its
  values, enforces single-use policy and appends the encoded tokens, then returns
  the builder so calls can be chained.

Control flow of one configuration call
1. bind the arguments against the option's declared params (TypeError on bad arity);
2. validate and encode every value (InputError, with option/param context);
3. single-use options only: consult and mark the call tracker (AlreadyUsedError);
4. append the tokens to the assembler.
Steps 1-3 never touch the builder and step 4 cannot fail, so a rejected call
leaves the builder exactly as it was.

Outputs
- materialize_tokens() / materialize_command_line() / materialize_structured() /
  materialize_shell_line(), plus build() and get() aliases and str(builder).
  Materializing is pure and repeatable at any point, even before any call.

Quick example
    >>> from ytbuilder import CommandBuilder
    >>> (CommandBuilder("/path/to/yt-dlp")
    ...     .js_runtime("quickjs", "/path/to/qjs")
    ...     .cookies_from_browser("firefox", profile="Profile 1")
    ...     .url("https://www.youtube.com/watch?v=_-AS5DtDeqs")
    ...     .build())
    '/path/to/yt-dlp --js-runtimes quickjs:/path/to/qjs --cookies-from-browser firefox:Profile 1 https://www.youtube.com/watch?v=_-AS5DtDeqs'
"""
import copy
import inspect
from collections import defaultdict

from rich.box import ROUNDED
from rich.table import Table
from rich.text import Text

from .assembler import Assembler
from .catalog import CATALOG
from .converters import text
from .faults import BuilderException, InputError, Outcome
from .tracker import CallTracker
from .utils import Unset, rename


def _generate(option, spec, owner, /):
    """
    Build the public method of one catalog entry.

    The method forwards to apply(); it only carries the option's real signature,
    name and description so that help(), IDEs and tracebacks read naturally.
    """
    @rename(option)
    def method(self, /, *args, **kwargs):
        return self.apply(option, *args, **kwargs)

    method.__qualname__ = f"{owner}.{option}"
    method.__signature__ = spec.signature.replace(
        parameters=(
            inspect.Parameter("self", inspect.Parameter.POSITIONAL_ONLY),
            *spec.signature.parameters.values(),
        ),
        return_annotation=owner,
    )
    flag = spec.flag or "positional"
    usage = "repeatable" if spec.repeatable else "single-use"
    method.__doc__ = f"{spec.descr or option} ({flag}, {usage})."
    return method


class BuilderType(type):
    """
    Metaclass generating one method per entry of the class's __catalog__.

    - Methods defined explicitly in the class body win over generated ones.
    - A catalog entry whose name collides with a builder attribute (apply, build, ...)
      is rejected with TypeError at class creation.
    - Subclasses may extend or replace __catalog__; inherited generated methods
      stay available.
    """

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(cls, name, bases, namespace, **options)

        generated = set().union(*(getattr(base, "__generated__", ()) for base in bases))
        for option, spec in getattr(self, "__catalog__", {}).items():
            if option in namespace:
                continue
            if hasattr(self, option) and option not in generated:
                raise TypeError(f"catalog entry {option!r} collides with {name}.{option}")
            setattr(self, option, _generate(option, spec, name))
            generated.add(option)

        self.__generated__ = frozenset(generated)
        return self


class CommandBuilder(metaclass=BuilderType):
    """
    Fluent, single-owner builder of a yt-dlp command.

    Configuration
    - executable: program name or path; Unset or None selects default_executable.
    - default_executable: class attribute, override in subclasses.
    - __catalog__: mapping of method name -> declaration driving the generated methods.

    State
    - an append-only token sequence (order equals call order);
    - the set of single-use options already configured.
    """

    __catalog__ = CATALOG
    default_executable = "yt-dlp"

    def __init__(self, executable=Unset, /):
        try:
            if executable is None or executable is Unset:
                executable = type(self).default_executable
            executable = text(executable)
        except InputError as fault:
            raise copy.replace(fault, option="executable") from None
        self._assembler = Assembler(executable)
        self._tracker = CallTracker()

    @property
    def executable(self):
        return self._assembler.executable

    def apply(self, option, /, *args, **kwargs):
        """
        Configure the catalog entry named option with the given values.

        Raises
        - KeyError: option is not in the catalog.
        - TypeError: the call does not match the option's parameters.
        - InputError: a value failed validation (builder untouched).
        - AlreadyUsedError: a single-use option was configured before (builder untouched).
        """
        try:
            spec = type(self).__catalog__[option]
        except KeyError:
            raise KeyError(f"unknown option {option!r}") from None

        try:
            tokens = spec(*args, **kwargs)
        except InputError as fault:
            raise copy.replace(fault, option=option) from None

        if not spec.repeatable:
            self._tracker.check_and_mark(option)
        self._assembler.append(*tokens)
        return self

    def attempt(self, option, /, *args, **kwargs):
        """
        Result-returning form of apply().

        Returns Outcome() on success, Outcome(fault) when the call was rejected by
        validation or single-use policy; the builder is untouched in that case.
        Programming errors (unknown option, bad arity) still raise.
        """
        try:
            self.apply(option, *args, **kwargs)
        except BuilderException as fault:
            return Outcome(fault)
        return Outcome()

    def append(self, *tokens):
        """append raw tokens verbatim; never tracked, may be called any number of times."""
        self._assembler.append(*tokens)
        return self

    def used(self, option, /):
        """return True when the single-use option has already been configured."""
        return self._tracker.used(option)

    def materialize_tokens(self):
        return self._assembler.materialize_tokens()

    def materialize_command_line(self):
        """executable and tokens joined by single spaces, without any shell quoting."""
        return self._assembler.materialize_command_line()

    def materialize_structured(self):
        return self._assembler.materialize_structured()

    def materialize_shell_line(self):
        return self._assembler.materialize_shell_line()

    def build(self):
        """alias of materialize_command_line()."""
        return self.materialize_command_line()

    def get(self):
        """alias of materialize_structured()."""
        return self.materialize_structured()

    @classmethod
    def describe(cls, *options):
        """
        Render catalog entries as a rich Table (all entries when none are named).

        Raises KeyError for names missing from the catalog.
        """
        catalog = cls.__catalog__
        for option in options:
            if option not in catalog:
                raise KeyError(f"unknown option {option!r}")

        groups = defaultdict(list)
        for option, spec in catalog.items():
            if not options or option in options:
                groups[spec.group].append((option, spec))

        table = Table(
            "method", "flag", "arguments", "use", "help",
            title=Text("options", "bold"),
            box=ROUNDED,
            header_style="bold",
        )
        for entries in groups.values():
            for index, (option, spec) in enumerate(entries):
                table.add_row(
                    Text(option, "bold #00E5FF"),
                    Text(spec.flag or "positional", "#E6E6F0"),
                    Text(" ".join(map(_metavar, spec.params)), "italic"),
                    Text("many" if spec.repeatable else "once", "dim"),
                    Text(spec.descr or "", "#C8C8D0"),
                    end_section=index == len(entries) - 1,
                )
        return table

    def __str__(self):
        return self.materialize_command_line()

    def __repr__(self):
        return f"{type(self).__name__}({self.materialize_command_line()!r})"

    def __rich_repr__(self):
        yield "executable", self.executable
        yield "tokens", self.materialize_tokens()

    def __rich__(self):
        return self.materialize_structured().__rich__()


def _metavar(param, /):
    if param.required:
        return param.name.upper()
    if param.optional:
        return f"[{param.name.upper()}]"
    return f"[{param.name.upper()}={param.default}]"


__all__ = ("CommandBuilder",)

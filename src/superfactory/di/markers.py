# superfactory/di/markers.py
"""
Factory & injection markers
──────────────────────────────────────────────
• @object_factory  → tags a static/class method (or module function) as a factory
• Inject           → tags a field: `dep: Annotated[Widget, Inject]`
• FactoryOperation → resolved descriptor of one factory (return + param types)
• CreatorTable     → explicit, ordered list of factories built in code
──────────────────────────────────────────────
"""
from __future__ import annotations

import dataclasses
import inspect
import logging
import types
import weakref
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, get_type_hints

from superfactory.di.annotations import RESOLUTION_ERRORS, module_globals, raw_annotations, resolve_each
from superfactory.di.typecheck import MISSING
from superfactory.errors import InvalidArgumentError, type_name

logger = logging.getLogger(__name__)

_FACTORY_ATTR = "__superfactory_factory__"


def object_factory(func):
    """
    Mark a callable as a factory operation.

    Works above or below @staticmethod / @classmethod:

        class WidgetCreator:
            @object_factory
            @staticmethod
            def make(value: int, label: str) -> Widget:
                return Widget(value, label)
    """
    target = func.__func__ if isinstance(func, (staticmethod, classmethod)) else func
    setattr(target, _FACTORY_ATTR, True)
    return func


def is_object_factory(obj: Any) -> bool:
    if isinstance(obj, (staticmethod, classmethod)):
        obj = obj.__func__
    return getattr(obj, _FACTORY_ATTR, False) is True


class Inject:
    """Injection marker. Use the class or an instance inside Annotated[...]."""

    def __repr__(self) -> str:
        return "Inject"


def is_inject_marker(meta: Any) -> bool:
    return meta is Inject or isinstance(meta, Inject)


def _type_hints(func: Callable[..., Any]) -> Dict[str, Any]:
    raw = inspect.unwrap(getattr(func, "__func__", func))
    try:
        return get_type_hints(raw, include_extras=True)
    except RESOLUTION_ERRORS:
        # Resolve entry by entry: an unresolved parameter falls back to Any,
        # an unresolved return type leaves the operation without one.
        hints, failed = resolve_each(raw_annotations(raw), module_globals(raw))
        logger.warning(
            "Cannot resolve annotations %s of %s: %s",
            sorted(failed), type_name(raw), "; ".join(str(e) for e in failed.values()),
        )
        return hints


@dataclass(frozen=True)
class FactoryOperation:
    """
    One factory operation, as seen by the resolver.

    Attributes
    ----------
    name : str
        Qualified name, used in error messages.
    func : callable
        Invocable handle; called with the positional args of create().
    returns : type
        Declared return type (MISSING when unannotated).
    params : tuple
        Declared positional parameter types, in order. Unannotated → Any.
    static : bool
        False for plain instance methods; those are never selected.
    variadic : bool
        True when the signature has *args / **kwargs; arity never matches.
    """

    name: str
    func: Callable[..., Any]
    returns: Any
    params: Tuple[Any, ...]
    static: bool = True
    variadic: bool = False

    @classmethod
    def from_callable(
        cls, func: Callable[..., Any], *, name: Optional[str] = None, static: bool = True
    ) -> "FactoryOperation":
        """Build a descriptor from a callable's signature and type hints."""
        if isinstance(func, type):
            # A class is its own factory: parameters come from __init__.
            hints = {} if func.__init__ is object.__init__ else _type_hints(func.__init__)
            returns: Any = func
        else:
            hints = _type_hints(func)
            returns = hints.get("return", MISSING)

        params: List[Any] = []
        variadic = False
        for p in inspect.signature(func).parameters.values():
            if p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD):
                variadic = True
            elif p.kind is not p.KEYWORD_ONLY:
                params.append(hints.get(p.name, Any))

        return cls(
            name=name or getattr(func, "__qualname__", repr(func)),
            func=func,
            returns=returns,
            params=tuple(params),
            static=static,
            variadic=variadic,
        )

    def __call__(self, *args: Any) -> Any:
        return self.func(*args)


class CreatorTable:
    """
    Explicit creator source: factories are listed in code instead of discovered.

        table = CreatorTable("widgets")
        table.add(Widget)                                    # class constructor
        table.add(lambda: Widget(0, ""), returns=Widget)     # explicit types

        @table.factory
        def labelled(label: str) -> Widget: ...
    """

    def __init__(self, name: str = "CreatorTable"):
        self.name = name
        self.operations: List[FactoryOperation] = []

    def add(
        self,
        func: Callable[..., Any],
        *,
        returns: Any = MISSING,
        params: Optional[Sequence[Any]] = None,
        name: Optional[str] = None,
    ) -> "CreatorTable":
        op = FactoryOperation.from_callable(func, name=name)
        if returns is not MISSING:
            op = dataclasses.replace(op, returns=returns)
        if params is not None:
            op = dataclasses.replace(op, params=tuple(params))
        self.operations.append(op)
        return self

    def factory(self, func: Callable[..., Any]) -> Callable[..., Any]:
        self.add(func)
        return func

    def __iter__(self) -> Iterator[FactoryOperation]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)

    def __repr__(self) -> str:
        return f"CreatorTable({self.name!r}, {len(self.operations)} operations)"


# Descriptors discovered on classes / modules, built once per creator.
_DISCOVERED: "weakref.WeakKeyDictionary[Any, Tuple[FactoryOperation, ...]]" = weakref.WeakKeyDictionary()


def _discover(creator: Any) -> Iterator[FactoryOperation]:
    if isinstance(creator, types.ModuleType):
        for name, value in vars(creator).items():
            if inspect.isfunction(value) and is_object_factory(value):
                yield FactoryOperation.from_callable(value, name=f"{creator.__name__}.{name}")
        return

    for name, raw in vars(creator).items():
        if not is_object_factory(raw):
            continue
        yield FactoryOperation.from_callable(
            getattr(creator, name),
            name=f"{creator.__qualname__}.{name}",
            static=isinstance(raw, (staticmethod, classmethod)),
        )


def iter_operations(creator: Any) -> Iterator[FactoryOperation]:
    """
    Iterate the factory operations of a creator source in declaration order.
    Accepts a class, a module or a CreatorTable. Descriptors of classes and
    modules are cached; a CreatorTable is read as it is.
    """
    if isinstance(creator, CreatorTable):
        return iter(creator.operations)
    if not isinstance(creator, (type, types.ModuleType)):
        raise InvalidArgumentError(f"Unsupported creator source {type_name(creator)}")

    operations = _DISCOVERED.get(creator)
    if operations is None:
        operations = _DISCOVERED[creator] = tuple(_discover(creator))
    return iter(operations)

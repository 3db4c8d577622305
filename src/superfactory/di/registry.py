from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar

from superfactory.config.settings import FactorySettings, get_settings
from superfactory.di.inject import inject as inject_fields
from superfactory.di.resolver import find_factory, has_factory_for
from superfactory.errors import (
    ConstructionError,
    InvalidArgumentError,
    NoMatchingFactoryError,
    NullFactoryResultError,
    RegistrationError,
    UnknownTargetError,
    type_name,
)

"""
──────────────────────────────────────────────────────────────────────────────
Object Creator Registry
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Map target types → creator sources and build instances on demand.

APIs:
    - register(target, creator)
    - create(target, *args) → instance (fields tagged Inject are filled)
    - create_with(target, args) → same, explicit argument sequence

A SuperFactory is an explicit object; the module-level functions work on a
process-wide default instance (see get_default_factory / set_default_factory).

Not thread-safe: the table is plain shared state with no locking.

Usage:
    class WidgetCreator:
        @object_factory
        @staticmethod
        def make(value: int, label: str) -> Widget:
            return Widget(value, label)

    register(Widget, WidgetCreator)
    widget = create(Widget, 8, "Hallo")
"""

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SuperFactory:
    """Registry of creator sources plus the resolver and injector that use it."""

    def __init__(self, settings: Optional[FactorySettings] = None):
        self.settings: FactorySettings = settings or get_settings()
        self._creators: Dict[Any, Any] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register(self, target: Any, creator: Any) -> None:
        """
        Register `creator` as the source of `target` instances.
        The creator must expose at least one static @object_factory whose
        return type is assignable to target. A previous entry is replaced.
        """
        if target is None:
            raise InvalidArgumentError("target must not be None")
        if creator is None:
            raise InvalidArgumentError("creator must not be None")
        if not has_factory_for(target, creator):
            raise RegistrationError(target, creator)

        previous = self._creators.get(target)
        self._creators[target] = creator
        if self.settings.log_registrations:
            if previous is not None and previous is not creator:
                logger.info(
                    "Replaced creator for %s: %s → %s",
                    type_name(target), type_name(previous), type_name(creator),
                )
            else:
                logger.info("Registered %s for %s", type_name(creator), type_name(target))

    def unregister(self, target: Any) -> None:
        self._creators.pop(target, None)

    def is_registered(self, target: Any) -> bool:
        return target in self._creators

    def creator_of(self, target: Any) -> Any:
        try:
            return self._creators[target]
        except KeyError:
            raise UnknownTargetError(target) from None

    def targets(self) -> List[Any]:
        return list(self._creators)

    def clear(self) -> None:
        self._creators.clear()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def create(self, target: Type[T], *args: Any) -> T:
        """Build an instance of `target` from `args`, then inject its fields."""
        return self.create_with(target, args)

    def create_with(self, target: Type[T], args: Optional[Sequence[Any]]) -> T:
        if target is None:
            raise InvalidArgumentError("target must not be None")
        if args is None:
            raise InvalidArgumentError("args must not be None")

        instance = self._create_instance(target, tuple(args))
        self.inject(instance)
        return instance

    def inject(self, instance: Any) -> None:
        """Fill the Inject-tagged fields of an existing instance."""
        if instance is None:
            raise InvalidArgumentError("instance must not be None")
        inject_fields(instance, self)

    def _create_instance(self, target: Any, args: tuple) -> Any:
        creator = self.creator_of(target)
        op = find_factory(target, creator, args, strict=self.settings.strict_overloads)
        if op is None:
            raise NoMatchingFactoryError(target, args)

        try:
            instance = op(*args)
        except RecursionError:
            raise
        except Exception as e:
            raise ConstructionError(target, op.name) from e

        # Factories are not allowed to return None.
        if instance is None:
            raise NullFactoryResultError(target, op.name)
        return instance

    def __contains__(self, target: Any) -> bool:
        return self.is_registered(target)

    def __repr__(self) -> str:
        return f"SuperFactory({len(self._creators)} targets)"


# ──────────────────────────────────────────────────────────────
# Process-wide default factory
# ──────────────────────────────────────────────────────────────
_default: Optional[SuperFactory] = None


def get_default_factory() -> SuperFactory:
    """Return the process-wide SuperFactory (create it if missing)."""
    global _default
    if _default is None:
        _default = SuperFactory()
    return _default


def set_default_factory(factory: Optional[SuperFactory]) -> None:
    """Swap the process-wide factory (None → recreated lazily on next use)."""
    global _default
    _default = factory


def register(target: Any, creator: Any) -> None:
    get_default_factory().register(target, creator)


def create(target: Type[T], *args: Any) -> T:
    return get_default_factory().create_with(target, args)


def create_with(target: Type[T], args: Optional[Sequence[Any]]) -> T:
    return get_default_factory().create_with(target, args)


def inject(instance: Any) -> None:
    get_default_factory().inject(instance)


def creates(*targets: Any, factory: Optional[SuperFactory] = None) -> Callable[[type], type]:
    """
    Class decorator: register the decorated creator for each target on definition.

        @creates(Widget, Gadget)
        class Workshop:
            ...
    """
    if not targets:
        raise InvalidArgumentError("creates() needs at least one target")

    def decorator(creator: type) -> type:
        registry = factory or get_default_factory()
        for target in targets:
            registry.register(target, creator)
        return creator

    return decorator

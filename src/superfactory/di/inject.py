from __future__ import annotations
from typing import TYPE_CHECKING, Annotated, Any, Dict, Iterator, Tuple, get_args, get_origin

from superfactory.di.annotations import annotation_metadata, module_globals, raw_annotations, resolve_each
from superfactory.di.markers import is_inject_marker
from superfactory.di.typecheck import unwrap_optional
from superfactory.errors import InjectionError

if TYPE_CHECKING:
    from superfactory.di.registry import SuperFactory

"""
──────────────────────────────────────────────────────────────────────────────
Field Injection
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Fill fields tagged with the Inject marker on a freshly created instance.

Mechanics:
    - Reads the annotations of the instance's class (inherited ones included),
      one entry at a time; untagged names that do not resolve are skipped
    - Each `name: Annotated[T, Inject]` gets factory.create(T), zero args
    - Assignment goes through object.__setattr__ (works on frozen dataclasses)
    - Optional[T] is unwrapped to T
    - Every field gets its own fresh instance; nothing is cached

Used by:
    SuperFactory.create() → inject(instance, self) before returning

Example:
    class Holder:
        dep: Annotated[Widget, Inject]

    holder = factory.create(Holder)   # holder.dep is a new Widget

Cycles (A injects B injects A) are not detected and end in RecursionError.
"""


def injection_fields(cls: type) -> Iterator[Tuple[str, Any]]:
    """
    Yield (field name, type to create) for every Inject-tagged annotation.
    Each annotation of each class in the MRO is resolved on its own: an
    untagged annotation that does not resolve is skipped, a tagged one
    raises InjectionError.
    """
    hints: Dict[str, Any] = {}
    for base in reversed(cls.__mro__):
        globalns, localns = module_globals(base), dict(vars(base))
        raw = raw_annotations(base)
        resolved, failed = resolve_each(raw, globalns, localns)
        for name, error in failed.items():
            if any(is_inject_marker(m) for m in annotation_metadata(raw[name], globalns, localns)):
                raise InjectionError(cls, name) from error
            hints.pop(name, None)
        hints.update(resolved)

    for name, typ in hints.items():
        if get_origin(typ) is not Annotated:
            continue
        base_type, *metadata = get_args(typ)
        if any(is_inject_marker(m) for m in metadata):
            yield name, unwrap_optional(base_type)


def inject(obj: Any, factory: "SuperFactory") -> None:
    """
    Populate the Inject-tagged fields of `obj` using `factory`.
    No-op when injection is disabled in the factory's settings.
    """
    if not factory.settings.injection_enabled:
        return

    owner = type(obj)
    for name, typ in injection_fields(owner):
        # Unregistered field types raise UnknownTargetError here and abort the outer create().
        value = factory.create(typ)
        try:
            object.__setattr__(obj, name, value)
        except (AttributeError, TypeError) as e:
            raise InjectionError(owner, name) from e

from __future__ import annotations
import inspect
import types
from typing import Any, Annotated, Dict, Tuple, TypeVar, Union, get_args, get_origin

"""
──────────────────────────────────────────────────────────────────────────────
Type compatibility
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Decide whether a declared annotation accepts a runtime type.

Rules:
    - Any / object / missing annotation → accepts everything
    - Annotated[X, ...] → X
    - Union / Optional / X | Y → any member accepts
    - list[int], dict[str, X] … → checked on the origin (list, dict)
    - TypeVar → its bound (or object)
    - otherwise issubclass(), plus the numeric promotions type checkers
      allow for parameters (int → float, int/float → complex)

Used by:
    - resolver.parameters_match() → argument vs parameter
    - resolver.returns_match()    → target vs declared return type
"""

NoneType = type(None)
MISSING = inspect.Parameter.empty

_PROMOTIONS: Dict[type, Tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


def unwrap_annotated(typ: Any) -> Any:
    if get_origin(typ) is Annotated:
        return get_args(typ)[0]
    return typ


def union_members(typ: Any) -> Tuple[Any, ...] | None:
    """Members of a Union / X | Y annotation, or None for anything else."""
    origin = get_origin(typ)
    if origin is Union or origin is types.UnionType:
        return get_args(typ)
    return None


def unwrap_optional(typ: Any) -> Any:
    """Optional[X] → X. Other unions are returned unchanged."""
    typ = unwrap_annotated(typ)
    members = union_members(typ)
    if members is not None:
        concrete = [m for m in members if m is not NoneType]
        if len(concrete) == 1:
            return concrete[0]
    return typ


def _as_class(typ: Any) -> Any:
    if typ is None:
        return NoneType
    if isinstance(typ, TypeVar):
        return typ.__bound__ or object
    origin = get_origin(typ)
    return origin if origin is not None else typ


def accepts(declared: Any, actual: type, *, promote: bool = True) -> bool:
    """True if something declared as `declared` can hold a value of type `actual`."""
    declared = unwrap_annotated(declared)
    if declared is Any or declared is object or declared is MISSING:
        return True
    members = union_members(declared)
    if members is not None:
        return any(accepts(m, actual, promote=promote) for m in members)

    declared = _as_class(declared)
    if declared is Any or declared is object:
        return True
    if not isinstance(declared, type):
        return False
    if promote and any(issubclass(actual, p) for p in _PROMOTIONS.get(declared, ())):
        return True
    try:
        return issubclass(actual, declared)
    except TypeError:
        return False


def is_assignable(target: Any, returns: Any) -> bool:
    """
    Covariant return check: `target` accepts the declared return type.
    A union return type is compatible only if every non-None member is.
    """
    returns = unwrap_annotated(returns)
    if returns is MISSING:
        return False
    members = union_members(returns)
    if members is not None:
        concrete = [m for m in members if m is not NoneType]
        return bool(concrete) and all(is_assignable(target, m) for m in concrete)

    returns = _as_class(returns)
    if not isinstance(returns, type):
        return False
    return accepts(target, returns, promote=False)

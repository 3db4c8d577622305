from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence

from superfactory.di.markers import FactoryOperation, iter_operations
from superfactory.di.typecheck import accepts, is_assignable
from superfactory.errors import AmbiguousFactoryError, type_name

"""
──────────────────────────────────────────────────────────────────────────────
Factory Resolution
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Pick the factory operation of a creator that builds `target` from `args`.

Algorithm (first match wins, declaration order):
    1. only @object_factory operations that are static / class methods
    2. declared return type assignable to target (covariant)
    3. same number of positional parameters as args
    4. every non-None arg is accepted by its parameter type
       (None matches any parameter, no type check)

No ambiguity detection unless strict=True, in which case more than one
match raises AmbiguousFactoryError.
"""

logger = logging.getLogger(__name__)


def parameters_match(args: Sequence[Any], params: Sequence[Any]) -> bool:
    """Check whether the runtime args fit the declared parameter types."""
    if len(args) != len(params):
        return False
    for arg, declared in zip(args, params):
        if arg is None:
            continue
        if not accepts(declared, type(arg)):
            return False
    return True


def returns_match(target: Any, op: FactoryOperation) -> bool:
    """Selectable at all for `target`: static, fixed arity, compatible return type."""
    return op.static and not op.variadic and is_assignable(target, op.returns)


def has_factory_for(target: Any, creator: Any) -> bool:
    """True if the creator exposes at least one selectable factory returning `target`."""
    return any(returns_match(target, op) for op in iter_operations(creator))


def find_factory(
    target: Any, creator: Any, args: Sequence[Any], *, strict: bool = False
) -> Optional[FactoryOperation]:
    """
    Return the factory to call, or None if nothing fits.
    With strict=True every candidate is examined and ties are rejected.
    """
    matches: List[FactoryOperation] = []
    for op in iter_operations(creator):
        if not returns_match(target, op):
            continue
        if parameters_match(args, op.params):
            if not strict:
                logger.debug("Selected %s for %s", op.name, type_name(target))
                return op
            matches.append(op)

    if len(matches) > 1:
        raise AmbiguousFactoryError(target, matches)
    return matches[0] if matches else None

from __future__ import annotations
import builtins
import inspect
import sys
import types
from typing import Annotated, Any, Dict, Optional, Tuple, get_args, get_origin, get_type_hints

"""
──────────────────────────────────────────────────────────────────────────────
Per-annotation resolution
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Resolve annotations one entry at a time, so a single unresolvable name
    (typically a TYPE_CHECKING-only import under `from __future__ import
    annotations`) does not hide the entries that do resolve.

APIs:
    - raw_annotations(obj)              → the object's own, unevaluated annotations
    - resolve_each(raw, globalns, ...)  → (resolved, failed) dicts
    - annotation_metadata(raw, ...)     → Annotated[...] metadata, even when
                                          the base type does not resolve

Used by:
    - markers.FactoryOperation.from_callable() → factory signatures
    - inject.injection_fields()                → Inject-tagged fields
"""

# Evaluating a string annotation may fail in any of these ways.
RESOLUTION_ERRORS = (NameError, AttributeError, TypeError, SyntaxError)


def raw_annotations(obj: Any) -> Dict[str, Any]:
    """Own annotations of a class / function, without evaluating strings."""
    try:
        return dict(inspect.get_annotations(obj))
    except NameError:
        # Deferred annotations (3.14+) that reference missing names.
        import annotationlib

        return dict(annotationlib.get_annotations(obj, format=annotationlib.Format.STRING))


def module_globals(obj: Any) -> Dict[str, Any]:
    if isinstance(obj, type):
        module = sys.modules.get(obj.__module__)
        return dict(vars(module)) if module is not None else {}
    return getattr(inspect.unwrap(obj), "__globals__", {})


def resolve_annotation(raw: Any, globalns: Dict[str, Any], localns: Optional[Dict[str, Any]] = None) -> Any:
    holder = types.SimpleNamespace(__annotations__={"hint": raw})
    return get_type_hints(holder, globalns, localns, include_extras=True)["hint"]


def resolve_each(
    raw: Dict[str, Any], globalns: Dict[str, Any], localns: Optional[Dict[str, Any]] = None
) -> Tuple[Dict[str, Any], Dict[str, Exception]]:
    """Resolve every entry on its own. Returns (resolved, failed-with-error)."""
    resolved: Dict[str, Any] = {}
    failed: Dict[str, Exception] = {}
    for name, value in raw.items():
        try:
            resolved[name] = resolve_annotation(value, globalns, localns)
        except RESOLUTION_ERRORS as e:
            failed[name] = e
    return resolved, failed


class Unresolved:
    """Placeholder for a name that does not exist at runtime."""


class _LenientNamespace(dict):
    def __missing__(self, key: str) -> Any:
        return Unresolved


def annotation_metadata(
    raw: Any, globalns: Dict[str, Any], localns: Optional[Dict[str, Any]] = None
) -> Tuple[Any, ...]:
    """
    Metadata of an Annotated[...] annotation; () for anything else.
    Unknown names evaluate to `Unresolved`, so `Annotated[Missing, Inject]`
    still reports its Inject marker.
    """
    if isinstance(raw, str):
        namespace = _LenientNamespace(vars(builtins))
        namespace.update(globalns)
        namespace.update(localns or {})
        try:
            raw = eval(raw, {"__builtins__": {}}, namespace)
        except RESOLUTION_ERRORS:
            return ()
    if get_origin(raw) is Annotated:
        return get_args(raw)[1:]
    return ()

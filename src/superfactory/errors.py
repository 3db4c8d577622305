# superfactory/errors.py
"""
Error hierarchy
──────────────────────────────────────────────
Every failure raised by the factory derives from SuperFactoryError.
Nothing here is retried or recovered: errors surface to the direct caller.
──────────────────────────────────────────────
"""
from __future__ import annotations
from typing import Any


def type_name(obj: Any) -> str:
    """Readable `module.QualName` for classes, modules and tables."""
    if obj is None:
        return "None"
    module = getattr(obj, "__module__", None)
    qualname = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None)
    if qualname is None:
        return repr(obj)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"


class SuperFactoryError(Exception):
    """Base class for all factory errors."""


class InvalidArgumentError(SuperFactoryError, ValueError):
    """A required input (target, creator, argument list) is None."""


class RegistrationError(SuperFactoryError):
    """The creator exposes no static factory returning the target type."""

    def __init__(self, target: Any, creator: Any):
        self.target = target
        self.creator = creator
        super().__init__(
            f"{type_name(creator)} has no factory method that creates an instance of {type_name(target)}"
        )


class UnknownTargetError(SuperFactoryError, LookupError):
    def __init__(self, target: Any):
        self.target = target
        super().__init__(f"Unknown class to instantiate {type_name(target)}")


class NoMatchingFactoryError(SuperFactoryError, LookupError):
    def __init__(self, target: Any, args: tuple):
        self.target = target
        self.args_types = tuple(type(a).__name__ for a in args)
        super().__init__(
            f"Unable to find factory method for {type_name(target)} "
            f"accepting ({', '.join(self.args_types)})"
        )


class AmbiguousFactoryError(SuperFactoryError):
    """Raised in strict mode when more than one factory matches the arguments."""

    def __init__(self, target: Any, candidates: list):
        self.target = target
        self.candidates = candidates
        names = ", ".join(op.name for op in candidates)
        super().__init__(f"Ambiguous factory methods for {type_name(target)}: {names}")


class NullFactoryResultError(SuperFactoryError):
    def __init__(self, target: Any, operation: str):
        self.target = target
        self.operation = operation
        super().__init__(f"Factory method '{operation}' for '{type_name(target)}' has returned None")


class ConstructionError(SuperFactoryError):
    """The selected factory raised. The original exception is `__cause__`."""

    def __init__(self, target: Any, operation: str):
        self.target = target
        self.operation = operation
        super().__init__(f"Unable to instantiate {type_name(target)} via '{operation}'")


class InjectionError(SuperFactoryError):
    """A constructed dependency could not be assigned into its field."""

    def __init__(self, owner: Any, field: str):
        self.owner = owner
        self.field = field
        super().__init__(f"Unable to inject into '{field}' of '{type_name(owner)}'")

# superfactory/__init__.py
"""
superfactory
──────────────────────────────────────────────────────────────
Build any object from a registered creator.
Provides:
    - register(target, creator) / create(target, *args)
    - @object_factory tagging for creator methods
    - Annotated[T, Inject] field injection after construction
    - Explicit SuperFactory objects or a process-wide default
    - Settings via SUPERFACTORY_* environment variables
Single-threaded: registration and creation share one unlocked table.
──────────────────────────────────────────────────────────────
"""

__version__ = "0.1.0"

from superfactory.config.settings import FactorySettings, get_settings
from superfactory.di.markers import CreatorTable, FactoryOperation, Inject, object_factory
from superfactory.di.registry import (
    SuperFactory,
    create,
    create_with,
    creates,
    get_default_factory,
    inject,
    register,
    set_default_factory,
)
from superfactory.errors import (
    AmbiguousFactoryError,
    ConstructionError,
    InjectionError,
    InvalidArgumentError,
    NoMatchingFactoryError,
    NullFactoryResultError,
    RegistrationError,
    SuperFactoryError,
    UnknownTargetError,
)

__all__ = [
    "SuperFactory",
    "register",
    "create",
    "create_with",
    "inject",
    "creates",
    "get_default_factory",
    "set_default_factory",
    "object_factory",
    "Inject",
    "FactoryOperation",
    "CreatorTable",
    "FactorySettings",
    "get_settings",
    "SuperFactoryError",
    "InvalidArgumentError",
    "RegistrationError",
    "UnknownTargetError",
    "NoMatchingFactoryError",
    "AmbiguousFactoryError",
    "NullFactoryResultError",
    "ConstructionError",
    "InjectionError",
]

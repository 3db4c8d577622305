from .markers import CreatorTable, FactoryOperation, Inject, object_factory
from .registry import (
    SuperFactory,
    create,
    create_with,
    creates,
    get_default_factory,
    inject,
    register,
    set_default_factory,
)

__all__ = [
    "CreatorTable",
    "FactoryOperation",
    "Inject",
    "object_factory",
    "SuperFactory",
    "create",
    "create_with",
    "creates",
    "get_default_factory",
    "inject",
    "register",
    "set_default_factory",
]

"""
Testing utilities for superfactory users.
──────────────────────────────────────────────────────────────
Provides pytest fixtures that hand out isolated registries.
──────────────────────────────────────────────────────────────
"""
from .fixtures import default_factory, factory

__all__ = ["default_factory", "factory"]

"""
──────────────────────────────────────────────────────────────────────────────
superfactory.testing.fixtures
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Reusable pytest fixtures so tests never leak registrations.

Exports:
    - factory         → a fresh SuperFactory per test
    - default_factory → swaps the process-wide factory for an empty one

Usage in your test (or re-export from conftest.py):
    from superfactory.testing.fixtures import factory

    def test_widget(factory):
        factory.register(Widget, WidgetCreator)
        assert factory.create(Widget, 8, "Hallo").value == 8
──────────────────────────────────────────────────────────────────────────────
"""

import pytest

from superfactory.config.settings import FactorySettings
from superfactory.di.registry import SuperFactory, get_default_factory, set_default_factory


# ──────────────────────────────────────────────────────────────
# Isolated factory (per test)
# ──────────────────────────────────────────────────────────────
@pytest.fixture()
def factory():
    """A fresh SuperFactory; any local .env file is ignored."""
    return SuperFactory(settings=FactorySettings(_env_file=None))


# ──────────────────────────────────────────────────────────────
# Process-wide default, restored afterwards
# ──────────────────────────────────────────────────────────────
@pytest.fixture()
def default_factory(factory):
    """Install `factory` as the default for module-level register()/create()."""
    previous = get_default_factory()
    set_default_factory(factory)
    yield factory
    set_default_factory(previous)

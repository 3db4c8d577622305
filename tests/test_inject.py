import pytest

from superfactory import FactorySettings, InjectionError, SuperFactory, UnknownTargetError

from tests.models import (
    Chicken,
    Egg,
    FrozenHolder,
    Holder,
    HolderCreator,
    PoultryCreator,
    SlottedHolder,
    TwinHolder,
    Widget,
    WidgetCreator,
)


@pytest.fixture()
def wired(factory):
    factory.register(Widget, WidgetCreator)
    for target in (Holder, TwinHolder, FrozenHolder, SlottedHolder):
        factory.register(target, HolderCreator)
    return factory


def test_injects_tagged_field(wired):
    holder = wired.create(Holder)

    assert isinstance(holder.dep, Widget)
    assert holder.dep == Widget(0, "default")


def test_injected_values_are_fresh_per_create(wired):
    first = wired.create(Holder)
    second = wired.create(Holder)

    assert first.dep is not second.dep


def test_injected_values_are_fresh_per_field(wired):
    twin = wired.create(TwinHolder)

    assert isinstance(twin.first, Widget)
    assert isinstance(twin.second, Widget)
    assert twin.first is not twin.second
    assert twin.note == "untouched"


def test_injects_into_frozen_dataclass(wired):
    holder = wired.create(FrozenHolder)

    assert holder.dep == Widget(0, "default")


def test_injection_failure_on_unassignable_field(wired):
    with pytest.raises(InjectionError) as exc:
        wired.create(SlottedHolder)

    assert exc.value.field == "dep"
    assert isinstance(exc.value.__cause__, AttributeError)


def test_unregistered_dependency_aborts_create(factory):
    factory.register(Holder, HolderCreator)

    with pytest.raises(UnknownTargetError) as exc:
        factory.create(Holder)
    assert exc.value.target is Widget


def test_injection_disabled_is_a_no_op():
    plain = SuperFactory(settings=FactorySettings(_env_file=None, injection_enabled=False))
    plain.register(Holder, HolderCreator)

    holder = plain.create(Holder)

    assert not hasattr(holder, "dep")


def test_inject_existing_instance(wired):
    holder = Holder()
    wired.inject(holder)

    assert holder.dep == Widget(0, "default")


def test_cyclic_injection_exhausts_the_stack(factory):
    factory.register(Chicken, PoultryCreator)
    factory.register(Egg, PoultryCreator)

    with pytest.raises(RecursionError):
        factory.create(Chicken)

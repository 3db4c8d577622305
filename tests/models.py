"""Target types and creators shared by the test modules."""
from dataclasses import dataclass
from numbers import Number
from typing import Annotated, Optional

from superfactory import Inject, object_factory


@dataclass
class Widget:
    value: int
    label: str


class MyObject:
    value: Optional[int] = None
    d: Optional[float] = None
    s: Optional[str] = None


class Holder:
    dep: Annotated[Widget, Inject]


class TwinHolder:
    first: Annotated[Widget, Inject]
    second: Annotated[Widget, Inject()]
    note: str = "untouched"


@dataclass(frozen=True)
class FrozenHolder:
    dep: Annotated[Optional[Widget], Inject] = None


class SlottedHolder:
    __slots__ = ()
    dep: Annotated[Widget, Inject]


class Chicken:
    egg: Annotated["Egg", Inject]


class Egg:
    chicken: Annotated[Chicken, Inject]


class DummyCreator:
    @object_factory
    @staticmethod
    def create_int(value: int, v2: float) -> int:
        return int(value)

    @object_factory
    @staticmethod
    def create_default_int() -> int:
        return 5

    @object_factory
    @staticmethod
    def create_my_object(value: int, d: float, s: str) -> MyObject:
        o = MyObject()
        o.value = value
        o.d = d
        o.s = s
        return o

    @object_factory
    @staticmethod
    def create_empty_my_object() -> MyObject:
        return MyObject()


class WidgetCreator:
    @object_factory
    @staticmethod
    def make(value: Number, label: str) -> Widget:
        return Widget(value, label)

    @object_factory
    @staticmethod
    def make_default() -> Widget:
        return Widget(0, "default")


class HolderCreator:
    @object_factory
    @staticmethod
    def holder() -> Holder:
        return Holder()

    @object_factory
    @staticmethod
    def twin_holder() -> TwinHolder:
        return TwinHolder()

    @object_factory
    @staticmethod
    def frozen_holder() -> FrozenHolder:
        return FrozenHolder()

    @object_factory
    @staticmethod
    def slotted_holder() -> SlottedHolder:
        return SlottedHolder()


class PoultryCreator:
    @object_factory
    @staticmethod
    def chicken() -> Chicken:
        return Chicken()

    @object_factory
    @staticmethod
    def egg() -> Egg:
        return Egg()

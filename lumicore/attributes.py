"""Observable, optionally persistent attributes grouped on an owning object."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Iterator, List, Optional, Type, TypeVar

from lumicore.events import Signal
from lumicore.utils import (
    deserialize_string_list,
    limit,
    remove_unique,
    serialize_string_list,
)

_log = logging.getLogger(__name__)

A = TypeVar("A", bound="SmartAttribute")


# -- conversions of stored state values ------------------------------------

def _to_double(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


def _to_integer(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    return 0


def _to_string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _to_bytes(value: Any) -> bytes:
    return bytes(value) if isinstance(value, (bytes, bytearray)) else b""


def _to_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


class ObjectWithAttributes:
    """Holds the attributes of one object and persists those that ask for it."""

    def __init__(self, parent: Any = None) -> None:
        self._parent = parent
        self._attributes: Dict[str, SmartAttribute] = {}
        self._persistent: List[SmartAttribute] = []

    @property
    def parent(self) -> Any:
        return self._parent

    def attr(self, name: str) -> Optional["SmartAttribute"]:
        """The attribute called ``name``, or None (with a warning) if absent."""
        if name not in self._attributes:
            _log.warning("Object has no attribute %s", name)
        return self._attributes.get(name)

    def attribute(self, name: str, kind: Type[A]) -> Optional[A]:
        """The attribute called ``name`` if it is an instance of ``kind``."""
        found = self._attributes.get(name)
        return found if isinstance(found, kind) else None

    def register_attribute(self, attribute: "SmartAttribute") -> None:
        """Make ``attribute`` available by name and persist it if requested."""
        self._attributes[attribute.name] = attribute
        if attribute.persistent:
            self._persistent.append(attribute)

    def write_attributes_to(self, state: Dict[str, Any]) -> None:
        """Store every persistent attribute into ``state``."""
        for attribute in self._persistent:
            attribute.write_to(state)

    def read_attributes_from(self, state: Dict[str, Any]) -> None:
        """Restore every persistent attribute from ``state``."""
        for attribute in self._persistent:
            attribute.read_from(state)


class SmartAttribute(ABC):
    """A named value that reports its changes through ``value_changed``.

    With an owner, the attribute registers itself there and takes the
    owner's parent as its own; otherwise ``parent`` is used as given.
    """

    def __init__(
        self,
        owner: Optional[ObjectWithAttributes],
        name: str,
        persistent: bool = True,
        parent: Any = None,
    ) -> None:
        self._name = name
        self._persistent = persistent
        self._parent = owner.parent if owner is not None else parent
        self.value_changed = Signal()
        if owner is not None:
            owner.register_attribute(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def persistent(self) -> bool:
        return self._persistent

    @property
    def block(self) -> Any:
        """The object this attribute belongs to."""
        return self._parent

    @abstractmethod
    def write_to(self, state: Dict[str, Any]) -> None:
        """Store the value into ``state``."""

    @abstractmethod
    def read_from(self, state: Dict[str, Any]) -> None:
        """Restore the value from ``state``."""


class _BoundedAttribute(SmartAttribute):
    """Numeric attribute whose assigned values are clamped to [min, max]."""

    _kind: type = float

    def __init__(self, owner, name, initial_value, minimum, maximum, persistent, parent) -> None:
        super().__init__(owner, name, persistent, parent)
        self._value = initial_value
        self._min = minimum
        self._max = maximum
        self.min_changed = Signal()
        self.max_changed = Signal()

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value) -> None:
        value = limit(self._min, self._kind(value), self._max)
        if value == self._value:
            return
        self._value = value
        self.value_changed.emit()

    @property
    def min(self):
        return self._min

    @min.setter
    def min(self, value) -> None:
        self._min = value
        self.min_changed.emit()

    @property
    def max(self):
        return self._max

    @max.setter
    def max(self, value) -> None:
        self._max = value
        self.max_changed.emit()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, {self._value!r})"


class DoubleAttribute(_BoundedAttribute):
    """A floating point value limited to [minimum, maximum]."""

    _kind = float

    def __init__(
        self,
        owner: Optional[ObjectWithAttributes],
        name: str,
        initial_value: float = 0.0,
        minimum: float = 0.0,
        maximum: float = 1.0,
        persistent: bool = True,
        parent: Any = None,
    ) -> None:
        super().__init__(owner, name, float(initial_value), float(minimum), float(maximum),
                         persistent, parent)

    def write_to(self, state: Dict[str, Any]) -> None:
        state[self._name] = self._value

    def read_from(self, state: Dict[str, Any]) -> None:
        self.value = _to_double(state.get(self._name))

    def __float__(self) -> float:
        return float(self._value)


class IntegerAttribute(_BoundedAttribute):
    """An integer value limited to [minimum, maximum]."""

    _kind = int

    def __init__(
        self,
        owner: Optional[ObjectWithAttributes],
        name: str,
        initial_value: int = 0,
        minimum: int = 0,
        maximum: int = 100,
        persistent: bool = True,
        parent: Any = None,
    ) -> None:
        super().__init__(owner, name, int(initial_value), int(minimum), int(maximum),
                         persistent, parent)

    def write_to(self, state: Dict[str, Any]) -> None:
        state[self._name] = self._value

    def read_from(self, state: Dict[str, Any]) -> None:
        self.value = _to_integer(state.get(self._name))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value


class StringAttribute(SmartAttribute):
    """A text value."""

    def __init__(
        self,
        owner: Optional[ObjectWithAttributes],
        name: str,
        initial_value: str = "",
        persistent: bool = True,
        parent: Any = None,
    ) -> None:
        super().__init__(owner, name, persistent, parent)
        self._value = initial_value

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        if value == self._value:
            return
        self._value = value
        self.value_changed.emit()

    def write_to(self, state: Dict[str, Any]) -> None:
        state[self._name] = self._value

    def read_from(self, state: Dict[str, Any]) -> None:
        self.value = _to_string(state.get(self._name))

    def __str__(self) -> str:
        return self._value


class BoolAttribute(SmartAttribute):
    """A boolean value."""

    def __init__(
        self,
        owner: Optional[ObjectWithAttributes],
        name: str,
        initial_value: bool = False,
        persistent: bool = True,
        parent: Any = None,
    ) -> None:
        super().__init__(owner, name, persistent, parent)
        self._value = bool(initial_value)

    @property
    def value(self) -> bool:
        return self._value

    @value.setter
    def value(self, value: bool) -> None:
        value = bool(value)
        if value == self._value:
            return
        self._value = value
        self.value_changed.emit()

    def write_to(self, state: Dict[str, Any]) -> None:
        state[self._name] = self._value

    def read_from(self, state: Dict[str, Any]) -> None:
        self.value = _to_bool(state.get(self._name))

    def __bool__(self) -> bool:
        return self._value


class _ListAttribute(SmartAttribute):
    """A list value with change-reporting edits."""

    def __init__(self, owner, name, initial_value, persistent, parent) -> None:
        super().__init__(owner, name, persistent, parent)
        self._value: List[Any] = list(initial_value)

    @property
    def value(self) -> List[Any]:
        """The list itself; edits made on it directly are not reported."""
        return self._value

    @value.setter
    def value(self, value: Iterable[Any]) -> None:
        value = list(value)
        if value == self._value:
            return
        self._value = value
        self.value_changed.emit()

    def append(self, value: Any) -> None:
        self._value.append(value)
        self.value_changed.emit()

    def remove_one(self, value: Any) -> None:
        """Remove the first occurrence of ``value``, if any."""
        remove_unique(self._value, value)
        self.value_changed.emit()

    def clear(self) -> None:
        self._value.clear()
        self.value_changed.emit()

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __contains__(self, item: Any) -> bool:
        return item in self._value


class StringListAttribute(_ListAttribute):
    """A list of strings, persisted as a binary blob."""

    def __init__(
        self,
        owner: Optional[ObjectWithAttributes],
        name: str,
        initial_value: Iterable[str] = (),
        persistent: bool = True,
        parent: Any = None,
    ) -> None:
        super().__init__(owner, name, initial_value, persistent, parent)

    def write_to(self, state: Dict[str, Any]) -> None:
        state[self._name] = serialize_string_list(self._value)

    def read_from(self, state: Dict[str, Any]) -> None:
        data = _to_bytes(state.get(self._name))
        self.value = deserialize_string_list(data) if data else []

    def append(self, value: str) -> None:
        super().append(value)

    def remove_one(self, value: str) -> None:
        super().remove_one(value)

    def clear(self) -> None:
        super().clear()


class VariantListAttribute(_ListAttribute):
    """A list of arbitrary serializable values."""

    def __init__(
        self,
        owner: Optional[ObjectWithAttributes],
        name: str,
        initial_value: Iterable[Any] = (),
        persistent: bool = True,
        parent: Any = None,
    ) -> None:
        super().__init__(owner, name, initial_value, persistent, parent)

    def write_to(self, state: Dict[str, Any]) -> None:
        state[self._name] = list(self._value)

    def read_from(self, state: Dict[str, Any]) -> None:
        self.value = _to_list(state.get(self._name))

    def append(self, value: Any) -> None:
        super().append(value)

    def remove_one(self, value: Any) -> None:
        super().remove_one(value)

    def clear(self) -> None:
        super().clear()
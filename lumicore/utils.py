"""Small helpers used across the package."""

from __future__ import annotations

import base64
import math
import re
import struct
import time
from typing import Any, Dict, Iterable, List, MutableSequence, TypeVar

import cbor2

T = TypeVar("T")

_NULL_LENGTH = 0xFFFFFFFF

_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*\Z")

_NUMBER_WORDS = {
    "one": 1.0, "eins": 1.0,
    "two": 2.0, "zwei": 2.0,
    "three": 3.0, "drei": 3.0,
    "four": 4.0, "vier": 4.0,
    "five": 5.0, "fünf": 5.0,
    "six": 6.0, "sechs": 6.0,
    "seven": 7.0, "sieben": 7.0,
    "eight": 8.0, "acht": 8.0,
    "nine": 9.0, "neun": 9.0,
    "ten": 10.0, "zehn": 10.0,
    "eleven": 11.0, "elf": 11.0,
    "twelve": 12.0, "zwölf": 12.0,
}


# -- numbers ---------------------------------------------------------------

def limit(minimum: Any, value: T, maximum: Any) -> T:
    """Clamp ``value`` to the range [minimum, maximum], in the value's type."""
    kind = type(value)
    if kind in (int, float):
        minimum, maximum = kind(minimum), kind(maximum)
    return max(minimum, min(value, maximum))


def limit_to_one(value: float) -> float:
    """Clamp ``value`` to the range [0, 1]."""
    return max(0.0, min(value, 1.0))


def real_mod(value: float, base: float) -> float:
    """Floating point modulo whose result has the sign of ``base``."""
    return math.fmod(math.fmod(value, base) + base, base)


def _truncated_mod(value: int, base: int) -> int:
    remainder = abs(value) % abs(base)
    return -remainder if value < 0 else remainder


def int_mod(value: int, base: int) -> int:
    """Integer modulo that is never negative for a positive ``base``."""
    if base == 0:
        raise ZeroDivisionError("integer modulo by zero")
    return _truncated_mod(_truncated_mod(value, base) + base, base)


def almost_median(values: Iterable[T]) -> T:
    """The median, or the upper of the two middle items for even sizes."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of an empty sequence")
    return ordered[len(ordered) // 2]


def string_to_double(text: str) -> float:
    """Parse a positive number, or an English or German number word up to 12.

    Anything else, including zero and negative numbers, gives 0.0.
    """
    if _NUMBER.match(text):
        number = float(text)
        if number > 0.0:
            return number
    return _NUMBER_WORDS.get(text, 0.0)


# -- sequences and strings -------------------------------------------------

def append_unique(items: MutableSequence[T], element: T) -> bool:
    """Append ``element`` unless present; return whether it was appended."""
    if element in items:
        return False
    items.append(element)
    return True


def remove_unique(items: MutableSequence[T], element: T) -> None:
    """Remove the first occurrence of ``element`` if there is one."""
    if element in items:
        items.remove(element)


def is_equal_insensitive(first: str, second: str) -> bool:
    """Compare two strings ignoring case."""
    return first.lower() == second.lower()


# -- binary serialization --------------------------------------------------

class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ValueError("serialized data is truncated")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def uint32(self) -> int:
        return struct.unpack(">I", self.take(4))[0]


def _encode_string(text: str) -> bytes:
    encoded = text.encode("utf-16-be")
    return struct.pack(">I", len(encoded)) + encoded


def serialize_string_list(items: Iterable[str]) -> bytes:
    """Encode strings as a count followed by length-prefixed UTF-16BE texts."""
    strings = list(items)
    return struct.pack(">I", len(strings)) + b"".join(_encode_string(s) for s in strings)


def deserialize_string_list(data: bytes) -> List[str]:
    """Decode the output of :func:`serialize_string_list`."""
    reader = _Reader(data)
    result = []
    for _ in range(reader.uint32()):
        length = reader.uint32()
        if length == _NULL_LENGTH:
            result.append("")
            continue
        if length % 2:
            raise ValueError("string length must be even")
        result.append(reader.take(length).decode("utf-16-be"))
    return result


def serialize_cbor_map(mapping: Dict[Any, Any]) -> bytes:
    """Encode a mapping as a length-prefixed CBOR document."""
    payload = cbor2.dumps(dict(mapping))
    return struct.pack(">I", len(payload)) + payload


def deserialize_cbor_map(data: bytes) -> Dict[Any, Any]:
    """Decode the output of :func:`serialize_cbor_map`.

    A document that does not hold a map gives an empty dict.
    """
    reader = _Reader(data)
    length = reader.uint32()
    if length == _NULL_LENGTH or length == 0:
        return {}
    value = cbor2.loads(reader.take(length))
    return dict(value) if isinstance(value, dict) else {}


def to_base64(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def from_base64(text: str) -> bytes:
    """Decode base64 text, tolerating missing padding."""
    cleaned = "".join(text.split())
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned)


# -- time ------------------------------------------------------------------

def now() -> float:
    """Current wall-clock time in seconds."""
    return time.time()


def diff(end: float, start: float) -> float:
    """Seconds from ``start`` to ``end``."""
    return end - start


def elapsed_sec_since(start: float) -> float:
    """Seconds elapsed since ``start``."""
    return diff(now(), start)


class Stopwatch:
    """Measures the time between successive laps."""

    def __init__(self) -> None:
        self._last = now()

    def lap(self) -> float:
        """Seconds since the previous lap (or creation); starts a new lap."""
        current = now()
        elapsed = diff(current, self._last)
        self._last = current
        return elapsed

    def elapsed(self) -> float:
        """Seconds since the previous lap without starting a new one."""
        return elapsed_sec_since(self._last)
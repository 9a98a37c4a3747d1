"""Canonical value model for signable objects.

This module maps dynamic Python values onto a closed set of variants that
every serializer can represent: null, boolean, integer, float, string,
ordered array and string-keyed object. Conversion is strict: anything else
raises ConversionError instead of being coerced.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Set, Tuple

from django_signing.exceptions import ConversionError

# Integers must fit either i64 or u64
MIN_INT = -(2**63)
MAX_INT = 2**64 - 1


class Value(ABC):
    """Abstract base class for canonical values."""

    @abstractmethod
    def to_python(self) -> Any:
        """Convert back to a plain JSON-native Python value.

        Returns:
            None, bool, int, float, str, list or dict.
        """
        ...


@dataclass(frozen=True)
class Null(Value):
    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Bool(Value):
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Int(Value):
    value: int

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class Float(Value):
    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class String(Value):
    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Array(Value):
    items: Tuple[Value, ...]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class Object(Value):
    """String-keyed map. Equality ignores insertion order."""

    members: Dict[str, Value]

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def to_python(self) -> dict[str, Any]:
        return {key: member.to_python() for key, member in self.members.items()}


def _object_key(key: Any) -> str:
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, str):
        return key
    try:
        return str(key)
    except Exception as e:
        raise ConversionError(type(key).__name__, "unprintable object key") from e


def to_value(obj: Any) -> Value:
    """Convert a Python value into its canonical representation.

    Dict keys are stringified: None becomes "null", booleans become
    "true"/"false" and everything else goes through str(). Tuples are
    treated as arrays.

    Args:
        obj: The value to convert.

    Returns:
        The canonical value.

    Raises:
        ConversionError: If obj, or anything nested in it, has an unsupported
            type, is a non-finite float or an integer outside 64 bits, or if obj
            contains itself or is nested too deeply to convert.

    Example:
        >>> to_value({"a": [1, None]})
        Object(members={'a': Array(items=(Int(value=1), Null()))})
    """
    try:
        return _convert(obj, set())
    except RecursionError:
        raise ConversionError(
            type(obj).__name__, "value is too deeply nested to convert"
        ) from None


def _convert(obj: Any, active: Set[int]) -> Value:
    if obj is None:
        return Null()

    # bool is a subclass of int
    if isinstance(obj, bool):
        return Bool(obj)

    if isinstance(obj, str):
        return String(obj)

    if isinstance(obj, int):
        if not MIN_INT <= obj <= MAX_INT:
            raise ConversionError(type(obj).__name__, f"integer {obj} does not fit in 64 bits")
        return Int(int(obj))

    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise ConversionError(type(obj).__name__, f"cannot convert non-finite float {obj}")
        return Float(float(obj))

    if isinstance(obj, (dict, list, tuple)):
        # ids of the containers currently being converted
        if id(obj) in active:
            raise ConversionError(type(obj).__name__, "cannot convert a value that contains itself")
        active.add(id(obj))
        try:
            if isinstance(obj, dict):
                return Object(
                    {_object_key(key): _convert(member, active) for key, member in obj.items()}
                )
            return Array(tuple(_convert(item, active) for item in obj))
        finally:
            active.discard(id(obj))

    raise ConversionError(type(obj).__name__)

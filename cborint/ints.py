"""Fixed-width CBOR integer items (major types 0 and 1).

A CBOR integer is stored as an unsigned magnitude of 1, 2, 4 or 8 bytes.
For a negative integer the logical value is ``-value - 1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IntWidth(Enum):
    """Storage width of an integer item, valued in bytes."""

    INT_8 = 1
    INT_16 = 2
    INT_32 = 4
    INT_64 = 8

    @property
    def max_value(self) -> int:
        """Largest magnitude that fits in this width."""
        return (1 << (8 * self.value)) - 1


class IntType(Enum):
    """Whether an integer item is positive or negative."""

    UINT = 0
    NEGINT = 1


def _check_value(width: IntWidth, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"integer value expected, got {type(value).__name__}")
    if not 0 <= value <= width.max_value:
        raise ValueError(
            f"value {value} does not fit in {width.value} byte(s) "
            f"(0..{width.max_value})"
        )
    return value


@dataclass
class IntItem:
    """An integer item with a fixed width, a magnitude and a sign marker.

    The width cannot be changed once the item exists.
    """

    width: IntWidth
    value: int = 0
    type: IntType = IntType.UINT

    def __post_init__(self) -> None:
        if not isinstance(self.width, IntWidth):
            raise TypeError(f"IntWidth expected, got {self.width!r}")
        if not isinstance(self.type, IntType):
            raise TypeError(f"IntType expected, got {self.type!r}")
        _check_value(self.width, self.value)

    def _require_width(self, width: IntWidth) -> None:
        if width is not self.width:
            raise ValueError(
                f"item has width {self.width.name}, not {IntWidth(width).name}"
            )

    def get_int(self) -> int:
        """Return the stored magnitude, whatever the width."""
        return self.value

    def read(self, width: IntWidth) -> int:
        """Return the stored magnitude, checking that the item has ``width``."""
        self._require_width(width)
        return self.value

    def assign(self, width: IntWidth, value: int) -> None:
        """Store ``value``; the item must have ``width`` and the value must fit."""
        self._require_width(width)
        self.value = _check_value(self.width, value)

    def mark_uint(self) -> None:
        """Mark the item as a positive integer, leaving the magnitude as is."""
        self.type = IntType.UINT

    def mark_negint(self) -> None:
        """Mark the item as a negative integer, leaving the magnitude as is."""
        self.type = IntType.NEGINT

    def is_uint(self) -> bool:
        return self.type is IntType.UINT

    def is_negint(self) -> bool:
        return self.type is IntType.NEGINT

    def logical_value(self) -> int:
        """The integer the item stands for: ``value`` or ``-value - 1``."""
        if self.type is IntType.NEGINT:
            return -self.value - 1
        return self.value


def new_int(width: IntWidth) -> IntItem:
    """Create a positive integer item of the given width holding zero."""
    return IntItem(IntWidth(width))


def new_int8() -> IntItem:
    return new_int(IntWidth.INT_8)


def new_int16() -> IntItem:
    return new_int(IntWidth.INT_16)


def new_int32() -> IntItem:
    return new_int(IntWidth.INT_32)


def new_int64() -> IntItem:
    return new_int(IntWidth.INT_64)


def _build(width: IntWidth, value: int, int_type: IntType) -> IntItem:
    item = new_int(width)
    item.assign(width, value)
    item.type = int_type
    return item


def build_uint8(value: int) -> IntItem:
    return _build(IntWidth.INT_8, value, IntType.UINT)


def build_uint16(value: int) -> IntItem:
    return _build(IntWidth.INT_16, value, IntType.UINT)


def build_uint32(value: int) -> IntItem:
    return _build(IntWidth.INT_32, value, IntType.UINT)


def build_uint64(value: int) -> IntItem:
    return _build(IntWidth.INT_64, value, IntType.UINT)


def build_negint8(value: int) -> IntItem:
    return _build(IntWidth.INT_8, value, IntType.NEGINT)


def build_negint16(value: int) -> IntItem:
    return _build(IntWidth.INT_16, value, IntType.NEGINT)


def build_negint32(value: int) -> IntItem:
    return _build(IntWidth.INT_32, value, IntType.NEGINT)


def build_negint64(value: int) -> IntItem:
    return _build(IntWidth.INT_64, value, IntType.NEGINT)
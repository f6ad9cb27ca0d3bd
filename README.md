# cborint

Integer items of the CBOR data model: unsigned integers (major type 0) and
negative integers (major type 1). Each item is stored with a fixed width of
1, 2, 4 or 8 bytes.

A negative integer keeps its stored magnitude `n`; the number it stands for
is `-n - 1`, the way CBOR encodes it.

## Installation

```
pip install cborint
```

## Usage

Everything lives in `cborint.ints`:

```python
from cborint.ints import (
    IntType,
    IntWidth,
    build_negint16,
    build_uint8,
    new_int32,
)

item = build_uint8(42)
item.get_int()            # 42
item.is_uint()            # True
item.width                # IntWidth.INT_8

neg = build_negint16(40)
neg.get_int()             # 40, the stored magnitude
neg.is_negint()           # True
neg.logical_value()       # -41

raw = new_int32()         # width fixed at 4 bytes, value 0, positive
raw.assign(IntWidth.INT_32, 2784428723)
raw.read(IntWidth.INT_32) # 2784428723
raw.mark_negint()         # same magnitude, now a negative integer
raw.type                  # IntType.NEGINT
```

### Contents

- `IntWidth`: `INT_8`, `INT_16`, `INT_32`, `INT_64`, valued in bytes
  (1, 2, 4, 8); `max_value` gives the largest magnitude that fits.
- `IntType`: `UINT` or `NEGINT`.
- `IntItem`: a dataclass with `width`, `value` and `type`, and the methods
  `get_int`, `read`, `assign`, `mark_uint`, `mark_negint`, `is_uint`,
  `is_negint` and `logical_value`.
- `new_int(width)` and `new_int8` / `new_int16` / `new_int32` / `new_int64`:
  a positive item of that width holding zero.
- `build_uint8` … `build_uint64` and `build_negint8` … `build_negint64`:
  an item of that width and sign holding the given magnitude.

### Errors

- `read` and `assign` with a width other than the item's raise `ValueError`.
- A magnitude below zero or above the width's `max_value` raises
  `ValueError`; a value that is not an `int` (or is a `bool`) raises
  `TypeError`.

Items compare equal when width, value and type all match, and `copy.copy`
gives an independent item with the same contents.

## What this package does not do

It models integer items only. It does not encode items to bytes, decode
bytes into items, or handle any other CBOR type (strings, arrays, maps,
tags, floats).

## Running the tests

```
pip install -e ".[test]"
pytest
```
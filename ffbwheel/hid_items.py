"""Decoding and encoding of HID report descriptor short items."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator

LONG_ITEM_PREFIX = 0xFE

_SIZE_BY_CODE = (0, 1, 2, 4)
_CODE_BY_SIZE = {size: code for code, size in enumerate(_SIZE_BY_CODE)}


class ItemType(IntEnum):
    """The bType field of an item prefix."""

    MAIN = 0
    GLOBAL = 1
    LOCAL = 2
    RESERVED = 3


_NAMES = {
    ItemType.MAIN: {
        0x8: "Input",
        0x9: "Output",
        0xA: "Collection",
        0xB: "Feature",
        0xC: "End Collection",
    },
    ItemType.GLOBAL: {
        0x0: "Usage Page",
        0x1: "Logical Minimum",
        0x2: "Logical Maximum",
        0x3: "Physical Minimum",
        0x4: "Physical Maximum",
        0x5: "Unit Exponent",
        0x6: "Unit",
        0x7: "Report Size",
        0x8: "Report ID",
        0x9: "Report Count",
        0xA: "Push",
        0xB: "Pop",
    },
    ItemType.LOCAL: {
        0x0: "Usage",
        0x1: "Usage Minimum",
        0x2: "Usage Maximum",
        0x3: "Designator Index",
        0x4: "Designator Minimum",
        0x5: "Designator Maximum",
        0x7: "String Index",
        0x8: "String Minimum",
        0x9: "String Maximum",
        0xA: "Delimiter",
    },
}


@dataclass(frozen=True)
class HidItem:
    """One short item: type, tag and 0, 1, 2 or 4 little-endian data bytes."""

    item_type: ItemType
    tag: int
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        object.__setattr__(self, "item_type", ItemType(self.item_type))
        object.__setattr__(self, "data", bytes(self.data))
        if not 0 <= self.tag <= 0xF:
            raise ValueError(f"item tag must be 0..15, got {self.tag}")
        if len(self.data) not in _CODE_BY_SIZE:
            raise ValueError(f"item data must be 0, 1, 2 or 4 bytes, got {len(self.data)}")

    @property
    def size(self) -> int:
        """Number of data bytes."""
        return len(self.data)

    @property
    def value(self) -> int:
        """Data as an unsigned little-endian integer."""
        return int.from_bytes(self.data, "little")

    @property
    def name(self) -> str:
        """Human-readable item name."""
        known = _NAMES.get(self.item_type, {})
        return known.get(self.tag, f"{self.item_type.name.title()} 0x{self.tag:X}")

    def signed_value(self) -> int:
        """Data as a two's-complement little-endian integer."""
        return int.from_bytes(self.data, "little", signed=True)

    def to_bytes(self) -> bytes:
        """The prefix byte followed by the data."""
        prefix = (self.tag << 4) | (self.item_type << 2) | _CODE_BY_SIZE[len(self.data)]
        return bytes([prefix]) + self.data


def iter_items(descriptor: bytes) -> Iterator[HidItem]:
    """Yield the short items of a report descriptor in order."""
    data = bytes(descriptor)
    pos = 0
    while pos < len(data):
        prefix = data[pos]
        if prefix == LONG_ITEM_PREFIX:
            raise ValueError(f"long item at offset {pos} is not supported")
        end = pos + 1 + _SIZE_BY_CODE[prefix & 0x03]
        if end > len(data):
            raise ValueError(f"item at offset {pos} is truncated")
        yield HidItem(ItemType((prefix >> 2) & 0x03), prefix >> 4, data[pos + 1 : end])
        pos = end


def encode_items(items: Iterable[HidItem]) -> bytes:
    """Concatenate items back into descriptor bytes."""
    return b"".join(item.to_bytes() for item in items)
"""Type/length field decoding."""

from dataclasses import dataclass
from typing import Tuple

from fru_eeprom_reader.errors import FieldOverflowError, TruncatedData

TYPE_CODE_MASK = 0xC0
TYPE_CODE_SHIFT = 6
LENGTH_MASK = 0x3F

# Type code 11b with a zero length marks the end of an area's field list
SENTINEL = 0xC1

# IPMI caps the payload length at 63 bytes
FIELD_CAPACITY = 64

TYPE_BINARY = 0
TYPE_BCD_PLUS = 1
TYPE_SIX_BIT_ASCII = 2
TYPE_TEXT = 3


@dataclass(frozen=True)
class FruField:
    """Raw payload of one type/length field."""

    data: bytes = b""
    type_code: int = TYPE_BINARY

    def __post_init__(self):
        if len(self.data) > FIELD_CAPACITY:
            raise FieldOverflowError(
                f"Field payload of {len(self.data)} bytes exceeds capacity {FIELD_CAPACITY}",
                needed=len(self.data),
                available=FIELD_CAPACITY,
            )

    @classmethod
    def empty(cls) -> "FruField":
        """Value returned for a field the record does not carry."""
        return cls()

    def __len__(self) -> int:
        return len(self.data)

    def __bool__(self) -> bool:
        return bool(self.data)

    def text(self) -> str:
        """Payload as text, with NUL and space padding stripped."""
        return self.data.decode("latin-1").rstrip("\x00 ")


def decode_field(area: bytes, cursor: int) -> Tuple[FruField, int]:
    """
    Decode the type/length field at ``cursor``.

    Args:
        area: Complete area buffer.
        cursor: Offset of the type/length byte within ``area``.

    Returns:
        (field, bytes_consumed) where bytes_consumed counts the
        type/length byte and the payload.

    Raises:
        TruncatedData: The type/length byte or the payload lies outside ``area``.
    """
    if cursor < 0 or cursor >= len(area):
        raise TruncatedData(
            f"Type/length byte at offset {cursor} is outside the area",
            offset=cursor,
            needed=1,
            available=len(area),
        )

    type_length = area[cursor]
    type_code = (type_length & TYPE_CODE_MASK) >> TYPE_CODE_SHIFT
    length = type_length & LENGTH_MASK

    if cursor + 1 + length > len(area):
        raise TruncatedData(
            f"buf length error. offset: 0x{cursor:x}, need length: {length}, "
            f"total length: 0x{len(area):x}",
            offset=cursor,
            needed=length,
            available=len(area) - cursor - 1,
        )

    field = FruField(bytes(area[cursor + 1:cursor + 1 + length]), type_code)
    return field, 1 + length

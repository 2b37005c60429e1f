"""FRU common header decoding."""

from dataclasses import dataclass
from enum import Enum

from fru_eeprom_reader.decoding.checksum import verify
from fru_eeprom_reader.errors import InvalidArgument, TruncatedData

HEADER_LENGTH = 8

# Offsets and lengths in the FRU are stored in units of 8 bytes
BLOCK_SIZE = 8


class AreaKind(Enum):
    """Areas addressed by the common header."""

    INTERNAL_USE = "internal_use"
    CHASSIS = "chassis"
    BOARD = "board"
    PRODUCT = "product"
    MULTI_RECORD = "multi_record"


@dataclass(frozen=True)
class CommonHeader:
    """Fixed 8-byte header at the start of every FRU."""

    format_version: int
    internal_use_offset: int
    chassis_info_offset: int
    board_info_offset: int
    product_info_offset: int
    multi_record_offset: int
    pad: int
    checksum: int

    def offset_multiplier(self, area: AreaKind) -> int:
        """Raw offset byte for ``area`` (0 means the area is absent)."""
        if area is AreaKind.INTERNAL_USE:
            return self.internal_use_offset
        if area is AreaKind.CHASSIS:
            return self.chassis_info_offset
        if area is AreaKind.BOARD:
            return self.board_info_offset
        if area is AreaKind.PRODUCT:
            return self.product_info_offset
        if area is AreaKind.MULTI_RECORD:
            return self.multi_record_offset
        raise InvalidArgument(f"Unknown area: {area!r}")

    def area_offset(self, area: AreaKind) -> int:
        """Byte offset of ``area`` from the start of the FRU."""
        return self.offset_multiplier(area) * BLOCK_SIZE

    def has_area(self, area: AreaKind) -> bool:
        return self.offset_multiplier(area) != 0


def decode_header(raw: bytes) -> CommonHeader:
    """
    Validate and parse the common header.

    Args:
        raw: At least the first 8 bytes of the FRU.

    Returns:
        Parsed header with offsets still expressed as 8-byte multipliers.
    """
    if len(raw) < HEADER_LENGTH:
        raise TruncatedData(
            f"Incomplete FRU common header. Size: {len(raw)}",
            offset=0,
            needed=HEADER_LENGTH,
            available=len(raw),
        )

    header = bytes(raw[:HEADER_LENGTH])
    verify(header, "common header")

    return CommonHeader(*header)

"""Product-Info and Board-Info area decoding.

Both areas share the same layout after their fixed preamble: a run of
type/length fields ended by the sentinel byte or by the checksum byte.
Fields are positional, so a caller asks for a slot index and gets back
exactly that one field.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional

from fru_eeprom_reader.decoding.checksum import verify
from fru_eeprom_reader.decoding.fields import SENTINEL, FruField, decode_field
from fru_eeprom_reader.decoding.header import AreaKind
from fru_eeprom_reader.errors import InvalidArgument, TruncatedData, UnsupportedFieldKind

log = logging.getLogger(__name__)

# version, length, language code
PRODUCT_LANGUAGE_OFFSET = 2
PRODUCT_FIELDS_START = 3
# version, length, language code, manufacture time
BOARD_LANGUAGE_OFFSET = 2
BOARD_MFG_TIME_OFFSET = 3
BOARD_MFG_TIME_LENGTH = 3
BOARD_FIELDS_START = BOARD_MFG_TIME_OFFSET + BOARD_MFG_TIME_LENGTH

# Fields that must be listed before a sentinel may end the area
PRODUCT_AREA_MIN_FIELDS = 5
BOARD_AREA_MIN_FIELDS = 4


class FieldKind(IntEnum):
    """Caller-visible field identifiers."""

    PRODUCT_NAME = 2
    SERIAL_NUMBER = 3
    VENDOR = 4
    HARDWARE_INFO = 5
    PART_NUMBER = 6
    DEVICE_TYPE = 7
    ASSET_TAG = 8

    @classmethod
    def from_name(cls, name: str) -> "FieldKind":
        """Look up a field kind by case-insensitive name (``serial-number`` works too)."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise InvalidArgument(f"Unknown field kind: {name}") from None

    @classmethod
    def coerce(cls, value) -> "FieldKind":
        """Accept a FieldKind or its plain integer identifier."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"Not a field kind: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgument(f"Unknown field kind: {value}") from None


class ProductSlot(IntEnum):
    MANUFACTURER = 0
    PRODUCT_NAME = 1
    PART_MODEL_NUMBER = 2
    VERSION = 3
    SERIAL_NUMBER = 4
    ASSET_TAG = 5
    FRU_FILE_ID = 6
    TYPE = 7


class BoardSlot(IntEnum):
    MANUFACTURER = 0
    PRODUCT_NAME = 1
    SERIAL_NUMBER = 2
    PART_NUMBER = 3
    FRU_FILE_ID = 4
    CUSTOM = 5


PRODUCT_SLOTS: Dict[FieldKind, ProductSlot] = {
    FieldKind.SERIAL_NUMBER: ProductSlot.SERIAL_NUMBER,
    FieldKind.PRODUCT_NAME: ProductSlot.PRODUCT_NAME,
    FieldKind.DEVICE_TYPE: ProductSlot.TYPE,
    FieldKind.HARDWARE_INFO: ProductSlot.VERSION,
    FieldKind.VENDOR: ProductSlot.MANUFACTURER,
    FieldKind.PART_NUMBER: ProductSlot.PART_MODEL_NUMBER,
    FieldKind.ASSET_TAG: ProductSlot.ASSET_TAG,
}

BOARD_SLOTS: Dict[FieldKind, BoardSlot] = {
    FieldKind.SERIAL_NUMBER: BoardSlot.SERIAL_NUMBER,
    FieldKind.PRODUCT_NAME: BoardSlot.PRODUCT_NAME,
    FieldKind.HARDWARE_INFO: BoardSlot.CUSTOM,
    FieldKind.PART_NUMBER: BoardSlot.PART_NUMBER,
    FieldKind.VENDOR: BoardSlot.MANUFACTURER,
}


def slot_for(area: AreaKind, field_kind: FieldKind) -> int:
    """
    Map a field kind to its positional slot in ``area``.

    Raises:
        InvalidArgument: ``field_kind`` is not a known field identifier or ``area`` is not decodable.
        UnsupportedFieldKind: The area has no slot for ``field_kind``.
    """
    field_kind = FieldKind.coerce(field_kind)

    if area is AreaKind.PRODUCT:
        table = PRODUCT_SLOTS
    elif area is AreaKind.BOARD:
        table = BOARD_SLOTS
    else:
        raise InvalidArgument(f"{area.value} area is not decodable")

    slot = table.get(field_kind)
    if slot is None:
        raise UnsupportedFieldKind(area.value, field_kind)
    return int(slot)


@dataclass(frozen=True)
class BoardPreamble:
    """Fixed fields that precede the board area's type/length fields."""

    language_code: int
    # Minutes since 1996-01-01 00:00, little endian, left undecoded
    mfg_time: bytes


def walk_area(
    area: bytes,
    start: int,
    slot: int,
    max_slots: int,
    minimum_fields: int,
    logger: Optional[logging.Logger] = None,
) -> FruField:
    """
    Walk the type/length fields of an area and return the one at ``slot``.

    A sentinel only ends the walk once ``minimum_fields`` fields have been
    seen; before that it is decoded like any other type/length byte, since
    some boards put a sentinel in a required slot. Reaching the checksum
    byte also ends the walk.

    Args:
        area: Verified area buffer.
        start: Offset of the first type/length byte.
        slot: Index of the wanted field.
        max_slots: Number of positional slots the area defines.
        minimum_fields: Slots that cannot be ended by the sentinel.
        logger: Where to log; defaults to this module's logger.

    Returns:
        The field at ``slot``, or an empty field if the area ends first.
    """
    logger = logger or log
    result = FruField.empty()
    cursor = start

    for index in range(max_slots):
        if cursor >= len(area):
            logger.error("[%d] area offset %d is past the area end %d", index, cursor, len(area))
            raise TruncatedData(
                f"Field {index} starts at offset {cursor}, past the area end",
                offset=cursor,
                needed=1,
                available=0,
            )

        if (area[cursor] == SENTINEL and index >= minimum_fields) or cursor == len(area) - 1:
            logger.debug("[%d] end of fields at offset %d", index, cursor)
            break

        try:
            field, consumed = decode_field(area, cursor)
        except TruncatedData as exc:
            logger.error("[%d] type/length decode failed at offset %d: %s", index, cursor, exc)
            raise

        logger.debug(
            "[%d] offset: 0x%x, type_code: 0x%x, length: %d",
            index, cursor, field.type_code, len(field),
        )
        if index == slot:
            result = field
        cursor += consumed

    return result


def _check_preamble(area: bytes, start: int, what: str) -> None:
    # the checksum byte must still follow the fixed fields
    if len(area) < start + 1:
        raise TruncatedData(
            f"{what} of {len(area)} bytes is too short for its fixed fields",
            offset=0,
            needed=start + 1,
            available=len(area),
        )


def decode_product_field(
    area: bytes,
    slot: int,
    minimum_fields: int = PRODUCT_AREA_MIN_FIELDS,
    logger: Optional[logging.Logger] = None,
) -> FruField:
    """Verify a Product-Info area and return the field at ``slot``."""
    verify(area, "product info area")
    _check_preamble(area, PRODUCT_FIELDS_START, "product info area")
    return walk_area(area, PRODUCT_FIELDS_START, slot, len(ProductSlot), minimum_fields, logger)


def decode_product_language(area: bytes) -> int:
    """Return the language code of a Product-Info area."""
    verify(area, "product info area")
    _check_preamble(area, PRODUCT_FIELDS_START, "product info area")
    return area[PRODUCT_LANGUAGE_OFFSET]


def decode_board_field(
    area: bytes,
    slot: int,
    minimum_fields: int = BOARD_AREA_MIN_FIELDS,
    logger: Optional[logging.Logger] = None,
) -> FruField:
    """Verify a Board-Info area and return the field at ``slot``."""
    verify(area, "board info area")
    _check_preamble(area, BOARD_FIELDS_START, "board info area")
    return walk_area(area, BOARD_FIELDS_START, slot, len(BoardSlot), minimum_fields, logger)


def decode_board_preamble(area: bytes) -> BoardPreamble:
    """Return the language code and raw manufacture time of a Board-Info area."""
    verify(area, "board info area")
    _check_preamble(area, BOARD_FIELDS_START, "board info area")
    return BoardPreamble(
        language_code=area[BOARD_LANGUAGE_OFFSET],
        mfg_time=bytes(area[BOARD_MFG_TIME_OFFSET:BOARD_FIELDS_START]),
    )

"""Read single named fields out of a FRU EEPROM."""

import logging
from typing import Optional

from fru_eeprom_reader.config import DecoderConfig
from fru_eeprom_reader.decoding.areas import (
    BoardPreamble,
    FieldKind,
    decode_board_field,
    decode_board_preamble,
    decode_product_field,
    decode_product_language,
    slot_for,
)
from fru_eeprom_reader.decoding.fields import FruField
from fru_eeprom_reader.decoding.header import (
    BLOCK_SIZE,
    HEADER_LENGTH,
    AreaKind,
    CommonHeader,
    decode_header,
)
from fru_eeprom_reader.errors import (
    AllocationFailure,
    DeviceReadFailure,
    FruError,
    InvalidArgument,
    TruncatedData,
)
from fru_eeprom_reader.log import LOGGER_NAME
from fru_eeprom_reader.transport import ByteReader

# byte 1 of every area is its length in 8-byte blocks
AREA_LENGTH_OFFSET = 1


class FruExtractor:
    """Extract FRU fields from EEPROMs reachable through a byte reader."""

    def __init__(
        self,
        reader: ByteReader,
        config: Optional[DecoderConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize extractor.

        Args:
            reader: Byte-range reader for the EEPROMs.
            config: Decoder settings; defaults if omitted.
            logger: Logger for diagnostics; the package logger if omitted.
        """
        self.reader = reader
        self.config = config or DecoderConfig()
        self.log = logger or logging.getLogger(LOGGER_NAME)

    def _read(self, bus: int, address: int, offset: int, length: int) -> bytes:
        try:
            data = self.reader.read_bytes(bus, address, offset, length)
        except DeviceReadFailure:
            raise
        except OSError as e:
            raise DeviceReadFailure(bus, address, offset, length, str(e)) from e

        if data is None or len(data) != length:
            got = 0 if data is None else len(data)
            raise DeviceReadFailure(
                bus, address, offset, length, f"short read of {got} byte(s)"
            )
        return bytes(data)

    def read_header(self, bus: int, address: int) -> CommonHeader:
        """
        Read and validate the common header.

        Returns:
            Decoded header.
        """
        raw = self._read(bus, address, 0, HEADER_LENGTH)
        try:
            header = decode_header(raw)
        except FruError as e:
            self.log.error(
                "Read eeprom head info error (bus: %d, addr: 0x%02x): %s", bus, address, e
            )
            raise
        self.log.debug("common header: %s", raw.hex())
        return header

    def read_area(self, bus: int, address: int, area: AreaKind) -> Optional[bytes]:
        """
        Read the raw bytes of one area.

        Returns:
            Area bytes, checksum included, or None if the header marks
            the area as absent.
        """
        header = self.read_header(bus, address)
        if not header.has_area(area):
            self.log.debug("%s area absent (bus: %d, addr: 0x%02x)", area.value, bus, address)
            return None

        area_offset = header.area_offset(area)
        length_byte = self._read(bus, address, area_offset + AREA_LENGTH_OFFSET, 1)[0]
        area_length = length_byte * BLOCK_SIZE
        if area_length == 0:
            raise TruncatedData(
                f"{area.value} area at offset {area_offset} declares zero length",
                offset=area_offset,
                needed=BLOCK_SIZE,
                available=0,
            )
        self.log.debug(
            "%s area: offset %d, length %d (bus: %d, addr: 0x%02x)",
            area.value, area_offset, area_length, bus, address,
        )

        try:
            return self._read(bus, address, area_offset, area_length)
        except MemoryError as e:
            raise AllocationFailure(f"Allocate buffer (len: {area_length}) error") from e

    def read_field(
        self, bus: int, address: int, area: AreaKind, field_kind: FieldKind
    ) -> FruField:
        """
        Decode one named field from the Product-Info or Board-Info area.

        Returns:
            The decoded field; empty if the area or the field is absent.
        """
        # validate the request before touching the device
        field_kind = FieldKind.coerce(field_kind)
        slot = slot_for(area, field_kind)

        self.log.debug(
            "Read fru eeprom (bus: %d, addr: 0x%02x, area: %s, field: %s)",
            bus, address, area.value, field_kind.name,
        )
        data = self.read_area(bus, address, area)
        if data is None:
            return FruField.empty()

        try:
            if area is AreaKind.PRODUCT:
                return decode_product_field(
                    data, slot, self.config.product_minimum_fields, self.log
                )
            return decode_board_field(data, slot, self.config.board_minimum_fields, self.log)
        except FruError as e:
            self.log.error("analysis FRU %s info error: %s", area.value, e)
            raise

    def read_product_language(self, bus: int, address: int) -> Optional[int]:
        """Language code of the product area, if present."""
        data = self.read_area(bus, address, AreaKind.PRODUCT)
        if data is None:
            return None
        return decode_product_language(data)

    def read_board_preamble(self, bus: int, address: int) -> Optional[BoardPreamble]:
        """Language code and raw manufacture time of the board area, if present."""
        data = self.read_area(bus, address, AreaKind.BOARD)
        if data is None:
            return None
        return decode_board_preamble(data)

    def extract(
        self,
        bus: int,
        address: int,
        area: AreaKind,
        field_kind: FieldKind,
        out: bytearray,
    ) -> int:
        """
        Copy one field into ``out``.

        Args:
            bus: Bus number of the EEPROM.
            address: Device address of the EEPROM.
            area: AreaKind.PRODUCT or AreaKind.BOARD.
            field_kind: Field to extract, as a FieldKind or its integer value.
            out: Writable destination buffer (bytearray or memoryview);
                at most ``len(out)`` bytes are written.

        Returns:
            Number of bytes written. 0 means the field is absent.
        """
        if not isinstance(out, (bytearray, memoryview)) or getattr(out, "readonly", False):
            raise InvalidArgument(f"Output buffer must be writable, got {type(out).__name__}")
        if len(out) == 0:
            raise InvalidArgument("Output buffer must have a non-zero capacity")

        field = self.read_field(bus, address, area, field_kind)
        count = min(len(out), len(field))
        out[:count] = field.data[:count]
        return count

    def extract_product_field(
        self, bus: int, address: int, field_kind: FieldKind, out: bytearray
    ) -> int:
        return self.extract(bus, address, AreaKind.PRODUCT, field_kind, out)

    def extract_board_field(
        self, bus: int, address: int, field_kind: FieldKind, out: bytearray
    ) -> int:
        return self.extract(bus, address, AreaKind.BOARD, field_kind, out)


def extract_product_field(
    reader: ByteReader, bus: int, address: int, field_kind: FieldKind, out: bytearray
) -> int:
    """Extract a Product-Info field with a default-configured extractor."""
    return FruExtractor(reader).extract_product_field(bus, address, field_kind, out)


def extract_board_field(
    reader: ByteReader, bus: int, address: int, field_kind: FieldKind, out: bytearray
) -> int:
    """Extract a Board-Info field with a default-configured extractor."""
    return FruExtractor(reader).extract_board_field(bus, address, field_kind, out)

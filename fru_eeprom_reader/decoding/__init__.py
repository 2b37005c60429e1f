"""Decoders for the IPMI FRU binary format."""

from fru_eeprom_reader.decoding.areas import (
    BoardPreamble,
    FieldKind,
    decode_board_field,
    decode_board_preamble,
    decode_product_field,
    decode_product_language,
    slot_for,
)
from fru_eeprom_reader.decoding.checksum import FORMAT_VERSION, checksum, verify
from fru_eeprom_reader.decoding.fields import SENTINEL, FruField, decode_field
from fru_eeprom_reader.decoding.header import AreaKind, CommonHeader, decode_header

__all__ = [
    "AreaKind",
    "BoardPreamble",
    "CommonHeader",
    "FORMAT_VERSION",
    "FieldKind",
    "FruField",
    "SENTINEL",
    "checksum",
    "decode_board_field",
    "decode_board_preamble",
    "decode_field",
    "decode_header",
    "decode_product_field",
    "decode_product_language",
    "slot_for",
    "verify",
]

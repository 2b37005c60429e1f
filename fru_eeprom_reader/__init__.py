"""Read named fields from IPMI FRU EEPROMs."""

from fru_eeprom_reader.config import ConfigManager, DecoderConfig, load_config
from fru_eeprom_reader.decoding import AreaKind, CommonHeader, FieldKind, FruField
from fru_eeprom_reader.errors import (
    AllocationFailure,
    ChecksumMismatch,
    DeviceReadFailure,
    FieldOverflowError,
    FormatVersionError,
    FruError,
    InvalidArgument,
    TruncatedData,
    UnsupportedFieldKind,
)
from fru_eeprom_reader.extractor import FruExtractor, extract_board_field, extract_product_field
from fru_eeprom_reader.transport import ByteReader, ImageReader, SysfsEepromReader

__version__ = "0.1.0"

__all__ = [
    "AllocationFailure",
    "AreaKind",
    "ByteReader",
    "ChecksumMismatch",
    "CommonHeader",
    "ConfigManager",
    "DecoderConfig",
    "DeviceReadFailure",
    "FieldKind",
    "FieldOverflowError",
    "FormatVersionError",
    "FruError",
    "FruExtractor",
    "FruField",
    "ImageReader",
    "InvalidArgument",
    "SysfsEepromReader",
    "TruncatedData",
    "UnsupportedFieldKind",
    "extract_board_field",
    "extract_product_field",
    "load_config",
]

"""Test common header decoding."""

import pytest

from conftest import make_header
from fru_eeprom_reader.decoding.header import AreaKind, decode_header
from fru_eeprom_reader.errors import ChecksumMismatch, FormatVersionError, TruncatedData


def test_decode_offsets():
    header = decode_header(make_header([0, 0, 1, 3, 0, 0]))
    assert header.format_version == 1
    assert header.board_info_offset == 1
    assert header.product_info_offset == 3
    assert header.area_offset(AreaKind.BOARD) == 8
    assert header.area_offset(AreaKind.PRODUCT) == 24
    assert not header.has_area(AreaKind.CHASSIS)
    assert header.has_area(AreaKind.PRODUCT)


def test_example_header_bytes():
    raw = bytes([0x01, 0x00, 0x00, 0x01, 0x03, 0x00, 0x00, 0xFB])
    header = decode_header(raw)
    assert header.checksum == 0xFB


def test_extra_bytes_are_ignored():
    header = decode_header(make_header([0, 0, 1, 3, 0, 0]) + b"\xff" * 16)
    assert header.product_info_offset == 3


def test_short_header():
    with pytest.raises(TruncatedData) as info:
        decode_header(make_header([0, 0, 1, 3, 0, 0])[:7])
    assert info.value.needed == 8
    assert info.value.available == 7


def test_corrupt_header():
    raw = bytearray(make_header([0, 0, 1, 3, 0, 0]))
    raw[4] = 0x04
    with pytest.raises(ChecksumMismatch):
        decode_header(bytes(raw))


def test_blank_eeprom():
    with pytest.raises(FormatVersionError):
        decode_header(b"\xff" * 8)


def test_header_builder_is_eight_bytes():
    raw = make_header([0, 0, 1, 3, 0, 0])
    assert len(raw) == 8
    assert raw == bytes([0x01, 0x00, 0x00, 0x01, 0x03, 0x00, 0x00, 0xFB])

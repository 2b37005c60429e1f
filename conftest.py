"""Shared FRU image builders for the tests."""

from typing import List, Sequence

import pytest

from fru_eeprom_reader.decoding.checksum import checksum


def tl(text: bytes, type_code: int = 3) -> bytes:
    """Encode a type/length field."""
    return bytes([(type_code << 6) | len(text)]) + text


def make_area(body: bytes, length_blocks: int = None) -> bytes:
    """Wrap area content (after version and length) into a checksummed area."""
    size = len(body) + 3
    if length_blocks is None:
        length_blocks = (size + 7) // 8
    raw = bytes([0x01, length_blocks]) + body
    raw = raw + bytes(length_blocks * 8 - len(raw) - 1)
    return raw + bytes([checksum(raw)])


def make_header(offsets: Sequence[int]) -> bytes:
    """Common header from the five area offsets and the pad byte."""
    raw = bytes([0x01] + list(offsets))
    return raw + bytes([checksum(raw)])


def product_area(fields: List[bytes], language: int = 0x00) -> bytes:
    return make_area(bytes([language]) + b"".join(fields))


def board_area(fields: List[bytes], mfg_time: bytes = b"\x10\x20\x30", language: int = 0x19) -> bytes:
    return make_area(bytes([language]) + mfg_time + b"".join(fields))


def make_fru(board: bytes = None, product: bytes = None) -> bytes:
    """Header followed by a board area and a product area."""
    offsets = [0, 0, 0, 0, 0, 0]
    image = b""
    cursor = 1
    if board is not None:
        offsets[2] = cursor
        image += board
        cursor += len(board) // 8
    if product is not None:
        offsets[3] = cursor
        image += product
    return make_header(offsets) + image


@pytest.fixture
def micas_product() -> bytes:
    """Product area from the fan module example."""
    return product_area([
        tl(b"Micas"),
        tl(b"Fan1"),
        b"\xc0",
        b"\xc0",
        tl(b"SN01"),
        b"\xc1",
    ])


@pytest.fixture
def micas_board() -> bytes:
    return board_area([
        tl(b"Micas"),
        tl(b"FCB"),
        tl(b"BRD0042"),
        tl(b"PN-7"),
        b"\xc0",
        tl(b"HW-A1"),
        b"\xc1",
    ])


@pytest.fixture
def micas_fru(micas_board, micas_product) -> bytes:
    return make_fru(micas_board, micas_product)

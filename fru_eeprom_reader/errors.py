"""Exception types raised while reading and decoding FRU records."""

from typing import Optional


class FruError(Exception):
    """Base exception for the fru_eeprom_reader package."""


class InvalidArgument(FruError):
    """Malformed caller input, such as an empty output buffer."""


class UnsupportedFieldKind(InvalidArgument):
    """The requested field kind has no slot in the selected area."""

    def __init__(self, area: str, field_kind):
        self.area = area
        self.field_kind = field_kind
        super().__init__(f"{area} area has no field for {field_kind!r}")


class TruncatedData(FruError):
    """A header or field needs more bytes than the buffer holds."""

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        needed: Optional[int] = None,
        available: Optional[int] = None,
    ):
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(message)


class FieldOverflowError(TruncatedData):
    """A field payload exceeds the fixed field capacity."""


class ChecksumMismatch(FruError):
    """The embedded checksum does not match the computed one."""

    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{what} checksum mismatch: calculated 0x{expected:02X}, "
            f"embedded 0x{actual:02X}"
        )


class FormatVersionError(FruError):
    """The first byte of a header or area is not the format version."""

    def __init__(self, what: str, found: int, required: int):
        self.what = what
        self.found = found
        self.required = required
        super().__init__(
            f"{what} has format version 0x{found:02X}, expected 0x{required:02X}"
        )


class DeviceReadFailure(FruError):
    """The byte-fetch collaborator failed to deliver the requested bytes."""

    def __init__(self, bus: int, address: int, offset: int, length: int, reason: str = ""):
        self.bus = bus
        self.address = address
        self.offset = offset
        self.length = length
        message = (
            f"read of {length} byte(s) at offset {offset} failed "
            f"(bus: {bus}, addr: 0x{address:02x})"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AllocationFailure(FruError):
    """The area buffer could not be allocated."""

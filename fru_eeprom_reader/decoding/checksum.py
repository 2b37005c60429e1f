"""IPMI 8-bit zero checksum."""

from fru_eeprom_reader.errors import ChecksumMismatch, FormatVersionError, TruncatedData

# First byte of the common header and of every area
FORMAT_VERSION = 0x01


def checksum(data: bytes) -> int:
    """Return the byte that makes the 8-bit sum of ``data`` plus itself zero."""
    return -sum(data) & 0xFF


def verify(record: bytes, what: str = "record") -> None:
    """
    Validate a checksummed IPMI record (common header or area).

    The first byte must be the format version and the last byte is the
    record's own checksum.

    Args:
        record: Record bytes, checksum byte included.
        what: Name used in error messages.

    Raises:
        TruncatedData: Record is empty.
        FormatVersionError: First byte is not the format version.
        ChecksumMismatch: Embedded checksum does not match.
    """
    if not record:
        raise TruncatedData(f"{what} is empty", offset=0, needed=1, available=0)

    if record[0] != FORMAT_VERSION:
        raise FormatVersionError(what, record[0], FORMAT_VERSION)

    calculated = checksum(record[:-1])
    if calculated != record[-1]:
        raise ChecksumMismatch(what, calculated, record[-1])

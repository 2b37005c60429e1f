"""Byte-range readers for FRU EEPROMs."""

from pathlib import Path
from typing import Dict, Optional, Protocol, Tuple, Union

from fru_eeprom_reader.errors import DeviceReadFailure


class ByteReader(Protocol):
    """Anything that can read a byte range from an EEPROM on a bus."""

    def read_bytes(self, bus: int, address: int, offset: int, length: int) -> bytes:
        ...


class SysfsEepromReader:
    """Read EEPROM contents through the kernel's i2c sysfs attribute."""

    def __init__(self, root: Union[str, Path] = "/sys/bus/i2c/devices", name: str = "eeprom"):
        """
        Initialize sysfs reader.

        Args:
            root: Directory holding the ``<bus>-<addr>`` device nodes.
            name: Name of the binary attribute exposing the EEPROM.
        """
        self.root = Path(root)
        self.name = name

    def device_path(self, bus: int, address: int) -> Path:
        """Path of the EEPROM attribute, e.g. ``/sys/bus/i2c/devices/1-0050/eeprom``."""
        return self.root / f"{bus}-{address:04x}" / self.name

    def read_bytes(self, bus: int, address: int, offset: int, length: int) -> bytes:
        path = self.device_path(bus, address)
        try:
            with open(path, "rb") as f:
                f.seek(offset)
                data = f.read(length)
        except OSError as e:
            raise DeviceReadFailure(bus, address, offset, length, str(e)) from e

        if len(data) != length:
            raise DeviceReadFailure(
                bus, address, offset, length, f"short read of {len(data)} byte(s) from {path}"
            )
        return data


class ImageReader:
    """Serve reads from in-memory EEPROM images keyed by (bus, address)."""

    def __init__(self, images: Optional[Dict[Tuple[int, int], bytes]] = None):
        self.images: Dict[Tuple[int, int], bytes] = dict(images or {})

    @classmethod
    def from_file(cls, path: Union[str, Path], bus: int = 0, address: int = 0) -> "ImageReader":
        """Load a raw EEPROM dump as the image for (bus, address)."""
        return cls({(bus, address): Path(path).read_bytes()})

    def add_image(self, bus: int, address: int, image: bytes) -> None:
        self.images[(bus, address)] = bytes(image)

    def read_bytes(self, bus: int, address: int, offset: int, length: int) -> bytes:
        image = self.images.get((bus, address))
        if image is None:
            raise DeviceReadFailure(bus, address, offset, length, "no such device")
        if offset < 0 or length < 0 or offset + length > len(image):
            raise DeviceReadFailure(
                bus, address, offset, length, f"range outside {len(image)}-byte image"
            )
        return image[offset:offset + length]

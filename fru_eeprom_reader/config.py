"""Decoder configuration loaded from an INI file."""

from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from fru_eeprom_reader.decoding.areas import BOARD_AREA_MIN_FIELDS, PRODUCT_AREA_MIN_FIELDS


@dataclass
class DecoderConfig:
    """Settings for one extractor instance."""

    product_minimum_fields: int = PRODUCT_AREA_MIN_FIELDS
    board_minimum_fields: int = BOARD_AREA_MIN_FIELDS
    sysfs_root: str = "/sys/bus/i2c/devices"
    eeprom_name: str = "eeprom"
    log_level: str = "WARNING"


class ConfigManager:
    """Manages decoder configuration from an INI file.

    Example::

        [decoder]
        product_minimum_fields = 5
        board_minimum_fields = 4

        [transport]
        sysfs_root = /sys/bus/i2c/devices
        eeprom_name = eeprom

        [logging]
        level = DEBUG
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None
        self.config = ConfigParser()

    def load(self) -> ConfigParser:
        """Load the config file; a missing file leaves only defaults."""
        if self.config_path is not None:
            self.config.read(self.config_path)
        return self.config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> str:
        """Get config value with fallback."""
        try:
            return self.config.get(section, key)
        except Exception:
            return fallback if fallback else ""

    def getint(self, section: str, key: str, fallback: int = 0) -> int:
        """Get integer config value."""
        try:
            return self.config.getint(section, key)
        except Exception:
            return fallback

    def decoder_config(self) -> DecoderConfig:
        """Build a DecoderConfig, falling back to defaults for anything unset."""
        defaults = DecoderConfig()
        return DecoderConfig(
            product_minimum_fields=self.getint(
                "decoder", "product_minimum_fields", defaults.product_minimum_fields
            ),
            board_minimum_fields=self.getint(
                "decoder", "board_minimum_fields", defaults.board_minimum_fields
            ),
            sysfs_root=self.get("transport", "sysfs_root", defaults.sysfs_root),
            eeprom_name=self.get("transport", "eeprom_name", defaults.eeprom_name),
            log_level=self.get("logging", "level", defaults.log_level).upper(),
        )


def load_config(config_path: Optional[Union[str, Path]] = None) -> DecoderConfig:
    """Read ``config_path`` (if given) and return the resulting DecoderConfig."""
    manager = ConfigManager(config_path)
    manager.load()
    return manager.decoder_config()

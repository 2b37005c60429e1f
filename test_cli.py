"""Test the command line interface."""

import pytest
from click.testing import CliRunner

from fru_eeprom_reader.cli import cli


@pytest.fixture
def dump(tmp_path, micas_fru):
    path = tmp_path / "fru.bin"
    path.write_bytes(micas_fru)
    return str(path)


def test_product_serial(dump):
    result = CliRunner().invoke(cli, ["product", "1", "0x50", "serial_number", "--image", dump])
    assert result.exit_code == 0
    assert "SN01" in result.output


def test_board_hardware_info_hex(dump):
    result = CliRunner().invoke(cli, ["board", "1", "0x50", "hardware_info", "--image", dump, "--hex"])
    assert result.exit_code == 0
    assert b"HW-A1".hex() in result.output


def test_absent_field(dump):
    result = CliRunner().invoke(cli, ["product", "1", "0x50", "asset_tag", "--image", dump])
    assert result.exit_code == 0
    assert "not present" in result.output


def test_board_rejects_asset_tag(dump):
    result = CliRunner().invoke(cli, ["board", "1", "0x50", "asset_tag", "--image", dump])
    assert result.exit_code != 0


def test_header_table(dump):
    result = CliRunner().invoke(cli, ["header", "1", "80", "--image", dump])
    assert result.exit_code == 0
    assert "product" in result.output
    assert "48" in result.output


def test_corrupt_image_exits_nonzero(tmp_path):
    path = tmp_path / "blank.bin"
    path.write_bytes(b"\xff" * 64)
    result = CliRunner().invoke(cli, ["product", "1", "0x50", "serial_number", "--image", str(path)])
    assert result.exit_code == 1
    assert "format version" in result.output


def test_sysfs_from_config(tmp_path, micas_fru):
    device = tmp_path / "i2c" / "2-0056"
    device.mkdir(parents=True)
    (device / "eeprom").write_bytes(micas_fru)
    config = tmp_path / "fru.ini"
    config.write_text(f"[transport]\nsysfs_root = {tmp_path / 'i2c'}\n")

    result = CliRunner().invoke(cli, ["--config", str(config), "product", "2", "0x56", "product_name"])
    assert result.exit_code == 0
    assert "Fan1" in result.output

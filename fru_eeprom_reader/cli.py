"""CLI entry point for the FRU EEPROM reader."""

import sys

import click
from rich.console import Console
from rich.table import Table

from fru_eeprom_reader import __version__
from fru_eeprom_reader.config import load_config
from fru_eeprom_reader.decoding.areas import BOARD_SLOTS, PRODUCT_SLOTS, FieldKind
from fru_eeprom_reader.decoding.header import AreaKind
from fru_eeprom_reader.errors import FruError
from fru_eeprom_reader.extractor import FruExtractor
from fru_eeprom_reader.log import get_logger
from fru_eeprom_reader.transport import ImageReader, SysfsEepromReader

console = Console()


def _int(value: str) -> int:
    # accepts 0x50 as well as 80
    return int(value, 0)


class IntParam(click.ParamType):
    name = "integer"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return _int(value)
        except ValueError:
            self.fail(f"{value!r} is not an integer", param, ctx)


INT = IntParam()

image_option = click.option(
    "--image",
    type=click.Path(exists=True, dir_okay=False),
    help="Decode a raw EEPROM dump instead of reading sysfs",
)


def _extractor(ctx: click.Context, bus: int, address: int, image) -> FruExtractor:
    config = ctx.obj["config"]
    if image:
        reader = ImageReader.from_file(image, bus, address)
    else:
        reader = SysfsEepromReader(config.sysfs_root, config.eeprom_name)
    return FruExtractor(reader, config=config, logger=ctx.obj["logger"])


def _print_field(area: AreaKind, bus, address, field_name, image, show_hex, ctx):
    try:
        field_kind = FieldKind.from_name(field_name)
        extractor = _extractor(ctx, bus, address, image)
        field = extractor.read_field(bus, address, area, field_kind)
    except FruError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    if not field:
        console.print(f"[yellow]{field_kind.name.lower()}: not present[/yellow]")
        return
    if show_hex:
        console.print(field.data.hex())
    else:
        console.print(field.text(), markup=False, highlight=False)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="INI file with decoder settings",
)
@click.option("--debug", is_flag=True, help="Enable debug logging of offsets and fields")
@click.pass_context
def cli(ctx, config_path, debug):
    """FRU EEPROM reader - extract inventory fields from IPMI FRU records."""
    config = load_config(config_path)
    level = "DEBUG" if debug else config.log_level
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["logger"] = get_logger(level, Console(stderr=True))


@cli.command()
@click.argument("bus", type=INT)
@click.argument("address", type=INT)
@image_option
@click.pass_context
def header(ctx, bus, address, image):
    """Show the common header area offsets."""
    try:
        hdr = _extractor(ctx, bus, address, image).read_header(bus, address)
    except FruError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    table = Table(title=f"FRU common header (bus {bus}, addr 0x{address:02x})")
    table.add_column("Area")
    table.add_column("Offset", justify="right")
    for area in AreaKind:
        offset = hdr.area_offset(area)
        table.add_row(area.value, str(offset) if offset else "-")
    console.print(table)


@cli.command()
@click.argument("bus", type=INT)
@click.argument("address", type=INT)
@click.argument("field", type=click.Choice([k.name.lower() for k in PRODUCT_SLOTS], case_sensitive=False))
@image_option
@click.option("--hex", "show_hex", is_flag=True, help="Print the raw payload as hex")
@click.pass_context
def product(ctx, bus, address, field, image, show_hex):
    """Print one Product-Info field."""
    _print_field(AreaKind.PRODUCT, bus, address, field, image, show_hex, ctx)


@cli.command()
@click.argument("bus", type=INT)
@click.argument("address", type=INT)
@click.argument("field", type=click.Choice([k.name.lower() for k in BOARD_SLOTS], case_sensitive=False))
@image_option
@click.option("--hex", "show_hex", is_flag=True, help="Print the raw payload as hex")
@click.pass_context
def board(ctx, bus, address, field, image, show_hex):
    """Print one Board-Info field."""
    _print_field(AreaKind.BOARD, bus, address, field, image, show_hex, ctx)


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()

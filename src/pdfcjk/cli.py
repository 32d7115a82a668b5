# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Click-based CLI for pdfcjk.

This module provides the command-line interface for inspecting
the supported CJK fonts and their /W width arrays.
"""

# Standard Library
import logging
import sys

# Third Party
import click
from colorama import Fore, Style, init

# Local
from . import __version__
from .exceptions import (
    CatalogLoadError,
    FormatError,
    MissingResourceError,
    UnsupportedFontError,
)
from .fonts.cidfont import parse_cid_system_info
from .fonts.constants import CJK_ORDERINGS
from .fonts.registry import FontRegistry
from .fonts.resources import FontResources
from .utils import setup_logging

EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_UNSUPPORTED_FONT = 2
EXIT_RESOURCE_ERROR = 3

logger = logging.getLogger(__name__)


def print_success(msg: str) -> None:
    """Prints a success message in green.

    Args:
        msg: The message to output.
    """
    click.echo(f"{Fore.GREEN}\u2713{Style.RESET_ALL} {msg}")


def print_error(msg: str) -> None:
    """Prints an error message in red.

    Args:
        msg: The error message to output.
    """
    click.echo(f"{Fore.RED}\u2717 Error:{Style.RESET_ALL} {msg}", err=True)


def _open_registry(resource_dir: str | None) -> FontRegistry:
    try:
        return FontRegistry.from_resources(FontResources(resource_dir))
    except CatalogLoadError as e:
        print_error(str(e))
        sys.exit(EXIT_RESOURCE_ERROR)


@click.group()
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only output errors",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Detailed output",
)
@click.option(
    "--resource-dir",
    type=click.Path(exists=True, file_okay=False),
    envvar="PDFCJK_RESOURCE_DIR",
    help="Directory with the font .properties resources "
    "(default: packaged resources).",
)
@click.version_option(version=__version__)
@click.pass_context
def main(
    ctx: click.Context, quiet: bool, verbose: bool, resource_dir: str | None
) -> None:
    """Inspects the supported CJK CIDFonts."""
    # Initialize colorama for Windows compatibility
    init()
    setup_logging(verbose=verbose, quiet=quiet)
    ctx.ensure_object(dict)
    ctx.obj["resource_dir"] = resource_dir
    ctx.obj["quiet"] = quiet


@main.command("list")
@click.pass_context
def list_fonts(ctx: click.Context) -> None:
    """Lists all supported fonts with their type."""
    registry = _open_registry(ctx.obj["resource_dir"])
    catalog = registry.catalog
    for name in catalog:
        click.echo(f"{name}\t{catalog.font_type(name)}")
    if not ctx.obj["quiet"]:
        print_success(f"{len(catalog)} supported fonts")


@main.command("show")
@click.argument("name")
@click.option(
    "-w",
    "--widths",
    "show_widths",
    is_flag=True,
    help="Print the encoded /W array",
)
@click.pass_context
def show_font(ctx: click.Context, name: str, show_widths: bool) -> None:
    """Shows the descriptor and widths of font NAME."""
    registry = _open_registry(ctx.obj["resource_dir"])
    try:
        font = registry.get_font(name)
    except UnsupportedFontError as e:
        print_error(str(e))
        sys.exit(EXIT_UNSUPPORTED_FONT)
    except MissingResourceError as e:
        print_error(str(e))
        sys.exit(EXIT_RESOURCE_ERROR)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Could not read font properties of {name}: {e}")
        sys.exit(EXIT_RESOURCE_ERROR)
    except FormatError as e:
        print_error(f"{name}: {e}")
        sys.exit(EXIT_GENERAL_ERROR)

    fd = font.descriptor
    click.echo(f"Font:          {font.name} ({font.font_type})")
    click.echo(f"Encoding:      {font.encoding}")
    script = _script_suffix(font.cid_system_info)
    click.echo(f"CIDSystemInfo: {font.cid_system_info}{script}")
    click.echo(f"Flags:         {fd.flags}")
    click.echo(f"FontBBox:      [{' '.join(str(v) for v in fd.bbox)}]")
    click.echo(f"ItalicAngle:   {fd.italic_angle}")
    click.echo(f"Ascent:        {fd.ascent}")
    click.echo(f"Descent:       {fd.descent}")
    click.echo(f"CapHeight:     {fd.cap_height}")
    click.echo(f"StemV:         {fd.stem_v}")
    click.echo(f"DW:            {font.default_width}")
    click.echo(f"W elements:    {len(font.widths)}")
    if show_widths:
        click.echo(f"W:             {_format_w_array(font.w_array)}")


def _script_suffix(identifier: str) -> str:
    try:
        ordering = parse_cid_system_info(identifier).ordering
    except FormatError:
        return ""
    script = CJK_ORDERINGS.get(ordering)
    return f" ({script})" if script else ""


def _format_w_array(w_array: list) -> str:
    parts = []
    for item in w_array:
        if isinstance(item, list):
            parts.append(f"[{' '.join(str(w) for w in item)}]")
        else:
            parts.append(str(item))
    return f"[{' '.join(parts)}]"

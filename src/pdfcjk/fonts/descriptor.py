# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""FontDescriptor and CIDFont profile building from property bundles."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ..exceptions import FormatError
from .constants import DESCRIPTOR_INT_KEYS, REQUIRED_KEYS
from .widths import WidthElement, encode_width_string

logger = logging.getLogger(__name__)

BBox = tuple[int, int, int, int]


@dataclass(frozen=True)
class FontDescriptor:
    """Font metrics and flags of a CJK font.

    Attributes:
        font_name: PostScript name of the font.
        flags: PDF font flags.
        bbox: Font bounding box (llx, lly, urx, ury).
        italic_angle: Italic angle in degrees.
        ascent: Ascent in glyph space units.
        descent: Descent in glyph space units (usually negative).
        cap_height: Height of capital letters.
        stem_v: Vertical stem thickness.
    """

    font_name: str
    flags: int
    bbox: BBox
    italic_angle: int
    ascent: int
    descent: int
    cap_height: int
    stem_v: int


@dataclass(frozen=True)
class CIDFontProfile:
    """Everything needed to construct a Type0 font for a catalog font.

    Attributes:
        name: Catalog name of the font.
        font_type: Lower-cased type tag from the catalog.
        descriptor: Font descriptor.
        widths: Encoded /W array. Bracket lists are stored as tuples.
        default_width: /DW value for CIDs not listed in ``widths``.
        encoding: CMap name, e.g. ``UniJIS-UCS2-H``.
        cid_system_info: Identifier in ``Registry-Ordering-Supplement`` form.
    """

    name: str
    font_type: str
    descriptor: FontDescriptor
    widths: tuple[int | tuple[int, ...], ...]
    default_width: int
    encoding: str
    cid_system_info: str

    @property
    def w_array(self) -> list[WidthElement]:
        """The /W array as a fresh nested list."""
        return [list(item) if isinstance(item, tuple) else item for item in self.widths]


def _require(bundle: Mapping[str, str], key: str) -> str:
    value = bundle.get(key)
    if value is None:
        raise FormatError(f"missing font property '{key}'")
    return value


def parse_int(bundle: Mapping[str, str], key: str) -> int:
    """Reads a decimal integer property.

    Raises:
        FormatError: If the key is missing or not an integer.
    """
    value = _require(bundle, key)
    try:
        return int(value.strip())
    except ValueError as e:
        raise FormatError(f"font property '{key}' is not an integer: {value!r}") from e


def parse_bbox(value: str) -> BBox:
    """Parses a ``[llx lly urx ury]`` bounding box.

    Args:
        value: Raw ``FontBBox`` value.

    Returns:
        Tuple of four integers.

    Raises:
        FormatError: If the value does not hold exactly four integers.
    """
    parts = value.strip().lstrip("[").rstrip("]").split()
    if len(parts) != 4:
        raise FormatError(f"font property 'FontBBox' is malformed: {value!r}")
    try:
        llx, lly, urx, ury = (int(part) for part in parts)
    except ValueError as e:
        raise FormatError(f"font property 'FontBBox' is malformed: {value!r}") from e
    return llx, lly, urx, ury


def _parse_identifier(bundle: Mapping[str, str], key: str) -> str:
    value = _require(bundle, key).strip()
    if not value:
        raise FormatError(f"font property '{key}' is empty")
    return value


def build_descriptor(font_name: str, bundle: Mapping[str, str]) -> FontDescriptor:
    """Builds the FontDescriptor of a font from its property bundle.

    Args:
        font_name: PostScript name of the font.
        bundle: Property mapping of the font.

    Returns:
        Populated FontDescriptor.

    Raises:
        FormatError: If a field is missing or malformed.
    """
    values = {key: parse_int(bundle, key) for key in DESCRIPTOR_INT_KEYS}
    return FontDescriptor(
        font_name=font_name,
        flags=values["Flags"],
        bbox=parse_bbox(_require(bundle, "FontBBox")),
        italic_angle=values["ItalicAngle"],
        ascent=values["Ascent"],
        descent=values["Descent"],
        cap_height=values["CapHeight"],
        stem_v=values["StemV"],
    )


def build_cid_font(
    font_name: str, bundle: Mapping[str, str], font_type: str = ""
) -> CIDFontProfile:
    """Builds the complete CIDFont profile of a font.

    Args:
        font_name: Catalog name of the font.
        bundle: Property mapping of the font.
        font_type: Type tag from the catalog.

    Returns:
        Immutable CIDFontProfile.

    Raises:
        FormatError: If a field is missing or malformed.
    """
    missing = [key for key in REQUIRED_KEYS if key not in bundle]
    if missing:
        raise FormatError(
            f"missing font properties of '{font_name}': "
            + ", ".join(f"'{key}'" for key in missing)
        )

    descriptor = build_descriptor(font_name, bundle)
    try:
        w_array = encode_width_string(_require(bundle, "W"))
    except FormatError as e:
        raise FormatError(f"font property 'W' of '{font_name}': {e}") from e

    logger.debug(
        "Encoded %d width entries of %s into %d /W elements",
        len(_require(bundle, "W").split()) // 2,
        font_name,
        len(w_array),
    )

    return CIDFontProfile(
        name=font_name,
        font_type=font_type,
        descriptor=descriptor,
        widths=tuple(
            tuple(item) if isinstance(item, list) else item for item in w_array
        ),
        default_width=parse_int(bundle, "DW"),
        encoding=_parse_identifier(bundle, "Encoding"),
        cid_system_info=_parse_identifier(bundle, "CIDSystemInfo"),
    )

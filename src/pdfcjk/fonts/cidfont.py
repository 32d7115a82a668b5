# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Type0/CIDFont PDF structures for CJK font profiles."""

from dataclasses import dataclass

import pikepdf
from pikepdf import Array, Dictionary, Name

from ..exceptions import FormatError
from .descriptor import CIDFontProfile, FontDescriptor
from .widths import w_array_to_pikepdf


@dataclass(frozen=True)
class CIDSystemInfo:
    """Character collection of a CIDFont.

    Attributes:
        registry: Issuer of the character collection, e.g. ``Adobe``.
        ordering: Collection name, e.g. ``Japan1``.
        supplement: Supplement number of the collection.
    """

    registry: str
    ordering: str
    supplement: int


def parse_cid_system_info(identifier: str) -> CIDSystemInfo:
    """Parses a ``Registry-Ordering-Supplement`` identifier.

    Raises:
        FormatError: If the identifier does not have three parts or the
            supplement is not an integer.
    """
    parts = identifier.strip().rsplit("-", 2)
    if len(parts) != 3 or not parts[0] or not parts[1]:
        raise FormatError(f"font property 'CIDSystemInfo' is malformed: {identifier!r}")
    registry, ordering, supplement = parts
    try:
        return CIDSystemInfo(registry, ordering, int(supplement))
    except ValueError as e:
        raise FormatError(
            f"font property 'CIDSystemInfo' is malformed: {identifier!r}"
        ) from e


class CIDFontBuilder:
    """Builds Type0/CIDFontType0 PDF structures.

    The CJK fonts are not embedded: the font hierarchy holds the
    CIDSystemInfo, FontDescriptor and /W array only.
    """

    def __init__(self, pdf: pikepdf.Pdf) -> None:
        """Initializes the CIDFontBuilder.

        Args:
            pdf: Opened pikepdf PDF object.
        """
        self._pdf = pdf

    def build_font_descriptor(self, descriptor: FontDescriptor) -> Dictionary:
        """Creates the /FontDescriptor dictionary."""
        return Dictionary(
            Type=Name.FontDescriptor,
            FontName=Name(f"/{descriptor.font_name}"),
            Flags=descriptor.flags,
            FontBBox=Array(list(descriptor.bbox)),
            ItalicAngle=descriptor.italic_angle,
            Ascent=descriptor.ascent,
            Descent=descriptor.descent,
            CapHeight=descriptor.cap_height,
            StemV=descriptor.stem_v,
        )

    def build_structure(self, profile: CIDFontProfile) -> Dictionary:
        """Creates the complete Type0/CIDFont structure.

        Builds the font hierarchy:
        - Type0 Dictionary (main font)
        - CIDFont Dictionary (descendant)
        - CIDSystemInfo
        - FontDescriptor
        - /DW and /W

        Args:
            profile: Font profile from the registry.

        Returns:
            pikepdf Dictionary for the Type0 font.

        Raises:
            FormatError: If the CIDSystemInfo identifier is malformed.
        """
        system_info = parse_cid_system_info(profile.cid_system_info)
        cid_system_info = Dictionary(
            Registry=pikepdf.String(system_info.registry),
            Ordering=pikepdf.String(system_info.ordering),
            Supplement=system_info.supplement,
        )

        font_descriptor = self.build_font_descriptor(profile.descriptor)

        cid_font = Dictionary(
            Type=Name.Font,
            Subtype=Name.CIDFontType0,
            BaseFont=Name(f"/{profile.name}"),
            CIDSystemInfo=cid_system_info,
            FontDescriptor=self._pdf.make_indirect(font_descriptor),
            DW=profile.default_width,
            W=Array(w_array_to_pikepdf(profile.widths)),
        )

        return Dictionary(
            Type=Name.Font,
            Subtype=Name.Type0,
            BaseFont=Name(f"/{profile.name}"),
            Encoding=Name(f"/{profile.encoding}"),
            DescendantFonts=Array([self._pdf.make_indirect(cid_font)]),
        )


def build_type0_font(pdf: pikepdf.Pdf, profile: CIDFontProfile) -> Dictionary:
    """Shortcut for ``CIDFontBuilder(pdf).build_structure(profile)``."""
    return CIDFontBuilder(pdf).build_structure(profile)

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""CJK CIDFont catalog, descriptors and /W array encoding."""

from ..exceptions import (
    CatalogLoadError,
    FormatError,
    MissingResourceError,
    UnsupportedFontError,
)
from .catalog import FontCatalog, load_catalog
from .cidfont import CIDFontBuilder, CIDSystemInfo, build_type0_font
from .descriptor import CIDFontProfile, FontDescriptor, build_cid_font
from .registry import FontRegistry, get_default_registry, get_font
from .resources import FontResources
from .widths import decode_widths, encode_width_string, encode_widths

__all__ = [
    # Exceptions
    "CatalogLoadError",
    "FormatError",
    "MissingResourceError",
    "UnsupportedFontError",
    # Catalog and registry
    "FontCatalog",
    "FontRegistry",
    "FontResources",
    "get_default_registry",
    "get_font",
    "load_catalog",
    # Profiles
    "CIDFontProfile",
    "FontDescriptor",
    "build_cid_font",
    # Widths
    "decode_widths",
    "encode_width_string",
    "encode_widths",
    # PDF structures
    "CIDFontBuilder",
    "CIDSystemInfo",
    "build_type0_font",
]

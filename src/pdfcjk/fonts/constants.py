# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Font resource names and property keys."""

# Catalog of supported font names (name=type)
CATALOG_RESOURCE = "supported_fonts.properties"

# Per-font resources are named <FontName>.properties
RESOURCE_SUFFIX = ".properties"

# Environment variable overriding the packaged resource directory
RESOURCE_DIR_ENV = "PDFCJK_RESOURCE_DIR"

# Keys every per-font resource must define
REQUIRED_KEYS = (
    "Flags",
    "FontBBox",
    "ItalicAngle",
    "Ascent",
    "Descent",
    "CapHeight",
    "StemV",
    "CIDSystemInfo",
    "DW",
    "W",
    "Encoding",
)

# Integer-valued FontDescriptor keys
DESCRIPTOR_INT_KEYS = (
    "Flags",
    "ItalicAngle",
    "Ascent",
    "Descent",
    "CapHeight",
    "StemV",
)

# CIDSystemInfo ordering -> script
CJK_ORDERINGS: dict[str, str] = {
    "Japan1": "Japanese",
    "CNS1": "Traditional Chinese",
    "GB1": "Simplified Chinese",
    "Korea1": "Korean",
}

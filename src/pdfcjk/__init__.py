# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""pdfcjk - CJK CIDFont profiles and /W width arrays for PDF."""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    CatalogLoadError,
    FormatError,
    MissingResourceError,
    PDFCJKError,
    UnsupportedFontError,
)
from .fonts import (
    CIDFontProfile,
    FontDescriptor,
    FontRegistry,
    build_type0_font,
    get_font,
)

try:
    __version__ = version("pdfcjk")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    "get_font",
    "build_type0_font",
    "FontRegistry",
    "CIDFontProfile",
    "FontDescriptor",
    "PDFCJKError",
    "UnsupportedFontError",
    "MissingResourceError",
    "FormatError",
    "CatalogLoadError",
]

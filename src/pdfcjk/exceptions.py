# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Custom exceptions for pdfcjk."""


class PDFCJKError(Exception):
    """Base exception for all pdfcjk errors."""


class UnsupportedFontError(PDFCJKError):
    """Font name is not in the font catalog."""


class MissingResourceError(PDFCJKError):
    """A per-font property resource could not be found."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class FormatError(PDFCJKError):
    """Malformed font property value or width list."""


class CatalogLoadError(PDFCJKError):
    """The font catalog could not be loaded."""

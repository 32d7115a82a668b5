# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Lookup of CJK font property resources."""

import logging
import os
from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from ..exceptions import MissingResourceError
from .constants import CATALOG_RESOURCE, RESOURCE_DIR_ENV, RESOURCE_SUFFIX
from .properties import parse_properties

logger = logging.getLogger(__name__)


def _get_resource_dir() -> Path | None:
    """Returns the resource directory from PDFCJK_RESOURCE_DIR, if set."""
    value = os.environ.get(RESOURCE_DIR_ENV)
    return Path(value) if value else None


class FontResources:
    """Reads the catalog and per-font property resources.

    Resources are read from the ``pdfcjk/resources/cjk`` package data
    unless a directory is given explicitly or through the
    ``PDFCJK_RESOURCE_DIR`` environment variable.
    """

    def __init__(self, directory: str | Path | None = None) -> None:
        """Initializes the FontResources.

        Args:
            directory: Optional directory containing the ``.properties``
                files. Overrides the environment variable.
        """
        if directory is None:
            directory = _get_resource_dir()
        self._directory = Path(directory) if directory is not None else None

    def _locate(self, filename: str):
        if self._directory is not None:
            return self._directory / filename
        return resources.files("pdfcjk") / "resources" / "cjk" / filename

    def describe(self, filename: str) -> str:
        """Returns a printable location for a resource file."""
        return str(self._locate(filename))

    def read_text(self, filename: str) -> str:
        """Reads a resource file as UTF-8 text.

        Args:
            filename: File name inside the resource directory.

        Returns:
            File contents.

        Raises:
            MissingResourceError: If the resource does not exist.
            OSError: If the resource exists but cannot be read.
        """
        ref = self._locate(filename)
        if not ref.is_file():
            raise MissingResourceError(
                f"Font properties not found: {ref}", path=str(ref)
            )
        logger.debug("Reading font resource %s", ref)
        return ref.read_text(encoding="utf-8")

    def load_catalog_properties(self) -> Mapping[str, str]:
        """Loads the ``name=type`` catalog resource."""
        return parse_properties(self.read_text(CATALOG_RESOURCE))

    def load_font_properties(self, font_name: str) -> Mapping[str, str]:
        """Loads the property bundle of one font.

        Args:
            font_name: Catalog name of the font.

        Returns:
            Read-only property mapping.

        Raises:
            MissingResourceError: If the font has no property resource.
        """
        return parse_properties(self.read_text(f"{font_name}{RESOURCE_SUFFIX}"))

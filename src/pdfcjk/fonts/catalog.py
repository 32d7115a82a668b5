# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Catalog of supported CJK font names."""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ..exceptions import CatalogLoadError, PDFCJKError
from .properties import parse_properties
from .resources import FontResources

logger = logging.getLogger(__name__)


class FontCatalog:
    """Read-only mapping of supported font names to their type tag.

    Type tags are lower-cased on load.
    """

    def __init__(self, entries: Mapping[str, str]) -> None:
        """Initializes the FontCatalog.

        Args:
            entries: Mapping of font name to type tag.
        """
        self._entries = MappingProxyType(
            {name: font_type.lower() for name, font_type in entries.items()}
        )

    @classmethod
    def from_text(cls, text: str) -> "FontCatalog":
        """Creates a catalog from ``name=type`` properties text."""
        return cls(parse_properties(text))

    def contains(self, name: str) -> bool:
        """Returns True if ``name`` is a supported font."""
        return name in self._entries

    def font_type(self, name: str) -> str | None:
        """Returns the type tag of ``name``, or None if unsupported."""
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))


def load_catalog(resources: FontResources | None = None) -> FontCatalog:
    """Loads the font catalog resource.

    Args:
        resources: Resource reader. Defaults to the packaged resources.

    Returns:
        Loaded FontCatalog.

    Raises:
        CatalogLoadError: If the catalog resource is missing, unreadable
            or malformed.
    """
    if resources is None:
        resources = FontResources()
    try:
        catalog = FontCatalog(resources.load_catalog_properties())
    except (OSError, UnicodeDecodeError, PDFCJKError) as e:
        raise CatalogLoadError(
            f"Could not load the supported fonts catalog: {e}"
        ) from e

    logger.debug("Loaded font catalog with %d fonts", len(catalog))
    return catalog

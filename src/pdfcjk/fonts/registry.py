# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Registry of CJK CIDFont profiles with build-once caching."""

import logging
import threading

from ..exceptions import UnsupportedFontError
from .catalog import FontCatalog, load_catalog
from .descriptor import CIDFontProfile, build_cid_font
from .resources import FontResources

logger = logging.getLogger(__name__)


class FontRegistry:
    """Builds and caches CIDFont profiles by font name.

    Each supported font is built at most once per registry, also when
    several threads request the same font concurrently. Different fonts
    are built independently of each other.
    """

    def __init__(
        self, catalog: FontCatalog, resources: FontResources | None = None
    ) -> None:
        """Initializes the FontRegistry.

        Args:
            catalog: Loaded catalog of supported fonts.
            resources: Resource reader for per-font properties.
        """
        self._catalog = catalog
        self._resources = resources if resources is not None else FontResources()
        self._cache: dict[str, CIDFontProfile] = {}
        self._build_locks: dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_resources(cls, resources: FontResources | None = None) -> "FontRegistry":
        """Creates a registry and loads its catalog.

        Raises:
            CatalogLoadError: If the catalog cannot be loaded.
        """
        if resources is None:
            resources = FontResources()
        return cls(load_catalog(resources), resources)

    @property
    def catalog(self) -> FontCatalog:
        return self._catalog

    def supported_fonts(self) -> list[str]:
        """Returns the sorted names of all supported fonts."""
        return list(self._catalog)

    def is_cached(self, name: str) -> bool:
        with self._lock:
            return name in self._cache

    def get_font(self, name: str) -> CIDFontProfile:
        """Returns the CIDFont profile of a supported font.

        Args:
            name: Catalog name of the font.

        Returns:
            The cached CIDFontProfile; the same object on every call.

        Raises:
            UnsupportedFontError: If the font is not in the catalog.
            MissingResourceError: If the font has no property resource.
            FormatError: If the font properties are malformed.
        """
        if not self._catalog.contains(name):
            raise UnsupportedFontError(f"{name} is not supported")

        with self._lock:
            font = self._cache.get(name)
            if font is not None:
                return font
            build_lock = self._build_locks.setdefault(name, threading.Lock())

        with build_lock:
            # Another thread may have finished the build while we waited
            with self._lock:
                font = self._cache.get(name)
            if font is not None:
                return font

            font = self._make_font(name)
            with self._lock:
                self._cache[name] = font
                self._build_locks.pop(name, None)
        return font

    def _make_font(self, name: str) -> CIDFontProfile:
        bundle = self._resources.load_font_properties(name)
        font = build_cid_font(name, bundle, self._catalog.font_type(name) or "")
        logger.debug("Built CJK font profile for %s", name)
        return font


_default_registry: FontRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> FontRegistry:
    """Returns the process-wide registry, creating it on first use.

    Raises:
        CatalogLoadError: If the catalog cannot be loaded.
    """
    global _default_registry  # noqa: PLW0603
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = FontRegistry.from_resources()
        return _default_registry


def get_font(name: str) -> CIDFontProfile:
    """Returns a font profile from the process-wide registry."""
    return get_default_registry().get_font(name)

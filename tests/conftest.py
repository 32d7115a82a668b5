# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest fixtures for the pdfcjk test suite."""

from pathlib import Path

import pytest
from pikepdf import Pdf

# -- Global PDF tracker --

_tracked_pdfs: list[Pdf] = []


@pytest.fixture(autouse=True)
def _auto_close_pdfs():
    """Close all tracked PDF objects after each test."""
    yield
    for pdf in reversed(_tracked_pdfs):
        try:
            pdf.close()
        except Exception:
            pass
    _tracked_pdfs.clear()


def new_pdf(**kwargs) -> Pdf:
    """Create a tracked Pdf (auto-closed after test)."""
    pdf = Pdf.new(**kwargs)
    _tracked_pdfs.append(pdf)
    return pdf


# -- Resource helpers --

SAMPLE_FONT_PROPERTIES = """\
# Sample CJK font
Flags=6
FontBBox=[-123 -257 1001 910]
ItalicAngle=0
Ascent=859
Descent=-143
CapHeight=709
StemV=69
CIDSystemInfo=Adobe-Japan1-2
DW=1000
Encoding=UniJIS-UCS2-H
W=1 250 2 333 3 408 4 500 5 500 6 833 \\
  10 500 11 500 12 500
"""


def make_font_properties(**overrides: str | None) -> str:
    """Return sample font properties text with some keys replaced.

    A value of None removes the key.
    """
    lines = []
    for line in SAMPLE_FONT_PROPERTIES.replace("\\\n", "").splitlines():
        key = line.split("=", 1)[0]
        if key in overrides:
            if overrides[key] is not None:
                lines.append(f"{key}={overrides[key]}")
            continue
        lines.append(line)
    return "\n".join(lines) + "\n"


def write_resources(
    directory: Path,
    catalog: dict[str, str],
    fonts: dict[str, str],
) -> Path:
    """Write a catalog and per-font property files to ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    catalog_text = "".join(
        f"{name}={font_type}\n" for name, font_type in catalog.items()
    )
    (directory / "supported_fonts.properties").write_text(
        catalog_text, encoding="utf-8"
    )
    for name, text in fonts.items():
        (directory / f"{name}.properties").write_text(text, encoding="utf-8")
    return directory


# -- Fixtures --


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Temporary directory for tests.

    Args:
        tmp_path: Pytest-provided temporary directory.

    Returns:
        Path to the temporary directory.
    """
    return tmp_path


@pytest.fixture
def resource_dir(tmp_dir: Path) -> Path:
    """Resource directory with one buildable font and one without properties.

    ``SampleMin-W3`` has a property file, ``NoProps-W5`` is listed in the
    catalog only.

    Returns:
        Path to the resource directory.
    """
    return write_resources(
        tmp_dir / "cjk",
        {"SampleMin-W3": "Mincho", "NoProps-W5": "GOTHIC"},
        {"SampleMin-W3": SAMPLE_FONT_PROPERTIES},
    )


@pytest.fixture(autouse=True)
def _no_resource_dir_env(monkeypatch):
    """Tests use the packaged resources unless they pass a directory."""
    monkeypatch.delenv("PDFCJK_RESOURCE_DIR", raising=False)

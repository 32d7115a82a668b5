# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for fonts/cidfont.py — Type0/CIDFont structures and CIDSystemInfo."""

import dataclasses
from io import BytesIO

import pytest
from conftest import SAMPLE_FONT_PROPERTIES, new_pdf
from pikepdf import Array, Name, Pdf

from pdfcjk.exceptions import FormatError
from pdfcjk.fonts.cidfont import (
    CIDFontBuilder,
    CIDSystemInfo,
    build_type0_font,
    parse_cid_system_info,
)
from pdfcjk.fonts.descriptor import build_cid_font
from pdfcjk.fonts.properties import parse_properties
from pdfcjk.fonts.widths import decode_widths
from pdfcjk.utils import resolve_indirect as _resolve_indirect


@pytest.fixture
def profile():
    """CIDFontProfile built from the sample properties."""
    return build_cid_font("SampleMin-W3", parse_properties(SAMPLE_FONT_PROPERTIES))


class TestParseCIDSystemInfo:
    """Tests for parse_cid_system_info()."""

    def test_adobe_japan1(self):
        assert parse_cid_system_info("Adobe-Japan1-2") == CIDSystemInfo(
            "Adobe", "Japan1", 2
        )

    def test_registry_with_dash(self):
        info = parse_cid_system_info("My-Vendor-Custom-0")

        assert info == CIDSystemInfo("My-Vendor", "Custom", 0)

    def test_two_parts_raise(self):
        with pytest.raises(FormatError, match="CIDSystemInfo"):
            parse_cid_system_info("Adobe-Japan1")

    def test_non_integer_supplement_raises(self):
        with pytest.raises(FormatError, match="CIDSystemInfo"):
            parse_cid_system_info("Adobe-Japan1-x")

    def test_empty_ordering_raises(self):
        with pytest.raises(FormatError):
            parse_cid_system_info("Adobe--2")


class TestCIDFontBuilder:
    """Direct tests for CIDFontBuilder.build_structure()."""

    def test_build_structure_returns_type0_dict(self, profile):
        pdf = new_pdf()
        result = CIDFontBuilder(pdf).build_structure(profile)

        assert result["/Type"] == Name.Font
        assert result["/Subtype"] == Name.Type0
        assert str(result["/BaseFont"]) == "/SampleMin-W3"
        assert str(result["/Encoding"]) == "/UniJIS-UCS2-H"

    def test_descendant_font(self, profile):
        pdf = new_pdf()
        result = CIDFontBuilder(pdf).build_structure(profile)

        desc = result["/DescendantFonts"]
        assert len(desc) == 1
        cid_font = _resolve_indirect(desc[0])
        assert cid_font["/Subtype"] == Name.CIDFontType0
        assert str(cid_font["/BaseFont"]) == "/SampleMin-W3"
        assert int(cid_font["/DW"]) == 1000

    def test_cid_system_info(self, profile):
        pdf = new_pdf()
        result = CIDFontBuilder(pdf).build_structure(profile)

        cid_font = _resolve_indirect(result["/DescendantFonts"][0])
        info = cid_font["/CIDSystemInfo"]
        assert str(info["/Registry"]) == "Adobe"
        assert str(info["/Ordering"]) == "Japan1"
        assert int(info["/Supplement"]) == 2

    def test_font_descriptor(self, profile):
        pdf = new_pdf()
        result = CIDFontBuilder(pdf).build_structure(profile)

        cid_font = _resolve_indirect(result["/DescendantFonts"][0])
        fd = _resolve_indirect(cid_font["/FontDescriptor"])
        assert fd["/Type"] == Name.FontDescriptor
        assert str(fd["/FontName"]) == "/SampleMin-W3"
        assert int(fd["/Flags"]) == 6
        assert [int(v) for v in fd["/FontBBox"]] == [-123, -257, 1001, 910]
        assert int(fd["/Ascent"]) == 859
        assert int(fd["/Descent"]) == -143
        assert int(fd["/CapHeight"]) == 709
        assert int(fd["/StemV"]) == 69
        assert "/FontFile2" not in fd

    def test_w_array(self, profile):
        pdf = new_pdf()
        result = CIDFontBuilder(pdf).build_structure(profile)

        cid_font = _resolve_indirect(result["/DescendantFonts"][0])
        w_array = cid_font["/W"]
        assert isinstance(w_array, Array)
        assert isinstance(w_array[1], Array)
        assert decode_widths(w_array) == decode_widths(profile.w_array)

    def test_malformed_cid_system_info_raises(self, profile):
        broken = dataclasses.replace(profile, cid_system_info="Adobe")

        with pytest.raises(FormatError):
            CIDFontBuilder(new_pdf()).build_structure(broken)

    def test_saved_pdf_round_trip(self, profile):
        pdf = new_pdf()
        font = pdf.make_indirect(build_type0_font(pdf, profile))
        pdf.Root.CJKTestFont = font

        buffer = BytesIO()
        pdf.save(buffer)
        buffer.seek(0)

        with Pdf.open(buffer) as reopened:
            font = reopened.Root.CJKTestFont
            cid_font = font.DescendantFonts[0]
            assert decode_widths(cid_font.W) == decode_widths(profile.w_array)

"""Tests for font and result models."""

import pytest

from models.fonts import FontData, FontProperties, UsageRecord, truncate_content
from models.summary import ExtractionResult, ExtractionSummary


class TestTruncateContent:
    """Test content snippet truncation."""

    def test_long_text(self):
        text = "abcdefghij" * 15

        assert truncate_content(text) == text[:100] + "..."

    def test_short_text(self):
        text = "x" * 50

        assert truncate_content(text) == text

    def test_exactly_one_hundred(self):
        text = "y" * 100

        assert truncate_content(text) == text

    def test_missing_text(self):
        assert truncate_content(None) == ""


class TestFontData:
    """Test FontData class."""

    def test_requires_family(self):
        with pytest.raises(ValueError):
            FontData(font_family="")
        with pytest.raises(ValueError):
            FontData(font_size="12px")

    def test_from_properties(self):
        usage = UsageRecord("d1", "post", "title", "Hi")
        properties = FontProperties(font_family="Arial", font_size="12px", color="red")

        font = FontData.from_properties(properties, usage)

        assert font.identity == ("Arial", "12px", None, None)
        assert font.color == "red"
        assert font.usage == [usage]

    def test_document_types_are_distinct_in_order(self, make_font):
        font = make_font("Arial", usages=1, document_type="post")
        font.add_usage(UsageRecord("d2", "page", "title", ""))
        font.add_usage(UsageRecord("d3", "post", "title", ""))

        assert font.document_types == ["post", "page"]

    def test_to_dict(self):
        font = FontData(
            font_family="Arial",
            font_weight="bold",
            usage=[UsageRecord("d1", "post", "body[0].style", "Hi")],
        )

        data = font.to_dict()

        assert data["fontFamily"] == "Arial"
        assert data["fontWeight"] == "bold"
        assert data["fontSize"] is None
        assert data["textDecoration"] is None
        assert data["usageCount"] == 1
        assert data["usages"] == [{
            "documentId": "d1",
            "documentType": "post",
            "fieldPath": "body[0].style",
            "content": "Hi",
        }]


class TestExtractionSummary:
    """Test ExtractionSummary class."""

    def test_most_used(self, make_font):
        fonts = [make_font("A", usages=1), make_font("B", usages=5), make_font("C", usages=3)]

        assert ExtractionSummary.from_fonts(fonts).most_used_font == "B"

    def test_ties_go_to_first_encountered(self, make_font):
        fonts = [make_font("A", usages=2), make_font("B", usages=2)]

        assert ExtractionSummary.from_fonts(fonts).most_used_font == "A"

    def test_single_font(self, make_font):
        summary = ExtractionSummary.from_fonts([make_font("Solo")])

        assert summary.most_used_font == "Solo"
        assert summary.unique_fonts == 1

    def test_no_fonts(self):
        assert ExtractionSummary.from_fonts([]).most_used_font == "None"


class TestExtractionResult:
    """Test ExtractionResult class."""

    def test_to_dict(self, make_font):
        fonts = [make_font("Arial", usages=2)]
        result = ExtractionResult(
            total_documents=3,
            fonts_found=fonts,
            errors=["Failed to analyze x: boom"],
            summary=ExtractionSummary.from_fonts(fonts),
        )

        data = result.to_dict()

        assert data["summary"] == {"uniqueFonts": 1, "totalUsages": 2, "mostUsedFont": "Arial"}
        assert data["totalDocuments"] == 3
        assert data["errors"] == ["Failed to analyze x: boom"]
        assert data["fonts"][0]["usageCount"] == 2

    def test_formatted_summary_lists_at_most_twenty_fonts(self, make_font):
        fonts = [make_font(f"Font {i}", font_size="12px") for i in range(25)]
        result = ExtractionResult(total_documents=1, fonts_found=fonts,
                                  summary=ExtractionSummary.from_fonts(fonts))

        text = result.get_formatted_summary()

        assert "Unique Fonts: 25" in text
        assert "Font 19: 1 usages" in text
        assert "Font 20:" not in text
        assert "...and 5 more fonts" in text
        assert "size: 12px" in text
        assert "Used in: post" in text

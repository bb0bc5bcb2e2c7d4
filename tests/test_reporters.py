"""Tests for report generation."""

import csv
import json
from datetime import date

import pytest
from docx import Document

from analyzers.font_aggregator import FontAggregator
from models.summary import ExtractionResult
from reports.base_reporter import BaseReporter
from reports.csv_reporter import CSVReporter
from reports.docx_reporter import DocxReporter
from reports.json_reporter import JSONReporter
from reports.markdown_reporter import MarkdownReporter
from reports.text_reporter import TextReporter


@pytest.fixture
def result(make_font):
    aggregator = FontAggregator()
    aggregator.add_document_fonts([
        make_font("Arial", usages=2, font_size="12px", color="#222"),
        make_font("body-bold", usages=1, document_type="page", font_weight="bold"),
    ])
    return ExtractionResult(
        total_documents=2,
        fonts_found=aggregator.fonts_found,
        errors=["Failed to analyze x: boom"],
        summary=aggregator.build_summary(),
    )


class TestReporters:
    """Test reporter classes."""

    def test_default_filename(self):
        assert JSONReporter.default_filename(date(2024, 3, 9)) == "font-data-extraction-2024-03-09.json"
        assert DocxReporter.default_filename(date(2024, 3, 9)).endswith(".docx")

    def test_base_reporter_is_abstract(self, result):
        with pytest.raises(TypeError):
            BaseReporter(result)

    def test_json_report(self, result, tmp_path):
        path = tmp_path / "report.json"
        JSONReporter(result).generate_report(str(path))

        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["summary"] == {"uniqueFonts": 2, "totalUsages": 3, "mostUsedFont": "Arial"}
        assert data["fonts"][0]["fontFamily"] == "Arial"
        assert data["fonts"][0]["color"] == "#222"
        assert data["fonts"][0]["usageCount"] == 2
        assert len(data["fonts"][0]["usages"]) == 2
        assert data["errors"] == ["Failed to analyze x: boom"]

    def test_csv_report(self, result, tmp_path):
        path = tmp_path / "report.csv"
        CSVReporter(result).generate_report(str(path))

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))

        assert rows[0][0] == "Font Family"
        assert len(rows) == 1 + 3
        assert rows[1][:2] == ["Arial", "12px"]
        assert rows[3][2] == "bold"
        assert rows[3][10] == "page"

    def test_text_report(self, result, tmp_path):
        path = tmp_path / "report.txt"
        TextReporter(result).generate_report(str(path))

        text = path.read_text(encoding="utf-8")

        assert "- Most used font: Arial" in text
        assert "Arial (2 usages):" in text
        assert "- font-size: 12px" in text
        assert "- Failed to analyze x: boom" in text

    def test_markdown_report(self, result, tmp_path):
        path = tmp_path / "report.md"
        MarkdownReporter(result).generate_report(str(path))

        text = path.read_text(encoding="utf-8")

        assert text.startswith("# Font Data Extraction Summary")
        assert "| Unique fonts | 2 |" in text
        assert "## body-bold" in text
        assert "* **Font Weight**: `bold`" in text

    def test_docx_report(self, result, tmp_path):
        path = tmp_path / "report.docx"
        DocxReporter(result).generate_report(str(path))

        doc = Document(str(path))
        table = doc.tables[0]

        assert [cell.text for cell in table.rows[0].cells][0] == "Font Family"
        assert [cell.text for cell in table.rows[1].cells] == ["Arial", "12px", "", "", "2", "post"]
        assert any("Most used font: Arial" in p.text for p in doc.paragraphs)

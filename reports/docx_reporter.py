# reports/docx_reporter.py
from docx import Document
from docx.oxml import parse_xml
from docx.oxml.ns import nsdecls
from docx.shared import Pt

from .base_reporter import BaseReporter

FONT_TABLE_HEADER = ["Font Family", "Size", "Weight", "Style", "Usages", "Used In"]
HEADER_FILL = "D9D9D9"


class DocxReporter(BaseReporter):
    """Generates reports as Word documents."""

    extension = "docx"

    def generate_report(self, output_path: str) -> None:
        """
        Generate a Word report with a summary and a font table.

        Args:
            output_path: Path where the .docx report should be saved
        """
        summary = self.result.summary
        doc = Document()
        doc.add_heading("Font Data Extraction Summary", level=1)

        for label, value in (
            ("Documents", self.result.total_documents),
            ("Unique fonts", summary.unique_fonts),
            ("Total usages", summary.total_usages),
            ("Most used font", summary.most_used_font),
        ):
            para = doc.add_paragraph(style="List Bullet")
            para.add_run(f"{label}: ").bold = True
            para.add_run(str(value))

        if self.result.fonts_found:
            doc.add_heading("Fonts", level=2)
            rows = [FONT_TABLE_HEADER] + [
                [
                    font.font_family,
                    font.font_size or "",
                    font.font_weight or "",
                    font.font_style or "",
                    str(font.usage_count),
                    ", ".join(font.document_types),
                ]
                for font in self.result.fonts_found
            ]
            self._add_table(doc, rows)

        if self.result.errors:
            doc.add_heading("Errors", level=2)
            for error in self.result.errors:
                doc.add_paragraph(error, style="List Bullet")

        doc.save(output_path)

    def _add_table(self, doc, rows) -> None:
        table = doc.add_table(rows=len(rows), cols=len(FONT_TABLE_HEADER))
        table.style = "Table Grid"
        for i, row_data in enumerate(rows):
            for j, cell_text in enumerate(row_data):
                cell = table.rows[i].cells[j]
                cell.text = ""
                run = cell.paragraphs[0].add_run(cell_text)
                run.font.size = Pt(9)
                if i == 0:
                    run.font.bold = True
                    shading = parse_xml(f'<w:shd {nsdecls("w")} w:fill="{HEADER_FILL}"/>')
                    cell._tc.get_or_add_tcPr().append(shading)

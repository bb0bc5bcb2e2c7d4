# reports/markdown_reporter.py
from datetime import datetime

from .base_reporter import BaseReporter


def _cell(value) -> str:
    """Escape a value for use inside a Markdown table cell."""
    return str(value or "").replace("|", "\\|").replace("\n", " ")


class MarkdownReporter(BaseReporter):
    """Generates reports in Markdown format."""

    extension = "md"

    def generate_report(self, output_path: str) -> None:
        """
        Generate a Markdown format report.

        Args:
            output_path: Path where the Markdown report should be saved
        """
        summary = self.result.summary
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write("# Font Data Extraction Summary\n\n")

            f.write("| Metric | Value |\n")
            f.write("|--------|-------|\n")
            f.write(f"| Documents | {self.result.total_documents} |\n")
            f.write(f"| Unique fonts | {summary.unique_fonts} |\n")
            f.write(f"| Total usages | {summary.total_usages} |\n")
            f.write(f"| Most used font | {_cell(summary.most_used_font)} |\n")

            if self.result.errors:
                f.write("\n## Errors\n")
                for error in self.result.errors:
                    f.write(f"* {error}\n")

            if self.result.fonts_found:
                f.write("\n# Fonts\n")

            for font in self.result.fonts_found:
                f.write(f"\n## {font.font_family}\n")
                f.write(f"* **Usages**: {font.usage_count}\n")
                for name, value in font.style_properties().items():
                    if value and name != "font_family":
                        f.write(f"* **{name.replace('_', ' ').title()}**: `{value}`\n")
                f.write(f"* **Used in**: {', '.join(font.document_types)}\n\n")

                f.write("| Document | Type | Field | Content |\n")
                f.write("|----------|------|-------|---------|\n")
                for usage in font.usage:
                    f.write(f"| {_cell(usage.document_id)} | {_cell(usage.document_type)} "
                            f"| `{_cell(usage.field_path)}` | {_cell(usage.content)} |\n")

            f.write(f"\n---\n*Report generated on {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}*\n")

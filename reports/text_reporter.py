# reports/text_reporter.py
from .base_reporter import BaseReporter


class TextReporter(BaseReporter):
    """Generates reports in plain text format."""

    extension = "txt"

    def generate_report(self, output_path: str) -> None:
        """
        Generate a plain text report.

        Args:
            output_path: Path where the text report should be saved
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write("Font Data Extraction Summary\n")
            f.write("============================\n\n")
            f.write(f"- Documents analyzed: {self.result.total_documents}\n")
            f.write(f"- Unique fonts: {self.result.summary.unique_fonts}\n")
            f.write(f"- Total usages: {self.result.summary.total_usages}\n")
            f.write(f"- Most used font: {self.result.summary.most_used_font}\n")

            if self.result.errors:
                f.write("\nErrors\n")
                f.write("------\n")
                for error in self.result.errors:
                    f.write(f"- {error}\n")

            if self.result.fonts_found:
                f.write("\nFonts\n")
                f.write("=====\n")

            for font in self.result.fonts_found:
                f.write(f"\n{font.font_family} ({font.usage_count} usages):\n")
                for name, value in font.style_properties().items():
                    if value and name != "font_family":
                        f.write(f"- {name.replace('_', '-')}: {value}\n")
                f.write(f"- Used in: {', '.join(font.document_types)}\n")
                for usage in font.usage:
                    f.write(f"  - {usage.document_id} [{usage.document_type}] "
                            f"{usage.field_path}: {usage.content}\n")

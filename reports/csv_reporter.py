# reports/csv_reporter.py
import csv

from .base_reporter import BaseReporter

USAGE_COLUMNS = ["Document ID", "Document Type", "Field Path", "Content"]
FONT_COLUMNS = ["Font Family", "Font Size", "Font Weight", "Font Style", "Line Height",
                "Letter Spacing", "Text Transform", "Text Decoration", "Color"]


class CSVReporter(BaseReporter):
    """Generates reports in CSV format, one row per font usage."""

    extension = "csv"

    def generate_report(self, output_path: str) -> None:
        """
        Generate a CSV format report.

        Args:
            output_path: Path where the CSV report should be saved
        """
        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(FONT_COLUMNS + USAGE_COLUMNS)

            for font in self.result.fonts_found:
                font_row = [value or "" for value in font.style_properties().values()]
                for usage in font.usage:
                    writer.writerow(font_row + [
                        usage.document_id,
                        usage.document_type,
                        usage.field_path,
                        usage.content,
                    ])

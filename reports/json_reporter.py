# reports/json_reporter.py
import json

from .base_reporter import BaseReporter


class JSONReporter(BaseReporter):
    """Generates the structured export of an extraction run."""

    extension = "json"

    def generate_report(self, output_path: str) -> None:
        """
        Generate a JSON export.

        Args:
            output_path: Path where the JSON file should be saved
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.result.to_dict(), f, indent=2, ensure_ascii=False)
            f.write("\n")

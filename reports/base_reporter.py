# reports/base_reporter.py
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from models.summary import ExtractionResult

REPORT_BASENAME = "font-data-extraction"


class BaseReporter(ABC):
    """Base class for all report generators."""

    extension = ""

    def __init__(self, result: ExtractionResult):
        """
        Initialize reporter with extraction results.

        Args:
            result: Result of an extraction run
        """
        self.result = result

    @classmethod
    def default_filename(cls, today: Optional[date] = None) -> str:
        """File name for a report generated on the given day."""
        today = today or date.today()
        return f"{REPORT_BASENAME}-{today.isoformat()}.{cls.extension}"

    @abstractmethod
    def generate_report(self, output_path: str) -> None:
        """
        Generate and save the report.

        Args:
            output_path: Path where report should be saved
        """
        pass

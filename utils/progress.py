import sys
import time
from typing import Optional, TextIO


class ProgressTracker:
    """
    Writes a single-line progress indicator while documents are analyzed.

    Attributes:
        total: Number of documents to analyze
        current: Documents analyzed so far
        description: Label shown in front of the counter
        start_time: Start time of the operation
    """

    def __init__(self, total_steps: int, description: str, stream: Optional[TextIO] = None):
        """
        Initialize progress tracker.

        Args:
            total_steps: Total number of steps to track
            description: Description of the operation
            stream: Output stream (defaults to stdout)
        """
        self.total = total_steps
        self.current = 0
        self.description = description
        self.stream = stream or sys.stdout
        self.start_time = time.time()
        self._print_progress()

    @property
    def percentage(self) -> float:
        return (self.current / self.total) * 100 if self.total > 0 else 0.0

    def update(self, steps: int = 1) -> None:
        """
        Update progress by specified number of steps.

        Args:
            steps: Number of steps to increment (default: 1)
        """
        self.current = min(self.current + steps, self.total)
        self._print_progress()

    def _print_progress(self) -> None:
        elapsed_time = time.time() - self.start_time
        self.stream.write(
            f"\r{self.description}: [{self.current}/{self.total}] "
            f"{self.percentage:.1f}% (Elapsed: {elapsed_time:.1f}s)"
        )
        self.stream.flush()

    def complete(self) -> None:
        """Mark progress as complete."""
        self.current = self.total
        self._print_progress()
        self.stream.write("\n")
        self.stream.flush()

from dataclasses import dataclass, field
from typing import Any, Dict, List

from models.fonts import FontData

NO_FONT = "None"


@dataclass
class ExtractionSummary:
    """
    Represents the headline numbers of an extraction run.

    Attributes:
        unique_fonts: Number of distinct fonts found
        total_usages: Number of usages across all fonts
        most_used_font: Family of the font with the most usages, "None" if no fonts
    """
    unique_fonts: int = 0
    total_usages: int = 0
    most_used_font: str = NO_FONT

    @classmethod
    def from_fonts(cls, fonts: List[FontData]) -> "ExtractionSummary":
        """Compute the summary for an ordered font list."""
        most_used = None
        for font in fonts:
            # Strictly greater keeps the first-encountered font on ties
            if most_used is None or font.usage_count > most_used.usage_count:
                most_used = font
        return cls(
            unique_fonts=len(fonts),
            total_usages=sum(font.usage_count for font in fonts),
            most_used_font=most_used.font_family if most_used else NO_FONT,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the summary to a dictionary format."""
        return {
            "uniqueFonts": self.unique_fonts,
            "totalUsages": self.total_usages,
            "mostUsedFont": self.most_used_font,
        }


@dataclass
class ExtractionResult:
    """
    Represents the overall result of one extraction run.

    Attributes:
        total_documents: Number of documents returned by the source
        fonts_found: Fonts in order of first discovery
        errors: Per-document failure messages
        summary: Headline numbers computed from fonts_found
    """
    total_documents: int = 0
    fonts_found: List[FontData] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    summary: ExtractionSummary = field(default_factory=ExtractionSummary)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to its export representation."""
        return {
            "summary": self.summary.to_dict(),
            "totalDocuments": self.total_documents,
            "errors": list(self.errors),
            "fonts": [font.to_dict() for font in self.fonts_found],
        }

    def get_formatted_summary(self, max_fonts: int = 20) -> str:
        """Generate a formatted summary of the extraction."""
        summary = [
            f"Documents: {self.total_documents}",
            f"Unique Fonts: {self.summary.unique_fonts}",
            f"Total Usages: {self.summary.total_usages}",
            f"Most used font: {self.summary.most_used_font}",
        ]

        if self.fonts_found:
            summary.append("\nFonts:")
            for font in self.fonts_found[:max_fonts]:
                summary.append(f"  - {font.font_family}: {font.usage_count} usages")
                details = []
                if font.font_size:
                    details.append(f"size: {font.font_size}")
                if font.font_weight:
                    details.append(f"weight: {font.font_weight}")
                if font.font_style:
                    details.append(f"style: {font.font_style}")
                if font.line_height:
                    details.append(f"line-height: {font.line_height}")
                if font.color:
                    details.append(f"color: {font.color}")
                if details:
                    summary.append(f"    {', '.join(details)}")
                summary.append(f"    Used in: {', '.join(font.document_types)}")
            if len(self.fonts_found) > max_fonts:
                summary.append(f"  ...and {len(self.fonts_found) - max_fonts} more fonts")

        if self.errors:
            summary.append("\nErrors:")
            for error in self.errors:
                summary.append(f"  - {error}")

        return "\n".join(summary)

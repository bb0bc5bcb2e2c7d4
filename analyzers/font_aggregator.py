from typing import Dict, List

from models.fonts import FontData, FontIdentity
from models.summary import ExtractionSummary
from utils.logger import setup_logger

logger = setup_logger(__name__)


class FontAggregator:
    """
    Merges per-document fonts into one deduplicated set for a run.

    Fonts are keyed by (family, size, weight, style). A font seen again in
    a later document gets that document's usages appended; the other style
    properties stay as first recorded.
    """

    def __init__(self):
        """Initialize an empty aggregator."""
        self._fonts: Dict[FontIdentity, FontData] = {}
        self.documents_merged = 0

    def add_document_fonts(self, fonts: List[FontData]) -> None:
        """
        Merge the fonts found in one document.

        Args:
            fonts: Fonts of a single document in discovery order
        """
        for font in fonts:
            existing = self._fonts.get(font.identity)
            if existing is not None:
                existing.extend_usage(font.usage)
            else:
                self._fonts[font.identity] = FontData(
                    usage=list(font.usage), **font.style_properties())
        self.documents_merged += 1
        logger.debug(f"Merged {len(fonts)} fonts, {len(self._fonts)} unique so far")

    @property
    def fonts_found(self) -> List[FontData]:
        """Unique fonts in order of first discovery."""
        return list(self._fonts.values())

    def build_summary(self) -> ExtractionSummary:
        return ExtractionSummary.from_fonts(self.fonts_found)

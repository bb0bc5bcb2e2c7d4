# font_extractor.py
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Optional

from analyzers.document_analyzer import DocumentAnalyzer
from analyzers.font_aggregator import FontAggregator
from models.config import RunConfig
from models.summary import ExtractionResult
from reports.csv_reporter import CSVReporter
from reports.docx_reporter import DocxReporter
from reports.json_reporter import JSONReporter
from reports.markdown_reporter import MarkdownReporter
from reports.text_reporter import TextReporter
from utils.config_loader import ConfigLoader
from utils.document_source import DocumentSource, JsonDocumentSource
from utils.exceptions import DocumentSourceError, ExtractionError
from utils.logger import setup_logger
from utils.progress import ProgressTracker

logger = setup_logger(__name__)


class OutputFormat(Enum):
    """Supported output formats for extraction reports."""
    JSON = "json"
    TXT = "txt"
    CSV = "csv"
    MD = "md"
    DOCX = "docx"


REPORTERS = {
    OutputFormat.JSON: JSONReporter,
    OutputFormat.TXT: TextReporter,
    OutputFormat.CSV: CSVReporter,
    OutputFormat.MD: MarkdownReporter,
    OutputFormat.DOCX: DocxReporter,
}


class FontDataExtractor:
    """
    Runs a font extraction over the documents of a source.

    This class:
    1. Builds the document query from the run configuration
    2. Fetches the documents
    3. Analyzes each document, turning failures into per-document errors
    4. Merges the findings and assembles the result
    5. Hands the result or the run failure to the optional callbacks
    """

    def __init__(self, config: RunConfig,
                 on_complete: Optional[Callable[[ExtractionResult], None]] = None,
                 on_error: Optional[Callable[[str], None]] = None,
                 show_progress: bool = True):
        """
        Initialize the extractor.

        Args:
            config: Run configuration
            on_complete: Called with the result of a successful run
            on_error: Called with the message of a failed run instead of raising
            show_progress: Write a progress line while analyzing
        """
        self.config = config
        self.on_complete = on_complete
        self.on_error = on_error
        self.show_progress = show_progress
        logger.info("Font data extractor initialized successfully")

    def extract(self, source: DocumentSource) -> Optional[ExtractionResult]:
        """
        Run one extraction.

        Args:
            source: Where the documents come from

        Returns:
            The extraction result, or None if the run failed and on_error handled it

        Raises:
            ExtractionError: If the run failed and no on_error callback is set
        """
        logger.info("Extracting font data from documents...")
        try:
            query = self.config.to_query()
            documents = source.fetch(query)
            if not isinstance(documents, list):
                raise DocumentSourceError(
                    f"Document source returned {type(documents).__name__}, expected a list")
        except Exception as e:
            return self._fail(str(e) or "Extraction failed", e)

        result = self.analyze_documents(documents)
        logger.info(f"Extraction complete: Found {result.summary.unique_fonts} unique fonts "
                    f"in {result.summary.total_usages} usages")
        if self.on_complete:
            self.on_complete(result)
        return result

    def analyze_documents(self, documents: List[Any]) -> ExtractionResult:
        """
        Analyze already-fetched documents and merge their fonts.

        Args:
            documents: Documents in fetch order

        Returns:
            The extraction result; failed documents appear only in its errors
        """
        logger.info(f"Analyzing {len(documents)} documents for font data...")
        analyzer = DocumentAnalyzer(self.config)
        aggregator = FontAggregator()
        errors: List[str] = []
        progress = ProgressTracker(len(documents), "Analyzing documents") \
            if self.show_progress else None

        for document in documents:
            try:
                document_fonts = analyzer.analyze(document)
            except Exception as e:
                message = f"Failed to analyze {_document_id(document)}: {str(e) or 'Analysis failed'}"
                logger.warning(message)
                errors.append(message)
            else:
                aggregator.add_document_fonts(document_fonts)
            if progress:
                progress.update()

        if progress:
            progress.complete()
        logger.info(f"Merged fonts from {aggregator.documents_merged} of {len(documents)} documents")

        return ExtractionResult(
            total_documents=len(documents),
            fonts_found=aggregator.fonts_found,
            errors=errors,
            summary=aggregator.build_summary(),
        )

    def generate_reports(self, result: ExtractionResult,
                         output_formats: Optional[List[str]] = None) -> List[Path]:
        """
        Generate extraction reports in the given formats.

        Args:
            result: Result to report
            output_formats: Formats to generate (defaults to the configured ones)

        Returns:
            Paths of the reports written
        """
        logger.info("Generating extraction reports...")
        output_dir = Path(self.config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        written = []

        for format_str in output_formats or self.config.output_format:
            try:
                reporter_class = REPORTERS[OutputFormat(format_str.lower())]
            except (ValueError, KeyError):
                logger.error(f"Unsupported output format: {format_str}")
                continue

            output_path = output_dir / reporter_class.default_filename()
            try:
                reporter_class(result).generate_report(str(output_path))
            except OSError as e:
                logger.error(f"Could not write {format_str} report: {e}")
                continue
            logger.info(f"Generated {format_str} report: {output_path}")
            written.append(output_path)

        return written

    def _fail(self, message: str, cause: Exception) -> None:
        logger.error(f"Extraction error: {message}")
        if self.on_error:
            self.on_error(message)
            return None
        raise ExtractionError(message) from cause


def _document_id(document: Any) -> str:
    """Best-effort identifier of a document for error messages."""
    try:
        return str(document["_id"])
    except Exception:
        return "<unknown document>"


def main():
    """Main entry point for the font data extractor."""
    if len(sys.argv) < 2:
        logger.error("No documents file provided.")
        print("Usage: python font_extractor.py <documents.json> [config_path]")
        sys.exit(1)

    try:
        documents_path = sys.argv[1]
        config_path = sys.argv[2] if len(sys.argv) > 2 else "config.json"

        print("\nFont Data Extractor")
        print("=" * 50)

        config = ConfigLoader.load_config(config_path)
        extractor = FontDataExtractor(config)
        result = extractor.extract(JsonDocumentSource(documents_path))

        extractor.generate_reports(result)

        print("\nExtraction Summary")
        print("-" * 30)
        print(result.get_formatted_summary())

        print("\nExtraction complete.")
        print("=" * 50)

    except Exception as e:
        logger.error(f"Error during extraction: {e}")
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Union

from utils.exceptions import ConfigurationError

DEFAULT_TARGET_FIELDS = "title,heading,content,description,text"
DEFAULT_MAX_DOCUMENTS = 1000


def parse_field_names(value: Union[str, Iterable[str], None]) -> FrozenSet[str]:
    """
    Parse target field names into a set of lower-cased substrings.

    Args:
        value: Comma-separated string or iterable of names

    Returns:
        Set of names; empty means every field is analyzed
    """
    if value is None:
        return frozenset()
    if isinstance(value, str):
        value = value.split(',')
    return frozenset(name.strip().lower() for name in value if name and name.strip())


@dataclass(frozen=True)
class DocumentQuery:
    """
    Description of the documents to fetch.

    Attributes:
        document_type: Only fetch documents of this type
        search: Text matched against document title or name
        limit: Maximum number of documents to fetch
        custom_query: Raw query used verbatim instead of the fields above
    """
    document_type: Optional[str] = None
    search: Optional[str] = None
    limit: int = DEFAULT_MAX_DOCUMENTS
    custom_query: Optional[str] = None

    def to_groq(self) -> str:
        """Render the query in the content store's query language."""
        if self.custom_query:
            return self.custom_query
        type_filter = f'_type == "{self.document_type}"' if self.document_type else "defined(_type)"
        search_filter = (
            f' && (title match "*{self.search}*" || name match "*{self.search}*")'
            if self.search else ""
        )
        return f"*[{type_filter}{search_filter}][0...{self.limit}]"


@dataclass(frozen=True)
class RunConfig:
    """
    Settings for one extraction run.

    Attributes:
        target_field_names: Field name substrings selecting string fields to scan
        include_inline_styles: Scan style="..." attributes
        include_css_classes: Scan class="..." attributes
        extract_from_rich_text: Map rich text blocks and their marks
        max_documents: Upper bound on fetched documents
        document_type: Optional document type filter
        search: Optional title/name search
        custom_query: Optional raw query
        output_format: Report formats to generate
        output_dir: Directory for generated reports
    """
    target_field_names: FrozenSet[str] = field(
        default_factory=lambda: parse_field_names(DEFAULT_TARGET_FIELDS))
    include_inline_styles: bool = True
    include_css_classes: bool = True
    extract_from_rich_text: bool = True
    max_documents: int = DEFAULT_MAX_DOCUMENTS
    document_type: Optional[str] = None
    search: Optional[str] = None
    custom_query: Optional[str] = None
    output_format: List[str] = field(default_factory=lambda: ["json"])
    output_dir: str = "."

    def __post_init__(self):
        """Normalize target field names into a lower-cased set."""
        object.__setattr__(self, "target_field_names", parse_field_names(self.target_field_names))

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "RunConfig":
        """Build a run configuration from a validated dictionary."""
        return cls(
            target_field_names=parse_field_names(
                config.get("target_field_names", DEFAULT_TARGET_FIELDS)),
            include_inline_styles=config.get("include_inline_styles", True),
            include_css_classes=config.get("include_css_classes", True),
            extract_from_rich_text=config.get("extract_from_rich_text", True),
            max_documents=config.get("max_documents", DEFAULT_MAX_DOCUMENTS),
            document_type=config.get("document_type") or None,
            search=config.get("search") or None,
            custom_query=config.get("custom_query") or None,
            output_format=list(config.get("output_format", ["json"])),
            output_dir=config.get("output_dir", "."),
        )

    def matches_field(self, field_name: str) -> bool:
        """Check whether a string field qualifies for style/class scanning."""
        if not self.target_field_names:
            return True
        lowered = field_name.lower()
        return any(target in lowered for target in self.target_field_names)

    def to_query(self) -> DocumentQuery:
        """
        Build the document query for this run.

        Raises:
            ConfigurationError: If no fetchable query can be built
        """
        if isinstance(self.max_documents, bool) or not isinstance(self.max_documents, int) \
                or self.max_documents < 1:
            raise ConfigurationError(
                f"'max_documents' must be a positive integer, got {self.max_documents!r}")
        return DocumentQuery(
            document_type=self.document_type,
            search=self.search,
            limit=self.max_documents,
            custom_query=self.custom_query,
        )

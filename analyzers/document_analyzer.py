import re
from enum import Enum
from typing import Any, Dict, List, Mapping

from analyzers.class_name_parser import ClassNameParser
from analyzers.rich_text_mapper import RichTextStyleMapper, is_rich_text_block
from analyzers.style_attribute_parser import StyleAttributeParser
from models.config import RunConfig
from models.fonts import FontData, FontProperties, UsageRecord, truncate_content
from utils.exceptions import DocumentShapeError
from utils.logger import setup_logger

logger = setup_logger(__name__)

STYLE_ATTRIBUTE_PATTERN = re.compile(r"style=[\"']([^\"']*)[\"']")
CLASS_ATTRIBUTE_PATTERN = re.compile(r"class=[\"']([^\"']*)[\"']")
SYSTEM_FIELD_PREFIX = "_"


class NodeKind(Enum):
    """Shapes a document node can take."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    LIST = "list"
    MAPPING = "mapping"
    NULL = "null"


def node_kind(value: Any) -> NodeKind:
    """
    Classify a document node.

    Raises:
        TypeError: If the value is not a JSON-like node
    """
    if value is None:
        return NodeKind.NULL
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.LIST
    raise TypeError(f"Unsupported node type: {type(value).__name__}")


class DocumentAnalyzer:
    """
    Finds fonts in one document by walking its field tree.

    This analyzer:
    1. Scans qualifying string fields for style="..." and class="..." attributes
    2. Maps rich text blocks and their marks to synthetic fonts
    3. Skips system fields (names starting with an underscore)
    4. Merges findings within the document by font family
    """

    def __init__(self, config: RunConfig):
        """
        Initialize the document analyzer.

        Args:
            config: Run configuration selecting fields and extraction sources
        """
        self.config = config
        self.style_parser = StyleAttributeParser()
        self.class_parser = ClassNameParser()
        self.rich_text_mapper = RichTextStyleMapper()
        logger.info("Document analyzer initialized successfully")

    def analyze(self, document: Mapping[str, Any]) -> List[FontData]:
        """
        Analyze a document for font usage.

        Args:
            document: Document with at least _id and _type fields

        Returns:
            Fonts found in the document, in order of first discovery

        Raises:
            DocumentShapeError: If the document root is not an object
        """
        kind = node_kind(document)
        if kind is not NodeKind.MAPPING:
            raise DocumentShapeError(kind.value)

        walk = _DocumentWalk(self, document)
        walk.visit(document, '')
        logger.debug(f"Found {len(walk.fonts)} fonts in document {walk.document_id}")
        return list(walk.fonts.values())


class _DocumentWalk:
    """State of a single traversal: the document identity and its fonts by family."""

    def __init__(self, analyzer: DocumentAnalyzer, document: Mapping[str, Any]):
        self.analyzer = analyzer
        self.config = analyzer.config
        self.document_id = document.get("_id")
        self.document_type = document.get("_type")
        self.fonts: Dict[str, FontData] = {}

    def visit(self, value: Any, path: str) -> None:
        kind = node_kind(value)
        if kind is NodeKind.STRING:
            self._visit_string(value, path)
        elif kind is NodeKind.LIST:
            for index, item in enumerate(value):
                self.visit(item, f"{path}[{index}]")
        elif kind is NodeKind.MAPPING:
            if self.config.extract_from_rich_text and is_rich_text_block(value):
                self._visit_block(value, path)
            else:
                for key, item in value.items():
                    if not key.startswith(SYSTEM_FIELD_PREFIX):
                        self.visit(item, f"{path}.{key}" if path else key)

    def _visit_string(self, value: str, path: str) -> None:
        if not value:
            return
        field_name = path.split('.')[-1]
        if not self.config.matches_field(field_name):
            return

        content = truncate_content(value)
        if self.config.include_inline_styles:
            for style_content in STYLE_ATTRIBUTE_PATTERN.findall(value):
                if style_content:
                    self._record(self.analyzer.style_parser.parse(style_content), path, content)
        if self.config.include_css_classes:
            for class_content in CLASS_ATTRIBUTE_PATTERN.findall(value):
                if class_content:
                    self._record(self.analyzer.class_parser.parse(class_content), path, content)

    def _visit_block(self, block: Mapping[str, Any], path: str) -> None:
        for finding in self.analyzer.rich_text_mapper.map_block(block, path):
            self._record(finding.properties, finding.field_path, finding.content)

    def _record(self, properties: FontProperties, path: str, content: str) -> None:
        """Add a finding, merging by family with fonts already in this document."""
        if not properties.font_family:
            return
        usage = UsageRecord(
            document_id=self.document_id,
            document_type=self.document_type,
            field_path=path,
            content=content,
        )
        existing = self.fonts.get(properties.font_family)
        if existing is not None:
            existing.add_usage(usage)
        else:
            self.fonts[properties.font_family] = FontData.from_properties(properties, usage)

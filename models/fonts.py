from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

# (font_family, font_size, font_weight, font_style)
FontIdentity = Tuple[Optional[str], Optional[str], Optional[str], Optional[str]]

CONTENT_PREVIEW_LENGTH = 100
TRUNCATION_MARKER = "..."


def truncate_content(text: Optional[str]) -> str:
    """Cut text to the preview length, marking the cut with an ellipsis."""
    text = text or ""
    if len(text) > CONTENT_PREVIEW_LENGTH:
        return text[:CONTENT_PREVIEW_LENGTH] + TRUNCATION_MARKER
    return text


def _camel_case(name: str) -> str:
    head, *tail = name.split('_')
    return head + ''.join(part.title() for part in tail)


@dataclass
class FontProperties:
    """
    Partial typography information found at one location.

    Every field is a free-form string taken verbatim from the source
    (units and casing are not normalized). Unset fields are None.

    Attributes:
        font_family: Font family name
        font_size: Font size, e.g. "14px" or "lg"
        font_weight: Font weight, e.g. "bold" or "700"
        font_style: Font style, e.g. "italic"
        line_height: Line height
        letter_spacing: Letter spacing
        text_transform: Text transform, e.g. "uppercase"
        text_decoration: Text decoration, e.g. "underline"
        color: Text color
    """
    font_family: Optional[str] = None
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    font_style: Optional[str] = None
    line_height: Optional[str] = None
    letter_spacing: Optional[str] = None
    text_transform: Optional[str] = None
    text_decoration: Optional[str] = None
    color: Optional[str] = None

    @property
    def identity(self) -> FontIdentity:
        """Key under which two findings count as the same logical font."""
        return (self.font_family, self.font_size, self.font_weight, self.font_style)

    def style_properties(self) -> Dict[str, Optional[str]]:
        """Return all property fields keyed by attribute name."""
        return {f.name: getattr(self, f.name) for f in fields(FontProperties)}


@dataclass(frozen=True)
class UsageRecord:
    """
    One place where a font was found.

    Attributes:
        document_id: Identifier of the source document
        document_type: Type of the source document
        field_path: Dotted/indexed path inside the document, e.g. body[2].children[0].marks
        content: Display snippet of the text at that location
    """
    document_id: str
    document_type: str
    field_path: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        """Convert the usage to its export representation."""
        return {
            "documentId": self.document_id,
            "documentType": self.document_type,
            "fieldPath": self.field_path,
            "content": self.content,
        }


@dataclass
class FontData(FontProperties):
    """
    A discovered font together with every place it is used.

    A FontData is created at its first usage, so `usage` is never empty
    once the analysis hands it out. `usage` is append-only and kept in
    discovery order.
    """
    usage: List[UsageRecord] = field(default_factory=list)

    def __post_init__(self):
        """Validate that the font family is present."""
        if not self.font_family:
            raise ValueError("FontData requires a non-empty font_family.")

    @classmethod
    def from_properties(cls, properties: FontProperties, usage: UsageRecord) -> "FontData":
        """Create a FontData from parsed properties and its first usage."""
        return cls(usage=[usage], **properties.style_properties())

    @property
    def usage_count(self) -> int:
        return len(self.usage)

    @property
    def document_types(self) -> List[str]:
        """Distinct document types using this font, in order of first use."""
        return list(dict.fromkeys(record.document_type for record in self.usage))

    def add_usage(self, usage: UsageRecord) -> None:
        self.usage.append(usage)

    def extend_usage(self, usages: List[UsageRecord]) -> None:
        self.usage.extend(usages)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the font to its export representation."""
        data: Dict[str, Any] = {
            _camel_case(name): value for name, value in self.style_properties().items()
        }
        data["usageCount"] = self.usage_count
        data["usages"] = [record.to_dict() for record in self.usage]
        return data

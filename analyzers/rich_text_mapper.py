from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from models.fonts import FontProperties, truncate_content

BLOCK_TYPE = "block"

# Block style tag -> synthetic font
BLOCK_STYLES: Dict[str, FontProperties] = {
    "h1": FontProperties(font_family="heading", font_size="2xl", font_weight="bold"),
    "h2": FontProperties(font_family="heading", font_size="xl", font_weight="bold"),
    "h3": FontProperties(font_family="heading", font_size="lg", font_weight="semibold"),
    "h4": FontProperties(font_family="heading", font_size="md", font_weight="semibold"),
    "h5": FontProperties(font_family="heading", font_size="sm", font_weight="medium"),
    "h6": FontProperties(font_family="heading", font_size="xs", font_weight="medium"),
    "blockquote": FontProperties(font_family="serif", font_style="italic"),
    "normal": FontProperties(font_family="body", font_size="base"),
}

# Inline mark -> synthetic font
MARK_STYLES: Dict[str, FontProperties] = {
    "strong": FontProperties(font_family="body-bold", font_weight="bold"),
    "em": FontProperties(font_family="body-italic", font_style="italic"),
    "underline": FontProperties(font_family="body-underline", text_decoration="underline"),
}


@dataclass
class RichTextFinding:
    """
    A font identified inside a rich text block.

    Attributes:
        properties: Synthetic font properties for the style or mark
        field_path: Location of the style tag or marks list
        content: Text the font applies to
    """
    properties: FontProperties
    field_path: str
    content: str


def is_rich_text_block(node: Mapping[str, Any]) -> bool:
    return node.get("_type") == BLOCK_TYPE


def span_text(child: Any) -> str:
    """Text of a span; spans that are not objects or have no text count as empty."""
    if not isinstance(child, Mapping):
        return ''
    text = child.get("text")
    if text is None:
        return ''
    return text if isinstance(text, str) else str(text)


class RichTextStyleMapper:
    """
    Maps rich text block styles and inline marks to synthetic fonts.

    Heading levels, block quotes and normal paragraphs become the
    "heading", "serif" and "body" families; strong, em and underline
    marks on a span become "body-bold", "body-italic" and
    "body-underline".
    """

    def map_block(self, block: Mapping[str, Any], path: str) -> List[RichTextFinding]:
        """
        Collect the block style finding and every mark finding of a block.

        Args:
            block: Rich text block node
            path: Field path of the block within its document

        Returns:
            Findings in order: block style first, then marks by child and mark order
        """
        findings = []
        children = block.get("children") or []

        style_properties = BLOCK_STYLES.get(block.get("style"))
        if style_properties is not None:
            findings.append(RichTextFinding(
                properties=FontProperties(**style_properties.style_properties()),
                field_path=f"{path}.style",
                content=truncate_content(self.block_text(children)),
            ))

        for child_index, child in enumerate(children):
            findings.extend(self._map_marks(child, f"{path}.children[{child_index}].marks"))

        return findings

    def block_text(self, children: List[Mapping[str, Any]]) -> str:
        """Concatenate the text of all spans in a block."""
        return ''.join(span_text(child) for child in children)

    def _map_marks(self, child: Any, path: str) -> List[RichTextFinding]:
        findings = []
        if not isinstance(child, Mapping):
            return findings
        for mark in child.get("marks") or []:
            mark_properties = MARK_STYLES.get(mark)
            if mark_properties is None:
                continue
            findings.append(RichTextFinding(
                properties=FontProperties(**mark_properties.style_properties()),
                field_path=path,
                content=truncate_content(span_text(child)),
            ))
        return findings

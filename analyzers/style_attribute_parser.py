import re
from typing import Dict

from models.fonts import FontProperties
from utils.logger import setup_logger

logger = setup_logger(__name__)

# Attribute name -> CSS property name
STYLE_PROPERTIES = {
    "font_family": "font-family",
    "font_size": "font-size",
    "font_weight": "font-weight",
    "font_style": "font-style",
    "line_height": "line-height",
    "letter_spacing": "letter-spacing",
    "text_transform": "text-transform",
    "text_decoration": "text-decoration",
    "color": "color",
}

QUOTES_PATTERN = re.compile(r"[\"']")


class StyleAttributeParser:
    """
    Extracts font properties from an inline CSS declaration block.

    This is a pattern matcher, not a CSS parser: each property is looked up
    with its own regular expression and the first occurrence wins. Because
    the lookup is a plain search, `color` also picks up the value of
    `background-color` when that comes first.
    """

    def __init__(self):
        """Compile one pattern per recognized property."""
        self.patterns: Dict[str, re.Pattern] = {
            attribute: re.compile(rf"{re.escape(css_name)}:\s*([^;]+)", re.IGNORECASE)
            for attribute, css_name in STYLE_PROPERTIES.items()
        }

    def parse(self, style_string: str) -> FontProperties:
        """
        Extract font properties from a style attribute value.

        Args:
            style_string: Content of a style="..." attribute

        Returns:
            FontProperties with every recognized property set
        """
        values = {}
        for attribute, pattern in self.patterns.items():
            match = pattern.search(style_string)
            if not match:
                continue
            value = match.group(1)
            if attribute == "font_family":
                value = QUOTES_PATTERN.sub('', value)
            values[attribute] = value.strip()

        logger.debug(f"Parsed style '{style_string}' into {values}")
        return FontProperties(**values)

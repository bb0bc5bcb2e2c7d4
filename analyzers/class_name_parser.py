import re
from typing import List

from models.fonts import FontProperties

FONT_SIZES = ["xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl"]
FONT_WEIGHTS = ["thin", "light", "normal", "medium", "semibold", "bold", "extrabold", "black"]

_WEIGHT_ALTERNATION = "|".join(FONT_WEIGHTS)

# Checked in order, first match wins
FONT_FAMILY_PATTERNS: List[re.Pattern] = [
    re.compile(rf"font-(?!(?:{_WEIGHT_ALTERNATION})\b)([a-zA-Z-]+)"),
    re.compile(r"family-([a-zA-Z-]+)"),
    re.compile(r"(serif|sans-serif|monospace|cursive|fantasy)"),
    re.compile(r"(arial|helvetica|times|georgia|verdana|courier)", re.IGNORECASE),
]

FONT_SIZE_PATTERN = re.compile(r"text-(%s)\b" % "|".join(
    re.escape(size) for size in sorted(FONT_SIZES, key=len, reverse=True)))
FONT_WEIGHT_PATTERN = re.compile(r"font-(%s)\b" % "|".join(
    sorted(FONT_WEIGHTS, key=len, reverse=True)))


class ClassNameParser:
    """
    Guesses font properties from CSS class names.

    Recognizes `font-<name>` and `family-<name>` classes, generic and
    well-known family names, plus utility-style size (`text-lg`) and
    weight (`font-bold`) classes. Weight classes never count as a family.
    """

    def parse(self, class_string: str) -> FontProperties:
        """
        Extract font properties from a class attribute value.

        Args:
            class_string: Content of a class="..." attribute

        Returns:
            FontProperties with family, size and weight set where matched
        """
        properties = FontProperties()

        for pattern in FONT_FAMILY_PATTERNS:
            match = pattern.search(class_string)
            if match:
                properties.font_family = match.group(1).replace('-', ' ')
                break

        size_match = FONT_SIZE_PATTERN.search(class_string)
        if size_match:
            properties.font_size = size_match.group(1)

        weight_match = FONT_WEIGHT_PATTERN.search(class_string)
        if weight_match:
            properties.font_weight = weight_match.group(1)

        return properties

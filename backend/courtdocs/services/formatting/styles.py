"""
Stylesheet derivation from a court's physical formatting rules
"""
from typing import Dict, Union

from courtdocs.services.formatting.models import PageNumbering, RuleProfile
from courtdocs.services.formatting.templates import CAPTION_STYLES, DOCUMENT_STYLES_TEMPLATE

Number = Union[int, float]


def _number(value: Number) -> str:
    # 1.0 -> "1", 1.5 -> "1.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def inches_to_css(inches: Number) -> str:
    return f"{_number(inches)}in"


def points_to_css(points: Number) -> str:
    return f"{_number(points)}pt"


def _page_number_position(rules: RuleProfile) -> str:
    right = inches_to_css(rules.margins.right)
    positions: Dict[PageNumbering, str] = {
        PageNumbering.BOTTOM_CENTER: "bottom: 0.5in; left: 50%; transform: translateX(-50%);",
        PageNumbering.BOTTOM_RIGHT: f"bottom: 0.5in; right: {right};",
        PageNumbering.TOP_RIGHT: f"top: 0.5in; right: {right};",
        PageNumbering.NONE: "",
    }
    return positions[rules.page.numbering]


def generate_document_styles(rules: RuleProfile) -> str:
    font, margins, page = rules.font, rules.margins, rules.page

    return DOCUMENT_STYLES_TEMPLATE.substitute(
        page_size=page.size.value,
        orientation=page.orientation.value,
        margin_top=inches_to_css(margins.top),
        margin_right=inches_to_css(margins.right),
        margin_bottom=inches_to_css(margins.bottom),
        margin_left=inches_to_css(margins.left + (margins.binding or 0)),
        font_family=", ".join(f'"{family}"' for family in font.family),
        font_size=points_to_css(font.size_body),
        line_height=_number(font.line_height),
        paragraph_spacing="0" if font.line_height == 2 else "1em",
        blockquote_size=points_to_css(font.size_body - 1),
        footnote_size=points_to_css(font.size_footnotes),
        page_number_position=_page_number_position(rules),
    )


def generate_caption_styles() -> str:
    return CAPTION_STYLES

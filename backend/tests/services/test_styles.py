import pytest

from courtdocs.services.formatting.styles import (
    generate_caption_styles, generate_document_styles, inches_to_css, points_to_css
)


def test_unit_conversion():
    assert inches_to_css(1) == "1in"
    assert inches_to_css(1.0) == "1in"
    assert inches_to_css(1.5) == "1.5in"
    assert points_to_css(12) == "12pt"
    assert points_to_css(10.5) == "10.5pt"


def test_document_styles_from_rules(rules):
    css = generate_document_styles(rules)
    assert "size: letter portrait;" in css
    assert "margin: 1in 1in 1in 1in;" in css
    assert 'font-family: "Times New Roman", "Arial", serif;' in css
    assert "font-size: 12pt;" in css
    assert "line-height: 2;" in css
    assert "font-size: 11pt;" in css
    assert "font-size: 10pt;" in css


def test_double_spacing_removes_paragraph_gap(rules, rules_factory):
    assert "margin-bottom: 0;" in generate_document_styles(rules)
    single = rules_factory(font={"family": ["Arial"], "size_body": 12, "size_footnotes": 10, "line_height": 1.5})
    css = generate_document_styles(single)
    assert "line-height: 1.5;" in css
    assert "margin-bottom: 1em;" in css


def test_binding_margin_added_to_left(rules_factory):
    rules = rules_factory(margins={"top": 1, "bottom": 1, "left": 1, "right": 1, "binding": 0.5})
    assert "margin: 1in 1in 1in 1.5in;" in generate_document_styles(rules)


@pytest.mark.parametrize("numbering,expected", [
    ("bottom-center", "left: 50%;"),
    ("bottom-right", "bottom: 0.5in; right: 1in;"),
    ("top-right", "top: 0.5in; right: 1in;"),
])
def test_page_number_position(rules_factory, numbering, expected):
    rules = rules_factory(page={"size": "letter", "orientation": "portrait", "numbering": numbering})
    assert expected in generate_document_styles(rules)


def test_no_page_numbers(rules_factory):
    rules = rules_factory(page={"size": "legal", "orientation": "landscape", "numbering": "none"})
    css = generate_document_styles(rules)
    assert "size: legal landscape;" in css
    assert "bottom: 0.5in" not in css
    assert "top: 0.5in" not in css


def test_caption_styles():
    css = generate_caption_styles()
    assert ".caption-box" in css
    assert ".court-name" in css

from __future__ import annotations

import textwrap

from styled_theme.hover import Confidence, HoverResult, hover

STYLED_SOURCE = textwrap.dedent(
    """\
    const Title = styled.h1`
      font-size: ${fontSize}px;
      color: ${props => props.theme.palette.primary.main};
    `;
    """
)


def test_hover_inside_arrow_accessor() -> None:
    text = "${({theme}) => theme.typography.fontSize}"
    offset = text.index("fontSize") + 2
    result = hover(text, offset, {"typography.fontSize": 14})
    assert result is not None
    assert (result.path, result.value, result.confidence) == ("typography.fontSize", 14, Confidence.HIGH)
    assert text[result.start:result.end] == "theme.typography.fontSize"


def test_hover_on_theme_anchor_resolves_accessor() -> None:
    text = "${({theme}) => theme.typography.fontSize}"
    result = hover(text, text.index("theme.") + 2, {"typography.fontSize": 14})
    assert result is not None
    assert (result.path, result.confidence) == ("typography.fontSize", Confidence.HIGH)
    assert text[result.start:result.end] == "theme.typography.fontSize"


def test_hover_on_props_qualifier_resolves_accessor() -> None:
    text = "${props => props.theme.typography.fontSize}"
    result = hover(text, text.index("props.theme") + 2, {"typography.fontSize": 14})
    assert result is not None
    assert (result.path, result.value, result.confidence) == ("typography.fontSize", 14, Confidence.HIGH)


def test_hover_on_arrow_parameter_is_not_an_accessor() -> None:
    text = "${props => props.theme.typography.fontSize}"
    assert hover(text, 3, {"typography.fontSize": 14}) is None

def test_hover_on_earlier_segment_resolves_full_path(mui_table) -> None:
    offset = STYLED_SOURCE.index("palette") + 1
    result = hover(STYLED_SOURCE, offset, mui_table)
    assert result == HoverResult(
        path="palette.primary.main",
        value="#1976d2",
        confidence=Confidence.HIGH,
        start=STYLED_SOURCE.index("theme.palette"),
        end=STYLED_SOURCE.index("};"),
    )


def test_bare_token_without_theme_prefix_does_not_match() -> None:
    text = "fontSize"
    assert hover(text, 3, {"typography.fontSize": 14}) is None


def test_bare_key_in_styled_interpolation_is_inferred(mui_table) -> None:
    text = "const Box = styled.div`\n  margin: ${shape.borderRadius}px;\n`;"
    result = hover(text, text.index("borderRadius"), mui_table)
    assert result is not None
    assert result.confidence is Confidence.INFERRED
    assert result.is_inferred
    assert result.value == 4


def test_inferred_tier_needs_interpolation_marker(mui_table) -> None:
    text = "const Box = styled.div`\n  margin: shape.borderRadius;\n`;"
    assert hover(text, text.index("borderRadius"), mui_table) is None


def test_inferred_tier_needs_styled_context(mui_table) -> None:
    text = "const label = `${shape.borderRadius}`;"
    assert hover(text, text.index("borderRadius"), mui_table) is None


def test_styled_file_name_stands_in_for_tag(mui_table) -> None:
    text = "export const radius = `${shape.borderRadius}`;"
    result = hover(text, text.index("borderRadius"), mui_table, document_name="Card.styled.ts")
    assert result is not None
    assert result.confidence is Confidence.INFERRED


def test_unknown_accessor_path_falls_through(mui_table) -> None:
    text = "${theme.palette.tertiary.main}"
    assert hover(text, text.index("tertiary"), mui_table) is None


def test_hover_on_composite_path_has_no_value(mui_table) -> None:
    text = "${theme.palette.primary}"
    assert hover(text, text.index("primary"), mui_table) is None


def test_hover_without_table() -> None:
    text = "${theme.typography.fontSize}"
    assert hover(text, 12, None) is None
    assert hover(text, 12, {}) is None

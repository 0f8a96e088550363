"""Tests for the markdown to HTML description renderer."""

from __future__ import annotations

import pytest

from repoimport.renderers import HtmlRenderer, create_renderer


def test_mid_word_underscores_stay_literal() -> None:
    html = HtmlRenderer().render("Hello_World_Test")

    assert html == "<p>Hello_World_Test</p>"


def test_identifiers_in_prose_are_not_emphasized() -> None:
    html = HtmlRenderer().render("Call snake_case_function with MAX_RETRY_COUNT set.")

    assert "snake_case_function" in html
    assert "MAX_RETRY_COUNT" in html
    assert "<em>" not in html


def test_word_boundary_underscores_still_emphasize() -> None:
    assert HtmlRenderer().render("_important_") == "<p><em>important</em></p>"


def test_headings_and_fenced_code_are_rendered() -> None:
    html = HtmlRenderer().render("# Widget\n\n```\npip install widget\n```\n")

    assert "<h1>Widget</h1>" in html
    assert "<code>pip install widget" in html


def test_blank_text_renders_empty() -> None:
    assert HtmlRenderer().render("  \n ") == ""


def test_legacy_emphasis_is_refused() -> None:
    with pytest.raises(ValueError, match="legacy_em"):
        HtmlRenderer(extensions=("legacy_em",))


def test_factory_creates_html_renderer() -> None:
    assert isinstance(create_renderer("html"), HtmlRenderer)


def test_factory_rejects_unknown_renderer() -> None:
    with pytest.raises(ValueError, match="Unknown renderer: rst"):
        create_renderer("rst")

"""
Tests for markdown rendering
"""
from src.apps.blog.services.markdown_service import render_markdown


def test_heading_renders_to_h1():
    assert render_markdown("# Hi") == "<h1>Hi</h1>"


def test_rendering_is_deterministic():
    text = "Some *emphasis* and a [link](https://example.com)\n\n- one\n- two"
    assert render_markdown(text) == render_markdown(text)


def test_fenced_code_extension_enabled():
    html = render_markdown("```\nprint('x')\n```")
    assert "<pre><code>" in html


def test_raw_html_passes_through():
    # Output is trusted and inserted verbatim
    assert "<span>raw</span>" in render_markdown("<span>raw</span>")

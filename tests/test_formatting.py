"""Tests for model text to HTML formatting."""

import re

from stackit.utils.formatting import extract_code_examples, extract_related_topics, format_as_html

ALLOWED_TAGS = re.compile(r"</?(?:p|strong|em|code|pre|h[1-3]|ul|ol|li|br)>")


def _without_allowed_tags(html):
    return ALLOWED_TAGS.sub("", html)


def test_plain_text_wrapped_in_paragraph():
    assert format_as_html("Hello world") == "<p>Hello world</p>"


def test_blank_lines_split_paragraphs_and_newlines_become_breaks():
    html = format_as_html("First line\nsecond line\n\nNext paragraph")
    assert html == "<p>First line<br>second line</p><p>Next paragraph</p>"


def test_bold_italic_and_inline_code():
    html = format_as_html("Use **bold**, *subtle* and `a<b>` here")
    assert html == "<p>Use <strong>bold</strong>, <em>subtle</em> and <code>a&lt;b&gt;</code> here</p>"


def test_markers_inside_inline_code_are_literal():
    assert format_as_html("`**x**`") == "<p><code>**x**</code></p>"


def test_headings():
    html = format_as_html("# One\n## Two\n### Three")
    assert html == "<h1>One</h1><h2>Two</h2><h3>Three</h3>"


def test_unordered_and_ordered_lists():
    html = format_as_html("- apples\n- pears\n\n1. first\n2. second")
    assert html == "<ul><li>apples</li><li>pears</li></ul><ol><li>first</li><li>second</li></ol>"


def test_fenced_code_block_becomes_pre_code():
    text = "Intro\n\n```python\nprint('<hi>')\n```\n\nDone"
    html = format_as_html(text)
    assert html == "<p>Intro</p><pre><code>print('&lt;hi&gt;')</code></pre><p>Done</p>"


def test_code_block_keeps_markdown_markers():
    html = format_as_html("```\n**not bold**\n# not heading\n```")
    assert html == "<pre><code>**not bold**\n# not heading</code></pre>"


def test_no_unescaped_angle_brackets():
    text = "<script>alert(1)</script>\n\n**<b>x</b>**\n\n- <li>\n\n```\n<div>\n```"
    stripped = _without_allowed_tags(format_as_html(text))
    assert "<" not in stripped
    assert ">" not in stripped
    assert "&lt;script&gt;" in format_as_html(text)


def test_unformattable_input():
    assert format_as_html(None) == "<p>Unable to format content</p>"
    assert format_as_html("   ") == "<p>Unable to format content</p>"
    assert format_as_html(42) == "<p>Unable to format content</p>"


def test_extract_code_examples():
    text = "```js\nconst a = 1;\n```\ntext\n```\nb()\n```"
    assert extract_code_examples(text) == ["const a = 1;", "b()"]
    assert extract_code_examples("no code") == []


def test_extract_related_topics_limited_to_three():
    text = "Use React with TypeScript, some CSS and an API"
    assert extract_related_topics(text) == ["React", "TypeScript", "CSS"]
    assert extract_related_topics("nothing here") == []

"""Tests for HTML presentation of content nodes."""

import pytest

from inkwell.models.content import CodeBlock, Heading, ListBlock, Paragraph, Text
from inkwell.services.html_renderer import render_html
from inkwell.services.renderer import render_markup


def test_renders_heading_and_paragraph():
    html = render_html(render_markup("# Title\n\nSome **bold** and *em* and `code`."))
    assert html.startswith('<h1 class="text-3xl font-bold mt-8 mb-4">Title</h1>\n<p')
    assert "<strong>bold</strong>" in html
    assert "<em>em</em>" in html
    assert '<code class="bg-muted px-1 py-0.5 rounded text-sm">code</code>' in html


def test_escapes_script_in_paragraph():
    html = render_html(render_markup('Hello <script>alert("x")</script>'))
    assert "<script>" not in html
    assert "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;" in html


def test_escapes_code_block_and_language():
    nodes = [CodeBlock(code="<b>&</b>", language='x"><img src=y>')]
    html = render_html(nodes)
    assert "<b>" not in html
    assert "<img" not in html
    assert "&lt;b&gt;&amp;&lt;/b&gt;" in html


def test_code_block_language_class():
    html = render_html([CodeBlock(code="ls", language="bash")])
    assert '<code class="language-bash">ls</code>' in html


def test_lists():
    html = render_html(
        [
            ListBlock(ordered=False, items=["a", "<b>"]),
            ListBlock(ordered=True, items=["one"]),
        ]
    )
    assert "<ul " in html and "<li>a</li><li>&lt;b&gt;</li></ul>" in html
    assert "<ol " in html and "<li>one</li></ol>" in html


def test_heading_levels_map_to_tags():
    html = render_html(
        [Heading(level=3, children=[Text(text="Deep")])]
    )
    assert html.startswith("<h3 ") and html.endswith("</h3>")


def test_empty_nodes_render_empty_string():
    assert render_html([]) == ""


def test_unknown_node_rejected():
    with pytest.raises(TypeError):
        render_html([object()])


def test_one_block_per_line():
    nodes = [Paragraph(children=[Text(text="a")]), Paragraph(children=[Text(text="b")])]
    assert render_html(nodes).count("\n") == 1

"""HTML presentation of rendered content nodes.

All text is escaped on the way out, so markup typed into an article body is
shown as text instead of being interpreted by the browser.
"""

import html
from collections.abc import Iterable

from inkwell.models.content import (
    Bold,
    BlockNode,
    CodeBlock,
    Heading,
    InlineCode,
    Italic,
    ListBlock,
    Paragraph,
    Span,
)

# Tailwind classes the blog front end styles article bodies with
_HEADING_CLASSES = {
    1: "text-3xl font-bold mt-8 mb-4",
    2: "text-2xl font-semibold mt-6 mb-3",
    3: "text-xl font-medium mt-4 mb-2",
}
_PARAGRAPH_CLASS = "mb-4"
_PRE_CLASS = "bg-muted p-4 rounded-lg overflow-x-auto"
_INLINE_CODE_CLASS = "bg-muted px-1 py-0.5 rounded text-sm"
_LIST_CLASSES = {
    False: "list-disc list-inside space-y-1 mb-4",
    True: "list-decimal list-inside space-y-1 mb-4",
}


def _span_html(span: Span) -> str:
    text = html.escape(span.text)
    if isinstance(span, Bold):
        return f"<strong>{text}</strong>"
    if isinstance(span, Italic):
        return f"<em>{text}</em>"
    if isinstance(span, InlineCode):
        return f'<code class="{_INLINE_CODE_CLASS}">{text}</code>'
    return text


def _spans_html(spans: Iterable[Span]) -> str:
    return "".join(_span_html(s) for s in spans)


def _block_html(node: BlockNode) -> str:
    if isinstance(node, Heading):
        tag = f"h{node.level}"
        css = _HEADING_CLASSES[node.level]
        return f'<{tag} class="{css}">{_spans_html(node.children)}</{tag}>'
    if isinstance(node, Paragraph):
        return f'<p class="{_PARAGRAPH_CLASS}">{_spans_html(node.children)}</p>'
    if isinstance(node, CodeBlock):
        code_attr = ""
        if node.language:
            code_attr = f' class="language-{html.escape(node.language)}"'
        code = html.escape(node.code)
        return f'<pre class="{_PRE_CLASS}"><code{code_attr}>{code}</code></pre>'
    if isinstance(node, ListBlock):
        tag = "ol" if node.ordered else "ul"
        items = "".join(f"<li>{html.escape(item)}</li>" for item in node.items)
        return f'<{tag} class="{_LIST_CLASSES[node.ordered]}">{items}</{tag}>'
    raise TypeError(f"Unsupported content node: {type(node).__name__}")


def render_html(nodes: Iterable[BlockNode]) -> str:
    """Render block nodes as an HTML fragment, one block per line."""
    return "\n".join(_block_html(node) for node in nodes)

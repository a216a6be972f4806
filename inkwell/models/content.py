"""Rendered content node models.

Article bodies are rendered into a flat sequence of typed block nodes rather
than an HTML string.  Every node carries a ``type`` tag so JSON consumers can
dispatch on it, and pydantic uses the same tag as the union discriminator.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class Text(_Node):
    type: Literal["text"] = "text"
    text: str


class Bold(_Node):
    type: Literal["bold"] = "bold"
    text: str


class Italic(_Node):
    type: Literal["italic"] = "italic"
    text: str


class InlineCode(_Node):
    type: Literal["code"] = "code"
    text: str


Span = Annotated[Text | Bold | Italic | InlineCode, Field(discriminator="type")]


class Heading(_Node):
    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=3)
    children: list[Span] = []

    @property
    def text(self) -> str:
        """Heading text with inline formatting removed."""
        return "".join(span.text for span in self.children)


class Paragraph(_Node):
    type: Literal["paragraph"] = "paragraph"
    children: list[Span] = []


class CodeBlock(_Node):
    type: Literal["code_block"] = "code_block"
    code: str
    language: str | None = None


class ListBlock(_Node):
    type: Literal["list"] = "list"
    ordered: bool = False
    items: list[str] = []


BlockNode = Annotated[
    Heading | Paragraph | CodeBlock | ListBlock, Field(discriminator="type")
]


class RenderRequest(BaseModel):
    """Editor preview request."""

    body: str = Field(..., max_length=100_000)


class RenderResponse(BaseModel):
    """Editor preview response."""

    nodes: list[BlockNode]

"""Render article markup to HTML from the command line.

Usage:
    python -m scripts.render_article post.md      # Render a markup file
    python -m scripts.render_article --id 3       # Render a stored article
"""

import asyncio
import logging
import sys
from pathlib import Path

from inkwell.logging_config import setup_logging
from inkwell.services.article_store import get_article
from inkwell.services.html_renderer import render_html
from inkwell.services.renderer import MalformedInput, render_markup

logger = logging.getLogger("scripts.render_article")


async def _read_source(args: list[str]) -> str | None:
    if len(args) == 2 and args[0] == "--id":
        article = await get_article(args[1])
        if article is None:
            logger.error("No article with id %s", args[1])
            return None
        return article.body
    if len(args) == 1:
        return Path(args[0]).read_text(encoding="utf-8")
    print(__doc__)
    return None


async def main(args: list[str]) -> int:
    setup_logging()

    source = await _read_source(args)
    if source is None:
        return 2

    try:
        nodes = render_markup(source)
    except MalformedInput as e:
        logger.error("Cannot render: %s", e)
        return 1

    print(render_html(nodes))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))

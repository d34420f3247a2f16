# content/markdown/processor.py

from __future__ import annotations

import logging
from dataclasses import dataclass

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedDocument:
    """HTML produced by a processor run. ``str()`` gives the markup."""

    html: str

    def __str__(self) -> str:
        return self.html


class MarkdownProcessor:
    """
    Markdown to HTML conversion bound to one render context.

    Pandoc does the conversion; the configured HTML postprocessors run on
    its output with the same context.
    """

    def __init__(self, context: dict, markdown_format: str, extra_args=None, postprocessors=None):
        self.context = context
        self.markdown_format = markdown_format
        self.extra_args = extra_args or []
        self.postprocessors = postprocessors or []

    def process(self, text: str) -> RenderedDocument:
        logger.debug("Converting %d characters of %s", len(text), self.markdown_format)
        html = pypandoc.convert_text(
            text,
            to="html5",
            format=self.markdown_format,
            extra_args=self.extra_args,
        )
        html = apply_postprocessors(html, self.context, self.postprocessors)
        return RenderedDocument(html)


def create_processor(context=None) -> MarkdownProcessor:
    context = context or {}
    config = get_pandoc_config(context)
    return MarkdownProcessor(
        context,
        markdown_format=config["format"],
        extra_args=config["extra_args"],
        postprocessors=config["postprocessors"],
    )

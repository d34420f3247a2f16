# content/markdown/renderer.py

import logging

from bs4 import BeautifulSoup
from django.utils.html import escape

from .comments import strip_html_comments
from .postprocessors.table_inline_tags import remove_newlines_from_inline_tags
from .preprocessors import apply_preprocessors
from .processor import create_processor
from .templating import render_template, template_engine

logger = logging.getLogger(__name__)


def render_content(
    template="",
    context=None,
    *,
    text_only=False,
    as_soup=False,
    encode_entities=False,
    filename=None,
):
    """
    Render a documentation template to HTML.

    Args:
        template: Template source mixing template directives and Markdown
        context: Dict used to resolve directives and configure the processor
        text_only: Return the visible text of the rendered HTML
        as_soup: Return a parsed BeautifulSoup tree instead of a string.
            Entity encoding is never applied to the tree.
        encode_entities: HTML-escape the final string
        filename: Source name reported in the log when rendering fails

    A falsy template can never render to anything, so it is returned as is.
    """
    if not template:
        return template

    context = context or {}

    try:
        template = strip_html_comments(template)

        template = render_template(template, context)

        # Snippet rewrite and whitespace clean-up on the evaluated template
        template = apply_preprocessors(template, context)

        processor = create_processor(context)
        html = str(processor.process(template))

        # Newlines around inline tags show up as spaces inside table cells
        if "<table>" in html:
            html = remove_newlines_from_inline_tags(html)

        if text_only:
            html = BeautifulSoup(html, "html.parser").get_text().strip()

        if as_soup:
            return BeautifulSoup(html, "html.parser")

        if encode_entities:
            html = str(escape(html))

        return html.strip()
    except Exception:
        if filename:
            logger.error("render_content failed on file: %s", filename)
        raise


render_content.template_engine = template_engine

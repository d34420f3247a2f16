# content/markdown/postprocessors/__init__.py

import logging

from .add_heading_links import add_heading_links
from .link_rewriter import rewrite_links

logger = logging.getLogger(__name__)

# Postprocessors selectable through CONTENT_RENDERING["POSTPROCESSORS"]
POSTPROCESSORS = {
    "add_heading_links": add_heading_links,  # Link headings to their own anchor
    "rewrite_links": rewrite_links,  # Language prefixes and external targets
}


def apply_postprocessors(html, context, names):
    """Apply the named postprocessors in order"""
    for name in names:
        try:
            processor = POSTPROCESSORS[name]
        except KeyError:
            raise ValueError(f"Unknown markdown postprocessor: {name!r}") from None
        logger.debug("Running postprocessor %s", name)
        html = processor(html, context)
    return html

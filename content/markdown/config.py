from django.conf import settings

DEFAULT_MARKDOWN_FORMAT = "gfm"

DEFAULT_POSTPROCESSORS = [
    "add_heading_links",
    "rewrite_links",
]


def get_pandoc_config(context=None):
    """
    Configuration for the Pandoc markdown processor.

    Defaults can be overridden through the ``CONTENT_RENDERING`` setting:

        CONTENT_RENDERING = {
            "MARKDOWN_FORMAT": "gfm",
            "PANDOC_EXTRA_ARGS": ["--wrap=preserve"],
            "POSTPROCESSORS": ["add_heading_links", "rewrite_links"],
        }

    A ``markdown_format`` key in the render context wins over the setting for
    that call only.
    """
    context = context or {}
    options = getattr(settings, "CONTENT_RENDERING", {})

    return {
        # GitHub-flavoured Markdown keeps raw HTML blocks (snippets, TOC
        # anchors) verbatim until the next blank line.
        "format": context.get("markdown_format")
        or options.get("MARKDOWN_FORMAT", DEFAULT_MARKDOWN_FORMAT),
        "extra_args": list(options.get("PANDOC_EXTRA_ARGS", [])),
        # Names from content.markdown.postprocessors.POSTPROCESSORS, run in order
        "postprocessors": list(options.get("POSTPROCESSORS", DEFAULT_POSTPROCESSORS)),
    }

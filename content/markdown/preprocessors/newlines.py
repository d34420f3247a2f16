import re

EXCESS_NEWLINES = re.compile(r"(\r?\n){3,}")


def collapse_excess_newlines(text: str, context: dict) -> str:
    """
    Collapse runs of three or more newlines to a single blank line.

    Resolved template statements leave empty lines behind, and extra
    blank lines would restart Markdown list numbering.
    """
    return EXCESS_NEWLINES.sub("\n\n", text)

# content/markdown/preprocessors/__init__.py
"""
Text clean-ups that run on the evaluated template, before Markdown
conversion.
"""

from .list_blank_lines import collapse_list_blank_lines
from .newlines import collapse_excess_newlines
from .shell_snippets import rewrite_shell_snippets

PREPROCESSORS = [
    rewrite_shell_snippets,  # Shell fences become clipboard snippets
    collapse_list_blank_lines,  # Blank lines left by skipped list items
    collapse_excess_newlines,  # Leftover newlines from resolved directives
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text

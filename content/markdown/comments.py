# content/markdown/comments.py

import re

# Comments spanning several lines are removed whole; an unterminated
# "<!--" never matches and is left in place.
HTML_COMMENT = re.compile(r"<!--[\s\S]*?-->")


def strip_html_comments(text: str) -> str:
    """
    Remove HTML comments from template source.

    The newline directly before a comment goes first, so a comment on its
    own line does not leave a blank line behind.
    """
    text = text.replace("\n<!--", "<!--")
    return HTML_COMMENT.sub("", text)

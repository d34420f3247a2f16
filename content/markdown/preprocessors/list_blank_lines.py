# content/markdown/preprocessors/list_blank_lines.py
"""
Remove blank lines between linked list items.

Table-of-contents lists are built from conditional items. When an item is
skipped its line stays behind as a blank line, which turns a tight list
into a loose one:

    - <a href="/foo">Foo</a>

    - <a href="/bar">Bar</a>

becomes

    - <a href="/foo">Foo</a>
    - <a href="/bar">Bar</a>
"""

import re

END_LINE = r"</a>\r?\n"
BLANK_LINE = r"\s*?[\r\n]*"
START_NEXT_LINE = r"[^\S\r\n]*?[-*] <a"

BLANK_LINE_IN_LIST = re.compile(
    rf"({END_LINE}){BLANK_LINE}({START_NEXT_LINE})", re.MULTILINE
)


def collapse_list_blank_lines(text: str, context: dict) -> str:
    if "</a>" not in text:
        return text
    return BLANK_LINE_IN_LIST.sub(r"\1\2", text)

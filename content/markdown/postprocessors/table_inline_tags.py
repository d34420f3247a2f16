# content/markdown/postprocessors/table_inline_tags.py
"""
Remove newlines around inline tags inside table cells.

Inside a table cell a newline renders as a space, so a link or code span
that was wrapped onto its own line picks up stray spaces:

    <td>Run
    <code>make</code>
    first</td>

Only a single newline directly before or after an inline tag's opening or
closing tag is removed. Other newlines in the cell are kept.
"""

import re

from bs4 import BeautifulSoup

INLINE_TAGS = ["a", "code", "em"]

INLINE_TAG_NEWLINES = re.compile(rf"\n?(</?(?:{'|'.join(INLINE_TAGS)})>?)\n?", re.MULTILINE)

# html.parser folds whitespace-only runs to one newline outside these tags
PRESERVE_WHITESPACE_TAGS = ["pre", "textarea", "td"]


def _parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser", preserve_whitespace_tags=PRESERVE_WHITESPACE_TAGS)


def remove_newlines_from_inline_tags(html: str) -> str:
    soup = _parse(html)

    cells = []
    for tag in soup.find_all(INLINE_TAGS):
        for cell in tag.find_parents("td"):
            if not any(cell is seen for seen in cells):
                cells.append(cell)

    for cell in cells:
        inner_html = cell.decode_contents()
        cleaned = INLINE_TAG_NEWLINES.sub(r"\1", inner_html)
        if cleaned == inner_html:
            continue
        # Reparse inside a cell so blank lines between tags survive
        replacement = _parse(f"<td>{cleaned}</td>").td
        cell.clear()
        for child in list(replacement.contents):
            cell.append(child.extract())

    return str(soup)

# content/markdown/preprocessors/shell_snippets.py
"""
Rewrite ```shell fences into clipboard snippets.

The fence is replaced with raw HTML before Markdown conversion. This loses
syntax highlighting but keeps inline tags such as <em> and entities such as
&lt; inside the snippet working. Anything after the code on the closing
fence line is dropped.
"""

import re

SHELL_FENCE = re.compile(r"``` ?shell\r?\n\s*?(\S[\s\S]*?)\r?\n.*?```", re.MULTILINE)

COPY_ICON = (
    '<svg aria-hidden=true class="m-2 octicon js-clipboard-copy-icon octicon-copy"'
    'data-view-component=true height=16 viewBox="0 0 16 16"width=16>'
    '<path d="M0 6.75C0 5.784.784 5 1.75 5h1.5a.75.75 0 010 1.5h-1.5a.25.25 0 00-.25.25v7.5c0 '
    ".138.112.25.25.25h7.5a.25.25 0 00.25-.25v-1.5a.75.75 0 011.5 0v1.5A1.75 1.75 0 019.25 "
    '16h-7.5A1.75 1.75 0 010 14.25v-7.5z"fill-rule=evenodd></path>'
    '<path d="M5 1.75C5 .784 5.784 0 6.75 0h7.5C15.216 0 16 .784 16 1.75v7.5A1.75 1.75 0 0114.25 '
    "11h-7.5A1.75 1.75 0 015 9.25v-7.5zm1.75-.25a.25.25 0 00-.25.25v7.5c0 .138.112.25.25.25h7.5a"
    '.25.25 0 00.25-.25v-7.5a.25.25 0 00-.25-.25h-7.5z"fill-rule=evenodd></path></svg>'
)

CHECK_ICON = (
    '<svg aria-hidden=true class="m-2 octicon color-fg-success d-none js-clipboard-check-icon '
    'octicon-check"data-view-component=true height=16 viewBox="0 0 16 16"width=16>'
    '<path d="M13.78 4.22a.75.75 0 010 1.06l-7.25 7.25a.75.75 0 01-1.06 0L2.22 9.28a.75.75 0 '
    '011.06-1.06L6 10.94l6.72-6.72a.75.75 0 011.06 0z"fill-rule=evenodd></path></svg>'
)

SNIPPET_OPEN = (
    '<div class="overflow-auto position-relative snippet-clipboard-content">'
    '<pre><code class="hljs language-shell">'
)

SNIPPET_CLOSE = (
    "</code></pre>"
    '<div class="clipboard-container position-absolute right-0 top-0">'
    '<button aria-label=Copy class="m-2 ClipboardButton btn js-clipboard-copy p-0"'
    "data-copy-feedback=Copied! role=button>"
    f"{COPY_ICON} {CHECK_ICON}"
    "</button></div></div>"
)


def _snippet(match: re.Match) -> str:
    return SNIPPET_OPEN + match.group(1) + SNIPPET_CLOSE


def rewrite_shell_snippets(text: str, context: dict) -> str:
    return SHELL_FENCE.sub(_snippet, text)

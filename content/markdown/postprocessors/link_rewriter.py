# content/markdown/postprocessors/link_rewriter.py
"""
Postprocessor for links in rendered content.

This postprocessor:
1. Prefixes site-local links with the current language (/foo -> /en/foo)
2. Adds target="_blank" and rel="noopener noreferrer" to external links

The language comes from ``context["current_language"]``. Without it, local
links are left untouched.
"""

from bs4 import BeautifulSoup


def _is_local(href: str) -> bool:
    # Protocol-relative URLs (//host/path) point off-site
    return href.startswith("/") and not href.startswith("//")


def _has_language_prefix(href: str, language: str) -> bool:
    return href == f"/{language}" or href.startswith(f"/{language}/")


def rewrite_links(html: str, context: dict) -> str:
    if "<a" not in html:
        return html

    language = context.get("current_language")
    soup = BeautifulSoup(html, "html.parser")

    for link in soup.find_all("a", href=True):
        href = link["href"]

        if href.startswith(("http://", "https://")):
            link["target"] = "_blank"
            link["rel"] = "noopener noreferrer"
        elif language and _is_local(href) and not _has_language_prefix(href, language):
            link["href"] = f"/{language}{href}"

    return str(soup)

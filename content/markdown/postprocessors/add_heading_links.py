# content/markdown/postprocessors/add_heading_links.py

from bs4 import BeautifulSoup

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def add_heading_links(html: str, context: dict) -> str:
    """
    Wrap the contents of every heading that has an id in a link to itself.

        <h2 id="setup">Setup</h2>  ->  <h2 id="setup"><a href="#setup">Setup</a></h2>

    Headings without an id, or that already link to their own anchor, are
    left alone.
    """
    if "<h" not in html:
        return html

    soup = BeautifulSoup(html, "html.parser")

    for heading in soup.find_all(HEADING_TAGS, id=True):
        anchor_href = f"#{heading['id']}"
        if heading.find("a", href=anchor_href):
            continue

        anchor = soup.new_tag("a", href=anchor_href)
        for child in list(heading.contents):
            anchor.append(child.extract())
        heading.append(anchor)

    return str(soup)

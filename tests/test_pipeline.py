"""End-to-end rendering through Pandoc."""

import pytest

from content.markdown.renderer import render_content


@pytest.fixture(autouse=True)
def rendering_settings(settings):
    settings.CONTENT_RENDERING = {"MARKDOWN_FORMAT": "gfm", "PANDOC_EXTRA_ARGS": []}


def test_markdown_with_directives_rendered():
    html = render_content("Hello **{{ name }}**", {"name": "Mona"})
    assert html == "<p>Hello <strong>Mona</strong></p>"


def test_headings_link_to_themselves():
    html = render_content("## Getting {{ thing }}", {"thing": "started"})
    assert html == '<h2 id="getting-started"><a href="#getting-started">Getting started</a></h2>'


def test_comments_never_reach_output():
    html = render_content("Visible\n<!-- internal note -->\n\nAlso visible")
    assert "internal note" not in html
    assert "<p>Visible</p>" in html


def test_shell_snippet_survives_conversion():
    html = render_content("Run this:\n\n```shell\ngh auth login\n```\n")
    assert '<code class="hljs language-shell">gh auth login</code>' in html
    assert "js-clipboard-copy" in html


def test_toc_list_stays_tight_and_localized():
    template = (
        '- <a href="/foo">Foo</a>\n'
        '{% if show %}- <a href="/skip">Skip</a>{% endif %}\n'
        '- <a href="/bar">Bar</a>\n'
    )
    html = render_content(template, {"show": False, "current_language": "en"})
    assert '<li><a href="/en/foo">Foo</a></li>' in html
    assert '<li><a href="/en/bar">Bar</a></li>' in html
    assert "<p>" not in html
    assert "skip" not in html


def test_table_cells_rendered():
    template = "| Command | Notes |\n| --- | --- |\n| `make` | builds *everything* |\n"
    html = render_content(template)
    assert "<table>" in html
    assert "<code>make</code>" in html
    assert "<em>everything</em>" in html


def test_external_links_open_in_new_tab():
    html = render_content("[GitHub](https://github.com)")
    assert 'href="https://github.com"' in html
    assert 'target="_blank"' in html


def test_text_only():
    text = render_content("# Title\n\nSome *text* here.", text_only=True)
    assert text.startswith("Title")
    assert text.endswith("Some text here.")


def test_encode_entities():
    html = render_content("Fish & chips", encode_entities=True)
    assert html == "&lt;p&gt;Fish &amp;amp; chips&lt;/p&gt;"


def test_as_soup():
    soup = render_content("A [link](https://example.com)", as_soup=True)
    assert soup.find("a")["href"] == "https://example.com"

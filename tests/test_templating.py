"""Tests for content.markdown.templating and the site data tag."""

import logging

import pytest
from django.template import TemplateSyntaxError

from content.markdown.templating import render_template, template_engine


def test_variables_substituted():
    assert render_template("Hello {{ name }}", {"name": "Mona"}) == "Hello Mona"


def test_output_not_html_escaped():
    assert render_template("{{ tag }}", {"tag": "<kbd>Ctrl</kbd> & C"}) == "<kbd>Ctrl</kbd> & C"


def test_conditionals_leave_blank_lines():
    text = "a\n{% if show %}b{% endif %}\nc"
    assert render_template(text, {"show": False}) == "a\n\nc"


def test_loops_over_context():
    text = "{% for item in items %}- {{ item }}\n{% endfor %}"
    assert render_template(text, {"items": ["one", "two"]}) == "- one\n- two\n"


def test_numbers_rendered():
    assert render_template("{{ count }} items", {"count": 3}) == "3 items"


def test_missing_variable_renders_empty():
    assert render_template("[{{ missing }}]", {}) == "[]"


def test_syntax_error_propagates():
    with pytest.raises(TemplateSyntaxError):
        render_template("{% if %}", {})


def test_unclosed_block_propagates():
    with pytest.raises(TemplateSyntaxError):
        render_template("{% if flag %}never closed", {"flag": True})


def test_engine_does_not_autoescape():
    assert template_engine.autoescape is False


# ---------------------------------------------------------------------------
# {% data %}
# ---------------------------------------------------------------------------


SITE = {
    "data": {
        "reusables": {
            "cli": {
                "install": "Install with `{{ tool }} install`.",
                "nested": 'Note: {% data "reusables.cli.install" %}',
            },
        },
        "variables": {"product": "Docs"},
    },
}


def test_data_tag_resolves_dotted_path():
    assert render_template('{% data "variables.product" %}', {"site": SITE}) == "Docs"


def test_data_tag_renders_fragment_against_context():
    result = render_template('{% data "reusables.cli.install" %}', {"site": SITE, "tool": "gh"})
    assert result == "Install with `gh install`."


def test_data_tag_fragments_can_nest():
    result = render_template('{% data "reusables.cli.nested" %}', {"site": SITE, "tool": "gh"})
    assert result == "Note: Install with `gh install`."


def test_data_tag_missing_path_renders_empty(caplog):
    with caplog.at_level(logging.WARNING, logger="content.templatetags.site_data"):
        result = render_template('[{% data "reusables.nope" %}]', {"site": SITE})
    assert result == "[]"
    assert "reusables.nope" in caplog.text


def test_data_tag_without_site_renders_empty():
    assert render_template('{% data "variables.product" %}', {}) == ""


LOOPING_SITE = {
    "data": {
        "self": 'again: [{% data "self" %}]',
        "ping": 'ping {% data "pong" %}',
        "pong": 'pong {% data "ping" %}',
        "twice": '{% data "leaf" %} and {% data "leaf" %}',
        "leaf": "leaf",
    },
}


def test_data_tag_self_reference_stops(caplog):
    with caplog.at_level(logging.WARNING, logger="content.templatetags.site_data"):
        result = render_template('{% data "self" %}', {"site": LOOPING_SITE})
    assert result == "again: []"
    assert "self -> self" in caplog.text


def test_data_tag_mutual_reference_stops():
    result = render_template('{% data "ping" %}', {"site": LOOPING_SITE})
    assert result == "ping pong "


def test_data_tag_same_fragment_used_twice_in_sequence():
    result = render_template('{% data "twice" %}', {"site": LOOPING_SITE})
    assert result == "leaf and leaf"

# content/templatetags/site_data.py
"""
Builtin tags for documentation templates.

``{% data "reusables.cli.install" %}`` looks the dotted path up in
``site.data`` of the render context and renders the value as a template
against the same context, so reusable fragments can use directives too.
A fragment that includes itself, directly or through others, renders the
inner reference as empty text.
"""

import logging

from django import template

logger = logging.getLogger(__name__)

register = template.Library()

# Paths currently being expanded, innermost last. The leading underscore
# keeps it out of reach of template variables.
_ACTIVE_PATHS = "_site_data_paths"


def _lookup(data, path: str):
    value = data
    for key in path.split("."):
        if not isinstance(value, dict) or key not in value:
            return None
        value = value[key]
    return value


@register.simple_tag(takes_context=True)
def data(context, path):
    site = context.get("site") or {}
    value = _lookup(site.get("data") or {}, path)
    if value is None:
        logger.warning("No site data found for %r", path)
        return ""

    active = context.get(_ACTIVE_PATHS, ())
    if path in active:
        logger.warning("Recursive site data reference %s", " -> ".join(active + (path,)))
        return ""

    # Nested fragments go through the engine that is rendering this template
    fragment = context.template.engine.from_string(str(value))
    with context.push({_ACTIVE_PATHS: active + (path,)}):
        return fragment.render(context)

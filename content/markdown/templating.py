# content/markdown/templating.py

from django.template import Context, Engine

# One engine for the whole process. Autoescaping is off because templates
# produce Markdown, and HTML escaping happens later if the caller asks for it.
template_engine = Engine(
    autoescape=False,
    builtins=["content.templatetags.site_data"],
)


def render_template(text: str, context: dict) -> str:
    """Evaluate template directives in ``text`` against ``context``."""
    template = template_engine.from_string(text)
    return template.render(Context(context, autoescape=template_engine.autoescape))

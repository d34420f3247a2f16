# content/templatetags/content_tags.py

from django import template
from django.utils.safestring import mark_safe

from content.markdown.renderer import render_content

register = template.Library()


@register.filter(name="render_content")
def render_content_filter(value):
    return mark_safe(render_content(value) or "")


@register.simple_tag(takes_context=True)
def render_content_with_context(context, value):
    """Template tag that passes template context to the renderer"""
    render_context = {
        "site": context.get("site"),
        "current_language": context.get("current_language"),
        "page": context.get("page"),
    }
    return mark_safe(render_content(value, context=render_context) or "")

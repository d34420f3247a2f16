"""
Celery tasks for rendering content outside the request cycle.

Rendering failures are not retried: the exception propagates and Celery
records the task as failed.
"""

from celery import shared_task

from .markdown.renderer import render_content


@shared_task
def render_content_task(template, context=None, text_only=False, encode_entities=False, filename=None):
    """
    Render a template asynchronously.

    Args:
        template: Template source
        context: JSON-serializable render context
        text_only: Return visible text instead of HTML
        encode_entities: HTML-escape the result
        filename: Source name used in the failure log

    Returns:
        The rendered string
    """
    return render_content(
        template,
        context,
        text_only=text_only,
        encode_entities=encode_entities,
        filename=filename,
    )

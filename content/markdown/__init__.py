# content/markdown/__init__.py

from .renderer import render_content

__all__ = ("render_content",)

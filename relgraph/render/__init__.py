"""Serializers for built graphs."""

from .dot import to_dot
from .html import wrap_html
from .summary import print_rich, summarize, to_markdown
from .svg import to_svg

__all__ = ["print_rich", "summarize", "to_dot", "to_markdown", "to_svg", "wrap_html"]

"""Styling and highlight overlay."""

from .highlight import decorate, set_highlight
from .tooltip import Formatted, format_tooltip

__all__ = ["Formatted", "decorate", "format_tooltip", "set_highlight"]

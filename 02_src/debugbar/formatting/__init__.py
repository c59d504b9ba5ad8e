"""Formatting collaborators: text formatter, rich renderer, link builder."""

from .formatter import IValueFormatter, ReprFormatter
from .links import IDebugLinkBuilder, TemplateLinkBuilder
from .renderer import HtmlValueRenderer, IRichValueRenderer

__all__ = [
    "IValueFormatter",
    "ReprFormatter",
    "IRichValueRenderer",
    "HtmlValueRenderer",
    "IDebugLinkBuilder",
    "TemplateLinkBuilder",
]

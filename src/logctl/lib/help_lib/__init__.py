"""
Help content for CLI applications.

Separates help content (commands and descriptions) from presentation
so usage text can be assembled from aligned, prioritized sections.
"""

from .core import HelpContent, HelpSection

__all__ = [
    'HelpContent',
    'HelpSection',
]

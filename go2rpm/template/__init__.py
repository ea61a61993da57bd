"""
Spec template rendering.
Expands @KEY@ placeholders, with list values repeating their line.
"""

from .renderer import SpecRenderer, render_template
from .spec_template import SPEC_TEMPLATE

__all__ = ['SpecRenderer', 'render_template', 'SPEC_TEMPLATE']

"""Source checkout support (git and Mercurial)."""

from .checkout import Checkout

__all__ = ['Checkout']

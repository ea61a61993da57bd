"""Command line interface for go2rpm."""

from .main import create_parser, main

__all__ = ['create_parser', 'main']

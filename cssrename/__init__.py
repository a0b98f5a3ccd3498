"""Rename CSS class selectors across stylesheets from a remote change list."""

__version__ = "0.1.0"

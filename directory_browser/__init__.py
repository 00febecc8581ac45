"""
Top-level package for the companies directory browser.

This package exposes the core pipeline (filter, sort, paginate), the
view-state coordinator and the Dash UI adapters.
Most code should import from submodules such as:
    directory_browser.core
    directory_browser.sources
    directory_browser.ui
"""

__all__: list[str] = []

"""
Top-level package for the heritage sites browser.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    heritage_browser.core
    heritage_browser.views
    heritage_browser.ui
"""

__all__: list[str] = []

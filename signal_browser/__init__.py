"""
Top-level package for the amateur radio signal browser.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    signal_browser.core
    signal_browser.services
    signal_browser.ui
"""

__all__: list[str] = []

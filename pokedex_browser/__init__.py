"""
Top-level package for the Pokédex browser.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    pokedex_browser.core
    pokedex_browser.services
    pokedex_browser.ui
"""

__all__: list[str] = []

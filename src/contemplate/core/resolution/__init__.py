"""Path resolution strategies.

A strategy turns a parsed :class:`~contemplate.core.templates.name.ResourceName`
into a file path or raises :class:`~contemplate.core.exceptions.TemplateNotFound`:

- base: ``ResolutionStrategy`` abstract base class
- default: namespaced folders + default directory
- theme: ordered theme hierarchy, first match wins
"""
from .base import ResolutionStrategy
from .default import DefaultStrategy
from .theme import ThemeStrategy

__all__ = [
    "ResolutionStrategy",
    "DefaultStrategy",
    "ThemeStrategy",
]

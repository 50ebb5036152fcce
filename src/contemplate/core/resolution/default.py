"""Folder-based resolution.

Lookup order for ``ns::name``:

1. ``<folder ns>/<file>``
2. ``<fallback folder>/<file>`` for every other fallback-marked folder
3. ``<default directory>/<file>`` when folder ``ns`` itself is fallback-marked

Un-namespaced names only look in the default directory.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Tuple

from ..exceptions import ConfigurationError, NoDefaultDirectory, TemplateNotFound
from ..templates.folders import Folder
from .base import ResolutionStrategy

if TYPE_CHECKING:
    from ..templates.config import TemplateConfig
    from ..templates.name import ResourceName

logger = logging.getLogger(__name__)

FALLBACK_ORDERS = ("registration", "reverse")

# Origin label for candidates in the default directory.
DEFAULT_ORIGIN = "default"


class DefaultStrategy(ResolutionStrategy):
    """Resolve names against namespaced folders and the default directory.

    Args:
        config: Engine settings, referenced (not copied) so later folder or
            directory changes are honoured
        fallback_order: ``"registration"`` searches fallback folders in the
            order they were added, ``"reverse"`` searches the newest first
    """

    def __init__(self, config: "TemplateConfig", *, fallback_order: str = "registration") -> None:
        if fallback_order not in FALLBACK_ORDERS:
            raise ConfigurationError(
                f'Unknown fallback order "{fallback_order}"; expected one of {", ".join(FALLBACK_ORDERS)}.',
                context={"fallback_order": fallback_order},
            )
        self.config = config
        self.fallback_order = fallback_order

    def _fallback_folders(self, requested: Folder) -> List[Folder]:
        folders = [f for f in self.config.folders.fallbacks() if f.name != requested.name]
        if self.fallback_order == "reverse":
            folders.reverse()
        return folders

    def _candidates(self, name: "ResourceName") -> List[Tuple[str, Path]]:
        """Return ``(origin, path)`` pairs in probe order."""
        if name.folder is None:
            directory = self.config.default_directory
            if directory is None:
                raise NoDefaultDirectory(name.raw)
            return [(DEFAULT_ORIGIN, directory / name.file_name)]

        candidates = [(name.folder.name, name.folder.path / name.file_name)]
        candidates.extend((f.name, f.path / name.file_name) for f in self._fallback_folders(name.folder))
        if name.folder.fallback and self.config.default_directory is not None:
            candidates.append((DEFAULT_ORIGIN, self.config.default_directory / name.file_name))
        return candidates

    def resolve(self, name: "ResourceName") -> Path:
        fs = self.config.fs
        searched: List[Tuple[str, Path]] = []
        for origin, candidate in self._candidates(name):
            if fs.is_file(candidate):
                logger.debug("Resolved %s -> %s (%s)", name.raw, candidate, origin)
                return candidate
            searched.append((origin, candidate))

        logger.debug("Template %s not found; tried %s", name.raw, [str(p) for _o, p in searched])
        raise TemplateNotFound(name.raw, [p for _o, p in searched], searched=searched)

    def __repr__(self) -> str:
        return f"DefaultStrategy(fallback_order={self.fallback_order!r})"


__all__ = ["DefaultStrategy", "FALLBACK_ORDERS"]

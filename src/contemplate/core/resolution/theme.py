from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..exceptions import TemplateNotFound
from ..fs import LOCAL_FS, FileSystem
from ..templates.theme import ThemeHierarchy
from .base import ResolutionStrategy

if TYPE_CHECKING:
    from ..templates.name import ResourceName

logger = logging.getLogger(__name__)


class ThemeStrategy(ResolutionStrategy):
    """Search a theme hierarchy, highest priority first.

    The first theme containing the file wins and lower themes are never
    probed, which is what lets a child theme override its parent. Namespaces
    play no part here: only the name's file name is looked up.
    """

    def __init__(self, hierarchy: ThemeHierarchy, *, fs: Optional[FileSystem] = None) -> None:
        self.hierarchy = hierarchy
        self.fs = fs or LOCAL_FS

    def resolve(self, name: "ResourceName") -> Path:
        searched: List[Tuple[str, Path]] = []
        for theme in self.hierarchy:
            path = theme.directory / name.file_name
            if self.fs.is_file(path):
                logger.debug("Resolved %s -> %s (theme %s)", name.raw, path, theme.name)
                return path
            searched.append((theme.name, path))

        message = 'The template "{}" was not found in the following themes: {}'.format(
            name.raw,
            ", ".join(f"{theme_name}:{path}" for theme_name, path in searched),
        )
        logger.debug(message)
        raise TemplateNotFound(
            name.raw,
            [path for _theme, path in searched],
            message,
            searched=searched,
        )

    def __repr__(self) -> str:
        return f"ThemeStrategy({self.hierarchy!r})"


__all__ = ["ThemeStrategy"]

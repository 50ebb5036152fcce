"""Themes: named template roots layered by priority."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from ..exceptions import ConfigurationError, DirectoryNotFound
from ..fs import LOCAL_FS, FileSystem, PathLike


@dataclass(frozen=True)
class Theme:
    """A single theme root (e.g. a child theme or its parent)."""

    name: str
    directory: Path

    @classmethod
    def new(
        cls,
        directory: PathLike,
        name: Optional[str] = None,
        *,
        fs: Optional[FileSystem] = None,
    ) -> "Theme":
        """Create a theme, checking that ``directory`` exists.

        ``name`` defaults to the directory's basename.
        """
        path = Path(directory)
        if not (fs or LOCAL_FS).is_dir(path):
            raise DirectoryNotFound(path, what="theme directory")
        return cls(name=name or path.name, directory=path)

    def __str__(self) -> str:
        return f"{self.name}:{self.directory}"


class ThemeHierarchy:
    """Immutable, ordered list of themes. The first theme has the highest priority.

    Usage:
        hierarchy = ThemeHierarchy.of([
            Theme.new("themes/child", "child"),
            Theme.new("themes/base", "base"),
        ])
    """

    __slots__ = ("_themes",)

    def __init__(self, themes: Iterable[Theme]) -> None:
        ordered: Tuple[Theme, ...] = tuple(themes)
        if not ordered:
            raise ConfigurationError("A theme hierarchy needs at least one theme.")
        seen: List[str] = []
        for theme in ordered:
            if theme.name in seen:
                raise ConfigurationError(
                    f'Duplicate theme name "{theme.name}" in hierarchy.',
                    context={"theme": theme.name},
                )
            seen.append(theme.name)
        self._themes = ordered

    @classmethod
    def of(cls, themes: Iterable[Theme]) -> "ThemeHierarchy":
        return cls(themes)

    def names(self) -> List[str]:
        return [t.name for t in self._themes]

    def get(self, name: str) -> Optional[Theme]:
        for theme in self._themes:
            if theme.name == name:
                return theme
        return None

    def __iter__(self) -> Iterator[Theme]:
        return iter(self._themes)

    def __len__(self) -> int:
        return len(self._themes)

    def __getitem__(self, index: int) -> Theme:
        return self._themes[index]

    def __repr__(self) -> str:
        return "ThemeHierarchy([{}])".format(", ".join(repr(t.name) for t in self._themes))


__all__ = ["Theme", "ThemeHierarchy"]

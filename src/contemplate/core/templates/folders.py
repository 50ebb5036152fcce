"""Namespaced template folders and the default directory."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from ..exceptions import DirectoryNotFound, DuplicateNamespace, UnknownNamespace
from ..fs import LOCAL_FS, FileSystem, PathLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Folder:
    """A registered namespace root.

    Attributes:
        name: Namespace used as ``name::template``
        path: Root directory for the namespace
        fallback: Whether this folder may be searched when another namespace misses
    """

    name: str
    path: Path
    fallback: bool = False


class FolderTable:
    """Registry of namespace -> folder, in registration order."""

    def __init__(self, *, fs: Optional[FileSystem] = None) -> None:
        self._fs = fs or LOCAL_FS
        self._folders: Dict[str, Folder] = {}

    def register(self, namespace: str, directory: PathLike, fallback: bool = False) -> Folder:
        """Register ``namespace`` for ``directory``.

        Raises:
            DuplicateNamespace: namespace already registered (the existing entry is kept)
            DirectoryNotFound: directory does not exist
        """
        if namespace in self._folders:
            raise DuplicateNamespace(namespace)
        path = Path(directory)
        if not self._fs.is_dir(path):
            raise DirectoryNotFound(path)
        folder = Folder(name=namespace, path=path, fallback=bool(fallback))
        self._folders[namespace] = folder
        logger.debug("Registered folder %s -> %s (fallback=%s)", namespace, path, folder.fallback)
        return folder

    def unregister(self, namespace: str) -> None:
        if namespace not in self._folders:
            raise UnknownNamespace(namespace)
        del self._folders[namespace]

    def lookup(self, namespace: str) -> Folder:
        try:
            return self._folders[namespace]
        except KeyError:
            raise UnknownNamespace(namespace) from None

    def contains(self, namespace: str) -> bool:
        return namespace in self._folders

    def fallbacks(self) -> List[Folder]:
        """Return fallback-marked folders in registration order."""
        return [f for f in self._folders.values() if f.fallback]

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._folders

    def __iter__(self) -> Iterator[Folder]:
        return iter(list(self._folders.values()))

    def __len__(self) -> int:
        return len(self._folders)


class DefaultDirectory:
    """Holder for the optional default template directory."""

    def __init__(self, path: Optional[PathLike] = None, *, fs: Optional[FileSystem] = None) -> None:
        self._fs = fs or LOCAL_FS
        self._path: Optional[Path] = None
        self.set(path)

    def set(self, path: Optional[PathLike]) -> "DefaultDirectory":
        """Set the directory; ``None`` disables it."""
        if path is None:
            self._path = None
            return self
        candidate = Path(path)
        if not self._fs.is_dir(candidate):
            raise DirectoryNotFound(candidate, what="default directory")
        self._path = candidate
        return self

    def get(self) -> Optional[Path]:
        return self._path


__all__ = ["Folder", "FolderTable", "DefaultDirectory"]

"""In-memory filesystem for probe-order tests."""
from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable, List, Set, Tuple, Union

PathLike = Union[str, Path]


class MemoryFileSystem:
    """FileSystem fake holding a fixed set of files.

    Every directory above a file exists implicitly; extra empty directories
    can be passed in ``dirs``. ``probes`` records ``(kind, path)`` for each
    query in call order.
    """

    def __init__(self, files: Iterable[PathLike] = (), dirs: Iterable[PathLike] = ()) -> None:
        self.files: Set[str] = {self._key(f) for f in files}
        self.dirs: Set[str] = {self._key(d) for d in dirs}
        for f in self.files:
            self.dirs.update(str(p) for p in PurePosixPath(f).parents)
        self.probes: List[Tuple[str, str]] = []

    @staticmethod
    def _key(path: PathLike) -> str:
        return str(PurePosixPath(str(path)))

    def add_file(self, path: PathLike) -> None:
        key = self._key(path)
        self.files.add(key)
        self.dirs.update(str(p) for p in PurePosixPath(key).parents)

    def remove_file(self, path: PathLike) -> None:
        self.files.discard(self._key(path))

    def is_dir(self, path: PathLike) -> bool:
        self.probes.append(("dir", self._key(path)))
        return self._key(path) in self.dirs

    def is_file(self, path: PathLike) -> bool:
        self.probes.append(("file", self._key(path)))
        return self._key(path) in self.files

    def file_probes(self) -> List[str]:
        return [p for kind, p in self.probes if kind == "file"]

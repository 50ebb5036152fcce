"""Filesystem probes used by resolution.

Resolution only ever asks two read-only questions of the filesystem: is this a
directory, and is this a regular file. Keeping them behind a small protocol
lets tests substitute an in-memory tree and count probes.
"""
from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union, runtime_checkable

PathLike = Union[str, Path]


@runtime_checkable
class FileSystem(Protocol):
    """Read-only existence checks."""

    def is_dir(self, path: PathLike) -> bool: ...

    def is_file(self, path: PathLike) -> bool: ...


class LocalFileSystem:
    """FileSystem backed by the local disk via :mod:`pathlib`."""

    def is_dir(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def is_file(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def __repr__(self) -> str:
        return "LocalFileSystem()"


LOCAL_FS = LocalFileSystem()


__all__ = ["FileSystem", "LocalFileSystem", "LOCAL_FS", "PathLike"]

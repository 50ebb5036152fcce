"""Resolution settings owned by one engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..fs import LOCAL_FS, FileSystem
from .extension import FileExtensionTable
from .folders import DefaultDirectory, FolderTable


@dataclass
class TemplateConfig:
    """Default directory, extension rules and folders for one engine.

    Strategies and names hold a reference to this object rather than a copy,
    so changes made through the engine are visible to the next resolution.
    """

    fs: FileSystem = LOCAL_FS
    extensions: FileExtensionTable = field(default_factory=FileExtensionTable)
    directory: Optional[DefaultDirectory] = None
    folders: Optional[FolderTable] = None

    def __post_init__(self) -> None:
        if self.directory is None:
            self.directory = DefaultDirectory(fs=self.fs)
        if self.folders is None:
            self.folders = FolderTable(fs=self.fs)

    @property
    def default_directory(self) -> Optional[Path]:
        return self.directory.get()

    def extension_for(self, type_tag: Optional[str] = None) -> Optional[str]:
        return self.extensions.get(type_tag)


__all__ = ["TemplateConfig"]

"""
Contemplate engine: resolution API and environment settings storage.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Type

from .fs import LOCAL_FS, FileSystem, PathLike
from .resolution import DefaultStrategy, ResolutionStrategy, ThemeStrategy
from .templates.config import TemplateConfig
from .templates.extension import DEFAULT_FILE_EXTENSION, FileExtensionTable
from .templates.folders import FolderTable
from .templates.functions import FunctionRegistry, FunctionType
from .templates.name import ResourceName
from .templates.resolvable import TYPE_CONTROLLER_DELEGATE, Controller, Resolvable
from .templates.theme import ThemeHierarchy

logger = logging.getLogger(__name__)


class Engine:
    """Resolve resource names and run controllers.

    The engine owns its settings (default directory, extension table, folder
    table, function registry) and the active resolution strategy. Nothing is
    global: two engines in one process never see each other's settings.

    Usage:
        engine = Engine("templates")
        engine.set_file_extension("tpl.html", TYPE_TEMPLATE)
        engine.add_folder("emails", "templates/emails", fallback=True)

        engine.path("emails::welcome", TYPE_TEMPLATE)
        engine.call_controller("profile", TYPE_CONTROLLER_GET, [request])
    """

    def __init__(
        self,
        directory: Optional[PathLike] = None,
        file_extension: Optional[str] = DEFAULT_FILE_EXTENSION,
        *,
        fs: Optional[FileSystem] = None,
    ) -> None:
        self.config = TemplateConfig(fs=fs or LOCAL_FS, extensions=FileExtensionTable(file_extension))
        self.config.directory.set(directory)
        self.functions = FunctionRegistry()
        self._strategy: ResolutionStrategy = DefaultStrategy(self.config)

    @classmethod
    def from_theme(
        cls,
        hierarchy: ThemeHierarchy,
        file_extension: Optional[str] = DEFAULT_FILE_EXTENSION,
        *,
        fs: Optional[FileSystem] = None,
    ) -> "Engine":
        """Create an engine that resolves names through ``hierarchy``."""
        engine = cls(None, file_extension, fs=fs)
        engine.set_resolution_strategy(ThemeStrategy(hierarchy, fs=engine.config.fs))
        return engine

    # ------------------------------------------------------------------
    # Strategy
    # ------------------------------------------------------------------

    def set_resolution_strategy(self, strategy: ResolutionStrategy) -> "Engine":
        logger.debug("Resolution strategy set to %r", strategy)
        self._strategy = strategy
        return self

    @property
    def resolution_strategy(self) -> ResolutionStrategy:
        return self._strategy

    # ------------------------------------------------------------------
    # Directory / extensions / folders
    # ------------------------------------------------------------------

    def set_directory(self, directory: Optional[PathLike]) -> "Engine":
        """Set path to the default directory. Pass None to disable it."""
        self.config.directory.set(directory)
        return self

    @property
    def directory(self) -> Optional[Path]:
        return self.config.default_directory

    def set_file_extension(self, file_extension: Optional[str], type_tag: Optional[str] = None) -> "Engine":
        """Set the file extension for ``type_tag`` (or the default extension)."""
        self.config.extensions.set(file_extension, type_tag)
        return self

    def get_file_extension(self, type_tag: Optional[str] = None) -> Optional[str]:
        return self.config.extensions.get(type_tag)

    def add_folder(self, name: str, directory: PathLike, fallback: bool = False) -> "Engine":
        """Add a folder for grouping templates under a namespace."""
        self.config.folders.register(name, directory, fallback)
        return self

    def remove_folder(self, name: str) -> "Engine":
        self.config.folders.unregister(name)
        return self

    @property
    def folders(self) -> FolderTable:
        return self.config.folders

    # ------------------------------------------------------------------
    # Functions and extensions
    # ------------------------------------------------------------------

    def register_function(self, name: str, callback: FunctionType) -> "Engine":
        self.functions.add(name, callback)
        return self

    def drop_function(self, name: str) -> "Engine":
        self.functions.remove(name)
        return self

    def get_function(self, name: str) -> FunctionType:
        return self.functions.get(name)

    def does_function_exist(self, name: str) -> bool:
        return name in self.functions

    def load_extension(self, extension: Any) -> "Engine":
        """Load an extension (any object with ``register(engine)``)."""
        extension.register(self)
        return self

    def load_extensions(self, extensions: Iterable[Any] = ()) -> "Engine":
        for extension in extensions:
            self.load_extension(extension)
        return self

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def make_name(self, name: str, type_tag: Optional[str] = None) -> ResourceName:
        """Parse ``name`` against this engine's folders and extensions."""
        return ResourceName.parse(name, type_tag, self.config.folders, self.config.extensions)

    def resolve(
        self,
        name: str,
        type_tag: Optional[str] = None,
        cls: Type[Resolvable] = Resolvable,
    ) -> Resolvable:
        """Return a resolvable (or ``cls`` instance) for ``name``."""
        return cls(self, name, type_tag)

    def path(self, name: str, type_tag: Optional[str] = None) -> Path:
        """Resolve ``name`` to a file path.

        Raises:
            InvalidName: the name cannot be parsed
            UnknownNamespace: the namespace is not registered
            NoDefaultDirectory: un-namespaced name and no default directory
            TemplateNotFound: no candidate exists
        """
        return self._strategy.resolve(self.make_name(name, type_tag))

    def exists(self, name: str, type_tag: Optional[str] = None) -> bool:
        """Check if ``name`` resolves to a file."""
        return self.resolve(name, type_tag).exists()

    def load(
        self,
        name: str,
        params: Optional[Mapping[str, Any]] = None,
        type_tag: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Execute the resolved Python file and return its public namespace."""
        return self.resolve(name, type_tag).load(params)

    def call_controller(
        self,
        name: str,
        type_tag: Optional[str] = TYPE_CONTROLLER_DELEGATE,
        args: Sequence[Any] = (),
    ) -> Any:
        """Resolve the controller ``name`` and call it with its decorators."""
        controller = self.resolve(name, type_tag, Controller)
        return controller.call(args)


__all__ = ["Engine"]

"""Core resolution engine.

Public entry points are re-exported here so callers can write
``from contemplate.core import Engine`` without knowing the module layout.
"""
from __future__ import annotations

from .engine import Engine
from .exceptions import (
    ContemplateError,
    ConfigurationError,
    ControllerError,
    DirectoryNotFound,
    DuplicateNamespace,
    EmptyBaseName,
    FunctionNotFound,
    InvalidName,
    MalformedName,
    NoDefaultDirectory,
    TemplateNotFound,
    UnknownNamespace,
)
from .fs import FileSystem, LocalFileSystem
from .resolution import DefaultStrategy, ResolutionStrategy, ThemeStrategy
from .templates import (
    TYPE_CONTROLLER_DELEGATE,
    TYPE_CONTROLLER_GET,
    TYPE_CONTROLLER_POST,
    TYPE_TEMPLATE,
    Controller,
    ControllerDecorator,
    FileExtensionTable,
    Folder,
    FolderTable,
    FunctionRegistry,
    Resolvable,
    ResourceName,
    TemplateConfig,
    Theme,
    ThemeHierarchy,
    call_decorated,
    decorators_of,
    invoke_chain,
    with_decorators,
)

__all__ = [
    "Engine",
    # errors
    "ContemplateError",
    "ConfigurationError",
    "ControllerError",
    "DirectoryNotFound",
    "DuplicateNamespace",
    "EmptyBaseName",
    "FunctionNotFound",
    "InvalidName",
    "MalformedName",
    "NoDefaultDirectory",
    "TemplateNotFound",
    "UnknownNamespace",
    # filesystem
    "FileSystem",
    "LocalFileSystem",
    # strategies
    "ResolutionStrategy",
    "DefaultStrategy",
    "ThemeStrategy",
    # templates
    "TYPE_TEMPLATE",
    "TYPE_CONTROLLER_GET",
    "TYPE_CONTROLLER_POST",
    "TYPE_CONTROLLER_DELEGATE",
    "Controller",
    "ControllerDecorator",
    "FileExtensionTable",
    "Folder",
    "FolderTable",
    "FunctionRegistry",
    "Resolvable",
    "ResourceName",
    "TemplateConfig",
    "Theme",
    "ThemeHierarchy",
    "call_decorated",
    "decorators_of",
    "invoke_chain",
    "with_decorators",
]

"""Template naming, lookup tables, themes, resolvables and decorators.

- extension: per-type file extensions
- folders: namespaced folders and the default directory
- config: settings bundle owned by an engine
- name: ``namespace::basename`` parsing
- theme: themes and theme hierarchies
- decorators: controller decorator chains
- functions: named template functions
- resolvable: resolvables and controllers
"""
from .config import TemplateConfig
from .decorators import (
    ControllerDecorator,
    call_decorated,
    decorators_of,
    invoke_chain,
    with_decorators,
)
from .extension import DEFAULT_FILE_EXTENSION, FileExtensionTable
from .folders import DefaultDirectory, Folder, FolderTable
from .functions import FunctionRegistry
from .name import NAMESPACE_SEPARATOR, ResourceName
from .resolvable import (
    CONTROLLER_ATTRIBUTE,
    TYPE_CONTROLLER_DELEGATE,
    TYPE_CONTROLLER_GET,
    TYPE_CONTROLLER_POST,
    TYPE_TEMPLATE,
    Controller,
    Resolvable,
)
from .theme import Theme, ThemeHierarchy

__all__ = [
    "TemplateConfig",
    "ControllerDecorator",
    "call_decorated",
    "decorators_of",
    "invoke_chain",
    "with_decorators",
    "DEFAULT_FILE_EXTENSION",
    "FileExtensionTable",
    "DefaultDirectory",
    "Folder",
    "FolderTable",
    "FunctionRegistry",
    "NAMESPACE_SEPARATOR",
    "ResourceName",
    "CONTROLLER_ATTRIBUTE",
    "TYPE_TEMPLATE",
    "TYPE_CONTROLLER_GET",
    "TYPE_CONTROLLER_POST",
    "TYPE_CONTROLLER_DELEGATE",
    "Controller",
    "Resolvable",
    "Theme",
    "ThemeHierarchy",
]

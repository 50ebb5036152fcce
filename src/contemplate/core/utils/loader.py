"""Dynamic loading of resolved Python files.

Resolved controllers and scripts are ordinary ``.py`` files living in template
folders or themes, outside any importable package. They are executed in a
fresh module object that is never added to ``sys.modules``, so every load
sees the file's current contents.
"""
from __future__ import annotations

import importlib.machinery
import importlib.util
import logging
import re
from pathlib import Path
from types import ModuleType
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^0-9A-Za-z_]")


class _UncachedSourceLoader(importlib.machinery.SourceFileLoader):
    """Source loader that always compiles from source and never writes bytecode."""

    def get_code(self, fullname: str) -> Any:
        return self.source_to_code(self.get_data(self.path), self.path)


def module_name_for(path: Path, namespace: str = "contemplate.dynamic") -> str:
    """Derive a dotted module name for ``path`` under ``namespace``."""
    stem = _UNSAFE_CHARS.sub("_", Path(path).name.split(".", 1)[0]) or "module"
    return f"{namespace}.{stem}"


def load_module_from_path(
    path: Path,
    namespace: str = "contemplate.dynamic",
    *,
    init_globals: Optional[Mapping[str, Any]] = None,
) -> ModuleType:
    """Execute the Python file at ``path`` and return the resulting module.

    ``init_globals`` are bound in the module namespace before the file runs,
    which is how parameters are passed into scripts.

    Errors raised while executing the file propagate to the caller.

    Args:
        path: Path to the Python file (any extension)
        namespace: Module namespace prefix for the loaded module
        init_globals: Names to pre-bind in the module namespace

    Returns:
        The executed module
    """
    path = Path(path)
    module_name = module_name_for(path, namespace)
    loader = _UncachedSourceLoader(module_name, str(path))
    spec = importlib.util.spec_from_file_location(module_name, path, loader=loader)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}")

    module = importlib.util.module_from_spec(spec)
    if init_globals:
        module.__dict__.update(init_globals)
    logger.debug("Executing %s as %s", path, module_name)
    spec.loader.exec_module(module)
    return module


def public_namespace(module: ModuleType) -> dict[str, Any]:
    """Return the module's public globals (no dunder or private names)."""
    return {k: v for k, v in vars(module).items() if not k.startswith("_")}


__all__ = ["load_module_from_path", "module_name_for", "public_namespace"]

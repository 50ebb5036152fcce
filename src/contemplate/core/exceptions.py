from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


class ContemplateError(Exception):
    """Base exception for Contemplate."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


# ---------------------------------------------------------------------------
# Name parsing
# ---------------------------------------------------------------------------


class InvalidName(ContemplateError, ValueError):
    """Raised when a raw resource name cannot be parsed."""

    def __init__(self, message: str = "", *, name: str = "", context: Mapping[str, Any] | None = None) -> None:
        ctx = dict(context or {})
        ctx.setdefault("name", name)
        ContemplateError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.name = name


class MalformedName(InvalidName):
    """Raised when the namespace separator occurs more than once."""


class EmptyBaseName(InvalidName):
    """Raised when the component after the namespace is empty."""


# ---------------------------------------------------------------------------
# Folder registration
# ---------------------------------------------------------------------------


class UnknownNamespace(ContemplateError, LookupError):
    """Raised when a namespace is referenced but was never registered."""

    def __init__(self, namespace: str, *, context: Mapping[str, Any] | None = None) -> None:
        message = f'The template namespace "{namespace}" was not found.'
        ctx = dict(context or {})
        ctx.setdefault("namespace", namespace)
        ContemplateError.__init__(self, message, context=ctx)
        LookupError.__init__(self, message)
        self.namespace = namespace


class DuplicateNamespace(ContemplateError, ValueError):
    """Raised when a namespace is registered twice."""

    def __init__(self, namespace: str, *, context: Mapping[str, Any] | None = None) -> None:
        message = f'The template namespace "{namespace}" is already being used.'
        ctx = dict(context or {})
        ctx.setdefault("namespace", namespace)
        ContemplateError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.namespace = namespace


class DirectoryNotFound(ContemplateError, FileNotFoundError):
    """Raised when a configured directory does not exist."""

    def __init__(self, directory: Path | str, *, what: str = "directory") -> None:
        message = f'The specified {what} "{directory}" does not exist.'
        ContemplateError.__init__(self, message, context={"directory": str(directory)})
        FileNotFoundError.__init__(self, message)
        self.directory = Path(directory)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(ContemplateError, ValueError):
    """Raised for invalid engine or configuration-file setup."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ContemplateError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class NoDefaultDirectory(ConfigurationError):
    """Raised when an un-namespaced name is resolved without a default directory."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f'The template name "{name}" is not valid. '
            "The default directory has not been defined.",
            context={"name": name},
        )
        self.name = name


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class TemplateNotFound(ContemplateError, LookupError):
    """Raised when every candidate path for a name was missing.

    ``tried_paths`` lists each probed path in probe order. ``searched`` pairs
    each path with the layer (theme or folder) it belongs to, when known.
    """

    def __init__(
        self,
        name: str,
        tried_paths: Iterable[Path],
        message: Optional[str] = None,
        *,
        searched: Iterable[Tuple[str, Path]] = (),
    ) -> None:
        self.name = name
        self.tried_paths: Tuple[Path, ...] = tuple(Path(p) for p in tried_paths)
        self.searched: Tuple[Tuple[str, Path], ...] = tuple((str(k), Path(p)) for k, p in searched)
        if message is None:
            message = 'The template "{}" could not be found at: {}'.format(
                name, ", ".join(f'"{p}"' for p in self.tried_paths)
            )
        ContemplateError.__init__(
            self,
            message,
            context={"name": name, "paths": [str(p) for p in self.tried_paths]},
        )
        LookupError.__init__(self, message)

    def paths(self) -> Tuple[Path, ...]:
        return self.tried_paths


# ---------------------------------------------------------------------------
# Functions / controllers
# ---------------------------------------------------------------------------


class FunctionNotFound(ContemplateError, LookupError):
    """Raised when a named template function is not registered."""

    def __init__(self, name: str) -> None:
        message = f'The template function "{name}" was not found.'
        ContemplateError.__init__(self, message, context={"function": name})
        LookupError.__init__(self, message)
        self.function = name


class ControllerError(ContemplateError, TypeError):
    """Raised when a controller file does not expose a callable controller."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ContemplateError.__init__(self, message, context=context)
        TypeError.__init__(self, message)


__all__ = [
    "ContemplateError",
    "InvalidName",
    "MalformedName",
    "EmptyBaseName",
    "UnknownNamespace",
    "DuplicateNamespace",
    "DirectoryNotFound",
    "ConfigurationError",
    "NoDefaultDirectory",
    "TemplateNotFound",
    "FunctionNotFound",
    "ControllerError",
]

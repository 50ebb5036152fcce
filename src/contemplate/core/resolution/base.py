"""Base class for path resolution strategies."""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..templates.name import ResourceName


class ResolutionStrategy(ABC):
    """Abstract base class for resolution strategies.

    Strategies are interchangeable: the engine calls ``resolve`` and never
    looks at which implementation is active. A strategy probes the filesystem
    on every call and caches nothing, so files added or removed between calls
    are picked up immediately.
    """

    @abstractmethod
    def resolve(self, name: "ResourceName") -> Path:
        """Resolve ``name`` to an existing file.

        Args:
            name: Parsed resource name

        Returns:
            Path of the first matching file

        Raises:
            TemplateNotFound: no candidate exists; lists every tried path
        """
        ...

    def __call__(self, name: "ResourceName") -> Path:
        return self.resolve(name)


__all__ = ["ResolutionStrategy"]

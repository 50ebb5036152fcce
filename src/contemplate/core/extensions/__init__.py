"""Engine extensions.

An extension is any object with a ``register(engine)`` method. Loading it
(``engine.load_extension(ext)``) lets it add functions or folders to the
engine.

- jinja: Jinja2 loader backed by engine resolution
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..engine import Engine


@runtime_checkable
class Extension(Protocol):
    """Protocol for engine extensions."""

    def register(self, engine: "Engine") -> None: ...


__all__ = ["Extension"]

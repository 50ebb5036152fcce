"""Registry for named template functions.

Functions are looked up explicitly by name:

    registry = FunctionRegistry()

    @registry.register("uppercase")
    def uppercase(value: str) -> str:
        return value.upper()

    registry.get("uppercase")("hello")  # "HELLO"
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List

from ..exceptions import FunctionNotFound

FunctionType = Callable[..., Any]


class FunctionRegistry:
    """Name -> callable lookup table."""

    def __init__(self) -> None:
        self._functions: Dict[str, FunctionType] = {}

    def register(self, name: str) -> Callable[[FunctionType], FunctionType]:
        """Decorator to register a function.

        Args:
            name: Name to register the function under

        Returns:
            Decorator that registers the function
        """
        def decorator(func: FunctionType) -> FunctionType:
            self.add(name, func)
            return func
        return decorator

    def add(self, name: str, func: FunctionType) -> None:
        """Add a function to the registry, replacing any previous one.

        Raises:
            ValueError: ``name`` is not a valid identifier
            TypeError: ``func`` is not callable
        """
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f'Not a valid function name: "{name}".')
        if not callable(func):
            raise TypeError(f'The function "{name}" must be callable.')
        self._functions[name] = func

    def remove(self, name: str) -> None:
        if name not in self._functions:
            raise FunctionNotFound(name)
        del self._functions[name]

    def get(self, name: str) -> FunctionType:
        """Get a function by name.

        Raises:
            FunctionNotFound: nothing is registered under ``name``
        """
        try:
            return self._functions[name]
        except KeyError:
            raise FunctionNotFound(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def list_functions(self) -> List[str]:
        """List all registered function names."""
        return list(self._functions.keys())


__all__ = ["FunctionRegistry", "FunctionType"]

"""Resolvables: a name bound to an engine, plus controllers.

A resolvable pairs a parsed name with the engine that resolves it and offers
the "associated" helpers for reaching the resource of a different type that
shares the same name (the GET controller next to a template, for instance).
"""
from __future__ import annotations

import logging
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Sequence, Type, TypeVar

from ..exceptions import ControllerError, TemplateNotFound
from ..utils.loader import load_module_from_path, public_namespace
from .decorators import call_decorated
from .name import ResourceName

if TYPE_CHECKING:
    from ..engine import Engine

logger = logging.getLogger(__name__)

TYPE_TEMPLATE = "__TEMPLATE__"
TYPE_CONTROLLER_GET = "__HTTP_GET__"
TYPE_CONTROLLER_POST = "__HTTP_POST__"
TYPE_CONTROLLER_DELEGATE = "__DELEGATE__"

# Module-level name a controller file must bind to its callable.
CONTROLLER_ATTRIBUTE = "controller"

R = TypeVar("R", bound="Resolvable")


class Resolvable:
    """A resource name resolved through an engine."""

    def __init__(self, engine: "Engine", name: str, type_tag: Optional[str] = None) -> None:
        self.engine = engine
        self.name: ResourceName = engine.make_name(name, type_tag)

    @property
    def type_tag(self) -> Optional[str]:
        return self.name.type_tag

    def exists(self) -> bool:
        """Check whether the resource resolves to a file."""
        try:
            self.engine.resolution_strategy.resolve(self.name)
        except TemplateNotFound:
            return False
        return True

    def path(self) -> Path:
        """Return the resolved path.

        When nothing matches, the first tried path is returned instead, which
        is where the resource would be created.
        """
        try:
            return self.engine.resolution_strategy.resolve(self.name)
        except TemplateNotFound as exc:
            return exc.tried_paths[0]

    def load(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Execute the resolved Python file and return its public namespace.

        ``params`` are bound as globals before the file runs.

        Raises:
            TemplateNotFound: the file does not resolve
        """
        module = self._load_module(params)
        return public_namespace(module)

    def _load_module(self, params: Optional[Mapping[str, Any]] = None) -> ModuleType:
        path = self.engine.resolution_strategy.resolve(self.name)
        return load_module_from_path(path, init_globals=params)

    def call_function(self, name: str, *args: Any) -> Any:
        """Call a function registered on the engine with this resolvable first.

        ``resolvable.call_function("url", "edit")`` calls ``url(resolvable, "edit")``.
        """
        return self.engine.get_function(name)(self, *args)

    # ------------------------------------------------------------------
    # Associated resources (same name, different type)
    # ------------------------------------------------------------------

    def resolve_associated(
        self,
        type_tag: Optional[str] = None,
        cls: Optional[Type[R]] = None,
    ) -> "Resolvable":
        """Return a resolvable with this name and another type tag."""
        factory = cls or Resolvable
        return factory(self.engine, self.name.raw, type_tag)

    def path_associated(self, type_tag: Optional[str] = None) -> Path:
        return self.engine.path(self.name.raw, type_tag)

    def exists_associated(self, type_tag: Optional[str] = None) -> bool:
        return self.engine.exists(self.name.raw, type_tag)

    def load_associated(
        self,
        params: Optional[Mapping[str, Any]] = None,
        type_tag: Optional[str] = None,
    ) -> Dict[str, Any]:
        return self.resolve_associated(type_tag).load(params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name.raw!r}, type_tag={self.name.type_tag!r})"


class Controller(Resolvable):
    """A resolvable whose file defines a ``controller`` callable.

    Example controller file (``profile.get.py``)::

        from contemplate.core import with_decorators
        from myapp.auth import RequireLogin

        @with_decorators(RequireLogin())
        def controller(request):
            return {"user": request.user}

    Calling the controller runs it through its declared decorators.
    """

    def target(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Load the file and return its controller callable."""
        module = self._load_module(params)
        target = getattr(module, CONTROLLER_ATTRIBUTE, None)
        if target is None or not callable(target):
            raise ControllerError(
                f'The controller "{self.name.raw}" at "{module.__file__}" '
                f'does not define a callable "{CONTROLLER_ATTRIBUTE}".',
                context={"name": self.name.raw, "path": str(module.__file__)},
            )
        return target

    def call(self, args: Sequence[Any] = ()) -> Any:
        """Execute the controller with its decorators and return its value."""
        logger.debug("Calling controller %s", self.name.raw)
        return call_decorated(self.target(), list(args))

    def __call__(self, *args: Any) -> Any:
        return self.call(args)

    def delegate(
        self,
        name: str,
        args: Sequence[Any] = (),
        type_tag: Optional[str] = TYPE_CONTROLLER_DELEGATE,
    ) -> Any:
        """Hand this action, or part of it, to another controller."""
        return self.engine.call_controller(name, type_tag, args)

    def delegate_associated(
        self,
        args: Sequence[Any] = (),
        type_tag: Optional[str] = TYPE_CONTROLLER_DELEGATE,
    ) -> Any:
        """Call the controller of another type that shares this name."""
        return self.engine.call_controller(self.name.raw, type_tag, args)


__all__ = [
    "TYPE_TEMPLATE",
    "TYPE_CONTROLLER_GET",
    "TYPE_CONTROLLER_POST",
    "TYPE_CONTROLLER_DELEGATE",
    "CONTROLLER_ATTRIBUTE",
    "Resolvable",
    "Controller",
]

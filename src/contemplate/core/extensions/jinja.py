"""Jinja2 integration.

``ContemplateLoader`` lets a Jinja environment find its templates through an
engine, so Jinja gets namespaces (``{% include "emails::footer" %}``), typed
extensions and theme overrides for free:

    engine = Engine.from_theme(hierarchy)
    engine.set_file_extension("html.j2", TYPE_TEMPLATE)
    engine.load_extension(JinjaExtension())

    env = engine.get_function("jinja_environment")()
    env.get_template("profile").render(user=user)
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

import jinja2

from ..exceptions import ContemplateError, TemplateNotFound
from ..templates.resolvable import TYPE_TEMPLATE

if TYPE_CHECKING:
    from ..engine import Engine

logger = logging.getLogger(__name__)

# Name of the engine function returning the extension's environment.
ENVIRONMENT_FUNCTION = "jinja_environment"


class ContemplateLoader(jinja2.BaseLoader):
    """Jinja loader resolving template names through an engine."""

    def __init__(self, engine: "Engine", type_tag: Optional[str] = TYPE_TEMPLATE, encoding: str = "utf-8") -> None:
        self.engine = engine
        self.type_tag = type_tag
        self.encoding = encoding

    def get_source(
        self, environment: jinja2.Environment, template: str
    ) -> Tuple[str, str, Callable[[], bool]]:
        try:
            path = self.engine.path(template, self.type_tag)
        except TemplateNotFound as exc:
            raise jinja2.TemplateNotFound(template, message=str(exc)) from exc

        source = Path(path).read_text(encoding=self.encoding)
        mtime = os.path.getmtime(path)

        def uptodate() -> bool:
            # A higher priority candidate may have appeared since loading.
            try:
                current = self.engine.path(template, self.type_tag)
            except ContemplateError:
                return False
            if Path(current) != Path(path):
                return False
            try:
                return os.path.getmtime(path) == mtime
            except OSError:
                return False

        return source, str(path), uptodate


class JinjaExtension:
    """Register a Jinja environment bound to the engine.

    Args:
        type_tag: Type tag used to resolve Jinja templates
        environment_options: Extra keyword arguments for ``jinja2.Environment``
    """

    def __init__(
        self,
        type_tag: Optional[str] = TYPE_TEMPLATE,
        environment_options: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.type_tag = type_tag
        self.environment_options = dict(environment_options or {})
        self._environment: Optional[jinja2.Environment] = None

    def register(self, engine: "Engine") -> None:
        loader = ContemplateLoader(engine, self.type_tag)
        self._environment = jinja2.Environment(loader=loader, **self.environment_options)
        engine.register_function(ENVIRONMENT_FUNCTION, self.environment)
        logger.debug("Registered Jinja environment for type %r", self.type_tag)

    def environment(self) -> jinja2.Environment:
        if self._environment is None:
            raise RuntimeError("JinjaExtension has not been registered with an engine.")
        return self._environment


__all__ = ["ContemplateLoader", "JinjaExtension", "ENVIRONMENT_FUNCTION"]

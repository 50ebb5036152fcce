"""Controller decorators.

A controller decorator wraps a controller call. Decorators are declared on
the controller with :func:`with_decorators`; the first one declared is the
outermost, so it is entered first and exited last::

    class RequireLogin(ControllerDecorator):
        def __call__(self, target, next, args):
            if not current_user():
                return redirect("/login")
            return next(args)

    @with_decorators(RequireLogin(), Timed())
    def controller(request):
        ...

    call_decorated(controller, [request])

Each decorator receives ``(target, next, args)``. It continues the chain by
calling ``next(args)`` (optionally with modified args) or returns its own
value without calling ``next`` to skip the rest of the chain.
"""
from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

# Attribute holding the declared decorators on a function or class.
DECORATORS_ATTR = "__controller_decorators__"

Next = Callable[[List[Any]], Any]
Decorator = Callable[[Any, Next, List[Any]], Any]

T = TypeVar("T")


class ControllerDecorator:
    """Base class for controller decorators.

    Subclasses override ``__call__``. The default implementation just forwards
    to the next link of the chain.
    """

    def __call__(self, target: Any, next: Next, args: List[Any]) -> Any:
        return next(args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _declared_on(obj: Any) -> Optional[Tuple[Decorator, ...]]:
    # Own namespace only: declarations are never inherited from base classes.
    namespace = getattr(obj, "__dict__", None)
    if namespace is None or DECORATORS_ATTR not in namespace:
        return None
    return tuple(namespace[DECORATORS_ATTR])


def with_decorators(*decorators: Decorator) -> Callable[[T], T]:
    """Declare ``decorators`` on a controller function or class.

    Applying it more than once stacks the declarations the way Python reads
    them: the outermost ``@with_decorators(...)`` ends up outermost in the
    chain. A subclass only gets the decorators declared on itself.
    """
    for decorator in decorators:
        if not callable(decorator):
            raise TypeError(f"Controller decorator must be callable, got {decorator!r}")

    def apply(target: T) -> T:
        existing = _declared_on(target) or ()
        setattr(target, DECORATORS_ATTR, tuple(decorators) + existing)
        return target

    return apply


def decorators_of(target: Any) -> Tuple[Decorator, ...]:
    """Return the decorators declared on ``target`` (or its own class), outermost first."""
    declared = _declared_on(target)
    if declared is None and not isinstance(target, type):
        declared = _declared_on(type(target))
    return declared or ()


def invoke_chain(target: Callable[..., Any], decorators: Sequence[Decorator], args: Sequence[Any]) -> Any:
    """Invoke ``target`` wrapped by ``decorators`` (first = outermost).

    Exceptions raised by the target or a decorator propagate unchanged.
    """
    if not decorators:
        return target(*args)

    def call_target(call_args: List[Any]) -> Any:
        return target(*call_args)

    def link(decorator: Decorator, inner: Next) -> Next:
        def call(call_args: List[Any]) -> Any:
            return decorator(target, inner, call_args)

        return call

    chain: Next = call_target
    for decorator in reversed(decorators):
        chain = link(decorator, chain)
    return chain(list(args))


def call_decorated(target: Callable[..., Any], args: Sequence[Any] = ()) -> Any:
    """Execute ``target`` along with all its declared decorators."""
    return invoke_chain(target, decorators_of(target), args)


__all__ = [
    "DECORATORS_ATTR",
    "ControllerDecorator",
    "with_decorators",
    "decorators_of",
    "invoke_chain",
    "call_decorated",
]

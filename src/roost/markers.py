"""Route markers — decorators that tag controllers and their operations.

Markers only record metadata; nothing is registered at decoration time.
The reflective scanner reads the tags back from imported classes, and the
source scanner recognises the same decorator lines in raw source text.

Usage::

    from roost import markers

    @markers.api_controller
    @markers.base_path("admin")
    class AdminController:
        @markers.get("users")
        def list_users(self): ...

        @markers.post("users")
        @markers.put("users/{id}")
        def save_user(self): ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from roost.routing.route import HttpMethod

MARKERS_ATTR = "__roost_markers__"


@dataclass(frozen=True, slots=True)
class ControllerMarker:
    """Class is an API controller and eligible for discovery."""


@dataclass(frozen=True, slots=True)
class BasePath:
    """Class-level path prefixed to every route on the controller."""

    path: str


@dataclass(frozen=True, slots=True)
class RouteMarker:
    """Operation handles ``method`` requests on ``path``."""

    method: HttpMethod = HttpMethod.GET
    path: str = ""


type Marker = ControllerMarker | BasePath | RouteMarker

type Operation = Callable[..., Any]
type OperationDecorator = Callable[[Operation], Operation]


def markers_of(obj: Any) -> tuple[Marker, ...]:
    """Return the markers attached directly to ``obj``.

    Classes only report their own markers: a subclass of a controller is
    not itself a controller unless decorated.  ``staticmethod`` and
    ``classmethod`` wrappers are looked through.
    """
    if isinstance(obj, type):
        return obj.__dict__.get(MARKERS_ATTR, ())
    found = getattr(obj, MARKERS_ATTR, None)
    if found is None and hasattr(obj, "__func__"):
        found = getattr(obj.__func__, MARKERS_ATTR, None)
    return found or ()


def _attach[T](obj: T, marker: Marker) -> T:
    # Decorators apply bottom-up; prepending keeps the tuple in source order.
    setattr(obj, MARKERS_ATTR, (marker, *markers_of(obj)))
    return obj


def api_controller[C: type](cls: C) -> C:
    """Mark a class as an API controller."""
    return _attach(cls, ControllerMarker())


def base_path(path: str) -> Callable[[type], type]:
    """Prefix every route on the decorated controller with ``path``."""

    def decorator(cls: type) -> type:
        return _attach(cls, BasePath(path))

    return decorator


def route(method: HttpMethod | str = HttpMethod.GET, path: str = "") -> OperationDecorator:
    """Attach a route marker for ``method`` and ``path`` to an operation.

    Prefer the verb helpers (``get``, ``post``...), which the source
    scanner can recognise without importing the module.
    """
    marker = RouteMarker(method=HttpMethod(method.upper()), path=path)

    def decorator(func: Operation) -> Operation:
        return _attach(func, marker)

    return decorator


def get(path: str = "") -> OperationDecorator:
    return route(HttpMethod.GET, path)


def post(path: str = "") -> OperationDecorator:
    return route(HttpMethod.POST, path)


def put(path: str = "") -> OperationDecorator:
    return route(HttpMethod.PUT, path)


def patch(path: str = "") -> OperationDecorator:
    return route(HttpMethod.PATCH, path)


def delete(path: str = "") -> OperationDecorator:
    return route(HttpMethod.DELETE, path)

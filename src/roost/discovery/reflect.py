"""Reflective discovery — read route markers from imported classes.

Walks a supplied class universe (identifier -> origin file), loads each
class, and collects the ``RouteMarker`` tags on its public operations.
Every marker becomes its own descriptor, so an operation decorated with
both ``@post`` and ``@put`` yields two routes.
"""

import logging
from collections.abc import Mapping

from roost.discovery.universe import load_class
from roost.markers import BasePath, ControllerMarker, RouteMarker, markers_of
from roost.routing.route import RouteDescriptor, RouteTable, normalize_path

logger = logging.getLogger("roost.discovery")


class ReflectiveScanner:
    """Discover routes by introspecting importable controller classes.

    Usage::

        universe = package_classes("shop")
        table = ReflectiveScanner(namespace="shop.").discover(universe)

    Args:
        namespace: Identifier prefix; classes outside it are ignored.
    """

    __slots__ = ("namespace",)

    def __init__(self, namespace: str = "") -> None:
        self.namespace = namespace

    def discover(self, source: Mapping[str, str]) -> RouteTable:
        """Scan the universe in its iteration order.

        Identifiers that cannot be loaded (stale entries, renamed modules,
        names that are not classes) are skipped.
        """
        routes: list[RouteDescriptor] = []
        for identifier in source:
            if not identifier.startswith(self.namespace):
                continue
            try:
                cls = load_class(identifier)
            except (ImportError, AttributeError, TypeError, ValueError) as exc:
                logger.debug("Skipping unloadable class %s: %s", identifier, exc)
                continue
            routes.extend(scan_class(cls, identifier))
        return tuple(routes)


def scan_class(cls: type, controller: str) -> list[RouteDescriptor]:
    """Collect descriptors from one class, or none if it is not a controller.

    Only the class's own attributes are inspected, in definition order.
    Nested classes are members, not operations.
    """
    class_markers = markers_of(cls)
    if not any(isinstance(m, ControllerMarker) for m in class_markers):
        return []

    logger.info("Found API controller: %s", controller)
    base = next((m.path for m in class_markers if isinstance(m, BasePath)), "")

    routes: list[RouteDescriptor] = []
    for name, member in vars(cls).items():
        if name.startswith("_"):
            continue
        func = getattr(member, "__func__", member)
        if isinstance(func, type) or not callable(func):
            continue
        for marker in markers_of(member):
            if not isinstance(marker, RouteMarker):
                continue
            route = RouteDescriptor(
                path=normalize_path(base, marker.path),
                method=marker.method,
                controller=controller,
                operation=name,
            )
            logger.debug("  %s /%s -> %s()", route.method, route.path, name)
            routes.append(route)
    return routes

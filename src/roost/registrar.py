"""Route registration — hand resolved routes to the application's router."""

from collections.abc import Callable
from typing import Any

from roost.routing.route import ResolvedRouteTable, RouteDescriptor

# Receives the descriptor and the resolved controller instance
type RouteRegisterer = Callable[[RouteDescriptor, Any], object]


def register_routes(resolved: ResolvedRouteTable, register: RouteRegisterer) -> None:
    """Call ``register`` once per route, in table order.

    Exceptions raised by ``register`` propagate unchanged.
    """
    for route in resolved:
        register(route.descriptor, route.controller)

"""Routing — route descriptors and the shared path normalizer.

Descriptors are produced by discovery, frozen into a tuple-based route
table, and bound to live controllers at resolve time.
"""

from roost.routing.route import (
    HttpMethod,
    ResolvedRoute,
    ResolvedRouteTable,
    RouteDescriptor,
    RouteTable,
    normalize_path,
)

__all__ = [
    "HttpMethod",
    "ResolvedRoute",
    "ResolvedRouteTable",
    "RouteDescriptor",
    "RouteTable",
    "normalize_path",
]

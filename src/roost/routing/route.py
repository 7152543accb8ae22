"""RouteDescriptor, ResolvedRoute and the shared path normalizer."""

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

_SEPARATOR_RUN_RE = re.compile(r"/{2,}")


class HttpMethod(StrEnum):
    """HTTP verbs a route marker can declare."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


def normalize_path(base: str, path: str = "") -> str:
    """Join a controller base path and a method path into a route path.

    Every discovery strategy goes through this function, so equivalent
    markers always produce byte-identical paths::

        normalize_path("/users/", "//create")  -> "users/create"
        normalize_path("admin", "")            -> "admin"
        normalize_path("", "/")                -> ""
    """
    path = path.lstrip("/")
    if base and path:
        joined = f"{base}/{path}"
    else:
        joined = base or path
    return _SEPARATOR_RUN_RE.sub("/", joined).strip("/")


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """One discovered endpoint.

    Produced by discovery, written to the cache, and read back by the
    resolver.  Construction validates the invariants so a descriptor that
    exists is always well-formed.

    Attributes:
        path: Normalized path (no leading, trailing or doubled ``/``).
        method: HTTP verb.
        controller: Fully qualified dotted class identifier.
        operation: Name of the public method implementing the endpoint.
    """

    path: str
    method: HttpMethod
    controller: str
    operation: str

    def __post_init__(self) -> None:
        # Coerce plain strings ("GET") so cached values compare equal.
        object.__setattr__(self, "method", HttpMethod(self.method))
        if normalize_path(self.path) != self.path:
            msg = f"Route path is not normalized: {self.path!r}"
            raise ValueError(msg)
        if not self.controller:
            msg = "Route controller must not be empty"
            raise ValueError(msg)
        if not self.operation:
            msg = "Route operation must not be empty"
            raise ValueError(msg)


type RouteTable = tuple[RouteDescriptor, ...]


@dataclass(frozen=True, slots=True)
class ResolvedRoute:
    """A cached route bound to a live controller instance."""

    descriptor: RouteDescriptor
    controller: Any

    @property
    def endpoint(self) -> Any:
        """The bound operation on the controller."""
        return getattr(self.controller, self.descriptor.operation)


type ResolvedRouteTable = tuple[ResolvedRoute, ...]

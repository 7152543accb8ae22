"""Route resolution — bind cached descriptors to live controllers.

Every call starts from the cache file; nothing is memoized between calls.
A descriptor whose controller or operation has disappeared fails the
whole resolve rather than being dropped.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from roost.cache import read_routes
from roost.errors import ControllerNotFound, OperationNotFound
from roost.routing.route import ResolvedRoute, ResolvedRouteTable

logger = logging.getLogger("roost.resolver")

# Maps a controller identifier to an instance, or None when unknown
type ServiceLocator = Callable[[str], Any]


def resolve_routes(
    cache_path: str | Path,
    locator: ServiceLocator,
    *,
    generate: Callable[[], object] | None = None,
) -> ResolvedRouteTable:
    """Read the route cache and bind each route to its controller.

    Args:
        cache_path: Location of the route cache artifact.
        locator: Called with each controller identifier; returns the
            controller instance or ``None``.
        generate: Compiles and writes the cache.  Called once, before
            reading, when no artifact exists at ``cache_path``.

    Raises:
        CacheNotFound: If the artifact is missing and was not generated.
        CacheCorrupt: If the artifact cannot be decoded.
        ControllerNotFound: If the locator returns ``None``.
        OperationNotFound: If a controller lacks the cached operation.
    """
    path = Path(cache_path)
    if generate is not None and not path.exists():
        logger.info("Route cache %s missing, generating", path)
        generate()

    resolved: list[ResolvedRoute] = []
    for descriptor in read_routes(path):
        controller = locator(descriptor.controller)
        if controller is None:
            raise ControllerNotFound(descriptor.controller)
        if not callable(getattr(controller, descriptor.operation, None)):
            raise OperationNotFound(descriptor.controller, descriptor.operation)
        resolved.append(ResolvedRoute(descriptor=descriptor, controller=controller))

    logger.info("Resolved %d route(s) from %s", len(resolved), path)
    return tuple(resolved)

"""Route compilation — run a discovery strategy into a route table."""

import logging
from typing import Any

from roost.discovery import DiscoveryStrategy
from roost.routing.route import RouteTable

logger = logging.getLogger("roost.compiler")


def compile_routes(strategy: DiscoveryStrategy, source: Any) -> RouteTable:
    """Compile the routes ``strategy`` discovers in ``source``.

    The table is returned as the strategy produced it: paths are already
    normalized and the order is discovery order.

    Raises:
        DirectoryNotFound: If a source scanner's root does not exist.
    """
    logger.info("Scanning for API controllers with %s", type(strategy).__name__)
    table = tuple(strategy.discover(source))
    logger.info("Compiled %d route(s)", len(table))
    return table

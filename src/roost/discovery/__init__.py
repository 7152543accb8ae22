"""Discovery — find route markers on controllers.

Two strategies share one contract:

- ``SourceScanner`` pattern-matches ``.py`` files without importing them.
- ``ReflectiveScanner`` introspects already importable classes.

Both normalize paths through ``roost.routing.normalize_path`` so they
produce equal tables for the same controllers.
"""

from typing import Any, Protocol

from roost.routing.route import RouteTable


class DiscoveryStrategy(Protocol):
    """Protocol for route discovery strategies.

    ``source`` is whatever the strategy scans: a directory for the source
    scanner, an identifier-to-file mapping for the reflective scanner.
    """

    def discover(self, source: Any) -> RouteTable: ...


def __getattr__(name: str) -> object:
    if name == "SourceScanner":
        from roost.discovery.source import SourceScanner

        return SourceScanner

    if name == "ReflectiveScanner":
        from roost.discovery.reflect import ReflectiveScanner

        return ReflectiveScanner

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = ["DiscoveryStrategy", "ReflectiveScanner", "SourceScanner"]

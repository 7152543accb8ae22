"""Roost exception hierarchy.

Shared across the scanners, cache store, resolver and router so every
phase raises and catches the same types.  Nothing here is retried: a
route that cannot be compiled, cached or resolved stops startup.
"""

from pathlib import Path


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when the router is missing required configuration.

    Typically raised by ``RouterBuilder.build()`` before any discovery runs.
    """


class DirectoryNotFound(RoostError):  # noqa: N818
    """The discovery root does not exist or is not a directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory does not exist: {self.path}")


class SourceUnreadable(RoostError):  # noqa: N818
    """A source file under the discovery root could not be read or decoded."""

    def __init__(self, path: str | Path, detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"Cannot read source file: {self.path} ({detail})")


class CacheIOError(RoostError):
    """The cache directory or file could not be created or written."""

    def __init__(self, path: str | Path, detail: str = "") -> None:
        self.path = Path(path)
        msg = f"Failed to write route cache: {self.path}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class CacheNotFound(RoostError):  # noqa: N818
    """No cache artifact exists at the requested path."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Route cache not found: {self.path}")


class CacheCorrupt(RoostError):  # noqa: N818
    """The cache artifact exists but cannot be decoded into routes."""

    def __init__(self, path: str | Path, detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"Route cache is corrupt: {self.path}: {detail}")


class ControllerNotFound(RoostError):  # noqa: N818
    """The service locator returned nothing for a cached controller."""

    def __init__(self, controller: str) -> None:
        self.controller = controller
        super().__init__(f"Controller not found: {controller}")


class OperationNotFound(RoostError):  # noqa: N818
    """A resolved controller has no callable member for a cached operation."""

    def __init__(self, controller: str, operation: str) -> None:
        self.controller = controller
        self.operation = operation
        super().__init__(f"Operation not found: {controller}.{operation}")

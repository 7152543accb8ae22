"""Route cache — JSON artifact shared by the build step and the app.

The artifact is plain data, diffable and never executed::

    {
      "format": "roost.routes",
      "version": 1,
      "generated_at": "2026-10-18T12:00:00+00:00",
      "routes": [
        {"path": "admin/users", "method": "GET",
         "controller": "shop.controllers.Admin", "operation": "list_users"}
      ]
    }

Writes go to a sibling temporary file that is moved into place, so a
reader never sees a partial artifact.  Concurrent writers of the same
path are not coordinated.
"""

import json
import logging
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from roost.errors import CacheCorrupt, CacheIOError, CacheNotFound
from roost.routing.route import RouteDescriptor, RouteTable

logger = logging.getLogger("roost.cache")

CACHE_FORMAT = "roost.routes"
CACHE_VERSION = 1

_FIELDS = ("path", "method", "controller", "operation")


def write_routes(table: RouteTable, destination: str | Path) -> Path:
    """Serialize ``table`` to ``destination``, creating parent directories.

    Returns the path written.

    Raises:
        CacheIOError: If the directory or file cannot be written.
    """
    path = Path(destination)
    document = {
        "format": CACHE_FORMAT,
        "version": CACHE_VERSION,
        "generated_at": datetime.now(UTC).isoformat(timespec="seconds"),
        "routes": [_encode(route) for route in table],
    }
    content = json.dumps(document, indent=2) + "\n"

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CacheIOError(path, f"cannot create directory {path.parent}: {exc}") from exc

    tmp = path.with_name(f".{path.name}.tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise CacheIOError(path, str(exc)) from exc

    logger.info("Wrote %d route(s) to %s", len(document["routes"]), path)
    return path


def read_routes(source: str | Path) -> RouteTable:
    """Load a route table from a cache artifact.

    Raises:
        CacheNotFound: If ``source`` does not exist.
        CacheCorrupt: If it is not a valid route cache.
    """
    path = Path(source)
    if not path.is_file():
        raise CacheNotFound(path)

    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CacheCorrupt(path, str(exc)) from exc

    if not isinstance(document, dict) or document.get("format") != CACHE_FORMAT:
        raise CacheCorrupt(path, f"not a {CACHE_FORMAT} document")
    if document.get("version") != CACHE_VERSION:
        raise CacheCorrupt(path, f"unsupported version {document.get('version')!r}")

    entries = document.get("routes")
    if not isinstance(entries, list):
        raise CacheCorrupt(path, "'routes' must be a list")

    routes: list[RouteDescriptor] = []
    for index, entry in enumerate(entries):
        try:
            routes.append(_decode(entry))
        except ValueError as exc:
            raise CacheCorrupt(path, f"route #{index}: {exc}") from exc
    return tuple(routes)


def _encode(route: RouteDescriptor) -> dict[str, str]:
    return {
        "path": route.path,
        "method": str(route.method),
        "controller": route.controller,
        "operation": route.operation,
    }


def _decode(entry: Any) -> RouteDescriptor:
    if not isinstance(entry, dict):
        msg = f"expected an object, got {type(entry).__name__}"
        raise ValueError(msg)
    for name in _FIELDS:
        if not isinstance(entry.get(name), str):
            msg = f"field {name!r} must be a string"
            raise ValueError(msg)
    return RouteDescriptor(**{name: entry[name] for name in _FIELDS})

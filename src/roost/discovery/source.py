"""Source discovery — find controllers by reading ``.py`` files as text.

Nothing is imported or executed.  Each file is split into top-level
class blocks (column-0 decorators, the ``class`` line, and every indented
line after it).  A block is a controller when its header carries
``@api_controller``; ``@base_path("...")`` in the header sets the prefix.

Inside the body, verb decorators (``@get(...)``, ``@post("x")``...) are
held as pending until the next public ``def`` at the same indent, which
consumes them all.  Pending markers with no following public ``def`` are
dropped silently.
"""

import logging
import re
import tokenize
from dataclasses import dataclass, field
from pathlib import Path

from roost.errors import DirectoryNotFound, SourceUnreadable
from roost.routing.route import HttpMethod, RouteDescriptor, RouteTable, normalize_path

logger = logging.getLogger("roost.discovery")

_CLASS_RE = re.compile(r"^class\s+([A-Za-z_]\w*)")

# Decorators may be referenced through a module (``@roost.api_controller``).
_CONTROLLER_RE = re.compile(r"^@(?:\w+\.)*api_controller\b")
_BASE_PATH_RE = re.compile(r"""^@(?:\w+\.)*base_path\(\s*(?:path\s*=\s*)?(['"])(.*?)\1\s*\)""")
_ROUTE_RE = re.compile(
    r"""^@(?:\w+\.)*(get|post|put|patch|delete)\(\s*(?:(?:path\s*=\s*)?(['"])(.*?)\2)?\s*\)"""
)

# Public operations only: a leading underscore never matches.
_OPERATION_RE = re.compile(r"^(?:async\s+)?def\s+([A-Za-z]\w*)\s*\(")


@dataclass(slots=True)
class _ClassBlock:
    name: str
    header: tuple[str, ...]
    body: list[tuple[int, str]] = field(default_factory=list)
    # Indent of the first body line; members of the class sit at exactly this depth
    indent: int | None = None
    open_brackets: int = 0


class SourceScanner:
    """Discover routes by pattern-matching source files under a directory.

    Usage::

        table = SourceScanner().discover("src/shop")
    """

    __slots__ = ()

    def discover(self, source: str | Path) -> RouteTable:
        """Scan every ``.py`` file below ``source``.

        Raises:
            DirectoryNotFound: If ``source`` is not a directory.
            SourceUnreadable: If a file cannot be read or decoded.
        """
        root = Path(source).resolve()
        if not root.is_dir():
            raise DirectoryNotFound(root)

        routes: list[RouteDescriptor] = []
        for file in iter_source_files(root):
            routes.extend(scan_source(read_source(file), module_name_for(file)))
        return tuple(routes)


def read_source(file: Path) -> str:
    """Read ``file`` honouring its PEP 263 coding cookie (UTF-8 otherwise)."""
    try:
        with tokenize.open(file) as fh:
            return fh.read()
    except (OSError, SyntaxError, UnicodeDecodeError) as exc:
        raise SourceUnreadable(file, str(exc)) from exc


def iter_source_files(root: Path) -> list[Path]:
    """Return the ``.py`` files under ``root`` in a stable order.

    Hidden directories and ``__pycache__`` are skipped.  A package's
    ``__init__.py`` comes before its siblings, as in package import order.
    """
    files: list[Path] = []
    for file in root.rglob("*.py"):
        if not file.is_file():
            continue
        parents = file.relative_to(root).parts[:-1]
        if any(part.startswith(".") or part == "__pycache__" for part in parents):
            continue
        files.append(file)
    return sorted(files, key=lambda f: _sort_key(f.relative_to(root)))


def _sort_key(relative: Path) -> tuple[str, ...]:
    name = "" if relative.name == "__init__.py" else relative.name
    return (*relative.parts[:-1], name)


def module_name_for(file: Path) -> str:
    """Derive the dotted module name Python would import ``file`` as.

    Walks up through every directory holding an ``__init__.py``::

        shop/__init__.py
        shop/controllers/__init__.py
        shop/controllers/users.py   -> "shop.controllers.users"
    """
    parts = [] if file.stem == "__init__" else [file.stem]
    directory = file.parent
    while (directory / "__init__.py").is_file():
        parts.insert(0, directory.name)
        directory = directory.parent
    return ".".join(parts)


def scan_source(text: str, module: str) -> list[RouteDescriptor]:
    """Extract route descriptors from the source text of one module.

    Only lines at the class's own body indent are candidates, so the
    methods of a nested class never attach to the outer controller.
    """
    routes: list[RouteDescriptor] = []
    for block in _split_classes(text):
        if not any(_CONTROLLER_RE.match(line) for line in block.header):
            continue

        controller = f"{module}.{block.name}" if module else block.name
        logger.info("Found API controller: %s", controller)

        base = _base_path(block.header)
        pending: list[tuple[HttpMethod, str]] = []
        for indent, line in block.body:
            if indent != block.indent:
                continue

            route_match = _ROUTE_RE.match(line)
            if route_match:
                method = HttpMethod(route_match.group(1).upper())
                pending.append((method, route_match.group(3) or ""))
                continue

            # Markers on a nested class are not routes
            if _CLASS_RE.match(line):
                pending = []
                continue

            op_match = _OPERATION_RE.match(line)
            if op_match and pending:
                operation = op_match.group(1)
                for method, path in pending:
                    route = RouteDescriptor(
                        path=normalize_path(base, path),
                        method=method,
                        controller=controller,
                        operation=operation,
                    )
                    logger.debug("  %s /%s -> %s()", route.method, route.path, operation)
                    routes.append(route)
                pending = []
    return routes


def _base_path(header: tuple[str, ...]) -> str:
    for line in header:
        match = _BASE_PATH_RE.match(line)
        if match:
            return match.group(2)
    return ""


def _split_classes(text: str) -> list[_ClassBlock]:
    """Split module text into top-level class blocks.

    Body lines are stored stripped, with their indent.  Comments, blank
    lines and the contents of triple-quoted strings never end a block and
    are never stored.
    """
    blocks: list[_ClassBlock] = []
    decorators: list[str] = []
    current: _ClassBlock | None = None
    quote: str | None = None

    for raw in text.splitlines():
        if quote is not None:
            quote = _track_quotes(raw, quote)
            continue

        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        quote = _track_quotes(raw, None)

        if raw[0].isspace():
            if current is None:
                continue
            if current.open_brackets > 0:
                current.open_brackets += _bracket_delta(stripped)
                continue
            indent = len(raw) - len(raw.lstrip())
            if current.indent is None:
                current.indent = indent
            current.body.append((indent, stripped))
            continue

        # Closing bracket of a wrapped ``class Name(\n    Base,\n):`` header
        if stripped[0] in ")]}":
            if current is not None:
                current.open_brackets = max(0, current.open_brackets + _bracket_delta(stripped))
            continue

        if stripped.startswith("@"):
            decorators.append(stripped)
            current = None
            continue

        class_match = _CLASS_RE.match(stripped)
        if class_match:
            current = _ClassBlock(
                name=class_match.group(1),
                header=tuple(decorators),
                open_brackets=max(0, _bracket_delta(stripped)),
            )
            blocks.append(current)
        else:
            current = None
        decorators = []

    return blocks


def _bracket_delta(line: str) -> int:
    return sum(line.count(c) for c in "([{") - sum(line.count(c) for c in ")]}")


def _track_quotes(line: str, quote: str | None) -> str | None:
    """Return the triple quote still open at the end of ``line``, if any."""
    pos = 0
    while True:
        if quote is None:
            hits = [(line.find(q, pos), q) for q in ('"""', "'''")]
            hits = [hit for hit in hits if hit[0] != -1]
            if not hits:
                return None
            pos, quote = min(hits)
        else:
            pos = line.find(quote, pos)
            if pos == -1:
                return quote
            quote = None
        pos += 3

"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CACHE_FILE = Path("caches") / "routes.json"

STRATEGIES = frozenset({"reflect", "source"})


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    Only ``project_dir`` is required::

        config = RouterConfig(project_dir="src/shop", strategy="source")
    """

    # Discovery root, and the base of the default cache location
    project_dir: str | Path

    # Explicit cache location (default: <project_dir>/caches/routes.json)
    cache_file: str | Path | None = None

    # Reflection only: identifier prefix of the classes to scan
    namespace: str = ""

    # "reflect" (import and introspect) or "source" (read files as text)
    strategy: str = "reflect"

    @property
    def cache_path(self) -> Path:
        """Where the route cache is read from and written to."""
        if self.cache_file is not None:
            return Path(self.cache_file)
        return Path(self.project_dir) / DEFAULT_CACHE_FILE

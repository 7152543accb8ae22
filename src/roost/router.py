"""Router facade — generate, resolve and register routes for one project.

``RouterBuilder`` collects configuration and collaborators, validates
them, and produces a ``Router``::

    router = (
        RouterBuilder()
        .set_project_dir("src/shop")
        .set_service_locator(container.get)
        .set_route_registerer(register)
        .set_class_universe(lambda: package_classes("shop"))
        .build()
    )
    router.build()  # resolve (generating the cache if needed) + register

Each call starts from empty state; the router holds configuration only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path

from roost.cache import write_routes
from roost.compiler import compile_routes
from roost.config import STRATEGIES, RouterConfig
from roost.discovery.reflect import ReflectiveScanner
from roost.discovery.source import SourceScanner
from roost.errors import ConfigurationError, DirectoryNotFound
from roost.registrar import RouteRegisterer, register_routes
from roost.resolver import ServiceLocator, resolve_routes
from roost.routing.route import ResolvedRouteTable, RouteTable

logger = logging.getLogger("roost.router")

# Supplies identifier -> origin file for every known class
type ClassUniverse = Callable[[], Mapping[str, str]]


class Router:
    """Compile-time and run-time entry point for one project's routes."""

    __slots__ = ("_locator", "_register", "_universe", "config")

    def __init__(
        self,
        config: RouterConfig,
        *,
        locator: ServiceLocator,
        register: RouteRegisterer,
        universe: ClassUniverse | None = None,
    ) -> None:
        if config.strategy not in STRATEGIES:
            msg = f"Unknown discovery strategy {config.strategy!r}; expected one of {sorted(STRATEGIES)}"
            raise ConfigurationError(msg)
        if config.strategy == "reflect" and universe is None:
            msg = "The reflect strategy needs a class universe provider"
            raise ConfigurationError(msg)
        self.config = config
        self._locator = locator
        self._register = register
        self._universe = universe

    @property
    def cache_path(self) -> Path:
        return self.config.cache_path

    def generate(self) -> RouteTable:
        """Discover routes and write them to the cache.

        Raises:
            DirectoryNotFound: If the project directory does not exist.
            SourceUnreadable: If a source file cannot be decoded.
            CacheIOError: If the cache cannot be written.
        """
        project_dir = Path(self.config.project_dir)
        if not project_dir.is_dir():
            raise DirectoryNotFound(project_dir)

        if self.config.strategy == "source":
            table = compile_routes(SourceScanner(), project_dir)
        else:
            scanner = ReflectiveScanner(namespace=self.config.namespace)
            table = compile_routes(scanner, self._universe())

        write_routes(table, self.cache_path)
        logger.info("Route cache generated: %d route(s) in %s", len(table), self.cache_path)
        return table

    def resolve(self) -> ResolvedRouteTable:
        """Bind cached routes to controllers, generating the cache if absent."""
        return resolve_routes(self.cache_path, self._locator, generate=self.generate)

    def build(self, resolved: ResolvedRouteTable | None = None) -> None:
        """Register every resolved route with the application's router."""
        if resolved is None:
            resolved = self.resolve()
        register_routes(resolved, self._register)


class RouterBuilder:
    """Collects router configuration; ``build()`` fails fast on gaps."""

    def __init__(self) -> None:
        self._project_dir: str | Path | None = None
        self._cache_file: str | Path | None = None
        self._namespace = ""
        self._strategy = "reflect"
        self._locator: ServiceLocator | None = None
        self._register: RouteRegisterer | None = None
        self._universe: ClassUniverse | None = None

    def set_project_dir(self, project_dir: str | Path) -> RouterBuilder:
        self._project_dir = project_dir
        return self

    def set_cache_file(self, cache_file: str | Path) -> RouterBuilder:
        self._cache_file = cache_file
        return self

    def set_namespace(self, namespace: str) -> RouterBuilder:
        self._namespace = namespace
        return self

    def set_strategy(self, strategy: str) -> RouterBuilder:
        self._strategy = strategy
        return self

    def set_service_locator(self, locator: ServiceLocator) -> RouterBuilder:
        self._locator = locator
        return self

    def set_route_registerer(self, register: RouteRegisterer) -> RouterBuilder:
        self._register = register
        return self

    def set_class_universe(self, universe: ClassUniverse) -> RouterBuilder:
        self._universe = universe
        return self

    def build(self) -> Router:
        """Validate the collected configuration and create a ``Router``.

        Raises:
            ConfigurationError: If a required setting is missing or the
                strategy is unknown.
        """
        missing: list[str] = []
        if not self._project_dir:
            missing.append("project_dir")
        if self._locator is None:
            missing.append("service_locator")
        if self._register is None:
            missing.append("route_registerer")
        if self._strategy == "reflect" and self._universe is None:
            missing.append("class_universe")
        if missing:
            msg = f"Router is missing required configuration: {', '.join(missing)}"
            raise ConfigurationError(msg)

        config = RouterConfig(
            project_dir=self._project_dir,
            cache_file=self._cache_file,
            namespace=self._namespace,
            strategy=self._strategy,
        )
        return Router(
            config,
            locator=self._locator,
            register=self._register,
            universe=self._universe,
        )


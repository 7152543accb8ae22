"""Roost — compiled, cached route tables for class-based API controllers.

Routes are declared with markers, discovered at build time, written to a
JSON cache, and resolved into live handlers when the app starts.

Declaring controllers::

    from roost import api_controller, base_path, get, post

    @api_controller
    @base_path("admin")
    class AdminController:
        @get("users")
        def list_users(self): ...

        @post("users")
        def create_user(self): ...

Wiring at startup::

    from roost import RouterBuilder
    from roost.discovery.universe import package_classes

    router = (
        RouterBuilder()
        .set_project_dir("src/shop")
        .set_namespace("shop.")
        .set_service_locator(container.get)
        .set_route_registerer(lambda route, ctrl: app.add(route, ctrl))
        .set_class_universe(lambda: package_classes("shop"))
        .build()
    )
    router.build()
"""

from roost.markers import api_controller, base_path, delete, get, patch, post, put

__version__ = "0.1.0"
__all__ = [
    "CacheCorrupt",
    "CacheIOError",
    "CacheNotFound",
    "ConfigurationError",
    "ControllerNotFound",
    "DirectoryNotFound",
    "HttpMethod",
    "OperationNotFound",
    "ResolvedRoute",
    "RoostError",
    "RouteDescriptor",
    "Router",
    "RouterBuilder",
    "RouterConfig",
    "SourceUnreadable",
    "api_controller",
    "base_path",
    "compile_routes",
    "delete",
    "get",
    "normalize_path",
    "patch",
    "post",
    "put",
    "read_routes",
    "register_routes",
    "resolve_routes",
    "write_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` (and so every controller module) cheap; the
    scanners and cache store load only when startup needs them.
    """
    if name in ("Router", "RouterBuilder"):
        from roost import router as _router

        return getattr(_router, name)

    if name == "RouterConfig":
        from roost.config import RouterConfig

        return RouterConfig

    if name in ("HttpMethod", "ResolvedRoute", "RouteDescriptor", "normalize_path"):
        from roost.routing import route as _route

        return getattr(_route, name)

    if name == "compile_routes":
        from roost.compiler import compile_routes

        return compile_routes

    if name in ("read_routes", "write_routes"):
        from roost import cache as _cache

        return getattr(_cache, name)

    if name == "resolve_routes":
        from roost.resolver import resolve_routes

        return resolve_routes

    if name == "register_routes":
        from roost.registrar import register_routes

        return register_routes

    if name in (
        "CacheCorrupt",
        "CacheIOError",
        "CacheNotFound",
        "ConfigurationError",
        "ControllerNotFound",
        "DirectoryNotFound",
        "OperationNotFound",
        "RoostError",
        "SourceUnreadable",
    ):
        from roost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

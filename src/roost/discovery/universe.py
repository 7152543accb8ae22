"""Class universe helpers — identifier-to-file mappings for reflection.

The reflective scanner only sees the classes it is handed.  These helpers
build that mapping from imported modules and packages, and resolve an
identifier back to its class.
"""

import importlib
import pkgutil
from types import ModuleType


def load_class(identifier: str) -> type:
    """Resolve a dotted identifier (``"shop.controllers.Users"``) to a class.

    Raises:
        ImportError: If no prefix of the identifier is an importable module.
        AttributeError: If the module has no such attribute.
        ValueError: If the identifier is malformed.
        TypeError: If the identifier names something other than a class.
    """
    obj = pkgutil.resolve_name(identifier)
    if not isinstance(obj, type):
        msg = f"{identifier!r} resolved to {type(obj).__name__}, not a class"
        raise TypeError(msg)
    return obj


def module_classes(module: ModuleType) -> dict[str, str]:
    """Map every class defined in ``module`` to the module's file.

    Classes imported from elsewhere are left out, so a package that
    re-exports its controllers lists each class once.
    """
    origin = getattr(module, "__file__", None) or ""
    universe: dict[str, str] = {}
    for obj in vars(module).values():
        if not isinstance(obj, type) or obj.__module__ != module.__name__:
            continue
        if "<" in obj.__qualname__:
            continue
        universe[f"{module.__name__}.{obj.__qualname__}"] = origin
    return universe


def package_classes(package: str) -> dict[str, str]:
    """Import ``package`` and all of its submodules and map their classes.

    Modules are visited package-first, then submodules in name order.
    """
    root = importlib.import_module(package)
    universe = module_classes(root)
    search_path = getattr(root, "__path__", None)
    if search_path is None:
        return universe

    for info in pkgutil.walk_packages(search_path, prefix=f"{root.__name__}."):
        universe.update(module_classes(importlib.import_module(info.name)))
    return universe

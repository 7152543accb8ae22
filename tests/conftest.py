"""Shared fixtures: a small on-disk controller package.

``shop_dir`` writes the ``shopapp`` package under ``tmp_path`` so the
source scanner can read it.  ``shop_importable`` also puts it on
``sys.path`` for the reflective scanner and purges it from
``sys.modules`` afterwards, so every test imports a fresh copy.
"""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from roost.routing.route import HttpMethod, RouteDescriptor

ADMIN_SOURCE = '''\
"""Admin endpoints."""

from roost import api_controller, base_path, get, post, put


@api_controller
@base_path("admin")
class AdminController:
    """Manage users."""

    @get("users")
    def list_users(self):
        return []

    # Both verbs land on the same operation
    @post("users")
    @put("/users/{id}")
    def save_user(self):
        return None

    def _helper(self):
        return None


class NotAController:
    @get("hidden")
    def hidden(self):
        return None
'''

HEALTH_SOURCE = '''\
import roost


@roost.api_controller
class HealthController:
    @roost.get()
    def ping(self):
        return "pong"

    @roost.delete(path="cache")
    async def purge(self):
        return None
'''

ADMIN = "shopapp.controllers.admin.AdminController"
HEALTH = "shopapp.controllers.health.HealthController"

SHOP_ROUTES = (
    RouteDescriptor("admin/users", HttpMethod.GET, ADMIN, "list_users"),
    RouteDescriptor("admin/users", HttpMethod.POST, ADMIN, "save_user"),
    RouteDescriptor("admin/users/{id}", HttpMethod.PUT, ADMIN, "save_user"),
    RouteDescriptor("", HttpMethod.GET, HEALTH, "ping"),
    RouteDescriptor("cache", HttpMethod.DELETE, HEALTH, "purge"),
)


def _purge_shopapp() -> None:
    for name in [n for n in sys.modules if n == "shopapp" or n.startswith("shopapp.")]:
        del sys.modules[name]


@pytest.fixture
def shop_routes() -> tuple[RouteDescriptor, ...]:
    """The routes both scanners must find in ``shopapp``, in order."""
    return SHOP_ROUTES


@pytest.fixture
def shop_dir(tmp_path: Path) -> Path:
    """Project directory containing the ``shopapp`` controller package."""
    project = tmp_path / "project"
    controllers = project / "shopapp" / "controllers"
    controllers.mkdir(parents=True)
    (project / "shopapp" / "__init__.py").write_text("")
    (controllers / "__init__.py").write_text("")
    (controllers / "admin.py").write_text(ADMIN_SOURCE)
    (controllers / "health.py").write_text(HEALTH_SOURCE)
    return project


@pytest.fixture
def shop_importable(shop_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """``shop_dir`` with ``shopapp`` importable."""
    _purge_shopapp()
    monkeypatch.syspath_prepend(str(shop_dir))
    yield shop_dir
    _purge_shopapp()

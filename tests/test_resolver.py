"""Tests for roost.resolver — binding cached routes to controllers."""

from pathlib import Path

import pytest

from roost.cache import write_routes
from roost.errors import CacheCorrupt, CacheNotFound, ControllerNotFound, OperationNotFound
from roost.resolver import resolve_routes
from roost.routing.route import HttpMethod, RouteDescriptor


class UsersController:
    label = "not callable"

    def index(self) -> str:
        return "users"

    def create(self) -> str:
        return "created"


TABLE = (
    RouteDescriptor("users", HttpMethod.GET, "shop.Users", "index"),
    RouteDescriptor("users", HttpMethod.POST, "shop.Users", "create"),
)


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    return write_routes(TABLE, tmp_path / "caches" / "routes.json")


class TestResolveRoutes:
    def test_binds_instances_in_order(self, cache_file: Path) -> None:
        controller = UsersController()
        resolved = resolve_routes(cache_file, {"shop.Users": controller}.get)

        assert [r.descriptor for r in resolved] == list(TABLE)
        assert all(r.controller is controller for r in resolved)
        assert [r.endpoint() for r in resolved] == ["users", "created"]

    def test_locator_called_per_route(self, cache_file: Path) -> None:
        calls: list[str] = []

        def locator(identifier: str) -> UsersController:
            calls.append(identifier)
            return UsersController()

        resolve_routes(cache_file, locator)
        assert calls == ["shop.Users", "shop.Users"]

    def test_controller_not_found(self, cache_file: Path) -> None:
        with pytest.raises(ControllerNotFound) as exc_info:
            resolve_routes(cache_file, lambda _identifier: None)
        assert exc_info.value.controller == "shop.Users"

    def test_falsy_controller_is_still_found(self, cache_file: Path) -> None:
        class EmptyUsers(UsersController):
            def __len__(self) -> int:
                return 0

        controller = EmptyUsers()
        assert not controller
        resolved = resolve_routes(cache_file, lambda _identifier: controller)
        assert all(r.controller is controller for r in resolved)

    def test_operation_not_found(self, tmp_path: Path) -> None:
        path = write_routes(
            (RouteDescriptor("users", HttpMethod.GET, "shop.Users", "renamed"),),
            tmp_path / "routes.json",
        )
        with pytest.raises(OperationNotFound) as exc_info:
            resolve_routes(path, lambda _identifier: UsersController())
        assert exc_info.value.operation == "renamed"
        assert exc_info.value.controller == "shop.Users"

    def test_operation_must_be_callable(self, tmp_path: Path) -> None:
        path = write_routes(
            (RouteDescriptor("users", HttpMethod.GET, "shop.Users", "label"),),
            tmp_path / "routes.json",
        )
        with pytest.raises(OperationNotFound):
            resolve_routes(path, lambda _identifier: UsersController())

    def test_empty_table(self, tmp_path: Path) -> None:
        path = write_routes((), tmp_path / "routes.json")
        assert resolve_routes(path, lambda _identifier: None) == ()

    def test_missing_cache_without_generate(self, tmp_path: Path) -> None:
        with pytest.raises(CacheNotFound):
            resolve_routes(tmp_path / "routes.json", lambda _identifier: UsersController())

    def test_corrupt_cache(self, tmp_path: Path) -> None:
        path = tmp_path / "routes.json"
        path.write_text("{")
        with pytest.raises(CacheCorrupt):
            resolve_routes(path, lambda _identifier: UsersController())


class TestLazyGenerate:
    def test_generates_once_when_missing(self, tmp_path: Path) -> None:
        path = tmp_path / "caches" / "routes.json"
        calls: list[int] = []

        def generate() -> None:
            calls.append(1)
            write_routes(TABLE, path)

        resolved = resolve_routes(path, lambda _identifier: UsersController(), generate=generate)
        assert len(calls) == 1
        assert len(resolved) == 2

    def test_not_called_when_cache_exists(self, cache_file: Path) -> None:
        def generate() -> None:
            pytest.fail("generate should not run when the cache exists")

        assert len(resolve_routes(cache_file, lambda _i: UsersController(), generate=generate)) == 2

    def test_generate_that_writes_nothing(self, tmp_path: Path) -> None:
        with pytest.raises(CacheNotFound):
            resolve_routes(tmp_path / "routes.json", lambda _i: None, generate=lambda: None)

    def test_generate_errors_propagate(self, tmp_path: Path) -> None:
        def generate() -> None:
            raise RuntimeError("discovery failed")

        with pytest.raises(RuntimeError, match="discovery failed"):
            resolve_routes(tmp_path / "routes.json", lambda _i: None, generate=generate)

    def test_no_memoization(self, cache_file: Path) -> None:
        first = resolve_routes(cache_file, lambda _i: UsersController())
        write_routes(TABLE[:1], cache_file)
        second = resolve_routes(cache_file, lambda _i: UsersController())
        assert len(first) == 2
        assert len(second) == 1

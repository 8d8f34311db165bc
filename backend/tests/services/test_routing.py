"""Routing: only POST / and GET / are served; everything else is an empty 404."""

import pytest

from message_board.core.errors import StorageConnectError
from message_board.infrastructure.database import (
    DatabaseSessionManager, get_db,
)
import message_board.infrastructure.database as db_module
from message_board.main import app


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/messages"),
        ("POST", "/messages"),
        ("PUT", "/"),
        ("DELETE", "/"),
        ("PATCH", "/"),
        ("HEAD", "/"),
        ("GET", "/static/app.js"),
    ],
)
async def test_unmatched_routes_return_empty_404(client, method, path):
    res = await client.request(method, path)

    assert res.status_code == 404
    assert res.content == b""


async def test_unmatched_route_does_not_insert(client, message_count):
    await client.put("/", data={"message": "hello"})

    assert await message_count() == 0


@pytest.fixture
async def unreachable_db(tmp_path):
    """Real session manager pointed at a database file that cannot be opened."""
    original_manager = db_module.db_manager
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'board.db'}",
    )
    db_module.db_manager = manager
    app.dependency_overrides.pop(get_db, None)
    yield manager
    await manager.dispose()
    db_module.db_manager = original_manager


async def test_connect_failure_short_circuits_get(client, unreachable_db):
    res = await client.get("/")

    assert res.status_code == 500
    assert res.content == b""


async def test_connect_failure_short_circuits_post(client, unreachable_db):
    res = await client.post("/", data={"message": "hello"})

    assert res.status_code == 500
    assert res.content == b""


async def test_session_manager_raises_storage_connect_error(unreachable_db):
    with pytest.raises(StorageConnectError):
        async with unreachable_db.session():
            pass


@pytest.fixture
def uninitialized_db():
    original_manager = db_module.db_manager
    db_module.db_manager = None
    app.dependency_overrides.pop(get_db, None)
    yield
    db_module.db_manager = original_manager


@pytest.mark.parametrize("method", ["GET", "POST"])
async def test_uninitialized_pool_returns_empty_500(
    client, uninitialized_db, method,
):
    res = await client.request(method, "/")

    assert res.status_code == 500
    assert res.content == b""

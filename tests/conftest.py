"""Pytest configuration and fixtures for shared-session tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from shared_session.permission import (
    InMemorySessionDirectory,
    InMemorySessionPermissionRepository,
    MappingPermissionHierarchy,
    Permission,
    PermissionClosureResolver,
    SessionFanOutCoordinator,
    SessionPermissionAuthorizer,
    SharedSessionPermissionRuntime,
)


@pytest.fixture
def order_read():
    """Entity permission with no ancestors."""
    return Permission.entity("Order", "read")


@pytest.fixture
def order_update():
    return Permission.entity("Order", "update")


@pytest.fixture
def orders_browse():
    """Screen permission whose ancestor is Order:read."""
    return Permission.screen("orders-browse")


@pytest.fixture
def order_edit():
    """Screen permission whose ancestors are Order:update and, transitively, Order:read."""
    return Permission.screen("order-edit")


@pytest.fixture
def order_total_attribute():
    """Deep permission (entity attribute level)."""
    return Permission.entity_attribute("Order", "total", "view")


@pytest.fixture
def save_button_element():
    """Deep permission (screen element level)."""
    return Permission.screen_element("order-edit", "saveBtn")


@pytest.fixture
def hierarchy(order_read, order_update, orders_browse, order_edit):
    """Sample hierarchy: orders-browse -> Order:read, order-edit -> Order:update -> Order:read."""
    return MappingPermissionHierarchy({
        orders_browse: [order_read],
        order_edit: [order_update],
        order_update: [order_read],
    })


@pytest.fixture
def permission_store():
    return InMemorySessionPermissionRepository()


@pytest.fixture
def session_directory():
    return InMemorySessionDirectory({
        "user-1": ["sess-1", "sess-2"],
        "user-2": ["sess-3"],
    })


@pytest.fixture
def closure_resolver(hierarchy):
    return PermissionClosureResolver(hierarchy)


@pytest.fixture
def authorizer(closure_resolver, permission_store):
    return SessionPermissionAuthorizer(closure_resolver, permission_store)


@pytest.fixture
def fan_out(authorizer, session_directory):
    return SessionFanOutCoordinator(authorizer, session_directory)


@pytest.fixture
def runtime(authorizer, fan_out):
    return SharedSessionPermissionRuntime(authorizer, fan_out)


@pytest.fixture
def mock_permission_store():
    """Mock permission store recording every call."""
    store = MagicMock()
    store.has_permissions = AsyncMock(return_value=[])
    store.add_permissions = AsyncMock(return_value=None)
    store.remove_permissions = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_redis_pipeline():
    """Mock Redis pipeline: commands are queued synchronously, execute() is awaited."""
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[])
    return pipe


@pytest.fixture
def mock_redis_client(mock_redis_pipeline):
    """Mock async Redis client."""
    client = MagicMock()
    client.pipeline = MagicMock(return_value=mock_redis_pipeline)
    client.sadd = AsyncMock(return_value=1)
    client.srem = AsyncMock(return_value=1)
    client.smembers = AsyncMock(return_value=set())
    return client

"""
ipnodes test fixtures
"""

import pytest
from fastapi.testclient import TestClient

from ipnodes.config import ServiceConfig
from ipnodes.placement import (
    AddressValidator,
    AddressMapper,
    CollisionResolver,
    PlacementEngine,
)
from ipnodes.server.app import create_app
from ipnodes.storage import NodeStore


@pytest.fixture
def validator() -> AddressValidator:
    return AddressValidator()


@pytest.fixture
def mapper() -> AddressMapper:
    return AddressMapper()


@pytest.fixture
def resolver() -> CollisionResolver:
    return CollisionResolver()


@pytest.fixture
def engine() -> PlacementEngine:
    return PlacementEngine()


@pytest.fixture
def memory_store() -> NodeStore:
    """Node store without disk persistence."""
    return NodeStore(storage_path=None)


@pytest.fixture
def memory_config() -> ServiceConfig:
    return ServiceConfig(storage_path=None)


@pytest.fixture
def client(memory_config) -> TestClient:
    """HTTP client bound to a fresh in-memory app."""
    return TestClient(create_app(memory_config))

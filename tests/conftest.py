from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from caringiq_api.app.core.storage import MemStorage
from caringiq_api.app.main import create_app


@pytest.fixture
def storage() -> MemStorage:
    """Provide an empty submission store for each test."""
    return MemStorage()


@pytest.fixture
def client(storage: MemStorage) -> TestClient:
    """Provide a test client bound to an app serving the ``storage`` fixture."""
    return TestClient(create_app(storage))

"""
Basic test to verify the project setup is working correctly.
"""

import pytest
from fastapi.testclient import TestClient
from treasure_map.main import app


def test_app_creation():
    """Test that the FastAPI app can be created successfully."""
    assert app is not None
    assert app.title == "Treasure Map"


def test_root_endpoint():
    """Test the root endpoint returns expected response."""
    client = TestClient(app)
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data
    assert data["status"] == "running"


def test_health_endpoint_with_lifespan():
    """The lifespan builds the seeded treasure screen."""
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["treasures"] == {"total": 3, "visible": 3, "filter": "all"}
    assert data["metrics"]["search"]["count"] == 0


if __name__ == "__main__":
    pytest.main([__file__])

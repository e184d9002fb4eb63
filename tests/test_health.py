"""Tests for the health endpoint."""

from fastapi.testclient import TestClient

from cim.main import app
from cim.services.workspace import WorkspaceRegistry

from fakes import FakeRepositoryFactory


def test_health_counts_open_workspaces():
    app.state.workspaces = WorkspaceRegistry(FakeRepositoryFactory())
    app.state.workspaces.get("user-1")
    try:
        response = TestClient(app).get("/api/health/")
    finally:
        del app.state.workspaces

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "service": "cim-backend",
        "open_workspaces": 1,
    }

"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from cim.api.deps import get_workspace
from cim.auth import get_current_user_id
from cim.main import app
from cim.services.workspace import IdeaWorkspace

from fakes import FakeRepositoryFactory, RecordingWebhookSink

USER_ID = "user-1"


@pytest.fixture
def repos() -> FakeRepositoryFactory:
    """Fresh in-memory repositories."""
    return FakeRepositoryFactory()


@pytest.fixture
def webhooks() -> RecordingWebhookSink:
    return RecordingWebhookSink()


@pytest.fixture
def workspace(repos, webhooks) -> IdeaWorkspace:
    """Workspace for USER_ID backed by the fakes."""
    return IdeaWorkspace(USER_ID, repos, webhooks)


@pytest.fixture
def client(workspace):
    """TestClient authenticated as USER_ID and bound to the fake workspace."""
    app.dependency_overrides[get_current_user_id] = lambda: USER_ID
    app.dependency_overrides[get_workspace] = lambda: workspace
    yield TestClient(app)
    app.dependency_overrides.clear()

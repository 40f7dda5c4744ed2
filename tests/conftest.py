"""
Shared test configuration and fixtures.
"""

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

with patch.dict(os.environ, {"DRIVE_ACCESS_TOKEN": "test-token"}):
    from drive_browser.main import app, get_drive_client, get_results_view

from drive_browser.api.files import get_storage_dependency, get_view_dependency
from drive_browser.core.domain import UploadedFile
from drive_browser.infrastructure.drive_client import GoogleDriveClient
from drive_browser.presentation.view import HtmlResultsView


@pytest.fixture
def mock_storage():
    """Drive client double with successful defaults."""
    storage = MagicMock(spec=GoogleDriveClient)
    storage.search = AsyncMock(return_value=[])
    storage.upload = AsyncMock(return_value=UploadedFile(id="new-1", name="Untitled"))
    storage.rename = AsyncMock(return_value=None)
    storage.delete = AsyncMock(return_value=None)
    return storage


@pytest.fixture
def results_view():
    """Fresh page state with a frozen clock so notices never expire."""
    return HtmlResultsView(clock=lambda: 0.0)


@pytest.fixture
def client(mock_storage, results_view):
    """
    TestClient with the view and storage replaced by test doubles.

    Restores the application wiring afterwards.
    """
    app.dependency_overrides[get_storage_dependency] = lambda: mock_storage
    app.dependency_overrides[get_view_dependency] = lambda: results_view
    yield TestClient(app)
    app.dependency_overrides[get_storage_dependency] = get_drive_client
    app.dependency_overrides[get_view_dependency] = get_results_view

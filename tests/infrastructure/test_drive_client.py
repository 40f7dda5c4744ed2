"""
Unit tests for the Google Drive client.
"""

import json

import httpx
import pytest
from respx import MockRouter

from drive_browser.config import DriveConfig
from drive_browser.core.domain import FileRecord, UploadedFile
from drive_browser.core.exceptions import RequestError
from drive_browser.infrastructure.drive_client import (
    GoogleDriveClient,
    build_search_query,
)

HOST = "www.googleapis.com"
FILES_PATH = "/drive/v3/files"
UPLOAD_PATH = "/upload/drive/v3/files"


@pytest.fixture
def drive_client():
    """Client configured with a static test token and default endpoints."""
    return GoogleDriveClient(DriveConfig(access_token="test-token"))


def test_build_search_query():
    """Test the query matches names and excludes trashed files."""
    assert build_search_query("report") == (
        "name contains 'report' and trashed = false"
    )


def test_build_search_query_escapes_quotes():
    """Test single quotes and backslashes are escaped."""
    assert build_search_query("bob's \\ notes") == (
        "name contains 'bob\\'s \\\\ notes' and trashed = false"
    )


@pytest.mark.asyncio
async def test_search_success(respx_mock: MockRouter, drive_client):
    """
    Test search sends the filter, field set and bearer token and parses files.
    """
    route = respx_mock.get(host=HOST, path=FILES_PATH).mock(
        return_value=httpx.Response(
            200,
            json={
                "files": [
                    {"id": "1", "name": "report.pdf", "mimeType": "application/pdf"},
                    {"id": "2", "name": "report-draft.txt", "mimeType": "text/plain"},
                ]
            },
        )
    )

    result = await drive_client.search("report")

    assert result == [
        FileRecord(id="1", name="report.pdf", mime_type="application/pdf"),
        FileRecord(id="2", name="report-draft.txt", mime_type="text/plain"),
    ]
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer test-token"
    assert request.url.params["q"] == "name contains 'report' and trashed = false"
    assert request.url.params["fields"] == "files(id,name,mimeType)"


@pytest.mark.asyncio
async def test_search_empty(respx_mock: MockRouter, drive_client):
    """Test search returns an empty list when Drive omits the files key."""
    respx_mock.get(host=HOST, path=FILES_PATH).mock(
        return_value=httpx.Response(200, json={})
    )

    assert await drive_client.search("nothing") == []


@pytest.mark.asyncio
async def test_search_http_error(respx_mock: MockRouter, drive_client):
    """Test search raises RequestError with its fixed message on 401."""
    respx_mock.get(host=HOST, path=FILES_PATH).mock(
        return_value=httpx.Response(401, json={"error": "invalid_token"})
    )

    with pytest.raises(RequestError, match="Failed to fetch files."):
        await drive_client.search("report")


@pytest.mark.asyncio
async def test_search_invalid_response(respx_mock: MockRouter, drive_client):
    """Test search raises RequestError when a record is missing fields."""
    respx_mock.get(host=HOST, path=FILES_PATH).mock(
        return_value=httpx.Response(200, json={"files": [{"name": "no-id"}]})
    )

    with pytest.raises(RequestError, match="Failed to fetch files."):
        await drive_client.search("report")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=[{"id": "1", "name": "a.txt"}]),
        httpx.Response(200, json={"files": None}),
        httpx.Response(200, json={"files": 5}),
        httpx.Response(200, json={"files": {"id": "1", "name": "a.txt"}}),
    ],
    ids=["not-json", "top-level-list", "files-null", "files-number", "files-object"],
)
async def test_search_malformed_body(respx_mock: MockRouter, drive_client, response):
    """Test a successful status with an undecodable body raises RequestError."""
    respx_mock.get(host=HOST, path=FILES_PATH).mock(return_value=response)

    with pytest.raises(RequestError, match="Failed to fetch files."):
        await drive_client.search("report")


@pytest.mark.asyncio
async def test_search_network_error(respx_mock: MockRouter, drive_client):
    """Test network failures surface the same RequestError."""
    respx_mock.get(host=HOST, path=FILES_PATH).mock(
        side_effect=httpx.ConnectError("Connection failed")
    )

    with pytest.raises(RequestError, match="Failed to fetch files."):
        await drive_client.search("report")


@pytest.mark.asyncio
async def test_upload_success(respx_mock: MockRouter, drive_client):
    """Test upload posts raw bytes with their content type."""
    route = respx_mock.post(host=HOST, path=UPLOAD_PATH).mock(
        return_value=httpx.Response(
            200, json={"kind": "drive#file", "id": "new-1", "name": "Untitled"}
        )
    )

    result = await drive_client.upload(b"%PDF-1.4", "application/pdf")

    assert result == UploadedFile(id="new-1", name="Untitled")
    request = route.calls.last.request
    assert request.url.params["uploadType"] == "media"
    assert request.headers["Content-Type"] == "application/pdf"
    assert request.headers["Authorization"] == "Bearer test-token"
    assert request.content == b"%PDF-1.4"


@pytest.mark.asyncio
async def test_upload_blank_content_type(respx_mock: MockRouter, drive_client):
    """Test a blank content type falls back to application/octet-stream."""
    route = respx_mock.post(host=HOST, path=UPLOAD_PATH).mock(
        return_value=httpx.Response(200, json={"id": "new-2"})
    )

    await drive_client.upload(b"data", "")

    assert route.calls.last.request.headers["Content-Type"] == (
        "application/octet-stream"
    )


@pytest.mark.asyncio
async def test_upload_http_error(respx_mock: MockRouter, drive_client):
    """Test upload raises RequestError with its fixed message."""
    respx_mock.post(host=HOST, path=UPLOAD_PATH).mock(
        return_value=httpx.Response(403)
    )

    with pytest.raises(RequestError, match="Upload failed."):
        await drive_client.upload(b"data", "text/plain")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json=["new-1"]),
        httpx.Response(200, json={"name": "Untitled"}),
        httpx.Response(200, content=b"null"),
    ],
    ids=["not-json", "list", "missing-id", "null"],
)
async def test_upload_malformed_body(respx_mock: MockRouter, drive_client, response):
    """Test an upload response without a usable ID raises RequestError."""
    respx_mock.post(host=HOST, path=UPLOAD_PATH).mock(return_value=response)

    with pytest.raises(RequestError, match="Upload failed."):
        await drive_client.upload(b"data", "text/plain")


@pytest.mark.asyncio
async def test_rename_success(respx_mock: MockRouter, drive_client):
    """Test rename sends a PATCH with the new name."""
    route = respx_mock.patch(host=HOST, path=f"{FILES_PATH}/abc").mock(
        return_value=httpx.Response(200, json={"id": "abc", "name": "new.txt"})
    )

    assert await drive_client.rename("abc", "new.txt") is None

    request = route.calls.last.request
    assert json.loads(request.content) == {"name": "new.txt"}
    assert request.headers["Authorization"] == "Bearer test-token"


@pytest.mark.asyncio
async def test_rename_http_error(respx_mock: MockRouter, drive_client):
    """Test rename raises RequestError with its fixed message."""
    respx_mock.patch(host=HOST, path=f"{FILES_PATH}/abc").mock(
        return_value=httpx.Response(404)
    )

    with pytest.raises(RequestError, match="Update failed."):
        await drive_client.rename("abc", "new.txt")


@pytest.mark.asyncio
async def test_delete_success(respx_mock: MockRouter, drive_client):
    """Test delete sends a DELETE for the file."""
    route = respx_mock.delete(host=HOST, path=f"{FILES_PATH}/abc").mock(
        return_value=httpx.Response(204)
    )

    assert await drive_client.delete("abc") is None
    assert route.called


@pytest.mark.asyncio
async def test_delete_http_error(respx_mock: MockRouter, drive_client):
    """Test delete raises RequestError with its fixed message."""
    respx_mock.delete(host=HOST, path=f"{FILES_PATH}/abc").mock(
        return_value=httpx.Response(500)
    )

    with pytest.raises(RequestError, match="Delete failed."):
        await drive_client.delete("abc")


@pytest.mark.asyncio
async def test_custom_base_url(respx_mock: MockRouter):
    """Test the configured base URL is used for metadata calls."""
    route = respx_mock.delete("http://drive.test/files/abc").mock(
        return_value=httpx.Response(204)
    )
    client = GoogleDriveClient(
        DriveConfig(access_token="t", base_url="http://drive.test/files")
    )

    await client.delete("abc")

    assert route.called


@pytest.mark.asyncio
async def test_file_id_is_escaped_in_path(respx_mock: MockRouter, drive_client):
    """Test an ID with reserved characters stays a single path segment."""
    route = respx_mock.delete(host=HOST).mock(return_value=httpx.Response(204))

    await drive_client.delete("a?b#c/d")

    request = route.calls.last.request
    assert request.url.raw_path == b"/drive/v3/files/a%3Fb%23c%2Fd"
    assert not request.url.params

"""
Client for interacting with the Google Drive v3 API.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx
from google.oauth2.credentials import Credentials

from drive_browser.config import DriveConfig
from drive_browser.core.domain import FileRecord, UploadedFile
from drive_browser.core.exceptions import (
    DELETE_FAILED,
    SEARCH_FAILED,
    UPDATE_FAILED,
    UPLOAD_FAILED,
    RequestError,
)

logger = logging.getLogger(__name__)

SEARCH_FIELDS = "files(id,name,mimeType)"


def build_search_query(term: str) -> str:
    """
    Build a Drive query matching non-trashed files whose name contains `term`.

    Backslashes and single quotes are escaped as Drive query syntax requires.
    """
    escaped = term.replace("\\", "\\\\").replace("'", "\\'")
    return f"name contains '{escaped}' and trashed = false"


class GoogleDriveClient:
    """
    A client for searching, uploading, renaming and deleting Drive files.

    Every call attaches the configured access token as a bearer credential.
    The token is used as-is: it is never refreshed or checked for expiry.
    """

    def __init__(self, config: DriveConfig):
        self._base_url = config.base_url
        self._upload_url = config.upload_url
        self._credentials = Credentials(token=config.access_token)

    def _get_headers(self) -> dict:
        """Get authorization headers."""
        headers: dict[str, str] = {}
        self._credentials.apply(headers)
        return headers

    def _file_url(self, file_id: str) -> str:
        """Metadata URL for a file; the ID is escaped as one path segment."""
        return f"{self._base_url}/{quote(file_id, safe='')}"

    async def _request(
        self, method: str, url: str, failure_message: str, **kwargs: Any
    ) -> httpx.Response:
        """
        Make a single request and raise RequestError unless it succeeds.
        """
        headers = self._get_headers()
        if "headers" in kwargs:
            headers.update(kwargs.pop("headers"))

        logger.info(f"Drive request: {method} {url}")
        async with httpx.AsyncClient() as client:
            try:
                response = await client.request(method, url, headers=headers, **kwargs)
                response.raise_for_status()
                return response
            except httpx.HTTPStatusError as e:
                logger.warning(
                    f"Drive API error: {e.response.status_code} {e.response.text}"
                )
                raise RequestError(failure_message) from e
            except httpx.RequestError as e:
                logger.warning(f"Drive network error: {e}")
                raise RequestError(failure_message) from e

    async def search(self, term: str) -> list[FileRecord]:
        """
        Find non-trashed files whose name contains the given term.

        Args:
            term: Non-empty, trimmed search term.

        Returns:
            Matching file records in the order Drive returned them.

        Raises:
            RequestError: If the request fails or the response is malformed.
        """
        params = {"q": build_search_query(term), "fields": SEARCH_FIELDS}
        response = await self._request("GET", self._base_url, SEARCH_FAILED, params=params)
        try:
            files = response.json().get("files", [])
            if not isinstance(files, list):
                raise TypeError(f"files is {type(files).__name__}, expected a list")
            return [FileRecord.model_validate(item) for item in files]
        except (ValueError, AttributeError, TypeError) as e:
            logger.warning(f"Invalid search response: {e}")
            raise RequestError(SEARCH_FAILED) from e

    async def upload(self, content: bytes, content_type: str) -> UploadedFile:
        """
        Upload raw bytes as a new file.

        Drive names media uploads "Untitled"; callers rename afterwards.

        Args:
            content: File payload.
            content_type: MIME type of the payload.

        Returns:
            The new file's ID and provisional name.

        Raises:
            RequestError: If the upload fails or the response is malformed.
        """
        response = await self._request(
            "POST",
            self._upload_url,
            UPLOAD_FAILED,
            params={"uploadType": "media"},
            headers={"Content-Type": content_type or "application/octet-stream"},
            content=content,
        )
        try:
            uploaded = UploadedFile.model_validate(response.json())
        except ValueError as e:
            logger.warning(f"Invalid upload response: {e}")
            raise RequestError(UPLOAD_FAILED) from e

        logger.info(f"Uploaded {len(content)} bytes as file {uploaded.id}")
        return uploaded

    async def rename(self, file_id: str, new_name: str) -> None:
        """Set a file's name with a partial metadata update."""
        await self._request(
            "PATCH",
            self._file_url(file_id),
            UPDATE_FAILED,
            json={"name": new_name},
        )

    async def delete(self, file_id: str) -> None:
        """Delete a file."""
        await self._request("DELETE", self._file_url(file_id), DELETE_FAILED)

"""
Port definitions (interfaces) for the core domain.

Ports define the contracts between the controller and the outside world.
Infrastructure and presentation adapters implement these ports, and tests
substitute doubles for them.
"""

from typing import Optional, Protocol, Sequence

from drive_browser.core.domain import FileRecord, SelectedFile, UploadedFile


class FileStorage(Protocol):
    """
    Port (interface) for the remote file store.

    Implemented by GoogleDriveClient. Every method is a single network call
    and raises RequestError when the call does not succeed.
    """

    async def search(self, term: str) -> list[FileRecord]:
        """Return non-trashed files whose name contains `term`."""
        ...

    async def upload(self, content: bytes, content_type: str) -> UploadedFile:
        """Upload raw bytes and return the new file's ID and provisional name."""
        ...

    async def rename(self, file_id: str, new_name: str) -> None:
        """Set a file's display name."""
        ...

    async def delete(self, file_id: str) -> None:
        """Delete a file."""
        ...


class ResultsView(Protocol):
    """
    Port (interface) for the page the controller drives.

    Covers both what the user typed or picked (inputs) and what the
    user sees (results, loader, notices).
    """

    def search_term(self) -> str:
        """Current raw value of the search field."""
        ...

    def selected_file(self) -> Optional[SelectedFile]:
        """Current file picker selection, if any."""
        ...

    def clear_file_selection(self) -> None:
        """Reset the file picker."""
        ...

    def render_results(self, records: Sequence[FileRecord]) -> None:
        """Replace the rendered results with one card per record."""
        ...

    def set_busy(self, busy: bool) -> None:
        """Toggle the loader and the search/upload triggers."""
        ...

    def notify(self, message: str) -> None:
        """Show a transient notice."""
        ...


class UserInteraction(Protocol):
    """Port (interface) for blocking dialogs shown to the user."""

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question."""
        ...

    def prompt_text(self, message: str, default: str = "") -> Optional[str]:
        """Ask for a line of text. None means the user cancelled."""
        ...

"""
Controller for the Drive browser page.

Wires user-triggered events to storage calls and updates the view
afterward. Independent of HTTP, HTML or the concrete storage service.
"""

import logging

from drive_browser.core.domain import ActionOutcome
from drive_browser.core.exceptions import RequestError
from drive_browser.core.ports import FileStorage, ResultsView, UserInteraction

logger = logging.getLogger(__name__)

EMPTY_SEARCH_MESSAGE = "Please enter a search term."
NO_FILE_MESSAGE = "Select a file first."
UPLOAD_SUCCESS_MESSAGE = "File uploaded successfully!"
RENAME_PROMPT = "Enter new name:"
DELETE_CONFIRMATION = "Delete this file?"


class FileBrowserController:
    """
    Handles search, upload, rename and delete actions.

    Each action runs to completion, catches its own RequestError and turns
    it into a single notice, and returns an ActionOutcome. Nothing is
    retried and nothing escapes to the caller.
    """

    def __init__(
        self,
        storage: FileStorage,
        view: ResultsView,
        interaction: UserInteraction,
    ):
        """
        Initialize the controller.

        Args:
            storage: Remote file store
            view: Page inputs and output
            interaction: Confirmation and prompt dialogs
        """
        self.storage = storage
        self.view = view
        self.interaction = interaction

    async def on_search(self) -> ActionOutcome:
        """Search for the term in the search field and render the results."""
        term = self.view.search_term().strip()
        if not term:
            self.view.notify(EMPTY_SEARCH_MESSAGE)
            return ActionOutcome.ABORTED

        self.view.set_busy(True)
        try:
            records = await self.storage.search(term)
            self.view.render_results(records)
            logger.info(f"Search for '{term}' returned {len(records)} file(s)")
            return ActionOutcome.COMPLETED
        except RequestError as e:
            self.view.notify(str(e))
            return ActionOutcome.FAILED
        finally:
            self.view.set_busy(False)

    async def on_upload(self) -> ActionOutcome:
        """
        Upload the selected file, then rename it to its local filename.

        The two calls are not atomic: if the rename fails, the uploaded
        file stays in Drive under its provisional name.
        """
        selected = self.view.selected_file()
        if selected is None:
            self.view.notify(NO_FILE_MESSAGE)
            return ActionOutcome.ABORTED

        self.view.set_busy(True)
        try:
            uploaded = await self.storage.upload(selected.content, selected.content_type)
            await self.storage.rename(uploaded.id, selected.filename)
            self.view.notify(UPLOAD_SUCCESS_MESSAGE)
            self.view.clear_file_selection()
            return ActionOutcome.COMPLETED
        except RequestError as e:
            self.view.notify(str(e))
            return ActionOutcome.FAILED
        finally:
            self.view.set_busy(False)

    async def on_rename(self, file_id: str, current_name: str) -> ActionOutcome:
        """Prompt for a new name, rename the file and refresh the results."""
        new_name = self.interaction.prompt_text(RENAME_PROMPT, current_name)
        if new_name is None or not new_name.strip():
            return ActionOutcome.ABORTED

        self.view.set_busy(True)
        try:
            await self.storage.rename(file_id, new_name.strip())
            await self.on_search()
            return ActionOutcome.COMPLETED
        except RequestError as e:
            self.view.notify(str(e))
            return ActionOutcome.FAILED
        finally:
            self.view.set_busy(False)

    async def on_delete(self, file_id: str) -> ActionOutcome:
        """Ask for confirmation, delete the file and refresh the results."""
        if not self.interaction.confirm(DELETE_CONFIRMATION):
            return ActionOutcome.ABORTED

        self.view.set_busy(True)
        try:
            await self.storage.delete(file_id)
            await self.on_search()
            return ActionOutcome.COMPLETED
        except RequestError as e:
            self.view.notify(str(e))
            return ActionOutcome.FAILED
        finally:
            self.view.set_busy(False)

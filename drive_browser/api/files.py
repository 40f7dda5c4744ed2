"""
Drive browser page endpoints.

This is a driving adapter: it copies form submissions into the view and
the interaction port, runs the matching controller action and returns
the re-rendered page. All behavior lives in the controller.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import HTMLResponse

from drive_browser.core.controller import FileBrowserController
from drive_browser.core.domain import ActionOutcome, SelectedFile
from drive_browser.core.ports import FileStorage
from drive_browser.presentation.interaction import FormInteraction
from drive_browser.presentation.view import HtmlResultsView

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])

OUTCOME_HEADER = "X-Action-Outcome"


def get_view_dependency() -> HtmlResultsView:
    """
    Placeholder dependency function for the page view.

    This will be overridden in main.py via app.dependency_overrides.
    """
    raise NotImplementedError("HtmlResultsView dependency must be configured")


def get_storage_dependency() -> FileStorage:
    """
    Placeholder dependency function for the file storage client.

    This will be overridden in main.py via app.dependency_overrides.
    """
    raise NotImplementedError("FileStorage dependency must be configured")


def _page(view: HtmlResultsView, outcome: Optional[ActionOutcome] = None) -> HTMLResponse:
    headers = {OUTCOME_HEADER: outcome.value} if outcome else None
    return HTMLResponse(content=view.render_page(), headers=headers)


@router.get("/", response_class=HTMLResponse)
async def page(view: HtmlResultsView = Depends(get_view_dependency)):
    """Render the page in its current state."""
    return _page(view)


@router.post("/search", response_class=HTMLResponse)
async def search(
    term: str = Form(""),
    view: HtmlResultsView = Depends(get_view_dependency),
    storage: FileStorage = Depends(get_storage_dependency),
):
    """Search Drive for files whose name contains the submitted term."""
    view.set_search_term(term)
    controller = FileBrowserController(storage, view, FormInteraction())
    outcome = await controller.on_search()
    return _page(view, outcome)


@router.post("/upload", response_class=HTMLResponse)
async def upload(
    file: Optional[UploadFile] = File(None),
    view: HtmlResultsView = Depends(get_view_dependency),
    storage: FileStorage = Depends(get_storage_dependency),
):
    """
    Upload the submitted file to Drive under its local filename.

    Browsers submit an empty part when no file was picked; that counts
    as no selection.
    """
    if file is not None and file.filename:
        content = await file.read()
        view.select_file(
            SelectedFile(
                filename=file.filename,
                content=content,
                content_type=file.content_type or "application/octet-stream",
            )
        )
    else:
        view.select_file(None)

    controller = FileBrowserController(storage, view, FormInteraction())
    outcome = await controller.on_upload()
    return _page(view, outcome)


@router.post("/files/{file_id}/rename", response_class=HTMLResponse)
async def rename(
    file_id: str,
    new_name: str = Form(""),
    current_name: str = Form(""),
    view: HtmlResultsView = Depends(get_view_dependency),
    storage: FileStorage = Depends(get_storage_dependency),
):
    """Rename a file to the name entered in the browser prompt."""
    controller = FileBrowserController(storage, view, FormInteraction(answer=new_name))
    outcome = await controller.on_rename(file_id, current_name)
    return _page(view, outcome)


@router.post("/files/{file_id}/delete", response_class=HTMLResponse)
async def delete(
    file_id: str,
    confirmed: bool = Form(False),
    view: HtmlResultsView = Depends(get_view_dependency),
    storage: FileStorage = Depends(get_storage_dependency),
):
    """Delete a file once the browser confirmation was accepted."""
    controller = FileBrowserController(
        storage, view, FormInteraction(confirmed=confirmed)
    )
    outcome = await controller.on_delete(file_id)
    return _page(view, outcome)

"""
Server-rendered view of the Drive browser page.

Holds the page state the controller reads and writes (search field,
file picker, result cards, loader, notice) and renders it as HTML.
"""

import time
from html import escape
from typing import Callable, Optional, Sequence
from urllib.parse import quote

from drive_browser.core.domain import FileRecord, SelectedFile

NOTICE_SECONDS = 5
NO_RESULTS_MESSAGE = "No results found."


def render_card(record: FileRecord) -> str:
    """Render one result card with its rename and delete controls."""
    name = escape(record.name)
    file_id = escape(record.id)
    path = quote(record.id, safe="")
    return f"""
      <div class="file-card">
        <h3>📄 {name}</h3>
        <p>ID: {file_id}</p>
        <div class="card-actions">
          <form method="post" action="/files/{path}/rename" class="rename-form">
            <input type="hidden" name="current_name" value="{name}">
            <input type="hidden" name="new_name" value="">
            <button type="submit" class="edit-btn" data-id="{file_id}" data-name="{name}">Rename</button>
          </form>
          <form method="post" action="/files/{path}/delete" class="delete-form">
            <input type="hidden" name="confirmed" value="false">
            <button type="submit" class="delete-btn" data-id="{file_id}">Delete</button>
          </form>
        </div>
      </div>"""


PAGE_SCRIPT = """
  document.querySelectorAll('.search-form, .upload-form').forEach(form => {
    form.addEventListener('submit', () => {
      document.getElementById('loader').classList.remove('hidden');
      document.getElementById('searchBtn').disabled = true;
      document.getElementById('uploadBtn').disabled = true;
    });
  });
  document.querySelectorAll('.rename-form').forEach(form => {
    form.addEventListener('submit', event => {
      const btn = form.querySelector('.edit-btn');
      const newName = prompt('Enter new name:', btn.dataset.name);
      if (newName === null) { event.preventDefault(); return; }
      form.elements.new_name.value = newName;
    });
  });
  document.querySelectorAll('.delete-form').forEach(form => {
    form.addEventListener('submit', event => {
      if (!confirm('Delete this file?')) { event.preventDefault(); return; }
      form.elements.confirmed.value = 'true';
    });
  });
  const errorBox = document.getElementById('errorBox');
  if (!errorBox.classList.contains('hidden')) {
    setTimeout(() => errorBox.classList.add('hidden'), Number(errorBox.dataset.hideAfterMs));
  }
"""


class HtmlResultsView:
    """
    ResultsView implementation backing the HTML page.

    Notices expire NOTICE_SECONDS after they are shown; a newer notice
    replaces the current one and restarts the delay.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._search_value = ""
        self._selected: Optional[SelectedFile] = None
        self._records: list[FileRecord] = []
        self._busy = False
        self._notice: Optional[str] = None
        self._notice_expires_at = 0.0

    # Inputs

    def set_search_term(self, value: str) -> None:
        self._search_value = value

    def search_term(self) -> str:
        return self._search_value

    def select_file(self, selected: Optional[SelectedFile]) -> None:
        self._selected = selected

    def selected_file(self) -> Optional[SelectedFile]:
        return self._selected

    def clear_file_selection(self) -> None:
        self._selected = None

    # Output

    @property
    def records(self) -> list[FileRecord]:
        """Records currently rendered as cards."""
        return list(self._records)

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def notice(self) -> Optional[str]:
        """The visible notice, or None once it has expired."""
        if self._notice is not None and self._clock() >= self._notice_expires_at:
            self._notice = None
        return self._notice

    def render_results(self, records: Sequence[FileRecord]) -> None:
        self._records = list(records)
        if not self._records:
            self.notify(NO_RESULTS_MESSAGE)

    def set_busy(self, busy: bool) -> None:
        self._busy = busy

    def notify(self, message: str) -> None:
        self._notice = message
        self._notice_expires_at = self._clock() + NOTICE_SECONDS

    def render_page(self) -> str:
        """Render the full HTML document for the current state."""
        notice = self.notice
        disabled = " disabled" if self._busy else ""
        loader_class = "loader" if self._busy else "loader hidden"
        error_class = "error-box" if notice else "error-box hidden"
        cards = "".join(render_card(record) for record in self._records)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Drive Browser</title>
  <style>.hidden {{ display: none; }}</style>
</head>
<body>
  <h1>Google Drive Files</h1>
  <form method="post" action="/search" class="search-form">
    <input type="text" id="searchInput" name="term" value="{escape(self._search_value)}" placeholder="Search files...">
    <button type="submit" id="searchBtn"{disabled}>Search</button>
  </form>
  <form method="post" action="/upload" enctype="multipart/form-data" class="upload-form">
    <input type="file" id="fileInput" name="file">
    <button type="submit" id="uploadBtn"{disabled}>Upload</button>
  </form>
  <div id="loader" class="{loader_class}">Loading...</div>
  <div id="errorBox" class="{error_class}" data-hide-after-ms="{NOTICE_SECONDS * 1000}">{escape(notice or "")}</div>
  <div id="resultsGrid" class="results-grid">{cards}
  </div>
  <script>{PAGE_SCRIPT}</script>
</body>
</html>
"""

"""
UserInteraction adapter for form submissions.

The browser shows the prompt and confirmation dialogs before it submits;
this adapter hands the answers it submitted to the controller.
"""

from typing import Optional


class FormInteraction:
    """Answers dialogs with values already collected by the page."""

    def __init__(self, confirmed: bool = False, answer: Optional[str] = None):
        self._confirmed = confirmed
        self._answer = answer

    def confirm(self, message: str) -> bool:
        return self._confirmed

    def prompt_text(self, message: str, default: str = "") -> Optional[str]:
        return self._answer

"""
Domain exceptions for the Drive browser.

Transport adapters raise these; the controller turns them into
user-visible notices.
"""

SEARCH_FAILED = "Failed to fetch files."
UPLOAD_FAILED = "Upload failed."
UPDATE_FAILED = "Update failed."
DELETE_FAILED = "Delete failed."


class DriveBrowserError(Exception):
    """Base exception for Drive browser errors."""

    pass


class RequestError(DriveBrowserError):
    """
    Raised when a call to the storage service does not succeed.

    Network failures, rejected credentials and server-side errors all
    surface the same way. The message is the fixed, human-readable text
    for the operation that failed and is shown to the user as-is.
    """

    pass


class ConfigurationError(DriveBrowserError):
    """Raised when required configuration is missing at startup."""

    pass

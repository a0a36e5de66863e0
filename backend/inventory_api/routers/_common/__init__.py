"""
Common utilities shared across routers.
"""

from .deps import get_app_settings, get_storage, read_upload, spreadsheet_response

__all__ = [
    "get_app_settings",
    "get_storage",
    "read_upload",
    "spreadsheet_response",
]

"""
Router dependencies and helpers.

Database and storage are constructed by the application factory and live on
``app.state``; routers reach them only through these dependencies.
"""

from fastapi import Request, Response, UploadFile

from shared.config.constants import XLSX_MEDIA_TYPE
from shared.config.settings import Settings
from shared.infrastructure.storage import Storage
from shared.utils.exceptions import UnsupportedMediaError, ValidationError
from shared.utils.validators import is_spreadsheet_upload


def get_storage(request: Request) -> Storage:
    """FastAPI dependency for the object storage backend."""
    return request.app.state.storage


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the settings the app was built with."""
    return request.app.state.settings


def read_upload(file: UploadFile | None, max_bytes: int) -> bytes:
    """
    Read a spreadsheet upload fully into memory.

    Raises:
        ValidationError: no file was sent.
        UnsupportedMediaError: not .xlsx/.csv (415) or larger than max_bytes (413).
    """
    if file is None:
        raise ValidationError("No file uploaded")

    if not is_spreadsheet_upload(file.filename, file.content_type):
        raise UnsupportedMediaError(
            f"Not an Excel/CSV file! Received: {file.content_type} ({file.filename}). "
            "Please upload only Excel or CSV files.",
            filename=file.filename,
        )

    content = file.file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise UnsupportedMediaError(
            f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB",
            too_large=True,
            filename=file.filename,
        )
    return content


def spreadsheet_response(content: bytes, filename: str) -> Response:
    """Workbook bytes as a downloadable attachment."""
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )

"""
Authentication endpoints (mock).

Register and login accept any credentials and return a demo user and token.
Email confirmation consumes a token from the users table and redirects to
the UI with the outcome in the query string.
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from inventory_api.services.domain import AuthService
from inventory_api.services.domain.auth_service import login, register
from shared.infrastructure.db import get_db
from shared.utils.schemas import AuthResponse, LoginRequest, RegisterRequest


router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(body: RegisterRequest) -> AuthResponse:
    return register(body.username, body.email)


@router.post("/login", response_model=AuthResponse)
def login_user(body: LoginRequest) -> AuthResponse:
    return login(body.email)


@router.get("/confirm-email")
def confirm_email(token: str | None = None, db: Session = Depends(get_db)):
    """Confirm an email address, then redirect to the UI."""
    if not token:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Token is required"},
        )

    result = AuthService(db).confirm_email(token)
    if result.success:
        return RedirectResponse("/?emailConfirmed=true", status_code=status.HTTP_302_FOUND)
    return RedirectResponse(
        f"/?emailConfirmed=false&error={quote(result.message)}",
        status_code=status.HTTP_302_FOUND,
    )

"""
Auth Service (mock).

Registration and login accept any credentials and return a demo user with a
demo token. Only email confirmation reads the users table.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from inventory_api.repositories import UserRepository
from shared.config.logging import auth_logger as logger
from shared.utils.schemas import AuthResponse, UserInfo

DEMO_USERNAME = "demo_user"
DEMO_EMAIL = "demo@example.com"


@dataclass(frozen=True)
class ConfirmationResult:
    success: bool
    message: str


def _demo_token() -> str:
    return f"demo_token_{int(time.time() * 1000)}"


def register(username: str | None, email: str | None) -> AuthResponse:
    user = UserInfo(
        id=random.randint(1, 1000),
        username=username or DEMO_USERNAME,
        email=email or DEMO_EMAIL,
    )
    logger.info("Mock registration", username=user.username)
    return AuthResponse(user=user, token=_demo_token(), message="Registration successful")


def login(email: str | None) -> AuthResponse:
    user = UserInfo(id=1, username=DEMO_USERNAME, email=email or DEMO_EMAIL)
    logger.info("Mock login", email=user.email)
    return AuthResponse(user=user, token=_demo_token(), message="Login successful")


class AuthService:
    """Email confirmation against the users table."""

    def __init__(self, db: Session):
        self._users = UserRepository(db)

    def confirm_email(self, token: str) -> ConfirmationResult:
        user = self._users.find_by_confirmation_token(token)
        if user is None:
            logger.warning("Unknown confirmation token")
            return ConfirmationResult(False, "Invalid confirmation token")

        expiry = user.email_confirmation_token_expiry
        if expiry is not None:
            # SQLite hands back naive datetimes
            if expiry.tzinfo is None:
                expiry = expiry.replace(tzinfo=timezone.utc)
            if expiry < datetime.now(timezone.utc):
                logger.warning("Expired confirmation token", user_id=user.id)
                return ConfirmationResult(False, "Confirmation token has expired")

        self._users.mark_email_confirmed(user)
        logger.info("Email confirmed", user_id=user.id)
        return ConfirmationResult(True, "Email confirmed successfully")

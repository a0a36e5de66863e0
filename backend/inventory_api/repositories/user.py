"""
User Repository - lookups for the email-confirmation flow.
"""

from sqlalchemy import select

from inventory_api.models import User
from shared.infrastructure.db import safe_commit
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entities."""

    @property
    def model(self) -> type[User]:
        return User

    def _base_query(self):
        return select(User).order_by(User.username, User.id)

    def find_by_confirmation_token(self, token: str) -> User | None:
        with self._upstream("select"):
            return self._db.scalar(select(User).where(User.email_confirmation_token == token))

    def mark_email_confirmed(self, user: User) -> User:
        """Confirm the address and consume the token."""
        with self._upstream("update"):
            user.is_email_confirmed = True
            user.email_confirmation_token = None
            user.email_confirmation_token_expiry = None
            safe_commit(self._db)
            self._db.refresh(user)
        return user

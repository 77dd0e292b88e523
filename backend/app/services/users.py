"""
Record store facade for the ``User`` table.

Every operation is a single round trip: read, or apply and commit. Integrity
failures on commit are the store telling us an email is already taken, so they
are reported as conflicts; any other database failure is opaque to callers.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, delete, select

from app.core.errors import EmailConflictError, StoreUnavailableError, UserNotFoundError
from app.models import User
from app.models.user import next_timestamp, utcnow
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, session: Session):
        self.session = session

    def list_users(self) -> List[User]:
        """All users, newest first."""
        try:
            return list(self.session.exec(select(User).order_by(User.id.desc())).all())
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("Failed to list users") from exc

    def get_user(self, user_id: int) -> User:
        try:
            user = self.session.get(User, user_id)
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"Failed to load user {user_id}") from exc
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, data: UserCreate) -> User:
        now = utcnow()
        user = User(name=data.name, email=data.email, created_at=now, updated_at=now)
        self._save(user)
        logger.info("Created user %s", user.id)
        return user

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Apply the supplied fields; anything left out keeps its value."""
        user = self.get_user(user_id)

        if data.name is not None:
            user.name = data.name
        if data.email is not None:
            user.email = data.email

        user.updated_at = next_timestamp(user.updated_at)
        self._save(user)
        logger.info("Updated user %s", user.id)
        return user

    def delete_user(self, user_id: int) -> int:
        try:
            result = self.session.exec(delete(User).where(User.id == user_id))
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreUnavailableError(f"Failed to delete user {user_id}") from exc
        if result.rowcount == 0:
            raise UserNotFoundError(user_id)
        logger.info("Deleted user %s", user_id)
        return user_id

    def _save(self, user: User) -> None:
        user_id, email = user.id, user.email
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise EmailConflictError(email) from exc
        except StaleDataError as exc:
            # row vanished between load and commit
            self.session.rollback()
            raise UserNotFoundError(user_id) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreUnavailableError("Failed to save user") from exc
        self.session.refresh(user)

"""User directory: account lookups and registration."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from library_api.database import is_valid_id
from library_api.models import User


class UserDirectory:
    """Resolves user identifiers to account records."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, user_id: int) -> User | None:
        if not is_valid_id(user_id):
            return None
        return self.db.get(User, user_id)

    def find_by_ids(self, user_ids: Iterable[int]) -> list[User]:
        """Return the users matching any of the ids. Missing ids are skipped."""
        ids = {user_id for user_id in user_ids if is_valid_id(user_id)}
        if not ids:
            return []
        stmt = select(User).where(User.id.in_(ids))
        return list(self.db.execute(stmt).scalars().all())

    def find_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def add(self, user: User) -> User:
        """Persist a new account and return it with its generated id."""
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

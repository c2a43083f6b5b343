from typing import TYPE_CHECKING

from governor.entities.user import User
from governor.models.base.session import Session, storage_errors
from governor.models.user import User as SQLUser
from governor.repositories.interfaces import UserRepository

if TYPE_CHECKING:
    from typing import Iterable, List, Optional


def _to_user(sql_user):
    # type: (SQLUser) -> User
    return User(id=sql_user.id, name=sql_user.name, email=sql_user.email)


class SQLUserRepository(UserRepository):
    """SQL storage layer for users.

    Like SQLGroupRepository, bulk lookups run on a private session so they are safe to call from a
    worker thread.
    """

    def __init__(self, session):
        # type: (Session) -> None
        self.session = session

    @storage_errors
    def create_user(self, name, email):
        # type: (str, str) -> str
        user = SQLUser(name=name, email=email)
        user.add(self.session)
        self.session.flush()
        return user.id

    @storage_errors
    def fetch_users_by_ids(self, user_ids):
        # type: (Iterable[str]) -> List[User]
        ids = list(set(user_ids))
        if not ids:
            return []
        with Session(bind=self.session.get_bind()) as session:
            return [_to_user(u) for u in session.query(SQLUser).filter(SQLUser.id.in_(ids))]

    @storage_errors
    def get_user(self, user_id):
        # type: (str) -> Optional[User]
        user = SQLUser.get(self.session, id=user_id)
        return _to_user(user) if user else None

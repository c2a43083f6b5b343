from datetime import datetime
from uuid import uuid4

from sqlalchemy.orm import declarative_base


def utcnow_without_ms():
    # type: () -> datetime
    """Current UTC time truncated to the second.

    Used for row timestamps.  Backends disagree on sub-second precision, so a row read back would
    otherwise not compare equal to the object that was written.
    """
    return datetime.utcnow().replace(microsecond=0)


def new_id():
    # type: () -> str
    return str(uuid4())


class _Model:
    """Helpers shared by every model.  add and delete are the only way past SessionWithoutAdd."""

    @classmethod
    def get(cls, session, **kwargs):
        return session.query(cls).filter_by(**kwargs).scalar()

    def add(self, session):
        session._add(self)
        return self

    def delete(self, session):
        session._delete(self)
        return self


Model = declarative_base(cls=_Model)

from sqlalchemy import Column, DateTime, String

from governor.constants import MAX_NAME_LENGTH
from governor.models.base.model_base import Model, new_id, utcnow_without_ms


class User(Model):
    __tablename__ = "users"

    id = Column(String(length=36), primary_key=True, default=new_id)
    name = Column(String(length=MAX_NAME_LENGTH), nullable=False)
    email = Column(String(length=MAX_NAME_LENGTH), unique=True, nullable=False)
    created_at = Column(DateTime, default=utcnow_without_ms, nullable=False)

    def __repr__(self):
        # type: () -> str
        return "<{}: id={} email={}>".format(type(self).__name__, self.id, self.email)

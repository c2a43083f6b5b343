from sqlalchemy import Column, DateTime, String

from governor.constants import MAX_NAME_LENGTH
from governor.models.base.model_base import Model, new_id, utcnow_without_ms


class Group(Model):
    __tablename__ = "groups"

    id = Column(String(length=36), primary_key=True, default=new_id)
    name = Column(String(length=MAX_NAME_LENGTH), nullable=False)
    slug = Column(String(length=MAX_NAME_LENGTH), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow_without_ms, nullable=False)

    # Soft-delete marker.  Deleted groups keep their rows but drop out of the hierarchy graph.
    deleted_at = Column(DateTime)

    def __repr__(self):
        # type: () -> str
        return "<{}: id={} slug={}>".format(type(self).__name__, self.id, self.slug)

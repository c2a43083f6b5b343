from sqlalchemy import Column, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from governor.models.base.model_base import Model, new_id, utcnow_without_ms


class GroupHierarchy(Model):
    """Nesting of member_group inside parent_group.

    Rows are never checked for cycles here.  Inserts must go through the hierarchy service, which
    runs the cycle guard in the same transaction as the write.
    """

    __tablename__ = "group_hierarchies"
    __table_args__ = (
        Index("group_hierarchies_pair_idx", "parent_group_id", "member_group_id", unique=True),
        Index("group_hierarchies_member_group_id_idx", "member_group_id"),
    )

    id = Column(String(length=36), primary_key=True, default=new_id)

    parent_group_id = Column(String(length=36), ForeignKey("groups.id"), nullable=False)
    parent_group = relationship("Group", foreign_keys=[parent_group_id])

    member_group_id = Column(String(length=36), ForeignKey("groups.id"), nullable=False)
    member_group = relationship("Group", foreign_keys=[member_group_id])

    expires_at = Column(DateTime)
    created_at = Column(DateTime, default=utcnow_without_ms, nullable=False)
    updated_at = Column(
        DateTime, default=utcnow_without_ms, onupdate=utcnow_without_ms, nullable=False
    )

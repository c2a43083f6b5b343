from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from governor.models.base.model_base import Model, new_id, utcnow_without_ms


class GroupMembership(Model):
    __tablename__ = "group_memberships"
    __table_args__ = (
        Index("group_memberships_pair_idx", "group_id", "user_id", unique=True),
        Index("group_memberships_user_id_idx", "user_id"),
    )

    id = Column(String(length=36), primary_key=True, default=new_id)

    group_id = Column(String(length=36), ForeignKey("groups.id"), nullable=False)
    group = relationship("Group", foreign_keys=[group_id])

    user_id = Column(String(length=36), ForeignKey("users.id"), nullable=False)
    user = relationship("User", foreign_keys=[user_id])

    is_admin = Column(Boolean, default=False, nullable=False)
    expires_at = Column(DateTime)
    created_at = Column(DateTime, default=utcnow_without_ms, nullable=False)
    updated_at = Column(
        DateTime, default=utcnow_without_ms, onupdate=utcnow_without_ms, nullable=False
    )

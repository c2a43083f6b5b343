from sqlalchemy import Column, DateTime, Integer

from governor.models.base.model_base import Model

# The one row every hierarchy writer updates before reading the hierarchy.
HIERARCHY_LOCK_ID = 1


class HierarchyLock(Model):
    """Serializes writers of group_hierarchies.

    The cycle guard reads the whole hierarchy, so locking the rows it reads is not enough: two
    inserts with disjoint endpoints can still close a cycle together.  Every writer instead updates
    this single row first and holds the row lock until commit.
    """

    __tablename__ = "hierarchy_lock"

    id = Column(Integer, primary_key=True, autoincrement=False)
    locked_at = Column(DateTime)

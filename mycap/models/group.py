"""Group model."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mycap.database import Base
from mycap.models.enums import GroupType
from mycap.models.mixins import TimestampMixin


class Group(Base, TimestampMixin):
    """Group chat or conference, owned by its admin. One live group per admin."""

    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, index=True)
    admin_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)
    admin_username = Column(String(255), unique=True, nullable=False, index=True)
    type = Column(
        Enum(GroupType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
    )

    # Relationships
    admin = relationship("User")
    memberships = relationship(
        "GroupParticipant",
        back_populates="group",
        cascade="all, delete-orphan",
        order_by="GroupParticipant.id",
    )
    participants = relationship(
        "User",
        secondary="group_participants",
        order_by="GroupParticipant.id",
        viewonly=True,
    )


class GroupParticipant(Base):
    """Membership row. Joining twice yields two rows."""

    __tablename__ = "group_participants"

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("groups.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    group = relationship("Group", back_populates="memberships")
    user = relationship("User")

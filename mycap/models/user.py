"""User and user type models."""

from sqlalchemy import BigInteger, Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mycap.config import get_settings
from mycap.database import Base
from mycap.models.mixins import TimestampMixin

settings = get_settings()


class UserType(Base, TimestampMixin):
    """Subscription tier (Free, Premium, Pro). The lowest id is the free tier."""

    __tablename__ = "user_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)


class User(Base, TimestampMixin):
    """User model for authentication, quota tracking and group membership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    username = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    remaining_time = Column(BigInteger, nullable=False, default=settings.default_remaining_time)
    reached_time_limit = Column(Boolean, nullable=False, default=False)
    type_id = Column(Integer, ForeignKey("user_types.id"), nullable=False, index=True)

    # Relationships
    type = relationship("UserType", lazy="joined")

"""User directory: registration, login, profile updates and quota resets."""

import logging

from sqlalchemy.orm import Session

from mycap.config import get_settings
from mycap.errors import ConflictError, NotFoundError, UnauthorizedError
from mycap.models.group import Group, GroupParticipant
from mycap.models.user import User, UserType
from mycap.services.auth import get_password_hash, verify_password
from mycap.services.base import BaseService

logger = logging.getLogger(__name__)

settings = get_settings()


def seed_user_types(db: Session, names: list[str] | None = None) -> list[UserType]:
    """Create any missing user types, in tier order. Safe to run repeatedly."""
    names = names or settings.user_types
    user_types = []
    for name in names:
        user_type = db.query(UserType).filter(UserType.name == name).first()
        if user_type:
            logger.debug(f"User type {name} already exists")
        else:
            user_type = UserType(name=name)
            db.add(user_type)
            db.flush()
            logger.info(f"Created user type {name}")
        user_types.append(user_type)
    db.commit()
    return user_types


class UserService(BaseService):
    """Service for user records and their time quota."""

    def list_types(self) -> list[UserType]:
        return self.db.query(UserType).order_by(UserType.id).all()

    def get_free_type(self) -> UserType:
        """The lowest tier, which is subject to the monthly quota reset."""
        user_type = self.db.query(UserType).order_by(UserType.id).first()
        if not user_type:
            raise NotFoundError("No user types configured.")
        return user_type

    def get_type(self, type_id: int) -> UserType:
        user_type = self.db.query(UserType).filter(UserType.id == type_id).first()
        if not user_type:
            raise NotFoundError(f"User type with ID {type_id} not found.")
        return user_type

    def get(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError(f"User with ID {user_id} not found.")
        return user

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def register(
        self,
        name: str,
        username: str,
        email: str,
        password: str,
        type_id: int | None = None,
    ) -> User:
        """Create a new user with a full quota.

        Raises:
            ConflictError: email or username is taken.
            NotFoundError: ``type_id`` does not exist.
        """
        if self.get_by_email(email):
            logger.warning(f"Registration rejected, email {email} already exists")
            raise ConflictError("User with this email is already exist.")
        if self.db.query(User).filter(User.username == username).first():
            logger.warning(f"Registration rejected, username {username} already exists")
            raise ConflictError("User with this username is already exist.")

        user_type = self.get_type(type_id) if type_id is not None else self.get_free_type()

        user = User(
            name=name,
            username=username,
            email=email,
            password_hash=get_password_hash(password),
            remaining_time=settings.default_remaining_time,
            reached_time_limit=False,
            type_id=user_type.id,
        )
        self.db.add(user)
        self._commit("User with this email or username is already exist.")
        self.db.refresh(user)

        logger.info(f"Registered user {user.id} ({user.username}) as {user_type.name}")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Check a user's password.

        Raises:
            NotFoundError: no user has this email.
            UnauthorizedError: the password does not match.
        """
        user = self.get_by_email(email)
        if not user:
            raise NotFoundError("User with this email not found.")
        if not verify_password(password, user.password_hash):
            raise UnauthorizedError("Password incorrect.")
        return user

    def update(
        self,
        user_id: int,
        name: str,
        remaining_time: int,
        reached_time_limit: bool,
        type_id: int | None = None,
    ) -> User:
        """Replace a user's name and quota fields, optionally changing tier."""
        user = self.get(user_id)
        user_type = self.get_type(type_id) if type_id is not None else None

        user.name = name
        user.remaining_time = remaining_time
        user.reached_time_limit = reached_time_limit
        if user_type:
            user.type_id = user_type.id

        self._commit()
        self.db.refresh(user)
        logger.info(f"Updated user {user.id}")
        return user

    def delete(self, user_id: int) -> None:
        """Delete a user, their memberships and any group they administer."""
        user = self.get(user_id)

        self.db.query(GroupParticipant).filter(GroupParticipant.user_id == user.id).delete(
            synchronize_session=False
        )
        # Memberships cascade from the group, so load them after the bulk delete above
        owned_group = self.db.query(Group).filter(Group.admin_id == user.id).first()
        if owned_group:
            self.db.delete(owned_group)
        self.db.delete(user)

        self._commit()
        logger.info(f"Deleted user {user_id}")

    def reset_all_free_tier_quota(self) -> int:
        """Restore the default quota for every free-tier user.

        Returns:
            Number of users reset.
        """
        free_type = self.get_free_type()
        count = (
            self.db.query(User)
            .filter(User.type_id == free_type.id)
            .update(
                {
                    User.remaining_time: settings.default_remaining_time,
                    User.reached_time_limit: False,
                },
                synchronize_session=False,
            )
        )
        self._commit()
        logger.info(f"Reset remaining time for {count} free users")
        return count

"""Group lifecycle: creating, joining, leaving and terminating groups."""

import logging

from sqlalchemy.orm import joinedload, selectinload
from sqlalchemy.orm.attributes import set_committed_value

from mycap.errors import ConflictError, NotFoundError, QuotaExceededError
from mycap.models.enums import GroupType
from mycap.models.group import Group, GroupParticipant
from mycap.models.user import User
from mycap.services.base import BaseService

logger = logging.getLogger(__name__)

ALREADY_HAS_GROUP = "You already have a group chat or conference."


class GroupService(BaseService):
    """Service for group chats and conferences.

    A group lives from the moment its admin creates it until the admin leaves.
    Participants come and go in between without affecting the group itself.
    """

    def _query(self):
        return self.db.query(Group).options(
            joinedload(Group.admin),
            selectinload(Group.participants),
        )

    def _get_by_admin_username(self, admin_username: str) -> Group:
        group = self._query().filter(Group.admin_username == admin_username).first()
        if not group:
            raise NotFoundError("Group not found.")
        return group

    def _reload(self, group_id: int) -> Group:
        self.db.expire_all()
        return self._query().filter(Group.id == group_id).one()

    def list_all(self) -> list[Group]:
        return self._query().order_by(Group.id).all()

    def create(self, caller: User, group_type: str | GroupType) -> Group:
        """Open a new group with the caller as admin and only participant.

        Raises:
            ConflictError: the caller already administers a live group.
            QuotaExceededError: the caller has reached this month's time limit.
            InvalidArgumentError: ``group_type`` is not Group or Conference.
        """
        if self.db.query(Group).filter(Group.admin_id == caller.id).first():
            logger.warning(f"User {caller.id} already has a group")
            raise ConflictError(ALREADY_HAS_GROUP)

        if caller.reached_time_limit:
            logger.warning(f"User {caller.id} reached the time limit, group not created")
            raise QuotaExceededError("This user already reached time limit this month.")

        parsed_type = GroupType.parse(group_type)

        group = Group(
            admin_id=caller.id,
            admin_username=caller.username,
            type=parsed_type,
        )
        group.memberships.append(GroupParticipant(user_id=caller.id))
        self.db.add(group)
        # The unique admin_id catches a concurrent create that passed the check above
        self._commit(ALREADY_HAS_GROUP)

        logger.info(f"User {caller.id} created {parsed_type.value} {group.id}")
        return self._reload(group.id)

    def join(self, caller: User, admin_username: str) -> Group:
        """Add the caller to the group owned by ``admin_username``.

        Membership is not deduplicated: joining twice adds a second row.
        """
        group = self._get_by_admin_username(admin_username)

        self.db.add(GroupParticipant(group_id=group.id, user_id=caller.id))
        # Memberships have no unique key, so the only violation is a group deleted meanwhile
        self._commit("Group not found.", NotFoundError)

        logger.info(f"User {caller.id} joined group {group.id}")
        return self._reload(group.id)

    def leave(self, caller: User, admin_username: str, remaining_time: int) -> Group:
        """Remove the caller from a group.

        When the caller is the admin the group is terminated: the admin's
        remaining time is settled (reaching zero sets the time limit flag),
        every membership is removed and the group is deleted. The returned
        group is a detached snapshot with no participants.

        Any other caller is simply removed; their quota is left untouched.
        """
        group = self._get_by_admin_username(admin_username)

        if group.admin_id == caller.id:
            caller.remaining_time = remaining_time
            if remaining_time == 0:
                caller.reached_time_limit = True

            # Deleting the group cascades to its memberships
            self.db.delete(group)
            self._commit()

            set_committed_value(group, "participants", [])
            logger.info(f"Admin {caller.id} left, group {group.id} terminated")
            return group

        self.db.query(GroupParticipant).filter(
            GroupParticipant.group_id == group.id,
            GroupParticipant.user_id == caller.id,
        ).delete(synchronize_session=False)
        self._commit()

        logger.info(f"User {caller.id} left group {group.id}")
        return self._reload(group.id)

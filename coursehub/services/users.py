"""Profile and coach management on top of the shared user store."""

import logging

from coursehub.core.errors import DuplicateEmailError, NotFoundError
from coursehub.core.store import EntityStore
from coursehub.models.user import Account, PublicUser, Role, to_public_user
from coursehub.services.accounts import AccountService

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, accounts: AccountService) -> None:
        self._accounts = accounts
        self._users: EntityStore[Account] = accounts.get_user_store()

    def get_profile(self, user_id: str) -> PublicUser:
        account = self._users.get_by_id(user_id)
        if account is None:
            raise NotFoundError("User not found")
        return to_public_user(account)

    def update_profile(
        self,
        user_id: str,
        name: str | None = None,
        email: str | None = None,
    ) -> PublicUser:
        """
        Change name and/or email of the account user_id.

        user_id always comes from the authenticated identity, so a user can only
        edit their own record. A new email taken by another account raises
        DuplicateEmailError and leaves the record as it was.
        """
        changes: dict[str, str] = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = email

        with self._users.atomic():
            account = self._users.get_by_id(user_id)
            if account is None:
                raise NotFoundError("User not found")
            if email is not None and email != account.email:
                taken = self._users.find_one(lambda u: u.email == email and u.id != user_id)
                if taken is not None:
                    raise DuplicateEmailError("Email already in use")
            updated = self._users.update(user_id, changes)
            if updated is None:
                raise NotFoundError("User not found")

        logger.info("Updated profile of user %s (fields=%s)", user_id, sorted(changes))
        return to_public_user(updated)

    def create_coach(self, name: str, email: str, password: str) -> PublicUser:
        """Provision a COACH account. Admin-only; the route enforces the role."""
        coach = self._accounts.create_account(name, email, password, Role.COACH)
        logger.info("Created coach %s", coach.id)
        return to_public_user(coach)

"""Account service: registration, login and the bootstrap admin account."""

import logging

from coursehub.core.errors import DuplicateEmailError, InvalidCredentialsError
from coursehub.core.security import BCRYPT_ROUNDS, TokenService, hash_password, verify_password
from coursehub.core.store import EntityStore
from coursehub.models.user import Account, PublicUser, Role, to_public_user
from coursehub.schemas.auth import AuthResult

logger = logging.getLogger(__name__)


class AccountService:
    """Orchestrates password hashing, the user store and token issuance."""

    def __init__(
        self,
        users: EntityStore[Account],
        tokens: TokenService,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._rounds = bcrypt_rounds
        # Verified against on unknown-email logins so both failure paths cost a bcrypt check.
        self._dummy_hash = hash_password("not-a-real-password", rounds=bcrypt_rounds)

    def get_user_store(self) -> EntityStore[Account]:
        return self._users

    def register(self, name: str, email: str, password: str) -> AuthResult:
        """Create a STUDENT account and return it with a fresh token."""
        account = self.create_account(name, email, password, Role.STUDENT)
        logger.info("Registered user %s", account.id)
        return self._auth_result(account)

    def login(self, email: str, password: str) -> AuthResult:
        """
        Check credentials and issue a new token.
        Unknown email and wrong password raise the same InvalidCredentialsError.
        """
        account = self._users.find_one(lambda u: u.email == email)
        if account is None:
            verify_password(password, self._dummy_hash)
            logger.info("Login failed")
            raise InvalidCredentialsError()
        if not verify_password(password, account.password_hash):
            logger.info("Login failed")
            raise InvalidCredentialsError()
        logger.info("User %s logged in", account.id)
        return self._auth_result(account)

    def create_account(self, name: str, email: str, password: str, role: Role) -> Account:
        """
        Hash the password and insert the account if the email is free.

        The email check and the insert run under the store lock, so concurrent
        calls with the same email create exactly one account.
        """
        password_hash = hash_password(password, rounds=self._rounds)
        with self._users.atomic():
            if self._users.find_one(lambda u: u.email == email) is not None:
                raise DuplicateEmailError("Email already registered")
            return self._users.create(
                {"name": name, "email": email, "password_hash": password_hash, "role": role}
            )

    def seed_admin(self, name: str, email: str, password: str) -> PublicUser:
        """Create the bootstrap ADMIN account unless one with this email exists. Idempotent."""
        with self._users.atomic():
            existing = self._users.find_one(lambda u: u.email == email)
            if existing is None:
                existing = self._users.create(
                    {
                        "name": name,
                        "email": email,
                        "password_hash": hash_password(password, rounds=self._rounds),
                        "role": Role.ADMIN,
                    }
                )
                logger.info("Seeded admin account %s", email)
        return to_public_user(existing)

    def _auth_result(self, account: Account) -> AuthResult:
        token = self._tokens.issue(account.id, account.email, account.role)
        return AuthResult(user=to_public_user(account), token=token)

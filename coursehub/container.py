"""Composition root: one store per entity type plus the services built on them."""

import logging
from dataclasses import dataclass

from coursehub.core.config import Settings
from coursehub.core.security import TokenService
from coursehub.core.store import EntityStore
from coursehub.models.course import Course
from coursehub.models.user import Account
from coursehub.services.accounts import AccountService
from coursehub.services.courses import CourseService
from coursehub.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class Container:
    settings: Settings
    users: EntityStore[Account]
    courses: EntityStore[Course]
    tokens: TokenService
    accounts: AccountService
    user_service: UserService
    course_service: CourseService


def build_container(settings: Settings) -> Container:
    """Build stores and services from settings and seed the bootstrap admin."""
    settings.warn_insecure_defaults(logger)

    users: EntityStore[Account] = EntityStore(Account, name="users")
    courses: EntityStore[Course] = EntityStore(Course, name="courses")
    tokens = TokenService(
        secret=settings.jwt_secret_value,
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )
    accounts = AccountService(users, tokens, bcrypt_rounds=settings.BCRYPT_ROUNDS)
    accounts.seed_admin(
        name=settings.ADMIN_NAME,
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD.get_secret_value(),
    )
    return Container(
        settings=settings,
        users=users,
        courses=courses,
        tokens=tokens,
        accounts=accounts,
        user_service=UserService(accounts),
        course_service=CourseService(courses),
    )

"""Domain services."""

from coursehub.services.accounts import AccountService
from coursehub.services.courses import CourseService
from coursehub.services.users import UserService

__all__ = ["AccountService", "CourseService", "UserService"]

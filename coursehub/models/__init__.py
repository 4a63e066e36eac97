"""Domain records held in the entity stores."""

from coursehub.models.course import Course
from coursehub.models.user import Account, PublicUser, Role, to_public_user

__all__ = ["Account", "Course", "PublicUser", "Role", "to_public_user"]

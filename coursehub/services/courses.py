"""Course service: public reads, owner-or-admin mutations."""

import logging
from typing import Any

from coursehub.core.authz import is_owner_or_admin
from coursehub.core.errors import ForbiddenError, NotFoundError
from coursehub.core.store import EntityStore
from coursehub.models.course import Course
from coursehub.schemas.auth import IdentityClaim

logger = logging.getLogger(__name__)

# Fields a course update may touch; created_by is fixed at creation.
UPDATABLE_FIELDS = ("title", "description", "image")


class CourseService:
    def __init__(self, courses: EntityStore[Course]) -> None:
        self._courses = courses

    def list_courses(self) -> list[Course]:
        return self._courses.list()

    def get_course(self, course_id: str) -> Course:
        course = self._courses.get_by_id(course_id)
        if course is None:
            raise NotFoundError("Course not found")
        return course

    def create_course(
        self,
        title: str,
        description: str,
        created_by: str,
        image: str | None = None,
    ) -> Course:
        course = self._courses.create(
            {
                "title": title,
                "description": description,
                "image": image,
                "created_by": created_by,
            }
        )
        logger.info("Course %s created by %s", course.id, created_by)
        return course

    def update_course(
        self,
        course_id: str,
        changes: dict[str, Any],
        identity: IdentityClaim,
    ) -> Course:
        """Apply non-None changes if identity is the creator or an admin."""
        data = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}
        with self._courses.atomic():
            course = self.get_course(course_id)
            if not is_owner_or_admin(identity, course.created_by):
                logger.warning("User %s may not update course %s", identity.id, course_id)
                raise ForbiddenError("You can only update your own courses")
            updated = self._courses.update(course_id, data)
            if updated is None:
                raise NotFoundError("Course not found")
        logger.info("Course %s updated by %s", course_id, identity.id)
        return updated

    def delete_course(self, course_id: str, identity: IdentityClaim) -> bool:
        with self._courses.atomic():
            course = self.get_course(course_id)
            if not is_owner_or_admin(identity, course.created_by):
                logger.warning("User %s may not delete course %s", identity.id, course_id)
                raise ForbiddenError("You can only delete your own courses")
            deleted = self._courses.delete(course_id)
        logger.info("Course %s deleted by %s", course_id, identity.id)
        return deleted

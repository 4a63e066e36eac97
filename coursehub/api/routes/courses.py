"""Course endpoints: anyone may read, coaches and admins may write their own."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from coursehub.api.deps import StaffIdentity, get_course_service
from coursehub.models.course import Course
from coursehub.schemas.common import Envelope, MessageResponse
from coursehub.schemas.course import CreateCourseRequest, UpdateCourseRequest
from coursehub.services import CourseService

router = APIRouter()


@router.get("", response_model=Envelope[list[Course]])
def list_courses(
    courses: Annotated[CourseService, Depends(get_course_service)],
) -> Envelope[list[Course]]:
    return Envelope(data=courses.list_courses())


@router.get("/{course_id}", response_model=Envelope[Course])
def get_course(
    course_id: str,
    courses: Annotated[CourseService, Depends(get_course_service)],
) -> Envelope[Course]:
    return Envelope(data=courses.get_course(course_id))


@router.post("", response_model=Envelope[Course], status_code=status.HTTP_201_CREATED)
def create_course(
    body: CreateCourseRequest,
    identity: StaffIdentity,
    courses: Annotated[CourseService, Depends(get_course_service)],
) -> Envelope[Course]:
    """Create a course owned by the caller (coach or admin)."""
    course = courses.create_course(
        title=body.title,
        description=body.description,
        image=str(body.image) if body.image is not None else None,
        created_by=identity.id,
    )
    return Envelope(message="Course created successfully", data=course)


@router.put("/{course_id}", response_model=Envelope[Course])
def update_course(
    course_id: str,
    body: UpdateCourseRequest,
    identity: StaffIdentity,
    courses: Annotated[CourseService, Depends(get_course_service)],
) -> Envelope[Course]:
    """Update a course; only its creator or an admin may do this."""
    changes = body.model_dump(exclude_none=True)
    if "image" in changes:
        changes["image"] = str(changes["image"])
    course = courses.update_course(course_id, changes, identity)
    return Envelope(message="Course updated successfully", data=course)


@router.delete("/{course_id}", response_model=MessageResponse)
def delete_course(
    course_id: str,
    identity: StaffIdentity,
    courses: Annotated[CourseService, Depends(get_course_service)],
) -> MessageResponse:
    courses.delete_course(course_id, identity)
    return MessageResponse(success=True, message="Course deleted successfully")

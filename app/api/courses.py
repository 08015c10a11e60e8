"""Courses API endpoints."""

from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import AliasChoices, Field
from sqlalchemy import select

from app.api.dependencies import DbSession
from app.api.errors import RequestRejected, commit_or_conflict
from app.api.schemas import ApiModel, valid_id
from app.models import Course
from app.services.enrollment_service import EnrollmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Courses", tags=["courses"])


class CourseCreate(ApiModel):
    """Course creation model."""

    course_id: Optional[int] = None
    course_name: str = Field(min_length=1, max_length=200)
    description: str = ""


class CourseResponse(ApiModel):
    """Course response model."""

    course_id: int = Field(
        validation_alias=AliasChoices("id", "courseId", "course_id"),
        serialization_alias="courseId",
    )
    course_name: str
    description: str


async def _get_course_or_404(db: DbSession, course_id: int) -> Course:
    course = await db.get(Course, course_id) if valid_id(course_id) else None
    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found"
        )
    return course


@router.get("", response_model=List[CourseResponse])
async def get_courses(db: DbSession) -> List[Course]:
    """Get all courses."""
    result = await db.execute(select(Course).order_by(Course.id))
    return result.scalars().all()


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(course_id: int, db: DbSession) -> Course:
    """Get course by ID."""
    return await _get_course_or_404(db, course_id)


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(course_data: CourseCreate, db: DbSession) -> Course:
    """Create new course."""
    course = Course(**course_data.model_dump(exclude={"course_id"}))
    db.add(course)
    await commit_or_conflict(db)
    await db.refresh(course)
    logger.info(f"Created course {course.id}: {course.course_name}")
    return course


@router.put("/{course_id}", response_model=CourseResponse)
async def update_course(
    course_id: int,
    course_data: CourseCreate,
    db: DbSession,
) -> Course:
    """Replace course fields."""
    course = await _get_course_or_404(db, course_id)
    if course_data.course_id is not None and course_data.course_id != course_id:
        raise RequestRejected({"courseId": ["Identity in body does not match the URL"]})

    course.course_name = course_data.course_name
    course.description = course_data.description

    await commit_or_conflict(db)
    await db.refresh(course)
    logger.info(f"Updated course {course.id}")
    return course


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(course_id: int, db: DbSession) -> None:
    """Delete course together with its enrollments."""
    course = await _get_course_or_404(db, course_id)

    await EnrollmentService(db).delete_for_course(course_id)
    await db.delete(course)
    await commit_or_conflict(db)
    logger.info(f"Deleted course {course_id}")

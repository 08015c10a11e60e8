"""Enrollments API endpoints."""

from datetime import date
from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import AliasChoices, Field
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.api.courses import CourseResponse
from app.api.dependencies import DbSession
from app.api.errors import RequestRejected, commit_or_conflict
from app.api.schemas import MAX_ID, ApiModel, valid_id
from app.api.students import StudentResponse
from app.models import Enrollment
from app.services.enrollment_service import EnrollmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Enrollments", tags=["enrollments"])


class EnrollmentCreate(ApiModel):
    """Enrollment creation model. Nested student/course objects are ignored."""

    enrollment_id: Optional[int] = None
    student_id: int = Field(ge=1, le=MAX_ID)
    course_id: int = Field(ge=1, le=MAX_ID)
    enrollment_date: Optional[date] = None


class EnrollmentResponse(ApiModel):
    """Enrollment response model."""

    enrollment_id: int = Field(
        validation_alias=AliasChoices("id", "enrollmentId", "enrollment_id"),
        serialization_alias="enrollmentId",
    )
    student_id: int
    course_id: int
    enrollment_date: date
    student: Optional[StudentResponse] = None
    course: Optional[CourseResponse] = None


def _enrollment_query():
    return select(Enrollment).options(
        selectinload(Enrollment.student),
        selectinload(Enrollment.course),
    )


async def _load_enrollment(db: DbSession, enrollment_id: int) -> Enrollment:
    if not valid_id(enrollment_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Enrollment not found"
        )
    result = await db.execute(
        _enrollment_query()
        .where(Enrollment.id == enrollment_id)
        .execution_options(populate_existing=True)
    )
    enrollment = result.scalar_one_or_none()
    if not enrollment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Enrollment not found"
        )
    return enrollment


async def _check_references(db: DbSession, enrollment_data: EnrollmentCreate) -> None:
    errors = await EnrollmentService(db).missing_references(
        enrollment_data.student_id, enrollment_data.course_id
    )
    if errors:
        raise RequestRejected(errors)


@router.get("", response_model=List[EnrollmentResponse])
async def get_enrollments(db: DbSession) -> List[Enrollment]:
    """Get all enrollments."""
    result = await db.execute(_enrollment_query().order_by(Enrollment.id))
    return result.scalars().all()


@router.get("/{enrollment_id}", response_model=EnrollmentResponse)
async def get_enrollment(enrollment_id: int, db: DbSession) -> Enrollment:
    """Get enrollment by ID."""
    return await _load_enrollment(db, enrollment_id)


@router.post("", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
async def create_enrollment(enrollment_data: EnrollmentCreate, db: DbSession) -> Enrollment:
    """Enroll a student in a course."""
    await _check_references(db, enrollment_data)

    enrollment = Enrollment(
        student_id=enrollment_data.student_id,
        course_id=enrollment_data.course_id,
        enrollment_date=enrollment_data.enrollment_date or date.today(),
    )
    db.add(enrollment)
    await commit_or_conflict(db)
    logger.info(
        f"Created enrollment {enrollment.id}: "
        f"student {enrollment.student_id} -> course {enrollment.course_id}"
    )
    return await _load_enrollment(db, enrollment.id)


@router.put("/{enrollment_id}", response_model=EnrollmentResponse)
async def update_enrollment(
    enrollment_id: int,
    enrollment_data: EnrollmentCreate,
    db: DbSession,
) -> Enrollment:
    """Replace enrollment fields."""
    enrollment = await _load_enrollment(db, enrollment_id)
    if enrollment_data.enrollment_id is not None and enrollment_data.enrollment_id != enrollment_id:
        raise RequestRejected({"enrollmentId": ["Identity in body does not match the URL"]})
    await _check_references(db, enrollment_data)

    enrollment.student_id = enrollment_data.student_id
    enrollment.course_id = enrollment_data.course_id
    enrollment.enrollment_date = enrollment_data.enrollment_date or date.today()

    await commit_or_conflict(db)
    logger.info(f"Updated enrollment {enrollment_id}")
    return await _load_enrollment(db, enrollment_id)


@router.delete("/{enrollment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_enrollment(enrollment_id: int, db: DbSession) -> None:
    """Delete enrollment."""
    enrollment = await _load_enrollment(db, enrollment_id)
    await db.delete(enrollment)
    await commit_or_conflict(db)
    logger.info(f"Deleted enrollment {enrollment_id}")

"""Students API endpoints."""

from datetime import date
from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import AliasChoices, EmailStr, Field, field_validator
from sqlalchemy import select

from app.api.dependencies import DbSession
from app.api.errors import RequestRejected, commit_or_conflict
from app.api.schemas import ApiModel, valid_id
from app.models import Student
from app.services.enrollment_service import EnrollmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Students", tags=["students"])


class StudentCreate(ApiModel):
    """Student creation model. PUT takes the same payload as a full replacement."""

    student_id: Optional[int] = None
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    date_of_birth: date

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class StudentResponse(ApiModel):
    """Student response model."""

    student_id: int = Field(
        validation_alias=AliasChoices("id", "studentId", "student_id"),
        serialization_alias="studentId",
    )
    first_name: str
    last_name: str
    email: Optional[str]
    date_of_birth: date


async def _get_student_or_404(db: DbSession, student_id: int) -> Student:
    student = await db.get(Student, student_id) if valid_id(student_id) else None
    if not student:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student not found"
        )
    return student


@router.get("", response_model=List[StudentResponse])
async def get_students(db: DbSession) -> List[Student]:
    """Get all students."""
    result = await db.execute(select(Student).order_by(Student.id))
    return result.scalars().all()


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(student_id: int, db: DbSession) -> Student:
    """Get student by ID."""
    return await _get_student_or_404(db, student_id)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(student_data: StudentCreate, db: DbSession) -> Student:
    """Create new student."""
    student = Student(**student_data.model_dump(exclude={"student_id"}))
    db.add(student)
    await commit_or_conflict(db)
    await db.refresh(student)
    logger.info(f"Created student {student.id}: {student.full_name}")
    return student


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: int,
    student_data: StudentCreate,
    db: DbSession,
) -> Student:
    """Replace student fields."""
    student = await _get_student_or_404(db, student_id)
    if student_data.student_id is not None and student_data.student_id != student_id:
        raise RequestRejected({"studentId": ["Identity in body does not match the URL"]})

    for field, value in student_data.model_dump(exclude={"student_id"}).items():
        setattr(student, field, value)

    await commit_or_conflict(db)
    await db.refresh(student)
    logger.info(f"Updated student {student.id}")
    return student


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(student_id: int, db: DbSession) -> None:
    """Delete student together with their enrollments."""
    student = await _get_student_or_404(db, student_id)

    await EnrollmentService(db).delete_for_student(student_id)
    await db.delete(student)
    await commit_or_conflict(db)
    logger.info(f"Deleted student {student_id}")

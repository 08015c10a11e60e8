"""Enrollment service for reference checks and cascade cleanup."""

import logging
from typing import Dict, List

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Course, Enrollment, Student

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Service for enrollment bookkeeping shared by the resource routers."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def missing_references(self, student_id: int, course_id: int) -> Dict[str, List[str]]:
        """Return field errors for student/course ids that do not resolve."""
        errors: Dict[str, List[str]] = {}
        if await self.db.get(Student, student_id) is None:
            errors["studentId"] = [f"Student {student_id} does not exist"]
        if await self.db.get(Course, course_id) is None:
            errors["courseId"] = [f"Course {course_id} does not exist"]
        return errors

    async def delete_for_student(self, student_id: int) -> int:
        """Delete every enrollment of a student. Caller commits."""
        result = await self.db.execute(
            delete(Enrollment).where(Enrollment.student_id == student_id)
        )
        if result.rowcount:
            logger.info(f"Cascade: removed {result.rowcount} enrollment(s) of student {student_id}")
        return result.rowcount

    async def delete_for_course(self, course_id: int) -> int:
        """Delete every enrollment in a course. Caller commits."""
        result = await self.db.execute(
            delete(Enrollment).where(Enrollment.course_id == course_id)
        )
        if result.rowcount:
            logger.info(f"Cascade: removed {result.rowcount} enrollment(s) of course {course_id}")
        return result.rowcount

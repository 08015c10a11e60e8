"""Database models for the student portal."""

from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.student import Student

__all__ = [
    "Student",
    "Course",
    "Enrollment",
]

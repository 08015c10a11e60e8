"""Enrollment model."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class Enrollment(Base):
    """Enrollment model for student-course relationships."""

    __tablename__ = "enrollments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    student_id: Mapped[int] = mapped_column(ForeignKey("students.id"), nullable=False)
    course_id: Mapped[int] = mapped_column(ForeignKey("courses.id"), nullable=False)
    enrollment_date: Mapped[date] = mapped_column(
        Date, nullable=False, default=date.today
    )

    # Relationships
    student: Mapped["Student"] = relationship("Student", back_populates="enrollments")
    course: Mapped["Course"] = relationship("Course", back_populates="enrollments")

    def __repr__(self) -> str:
        return (
            f"<Enrollment(id={self.id}, "
            f"student_id={self.student_id}, "
            f"course_id={self.course_id}, "
            f"enrollment_date={self.enrollment_date})>"
        )

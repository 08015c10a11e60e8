"""Seed database with sample data."""

import asyncio
import logging
import sys
from datetime import date

sys.path.append(".")

from app.core.database import AsyncSessionLocal, init_db
from app.models import Course, Enrollment, Student

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def seed_data():
    """Seed database with sample data."""
    await init_db()

    async with AsyncSessionLocal() as db:
        # Create students
        students = [
            Student(
                first_name="Ada",
                last_name="Lovelace",
                email="ada@example.com",
                date_of_birth=date(1815, 12, 10),
            ),
            Student(
                first_name="Alan",
                last_name="Turing",
                email="alan@example.com",
                date_of_birth=date(1912, 6, 23),
            ),
            Student(
                first_name="Grace",
                last_name="Hopper",
                email=None,
                date_of_birth=date(1906, 12, 9),
            ),
        ]

        for student in students:
            db.add(student)

        await db.commit()

        # Create courses
        courses = [
            Course(course_name="Mathematics", description="Introductory calculus and algebra"),
            Course(course_name="Computer Science", description="Algorithms and data structures"),
            Course(course_name="Physics", description="Classical mechanics"),
        ]

        for course in courses:
            db.add(course)

        await db.commit()

        # Create enrollments
        enrollments = [
            Enrollment(student_id=students[0].id, course_id=courses[0].id, enrollment_date=date(2024, 1, 15)),
            Enrollment(student_id=students[1].id, course_id=courses[0].id, enrollment_date=date(2024, 1, 16)),
            Enrollment(student_id=students[1].id, course_id=courses[1].id, enrollment_date=date(2024, 2, 1)),
            Enrollment(student_id=students[2].id, course_id=courses[1].id, enrollment_date=date(2024, 2, 3)),
        ]

        for enrollment in enrollments:
            db.add(enrollment)

        await db.commit()

        logger.info(
            f"Seeded {len(students)} students, {len(courses)} courses, "
            f"{len(enrollments)} enrollments"
        )


if __name__ == "__main__":
    asyncio.run(seed_data())

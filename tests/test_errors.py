"""Tests for database error translation."""

from datetime import date

import pytest
from fastapi import HTTPException
from sqlalchemy import func, select

from app.api.errors import commit_or_conflict
from app.core.database import AsyncSessionLocal
from app.models import Enrollment


async def test_dangling_foreign_key_commit_is_conflict(database):
    async with AsyncSessionLocal() as db:
        db.add(Enrollment(student_id=424242, course_id=424242, enrollment_date=date(2024, 1, 1)))
        with pytest.raises(HTTPException) as excinfo:
            await commit_or_conflict(db)

    assert excinfo.value.status_code == 409

    async with AsyncSessionLocal() as db:
        count = (await db.execute(select(func.count()).select_from(Enrollment))).scalar()
    assert count == 0

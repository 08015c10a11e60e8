import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="student-portal-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["ENV"] = "test"

import httpx
import pytest

from app.core.database import drop_db, engine, init_db
from app.main import app

BASE_URL = "http://testserver"


@pytest.fixture
async def database():
    """Fresh tables for every test."""
    await drop_db()
    await init_db()
    yield
    await engine.dispose()


@pytest.fixture
def transport(database):
    return httpx.ASGITransport(app=app)


@pytest.fixture
async def client(transport):
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as c:
        yield c


@pytest.fixture
def ada():
    return {"firstName": "Ada", "lastName": "Lovelace", "dateOfBirth": "1815-12-10"}


@pytest.fixture
def math_course():
    return {"courseName": "Math", "description": "intro"}

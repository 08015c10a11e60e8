"""Dashboard counts."""

import asyncio
from typing import Optional

import httpx
from pydantic import BaseModel

from app.client.api import ClientError, ResourceClient, TransportError


class DashboardStats(BaseModel):
    """Row counts per resource."""

    students: int
    courses: int
    enrollments: int


async def fetch_stats(
    base_url: str,
    api_prefix: str = "/api",
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DashboardStats:
    """Fetch the three lists concurrently and count them."""
    clients = [
        ResourceClient(base_url, resource, api_prefix=api_prefix, transport=transport)
        for resource in ("Students", "Courses", "Enrollments")
    ]
    try:
        students, courses, enrollments = await asyncio.gather(
            *(client.list() for client in clients)
        )
    except ClientError as e:
        raise TransportError("Failed to fetch stats.") from e

    return DashboardStats(
        students=len(students),
        courses=len(courses),
        enrollments=len(enrollments),
    )

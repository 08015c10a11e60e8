"""API dependencies for database access."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db

# Dependency aliases for easier use
DbSession = Annotated[AsyncSession, Depends(get_db)]

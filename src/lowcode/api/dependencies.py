"""Shared API dependencies.

Repositories and change hooks resolved for one request all receive the
same session, so a mutation and its audit entry commit together.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lowcode.core.database import get_db


DBSession = Annotated[AsyncSession, Depends(get_db)]

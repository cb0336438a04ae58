"""People endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from people.core.models import Person
from people.database import PersonDatabase
from people.database import get_database as get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["People"])


def get_database() -> PersonDatabase:
    """Get database instance."""
    return get_db()


@router.get("/people", response_model=List[Person])
async def list_people(
    limit: int = Query(100, ge=1, le=100, description="Page size"),
    offset: int = Query(0, ge=0, description="Offset (Number of people to skip)"),
    db: PersonDatabase = Depends(get_database),
):
    """List people in roster order."""
    results = await db.list_people(limit=limit, offset=offset)
    logger.debug(f"Listing {len(results)} people from offset {offset}")
    return results

"""Schema endpoints."""

from typing import Any, Dict

from fastapi import APIRouter

from people.core.models import Person

router = APIRouter(tags=["Schemas"])


@router.get("/schemas/person")
async def get_person_schema() -> Dict[str, Any]:
    """Get the JSON schema of a serialized person."""
    return Person.model_json_schema()

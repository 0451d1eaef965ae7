# prereq_api/models.py
from pydantic import BaseModel
from typing import Dict, List, Optional, Union


class PrerequisiteResponse(BaseModel):
    """Body of GET /api/{course}: a flat list or group label -> list of codes."""

    courses: Union[List[str], Dict[str, List[str]]] = []


class LookupResult(BaseModel):
    """
    Outcome of one prerequisite lookup.

    A failed lookup never raises; it comes back with ok=False, an error
    description and no prerequisites.
    """

    course: str
    prerequisites: List[str] = []
    ok: bool = True
    error: Optional[str] = None

    @classmethod
    def found(cls, course: str, prerequisites: List[str]) -> "LookupResult":
        return cls(course=course, prerequisites=prerequisites)

    @classmethod
    def failed(cls, course: str, error: str) -> "LookupResult":
        return cls(course=course, ok=False, error=error)

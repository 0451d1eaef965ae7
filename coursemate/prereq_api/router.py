# prereq_api/router.py
import json
import logging
from pathlib import Path
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from ..academic.utils import normalize_course_code
from .models import PrerequisiteResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",  # GET /api/{course}, the contract PrerequisiteClient consumes
    tags=["Prerequisites"],
)


def load_prerequisite_table(path: Path) -> Dict[str, Any]:
    """
    Read the static prerequisite fixture (course code -> list or grouped mapping).

    Keys are normalized so lookups match normalized request codes.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"expected a JSON object of course codes, got {type(raw).__name__}")
    return {normalize_course_code(code): entry for code, entry in raw.items()}


def get_prerequisite_table(request: Request) -> Dict[str, Any]:
    return getattr(request.app.state, "prerequisite_table", {})


@router.get(
    "/{course}",
    response_model=PrerequisiteResponse,
    summary="Prerequisites of a single course",
)
async def course_prerequisites(
    course: str,
    table: Dict[str, Any] = Depends(get_prerequisite_table),
):
    """
    Courses with no fixture entry have no prerequisites: {"courses": []}.
    """
    code = normalize_course_code(course)
    entry = table.get(code)
    if entry is None:
        logger.debug(f"No prerequisite entry for {code}")
        return PrerequisiteResponse(courses=[])
    return PrerequisiteResponse(courses=entry)

# prereq_api/service.py
import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Optional, Union
from urllib.parse import quote

import requests
from pydantic import ValidationError

from ..academic.utils import normalize_course_code
from .models import LookupResult, PrerequisiteResponse

# --- Logger ---
logger = logging.getLogger(__name__)

# Any async callable course -> LookupResult can stand in for the HTTP client
PrerequisiteLookup = Callable[[str], Awaitable[LookupResult]]


def flatten_prerequisites(courses: Union[List[str], Dict[str, List[str]]]) -> List[str]:
    """
    Flatten a prerequisite body into one list of course codes.

    Grouped bodies ({"one of": [...], "and one of": [...]}) lose their
    grouping; every code mentioned is returned once, in the order seen.
    """
    if isinstance(courses, dict):
        codes = [code for group in courses.values() for code in group]
    else:
        codes = list(courses)
    normalized = (normalize_course_code(code) for code in codes if code and code.strip())
    return list(dict.fromkeys(normalized))


class PrerequisiteClient:
    """
    Client for the per-course prerequisite endpoint.

    One GET per course, no retry and no caching. Every failure (network,
    HTTP status, bad JSON, unexpected shape) is logged and turned into a
    failed LookupResult with no prerequisites.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def course_url(self, course: str) -> str:
        return f"{self.base_url}/{quote(course, safe='')}"

    def fetch_prerequisites(self, course: str) -> LookupResult:
        """Blocking lookup of one course's prerequisites."""
        if not course or not course.strip():
            return LookupResult.failed(course or "", "empty course code")

        url = self.course_url(course)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = PrerequisiteResponse.model_validate(response.json())
        except requests.exceptions.RequestException as e:
            logger.warning(f"Prerequisite request for {course} failed: {e}")
            return LookupResult.failed(course, str(e))
        except (ValueError, ValidationError) as e:
            logger.warning(f"Malformed prerequisite response for {course}: {e}")
            return LookupResult.failed(course, "malformed response")

        prerequisites = flatten_prerequisites(payload.courses)
        logger.debug(f"{course}: {len(prerequisites)} prerequisites")
        return LookupResult.found(course, prerequisites)

    async def lookup(self, course: str) -> LookupResult:
        """Awaitable lookup; the blocking request runs in a worker thread."""
        return await asyncio.to_thread(self.fetch_prerequisites, course)

    def close(self):
        self.session.close()

"""
catalog/store.py - Degree catalog loading

Each degree program ships as one JSON document:

    {
        "Major": {
            "Core Computing": {"list": ["CMPUT 201", "CMPUT 204"], "units": 6},
            ...
        }
    }

Documents are read once at startup into immutable DegreeProgram models and
held in a CatalogStore, which is handed to the resolver explicitly.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from ..academic.utils import normalize_course_code
from .models import DegreeProgram, RequirementCategory

logger = logging.getLogger(__name__)

# Program name (as shown in the selector) -> catalog file name
DEFAULT_PROGRAMS = {
    "Bachelor of Science General": "general.json",
    "Bachelor of Science Honors": "honors.json",
    "Bachelor of Science Specialization": "spec.json",
}


class CatalogStore:
    """Read-only mapping of program name -> DegreeProgram."""

    def __init__(self, programs: Optional[Mapping[str, DegreeProgram]] = None):
        self._programs = MappingProxyType(dict(programs or {}))

    def get(self, name: str) -> Optional[DegreeProgram]:
        return self._programs.get(name)

    def names(self) -> List[str]:
        return list(self._programs)

    def __contains__(self, name: object) -> bool:
        return name in self._programs

    def __len__(self) -> int:
        return len(self._programs)


def parse_category(name: str, entry: Any) -> Optional[RequirementCategory]:
    """
    Build a RequirementCategory from a raw catalog entry.

    Returns None for malformed entries (missing or mistyped "list"/"units",
    negative or fractional units) so callers can skip them.
    """
    if not isinstance(entry, dict):
        return None
    courses = entry.get("list")
    units = entry.get("units")
    if not isinstance(courses, list):
        return None
    # bool is an int subclass; "units": true is not a unit count
    if isinstance(units, bool) or not isinstance(units, (int, float)):
        return None
    # 6.0 is accepted as 6; fractional unit counts are not
    if isinstance(units, float) and not units.is_integer():
        return None
    units = int(units)
    if units < 0:
        return None

    # Normalize and drop repeats, keeping the first occurrence
    normalized = dict.fromkeys(
        normalize_course_code(c) for c in courses if isinstance(c, str) and c.strip()
    )
    return RequirementCategory(name=name, courses=tuple(normalized), units=units)


def build_program(name: str, document: Dict[str, Any]) -> DegreeProgram:
    """Convert a parsed catalog document into a DegreeProgram."""
    major = document.get("Major") if isinstance(document, dict) else None
    if not isinstance(major, dict):
        logger.warning(f"Catalog for '{name}' has no 'Major' section")
        return DegreeProgram(name=name)

    categories = []
    for category_name, entry in major.items():
        category = parse_category(category_name, entry)
        if category is None:
            logger.warning(f"Skipping malformed category '{category_name}' in '{name}'")
            continue
        categories.append(category)
    return DegreeProgram(name=name, categories=tuple(categories))


def load_program(name: str, path: Path) -> DegreeProgram:
    with open(path, "r", encoding="utf-8") as f:
        return build_program(name, json.load(f))


def load_catalog(directory: Path, programs: Mapping[str, str] = DEFAULT_PROGRAMS) -> CatalogStore:
    """
    Load every program listed in `programs` from `directory`.

    Programs whose file is missing or unreadable are logged and left out.
    """
    loaded = {}
    for name, filename in programs.items():
        path = Path(directory) / filename
        try:
            loaded[name] = load_program(name, path)
        except FileNotFoundError:
            logger.error(f"Catalog file not found for '{name}': {path}")
            continue
        except (OSError, ValueError) as e:
            # unreadable file, bad encoding or invalid JSON; the other programs still load
            logger.error(f"Could not read catalog file for '{name}' ({path}): {e}")
            continue
        logger.info(f"Loaded '{name}' with {len(loaded[name].categories)} categories")
    return CatalogStore(loaded)

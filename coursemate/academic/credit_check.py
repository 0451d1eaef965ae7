import logging
from typing import Dict, Iterable, List, Optional

from ..catalog.models import DegreeProgram, RequirementCategory

logger = logging.getLogger(__name__)

# -------------------------------------
# 1. Constants
# -------------------------------------

# Every catalog course counts for a flat 3 units; there is no partial credit
UNITS_PER_COURSE = 3

# -------------------------------------
# 2. Helper Functions
# -------------------------------------

def category_label(category: RequirementCategory, units_remaining: int) -> str:
    """Display label for an outstanding category, e.g. 'Core Computing: 6 units'."""
    return f"{category.name}: {units_remaining} units"


def earned_units(category: RequirementCategory, completed: Iterable[str]) -> int:
    """Units earned toward a category from completed courses on its list."""
    completed_set = set(completed)
    return UNITS_PER_COURSE * sum(1 for code in category.courses if code in completed_set)


def courses_to_cover(category: RequirementCategory, completed: Iterable[str], units_remaining: int) -> List[str]:
    """
    Walk the category list in order and pick courses until units_remaining is covered.

    Completed courses are skipped without using any of the budget.
    """
    completed_set = set(completed)
    picked = []
    covered = 0
    for code in category.courses:
        if code in completed_set:
            continue
        if covered >= units_remaining:
            break
        picked.append(code)
        covered += UNITS_PER_COURSE
    return picked

# -------------------------------------
# 3. Requirement Resolution
# -------------------------------------

def resolve_remaining_requirements(program: Optional[DegreeProgram], completed: Iterable[str]) -> Dict[str, List[str]]:
    """
    Work out which major requirements are still outstanding.

    Categories are checked independently and in catalog order, so a course
    listed in two categories counts toward both. Fully satisfied categories
    are left out of the result; an unknown program (None) yields {}.

    Returns:
        {"<category>: <units remaining> units": ["CMPUT 201", ...], ...}
    """
    if program is None:
        return {}

    completed_set = set(completed)
    remaining = {}
    for category in program.categories:
        units_remaining = category.units - earned_units(category, completed_set)
        if units_remaining <= 0:
            continue
        remaining[category_label(category, units_remaining)] = courses_to_cover(
            category, completed_set, units_remaining
        )

    logger.debug(f"{program.name}: {len(remaining)} of {len(program.categories)} categories outstanding")
    return remaining

# -------------------------------------
# 4. Reporting
# -------------------------------------

def build_remaining_report(remaining: Dict[str, List[str]], program_name: Optional[str] = None) -> str:
    """Plain-text report of outstanding requirements."""
    lines = []
    if program_name:
        lines.append(f"--- Remaining Major Requirements ({program_name}) ---")
    else:
        lines.append("--- Remaining Major Requirements ---")

    for label, courses in remaining.items():
        lines.append(f"  {label}")
        if courses:
            lines.extend(f"    - {code}" for code in courses)
        else:
            lines.append("    (no eligible courses listed)")

    if remaining:
        lines.append(f"Status: {len(remaining)} categories outstanding")
    else:
        lines.append("Status: All major requirements satisfied")
    return "\n".join(lines)

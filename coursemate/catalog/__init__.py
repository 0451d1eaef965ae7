# catalog/__init__.py
"""
Degree catalog package: static program requirements loaded at startup.
"""

from .models import DegreeProgram, RequirementCategory
from .store import DEFAULT_PROGRAMS, CatalogStore, load_catalog, load_program

__all__ = [
    "DegreeProgram",
    "RequirementCategory",
    "CatalogStore",
    "DEFAULT_PROGRAMS",
    "load_catalog",
    "load_program",
]

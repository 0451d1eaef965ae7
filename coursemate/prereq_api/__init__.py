# prereq_api/__init__.py
"""
Prerequisite lookup: HTTP client for the per-course endpoint and the
fixture-backed endpoint itself.
"""

from .models import LookupResult, PrerequisiteResponse
from .service import PrerequisiteClient, PrerequisiteLookup, flatten_prerequisites

__all__ = [
    "LookupResult",
    "PrerequisiteResponse",
    "PrerequisiteClient",
    "PrerequisiteLookup",
    "flatten_prerequisites",
]

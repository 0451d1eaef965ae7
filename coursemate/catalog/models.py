# catalog/models.py
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class RequirementCategory(BaseModel):
    """One requirement bucket of a program: eligible courses and the units needed."""

    model_config = ConfigDict(frozen=True)

    name: str
    courses: Tuple[str, ...] = ()
    units: int = Field(ge=0)


class DegreeProgram(BaseModel):
    """A named program; categories are kept in catalog (display) order."""

    model_config = ConfigDict(frozen=True)

    name: str
    categories: Tuple[RequirementCategory, ...] = ()

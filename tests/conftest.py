import pytest
from fastapi.testclient import TestClient

from coursemate.academic.router import get_catalog, get_prerequisite_lookup
from coursemate.catalog import CatalogStore, DegreeProgram, RequirementCategory
from coursemate.main import app
from coursemate.prereq_api import LookupResult


# ============================================================================
# Fixtures - small catalog and prerequisite data
# ============================================================================

@pytest.fixture
def program():
    return DegreeProgram(
        name="Bachelor of Science General",
        categories=(
            RequirementCategory(name="Introductory Computing", courses=("CMPUT 174", "CMPUT 175"), units=3),
            RequirementCategory(name="Core Computing", courses=("CMPUT 201", "CMPUT 204", "CMPUT 229"), units=9),
            RequirementCategory(name="Statistics", courses=("STAT 151", "STAT 265"), units=3),
        ),
    )


@pytest.fixture
def catalog(program):
    return CatalogStore({program.name: program})


PREREQUISITES = {
    "CMPUT 175": ["CMPUT 174"],
    "CMPUT 201": ["CMPUT 175"],
    "CMPUT 204": ["CMPUT 175", "CMPUT 272"],
    "CMPUT 229": ["CMPUT 201"],
}


def make_lookup(table, calls=None):
    """Async stub lookup backed by a dict; records the order of calls."""

    async def lookup(course):
        if calls is not None:
            calls.append(course)
        return LookupResult.found(course, list(table.get(course, [])))

    return lookup


@pytest.fixture
def prerequisite_lookup():
    return make_lookup(PREREQUISITES)


@pytest.fixture
def client(catalog, prerequisite_lookup):
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_prerequisite_lookup] = lambda: prerequisite_lookup
    yield TestClient(app)
    app.dependency_overrides.clear()

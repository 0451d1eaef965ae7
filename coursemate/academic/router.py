# academic/router.py

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from ..catalog.store import CatalogStore
from ..config import settings
from ..prereq_api.service import PrerequisiteLookup
from .credit_check import build_remaining_report, resolve_remaining_requirements
from .graph import GraphNode, PrerequisiteEdge, assemble_graph
from .utils import parse_completed_courses

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/academic", tags=["Academic"])


class PlanRequest(BaseModel):
    program: str = Field("", description="Degree program name, as listed by /academic/programs.")
    courses: str = Field(
        "",
        description="Completed courses, comma-separated.",
        examples=["CMPUT 174, MATH 144, STAT265"],
    )


class RemainingResponse(BaseModel):
    program: str
    completed: List[str]
    remaining: Dict[str, List[str]]
    report: str


class GraphOut(BaseModel):
    nodes: List[GraphNode]
    edges: List[PrerequisiteEdge]


class PlanResponse(RemainingResponse):
    graph: GraphOut


# --- Dependencies (state is set up in main.lifespan) ---

def get_catalog(request: Request) -> CatalogStore:
    return getattr(request.app.state, "catalog", None) or CatalogStore()


def get_prerequisite_lookup(request: Request) -> PrerequisiteLookup:
    return request.app.state.prereq_client.lookup


def require_program(payload: PlanRequest) -> str:
    program = payload.program.strip()
    if not program:
        raise HTTPException(status_code=400, detail="Please select a program.")
    return program


def resolve_for(payload: PlanRequest, catalog: CatalogStore):
    """Shared first half of /remaining and /plan: parse, look up program, resolve."""
    program_name = require_program(payload)
    completed = parse_completed_courses(payload.courses)

    program = catalog.get(program_name)
    if program is None:
        logger.warning(f"Unknown degree program requested: '{program_name}'")
    remaining = resolve_remaining_requirements(program, completed)
    return program_name, completed, remaining


@router.get("/programs", response_model=List[str], summary="Degree programs available for planning")
async def list_programs(catalog: CatalogStore = Depends(get_catalog)):
    return catalog.names()


@router.post(
    "/remaining",
    response_model=RemainingResponse,
    summary="Outstanding requirements for a program",
)
async def remaining_requirements(
    payload: PlanRequest,
    catalog: CatalogStore = Depends(get_catalog),
):
    program_name, completed, remaining = resolve_for(payload, catalog)
    return RemainingResponse(
        program=program_name,
        completed=completed,
        remaining=remaining,
        report=build_remaining_report(remaining, program_name),
    )


@router.post(
    "/plan",
    response_model=PlanResponse,
    response_model_by_alias=True,
    summary="Outstanding requirements plus their prerequisite graph",
)
async def course_plan(
    payload: PlanRequest,
    catalog: CatalogStore = Depends(get_catalog),
    lookup: PrerequisiteLookup = Depends(get_prerequisite_lookup),
):
    """
    Resolve the outstanding requirements, then look up prerequisites for
    every outstanding and completed course and return the graph.
    """
    try:
        program_name, completed, remaining = resolve_for(payload, catalog)
        graph = await assemble_graph(
            remaining,
            completed,
            lookup,
            concurrency=settings.lookup_concurrency,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to build course plan for '{payload.program.strip()}': {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Could not build course plan")

    nodes = graph.merged_nodes() if settings.merge_graph_nodes else graph.nodes
    return PlanResponse(
        program=program_name,
        completed=completed,
        remaining=remaining,
        report=build_remaining_report(remaining, program_name),
        graph=GraphOut(nodes=nodes, edges=graph.edges),
    )

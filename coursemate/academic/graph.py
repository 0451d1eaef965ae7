"""
academic/graph.py - Prerequisite graph assembly

Builds the node/edge data a directed-graph layout consumes:

    nodes: [{"key": "CMPUT 204", "status": "not-completed"}, ...]
    edges: [{"key": 0, "from": "CMPUT 201", "to": "CMPUT 204"}, ...]

Outstanding courses are looked up first, then completed courses. Nodes are
pushed as they are met, so the same course can appear more than once;
merged_nodes() gives one node per course.
"""

import asyncio
import logging
from enum import Enum
from typing import Dict, Iterable, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..prereq_api.models import LookupResult
from ..prereq_api.service import PrerequisiteLookup

logger = logging.getLogger(__name__)


class NodeStatus(str, Enum):
    NOT_COMPLETED = "not-completed"
    COMPLETED = "completed"
    RECOMMENDED = "recommended"


# Higher wins when the same course shows up with different statuses
STATUS_PRECEDENCE = {
    NodeStatus.NOT_COMPLETED: 0,
    NodeStatus.RECOMMENDED: 1,
    NodeStatus.COMPLETED: 2,
}


class GraphNode(BaseModel):
    key: str
    status: NodeStatus


class PrerequisiteEdge(BaseModel):
    """`source` is a prerequisite of `target`; serialized as from/to."""

    model_config = ConfigDict(populate_by_name=True)

    key: int
    source: str = Field(alias="from")
    target: str = Field(alias="to")


class PrerequisiteGraph(BaseModel):
    nodes: List[GraphNode] = []
    edges: List[PrerequisiteEdge] = []

    def add_course(self, course: str, prerequisites: Iterable[str], status: NodeStatus):
        """Push a node for `course` plus a node and an edge per prerequisite."""
        self.nodes.append(GraphNode(key=course, status=status))
        for prerequisite in prerequisites:
            if not prerequisite:
                continue
            self.nodes.append(GraphNode(key=prerequisite, status=status))
            # Edge ids count up from 0 in push order
            self.edges.append(PrerequisiteEdge(key=len(self.edges), source=prerequisite, target=course))

    def merged_nodes(self) -> List[GraphNode]:
        merged: Dict[str, GraphNode] = {}
        for node in self.nodes:
            current = merged.get(node.key)
            if current is None or STATUS_PRECEDENCE[node.status] > STATUS_PRECEDENCE[current.status]:
                merged[node.key] = node
        return list(merged.values())


def flatten_outstanding(remaining: Dict[str, List[str]]) -> List[str]:
    """Outstanding courses in category order, then in-category order."""
    return [code for courses in remaining.values() for code in courses]


async def safe_lookup(lookup: PrerequisiteLookup, course: str) -> List[str]:
    """
    Prerequisites of `course`, or [] when the lookup fails in any way.

    Errors stop here so one bad lookup never aborts the rest of the graph.
    """
    try:
        result = await lookup(course)
    except Exception as e:
        logger.warning(f"Prerequisite lookup for {course} raised: {e}")
        return []
    if not isinstance(result, LookupResult):
        logger.warning(f"Prerequisite lookup for {course} returned {type(result).__name__}, ignoring")
        return []
    if not result.ok:
        logger.info(f"No prerequisites for {course}: {result.error}")
    return list(result.prerequisites)


async def collect_prerequisites(courses: Sequence[str], lookup: PrerequisiteLookup, concurrency: int = 1) -> List[List[str]]:
    """
    Look up every course, returning prerequisite lists in input order.

    concurrency=1 awaits one lookup at a time; larger values allow that
    many lookups in flight at once.
    """
    if concurrency <= 1:
        return [await safe_lookup(lookup, course) for course in courses]

    semaphore = asyncio.Semaphore(concurrency)

    async def bounded(course: str) -> List[str]:
        async with semaphore:
            return await safe_lookup(lookup, course)

    return list(await asyncio.gather(*(bounded(course) for course in courses)))


async def assemble_graph(
    remaining: Dict[str, List[str]],
    completed: Sequence[str],
    lookup: PrerequisiteLookup,
    concurrency: int = 1,
) -> PrerequisiteGraph:
    """
    Assemble the prerequisite graph for outstanding and completed courses.

    All outstanding-course lookups finish before completed-course lookups
    start. Nodes and edges are returned exactly as pushed (no de-duplication).
    """
    outstanding_courses = [code for code in flatten_outstanding(remaining) if code]
    completed_courses = [code for code in completed if code]

    graph = PrerequisiteGraph()

    outstanding_prereqs = await collect_prerequisites(outstanding_courses, lookup, concurrency)
    for course, prerequisites in zip(outstanding_courses, outstanding_prereqs):
        graph.add_course(course, prerequisites, NodeStatus.NOT_COMPLETED)

    completed_prereqs = await collect_prerequisites(completed_courses, lookup, concurrency)
    for course, prerequisites in zip(completed_courses, completed_prereqs):
        graph.add_course(course, prerequisites, NodeStatus.COMPLETED)

    logger.info(
        f"Assembled graph: {len(graph.nodes)} nodes, {len(graph.edges)} edges "
        f"({len(outstanding_courses)} outstanding, {len(completed_courses)} completed)"
    )
    return graph

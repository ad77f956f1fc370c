"""
LCP prioritization savings — before/after simulation.

Simulates the page once as observed and once with the LCP request raised to
high priority, then credits the difference in the LCP request's end time.
The image cannot paint before it is in the DOM, so the "after" time is
floored by the latest end time among the request's dependencies.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from ..graph import DependencyGraph, GraphInvariantError, GraphNode, NetworkRequest, Priority
from ..models import TraceElement, node_item
from ..simulation import SimulationResult, Simulator
from .locator import find_main_document

logger = logging.getLogger(__name__)


@contextmanager
def elevated_priority(request: NetworkRequest, priority: Priority = Priority.HIGH) -> Iterator[NetworkRequest]:
    """Temporarily set `request.initial_priority`; the original is restored on exit."""
    original = request.initial_priority
    request.initial_priority = priority
    try:
        yield request
    finally:
        request.initial_priority = original


def _lcp_end_time(simulation: SimulationResult, lcp_node: GraphNode) -> float:
    timing = simulation.timing(lcp_node)
    if timing is None:
        raise GraphInvariantError(f"No simulated timing for LCP node {lcp_node.id}")
    return timing.end_time


def max_dependency_end_time(simulation: SimulationResult, dependency_ids: set[str]) -> float:
    """
    Latest end time among `dependency_ids` in `simulation`.

    Ids are resolved against the simulation's own nodes; an id it does not
    cover means the simulation dropped part of the graph.
    """
    nodes_by_id = simulation.nodes_by_id()
    latest = 0.0
    for node_id in sorted(dependency_ids):
        node = nodes_by_id.get(node_id)
        if node is None:
            raise GraphInvariantError(f"Dependency {node_id} missing from simulation")
        timing = simulation.timing(node)
        end_time = (timing.end_time if timing else 0) or 0
        latest = max(latest, end_time)
    return latest


def estimate_waste(
    lcp_element: TraceElement | None,
    lcp_node: GraphNode | None,
    graph: DependencyGraph,
    simulator: Simulator,
) -> dict:
    """
    Estimate milliseconds saved by fetching `lcp_node` at High priority.

    Returns {wasted_ms, results}; results holds one row {node, url, wasted_ms}
    or is empty when there is no candidate. wasted_ms is not clamped.
    """
    if lcp_element is None or lcp_node is None:
        return {"wasted_ms": 0, "results": []}

    # Captured before the priority changes; used to floor the "after" time.
    dependency_ids = {n.id for n in graph.transitive_dependencies(lcp_node)}

    main_document = find_main_document(graph)

    if lcp_node.record.compare_initial_priority_with(Priority.HIGH) >= 0:
        raise GraphInvariantError(f"LCP node {lcp_node.id} is already prioritized")

    before = simulator.simulate(graph, flexible_ordering=True)
    with elevated_priority(lcp_node.record, Priority.HIGH):
        after = simulator.simulate(graph, flexible_ordering=True)

    lcp_before = _lcp_end_time(before, lcp_node)
    lcp_after  = _lcp_end_time(after, lcp_node)
    floor      = max_dependency_end_time(after, dependency_ids)

    wasted_ms = lcp_before - max(lcp_after, floor)
    logger.debug(
        "LCP %s (main document %s): before=%.1fms after=%.1fms dependency floor=%.1fms wasted=%.1fms",
        lcp_node.record.url, main_document.id, lcp_before, lcp_after, floor, wasted_ms,
    )

    return {
        "wasted_ms": wasted_ms,
        "results": [{
            "node":      node_item(lcp_element.node),
            "url":       lcp_node.record.url,
            "wasted_ms": wasted_ms,
        }],
    }

"""
LCP candidate resolution — pure functions only.

Maps the trace's LCP element to the graph node that fetched its image,
or to None when there is nothing actionable.
"""
from __future__ import annotations

import logging

from ..graph import DependencyGraph, GraphNode
from ..models import ImageElement, TraceElement
from .eligibility import should_prioritize
from .locator import locate_network_node_by_url

logger = logging.getLogger(__name__)

LCP_EVENT_TYPE = "largest-contentful-paint"


def find_lcp_element(trace_elements: list[TraceElement]) -> TraceElement | None:
    return next((e for e in trace_elements if e.trace_event_type == LCP_EVENT_TYPE), None)


def resolve_candidate(
    graph: DependencyGraph,
    lcp_element: TraceElement | None,
    image_elements: list[ImageElement],
) -> GraphNode | None:
    if lcp_element is None:
        logger.debug("no LCP element in trace")
        return None

    path = lcp_element.node.devtools_node_path
    lcp_image = next((img for img in image_elements if img.node.devtools_node_path == path), None)
    if lcp_image is None:
        logger.debug("LCP element %s is not an image", path)
        return None

    lcp_node = locate_network_node_by_url(graph, lcp_image.src)
    if lcp_node is None:
        logger.debug("LCP image %s not found in dependency graph", lcp_image.src)
        return None

    if not should_prioritize(lcp_node.record):
        logger.debug(
            "LCP image %s not eligible (priority=%s)",
            lcp_image.src, lcp_node.record.initial_priority.label,
        )
        return None
    return lcp_node

"""Prioritize-LCP-image audit: candidate selection and simulated savings."""

from .analytics.candidate import find_lcp_element, resolve_candidate
from .analytics.eligibility import should_prioritize
from .analytics.locator import find_main_document, locate_network_node_by_url
from .analytics.waste import elevated_priority, estimate_waste
from .audit import AUDIT_META, audit
from .graph import DependencyGraph, GraphInvariantError, GraphNode, NetworkRequest, Priority
from .simulation import NodeTiming, SimulationResult, Simulator

__all__ = [
    "AUDIT_META",
    "DependencyGraph",
    "GraphInvariantError",
    "GraphNode",
    "NetworkRequest",
    "NodeTiming",
    "Priority",
    "SimulationResult",
    "Simulator",
    "audit",
    "elevated_priority",
    "estimate_waste",
    "find_lcp_element",
    "find_main_document",
    "locate_network_node_by_url",
    "resolve_candidate",
    "should_prioritize",
]

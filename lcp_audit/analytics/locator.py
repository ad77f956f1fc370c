"""
Graph node lookup — pure functions only.
"""
from __future__ import annotations

from ..graph import NETWORK, DependencyGraph, GraphInvariantError, GraphNode


def locate_network_node_by_url(graph: DependencyGraph, url: str) -> GraphNode | None:
    """
    Find the network node whose request URL is exactly `url`.

    Every node is visited once in the graph's canonical order; on duplicate
    URLs the last visited match wins.
    """
    match = None
    for node in graph.traverse():
        if node.type != NETWORK:
            continue
        if node.record.url == url:
            match = node
    return match


def find_main_document(graph: DependencyGraph) -> GraphNode:
    main_document = None
    for node in graph.traverse():
        if node.type != NETWORK:
            continue
        if node.is_main_document():
            main_document = node
    if main_document is None:
        raise GraphInvariantError("Could not find main document node")
    return main_document

"""
Page-load dependency graph primitives.

The graph is an arena: nodes live in a networkx DiGraph keyed by their
stable id, and an edge u → v means "u must complete before v starts".
Construction belongs to the graph builder; analytics only read it.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator
from urllib.parse import urlsplit

import networkx as nx

NETWORK = "network"
CPU     = "cpu"

NON_NETWORK_PROTOCOLS = {"blob", "data", "intent", "file", "filesystem", "chrome-extension"}


class GraphInvariantError(RuntimeError):
    """A well-formed graph or simulation broke one of its guarantees."""


class Priority(IntEnum):
    VERY_LOW  = 0
    LOW       = 1
    MEDIUM    = 2
    HIGH      = 3
    VERY_HIGH = 4

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "Priority":
        for priority, name in _LABELS.items():
            if name == label:
                return priority
        raise ValueError(f"Unknown request priority: {label!r}")


_LABELS = {
    Priority.VERY_LOW:  "VeryLow",
    Priority.LOW:       "Low",
    Priority.MEDIUM:    "Medium",
    Priority.HIGH:      "High",
    Priority.VERY_HIGH: "VeryHigh",
}


@dataclass
class NetworkRequest:
    url: str
    initial_priority: Priority = Priority.LOW
    protocol: str = ""

    def compare_initial_priority_with(self, priority: Priority) -> int:
        """Negative, zero or positive as this request sits below, at or above `priority`."""
        return int(self.initial_priority) - int(priority)

    @property
    def is_network_originated(self) -> bool:
        scheme = urlsplit(self.url).scheme.lower()
        protocol = (self.protocol or "").lower()
        return scheme not in NON_NETWORK_PROTOCOLS and protocol not in NON_NETWORK_PROTOCOLS


@dataclass(eq=False)
class GraphNode:
    # eq=False keeps identity hashing, so nodes can key simulation timings.
    id: str
    type: str
    record: NetworkRequest | None = None
    main_document: bool = False

    def is_main_document(self) -> bool:
        return self.type == NETWORK and self.main_document


class DependencyGraph:
    def __init__(self) -> None:
        self._g = nx.DiGraph()

    # ── Construction ──────────────────────────────────────────────────────────

    def add_node(self, node: GraphNode) -> GraphNode:
        if node.id in self._g:
            raise ValueError(f"Duplicate node id: {node.id}")
        if node.type == NETWORK and node.record is None:
            raise ValueError(f"Network node {node.id} has no request record")
        self._g.add_node(node.id, node=node)
        return node

    def add_dependency(self, dependent: GraphNode, dependency: GraphNode) -> None:
        """Record that `dependent` cannot start before `dependency` completes."""
        for n in (dependent, dependency):
            if n.id not in self._g:
                raise ValueError(f"Unknown node: {n.id}")
        if dependent.id == dependency.id or nx.has_path(self._g, dependent.id, dependency.id):
            raise ValueError(f"Edge {dependency.id} -> {dependent.id} would create a cycle")
        self._g.add_edge(dependency.id, dependent.id)

    # ── Lookup ────────────────────────────────────────────────────────────────

    def node(self, node_id: str) -> GraphNode:
        if node_id not in self._g:
            raise KeyError(node_id)
        return self._g.nodes[node_id]["node"]

    def dependencies(self, node: GraphNode) -> list[GraphNode]:
        return [self.node(h) for h in self._g.predecessors(node.id)]

    def dependents(self, node: GraphNode) -> list[GraphNode]:
        return [self.node(h) for h in self._g.successors(node.id)]

    def transitive_dependencies(self, node: GraphNode) -> list[GraphNode]:
        return [self.node(h) for h in nx.ancestors(self._g, node.id)]

    # ── Traversal ─────────────────────────────────────────────────────────────

    def traverse(self) -> Iterator[GraphNode]:
        """
        Yield every node exactly once in canonical order.

        Breadth-first from the source nodes (no dependencies), following
        dependents in insertion order. Deterministic for a given build order.
        """
        roots = [h for h in self._g.nodes if self._g.in_degree(h) == 0]
        seen  = set(roots)
        queue = deque(roots)
        while queue:
            current = queue.popleft()
            yield self.node(current)
            for nxt in self._g.successors(current):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)

    def __iter__(self) -> Iterator[GraphNode]:
        return self.traverse()

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __contains__(self, node: object) -> bool:
        return isinstance(node, GraphNode) and node.id in self._g and self.node(node.id) is node

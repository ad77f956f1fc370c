"""
Load-simulator contract.

The simulator itself is an external collaborator; this module only fixes
the shape of what it is asked and what it answers.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, NamedTuple, Protocol

from .graph import DependencyGraph, GraphNode


class NodeTiming(NamedTuple):
    start_time: float
    end_time: float


@dataclass(frozen=True)
class SimulationResult:
    node_timings: Mapping[GraphNode, NodeTiming]

    def __post_init__(self) -> None:
        # Snapshot the caller's mapping so the result can never change underneath us.
        object.__setattr__(self, "node_timings", MappingProxyType(dict(self.node_timings)))

    def timing(self, node: GraphNode) -> NodeTiming | None:
        return self.node_timings.get(node)

    def nodes_by_id(self) -> dict[str, GraphNode]:
        return {node.id: node for node in self.node_timings}


class Simulator(Protocol):
    def simulate(self, graph: DependencyGraph, *, flexible_ordering: bool = False) -> SimulationResult:
        ...

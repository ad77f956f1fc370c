"""
Priority-hint eligibility — pure functions only.
"""
from __future__ import annotations

from ..graph import NetworkRequest, Priority


def should_prioritize(request: NetworkRequest) -> bool:
    # Already high priority: nothing left to gain.
    if request.compare_initial_priority_with(Priority.HIGH) >= 0:
        return False
    # Inline/data resources never hit the network, so a hint cannot help.
    if not request.is_network_originated:
        return False
    return True

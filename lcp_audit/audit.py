"""
Prioritize-LCP-image audit.

Wires externally produced artifacts (trace elements, image elements, the
LCP dependency graph and a load simulator) through candidate resolution
and waste estimation into a scored opportunity.
"""
from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Awaitable, Callable

from .analytics.candidate import find_lcp_element, resolve_candidate
from .analytics.scoring import score_for_wasted_ms
from .analytics.waste import estimate_waste
from .config import AuditContext
from .graph import DependencyGraph
from .models import Artifacts, AuditProduct, Heading, make_opportunity_details
from .simulation import Simulator

logger = logging.getLogger(__name__)

AUDIT_META = {
    "id":               "prioritize-lcp-image",
    "title":            "Prioritize Largest Contentful Paint image",
    "description":      (
        "If the LCP element is an image, you should use Priority Hints to improve LCP. "
        "[Learn more](https://web.dev/optimize-lcp/#preload-important-resources)."
    ),
    "supported_modes":    ["navigation"],
    "required_artifacts": ["traces", "devtools_logs", "gather_context", "url",
                           "trace_elements", "image_elements"],
    "score_display_mode": "numeric",
}

HEADINGS = [
    Heading(key="node",      value_type="node",       label=""),
    Heading(key="url",       value_type="url",        label="URL"),
    Heading(key="wasted_ms", value_type="timespanMs", label="Potential Savings"),
]

GraphLoader     = Callable[[dict, AuditContext], Awaitable[DependencyGraph]]
SimulatorLoader = Callable[[dict, AuditContext], Awaitable[Simulator]]


def display_savings(wasted_ms: float) -> str:
    if not wasted_ms:
        return ""
    # Nearest 10 ms, halves rounded up.
    rounded = math.floor(wasted_ms / 10 + 0.5) * 10
    return f"Potential savings of {rounded:,} ms"


async def audit(
    artifacts: Artifacts,
    context: AuditContext,
    *,
    load_lcp_graph: GraphLoader,
    load_simulator: SimulatorLoader,
    score: Callable[..., float] = score_for_wasted_ms,
) -> AuditProduct:
    """
    Run the audit once.

    load_lcp_graph  — resolves the pessimistic LCP dependency graph from metric data
    load_simulator  — resolves a load simulator from the devtools log
    Both run concurrently; a failure in either fails the audit as-is.
    """
    settings = context.settings
    trace        = artifacts.traces.get(settings.default_pass)
    devtools_log = artifacts.devtools_logs.get(settings.default_pass)
    metric_data: dict[str, Any] = {
        "trace":          trace,
        "devtools_log":   devtools_log,
        "gather_context": artifacts.gather_context,
        "settings":       settings,
        "url":            artifacts.url,
    }
    simulator_data = {"devtools_log": devtools_log, "settings": settings}

    lcp_element = find_lcp_element(artifacts.trace_elements)

    graph, simulator = await asyncio.gather(
        load_lcp_graph(metric_data, context),
        load_simulator(simulator_data, context),
    )

    lcp_node = resolve_candidate(graph, lcp_element, artifacts.image_elements)
    waste = estimate_waste(lcp_element, lcp_node, graph, simulator)
    wasted_ms = waste["wasted_ms"]
    logger.debug("%s: wasted_ms=%s", AUDIT_META["id"], wasted_ms)

    details = make_opportunity_details(HEADINGS, waste["results"], wasted_ms)
    return AuditProduct(
        score=score(wasted_ms, settings.scoring_p10_ms, settings.scoring_median_ms),
        numeric_value=wasted_ms,
        numeric_unit="millisecond",
        display_value=display_savings(wasted_ms),
        details=details,
    )

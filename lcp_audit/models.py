"""
Artifact and audit-product models.

Artifacts arrive from the trace/DOM gatherers; the product goes to the
reporting layer. No analysis logic lives here.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class NodeDetails(BaseModel):
    devtools_node_path: str
    lh_id:         Optional[str]  = None
    selector:      str            = ""
    bounding_rect: Optional[dict] = None
    snippet:       str            = ""
    node_label:    str            = ""


class TraceElement(BaseModel):
    trace_event_type: str
    node:             NodeDetails


class ImageElement(BaseModel):
    src:  str
    node: NodeDetails


class Artifacts(BaseModel):
    trace_elements: List[TraceElement] = []
    image_elements: List[ImageElement] = []
    traces:         Dict[str, Any]     = {}
    devtools_logs:  Dict[str, Any]     = {}
    gather_context: Dict[str, Any]     = {}
    url:            Dict[str, Any]     = {}


class Heading(BaseModel):
    key:        str
    value_type: str
    label:      str = ""


class OpportunityDetails(BaseModel):
    type:               str = "opportunity"
    headings:           List[Heading]
    items:              List[Dict[str, Any]]
    overall_savings_ms: float


class AuditProduct(BaseModel):
    score:         float
    numeric_value: float
    numeric_unit:  str = "millisecond"
    display_value: str = ""
    details:       OpportunityDetails


def node_item(node: NodeDetails) -> dict:
    """DOM node as the report's `node` column renders it."""
    return {
        "type":         "node",
        "lhId":         node.lh_id,
        "path":         node.devtools_node_path,
        "selector":     node.selector,
        "boundingRect": node.bounding_rect,
        "snippet":      node.snippet,
        "nodeLabel":    node.node_label,
    }


def make_opportunity_details(
    headings: list[Heading],
    items: list[dict],
    overall_savings_ms: float,
) -> OpportunityDetails:
    return OpportunityDetails(
        headings=headings,
        items=items,
        overall_savings_ms=overall_savings_ms,
    )

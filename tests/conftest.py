"""
Shared builders and fake collaborators for the LCP audit tests.

Graphs are built in memory; simulators are scripted per test so every
timing an assertion depends on is visible in the test itself.
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from lcp_audit.graph import CPU, NETWORK, DependencyGraph, GraphNode, NetworkRequest, Priority  # noqa: E402
from lcp_audit.models import ImageElement, NodeDetails, TraceElement  # noqa: E402
from lcp_audit.simulation import NodeTiming, SimulationResult  # noqa: E402

DOC_URL   = "https://example.com/"
IMAGE_URL = "https://example.com/hero.jpg"
IMAGE_PATH = "1,HTML,1,BODY,0,IMG"


# --------------------------------------------------------------------------
# Graph builders
# --------------------------------------------------------------------------

def network_node(node_id, url, priority=Priority.LOW, main_document=False, protocol=""):
    record = NetworkRequest(url=url, initial_priority=priority, protocol=protocol)
    return GraphNode(id=node_id, type=NETWORK, record=record, main_document=main_document)


def cpu_node(node_id):
    return GraphNode(id=node_id, type=CPU)


def build_page(image_priority=Priority.LOW, with_parse_task=False, image_url=IMAGE_URL):
    """
    main document → image, plus an unrelated stylesheet off the document.

    with_parse_task inserts a CPU task between document and image, modelling
    the image only being discovered once the HTML is parsed.
    """
    graph = DependencyGraph()
    doc   = graph.add_node(network_node("doc", DOC_URL, Priority.VERY_HIGH, main_document=True))
    css   = graph.add_node(network_node("css", "https://example.com/site.css", Priority.VERY_HIGH))
    image = graph.add_node(network_node("img", image_url, image_priority))
    graph.add_dependency(css, doc)
    if with_parse_task:
        parse = graph.add_node(cpu_node("parse"))
        graph.add_dependency(parse, doc)
        graph.add_dependency(image, parse)
    else:
        graph.add_dependency(image, doc)
    return graph


def lcp_trace_element(path=IMAGE_PATH):
    return TraceElement(
        trace_event_type="largest-contentful-paint",
        node=NodeDetails(devtools_node_path=path, selector="img.hero", snippet='<img class="hero">'),
    )


def image_element(src=IMAGE_URL, path=IMAGE_PATH):
    return ImageElement(src=src, node=NodeDetails(devtools_node_path=path))


# --------------------------------------------------------------------------
# Fake simulators
# --------------------------------------------------------------------------

class ScriptedSimulator:
    """
    Replays end-time tables keyed by node id, one per simulate() call,
    cycling when calls outnumber tables. Nodes absent from a table end at 0.
    """

    def __init__(self, *tables, fail_on_call=None, omit=()):
        self.tables       = list(tables)
        self.fail_on_call = fail_on_call
        self.omit         = set(omit)
        self.calls        = []

    def simulate(self, graph, *, flexible_ordering=False):
        call = len(self.calls)
        self.calls.append({
            "flexible_ordering": flexible_ordering,
            "priorities": {n.id: n.record.initial_priority for n in graph if n.record},
        })
        if self.fail_on_call == call:
            raise RuntimeError("simulator crashed")
        table = self.tables[call % len(self.tables)]
        return SimulationResult({
            n: NodeTiming(0, table.get(n.id, 0)) for n in graph if n.id not in self.omit
        })


class PriorityAwareSimulator:
    """Image finishes at 500ms below High priority and at 200ms at High or above."""

    def __init__(self, image_id="img"):
        self.image_id = image_id

    def simulate(self, graph, *, flexible_ordering=False):
        timings = {}
        for n in graph:
            end = 100
            if n.id == self.image_id:
                end = 200 if n.record.initial_priority >= Priority.HIGH else 500
            timings[n] = NodeTiming(0, end)
        return SimulationResult(timings)


@pytest.fixture
def page():
    return build_page()


@pytest.fixture
def parsed_page():
    return build_page(with_parse_task=True)

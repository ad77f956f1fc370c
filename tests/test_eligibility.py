"""
Unit tests for analytics/eligibility.py.
"""
import pytest

from lcp_audit.analytics.eligibility import should_prioritize
from lcp_audit.graph import NetworkRequest, Priority

NETWORK_URL = "https://example.com/hero.jpg"
DATA_URL    = "data:image/png;base64,iVBORw0KGgo="


@pytest.mark.parametrize("priority", list(Priority))
@pytest.mark.parametrize("url", [NETWORK_URL, DATA_URL])
def test_prioritize_iff_below_high_and_networked(priority, url):
    req = NetworkRequest(url=url, initial_priority=priority)
    expected = priority < Priority.HIGH and url == NETWORK_URL
    assert should_prioritize(req) is expected


def test_low_network_image_is_candidate():
    assert should_prioritize(NetworkRequest(url=NETWORK_URL, initial_priority=Priority.LOW))


def test_already_high_is_skipped():
    assert not should_prioritize(NetworkRequest(url=NETWORK_URL, initial_priority=Priority.HIGH))


def test_non_network_protocol_is_skipped():
    req = NetworkRequest(url=NETWORK_URL, initial_priority=Priority.LOW, protocol="data")
    assert not should_prioritize(req)


def test_does_not_touch_request():
    req = NetworkRequest(url=NETWORK_URL, initial_priority=Priority.MEDIUM)
    should_prioritize(req)
    assert req.initial_priority is Priority.MEDIUM

"""Latency Simulator: bounds and fallback."""

import random

from catalog.infrastructure.latency import LatencySimulator

from tests.fakes import RecordingEvents


class _BrokenRandom(random.Random):
    def randint(self, a, b):
        raise RuntimeError("entropy pool empty")


def test_delay_within_default_bounds():
    sim = LatencySimulator(rng=random.Random(42))
    for _ in range(500):
        delay = sim.next_delay()
        assert isinstance(delay, int)
        assert 2000 <= delay <= 60_000


def test_bounds_are_inclusive():
    sim = LatencySimulator(min_ms=2000, max_ms=2000)
    assert sim.next_delay() == 2000


def test_custom_bounds():
    sim = LatencySimulator(min_ms=10, max_ms=20, rng=random.Random(7))
    assert all(10 <= sim.next_delay() <= 20 for _ in range(100))


def test_internal_fault_falls_back_to_2000():
    sim = LatencySimulator(rng=_BrokenRandom())
    assert sim.next_delay() == 2000


def test_internal_fault_reported_to_event_logger():
    events = RecordingEvents()
    sim = LatencySimulator(rng=_BrokenRandom(), events=events)

    sim.next_delay()

    assert events.messages("ERROR") == ["Failed to generate random delay"]
    assert isinstance(events.causes()[0], RuntimeError)


def test_inverted_bounds_fall_back_instead_of_raising():
    sim = LatencySimulator(min_ms=5000, max_ms=100, fallback_ms=2000)
    assert sim.next_delay() == 2000

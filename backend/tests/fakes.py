"""Test doubles for the controller's collaborators.

Invariants:
    - RecordingEvents satisfies EventLogger and keeps every call in order
    - ManualClock.sleep parks each caller until released, so tests decide
      when a simulated delay elapses
"""

import asyncio


class RecordingEvents:
    """In-memory EventLogger."""

    def __init__(self):
        self.records: list[tuple[str, str, BaseException | None]] = []

    def info(self, message):
        self.records.append(("INFO", message, None))

    def warn(self, message):
        self.records.append(("WARN", message, None))

    def error(self, message, cause=None):
        self.records.append(("ERROR", message, cause))

    def messages(self, level):
        return [m for lvl, m, _ in self.records if lvl == level]

    def causes(self):
        return [c for lvl, _, c in self.records if lvl == "ERROR"]


class ManualClock:
    """Replacement for asyncio.sleep with explicit release."""

    def __init__(self):
        self.calls: list[float] = []
        self._gates: list[asyncio.Event] = []

    async def sleep(self, seconds):
        gate = asyncio.Event()
        self.calls.append(seconds)
        self._gates.append(gate)
        await gate.wait()

    async def wait_for_calls(self, count):
        for _ in range(100):
            if len(self.calls) >= count:
                return
            await asyncio.sleep(0)
        raise AssertionError(f"expected {count} sleep call(s), saw {len(self.calls)}")

    def release(self, index=-1):
        self._gates[index].set()

    def release_all(self):
        for gate in self._gates:
            gate.set()


class StaticSource:
    """ProductSource returning a fixed payload, or raising a fixed error."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = 0

    async def load(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.rows)


class FixedLatency:
    def __init__(self, delay_ms=1500):
        self.delay_ms = delay_ms

    def next_delay(self):
        return self.delay_ms


SAMPLE_PRODUCT = {
    "id": 1100,
    "categories": ["Category 1", "Category 2"],
    "name": "Product 100",
    "image": "https://picsum.photos/400?image=530",
    "inStock": True,
    "price": 381,
}

"""Latency Simulator: bounded random delay standing in for server variance.

Invariants:
    - next_delay() returns an int in [min_ms, max_ms], both inclusive
    - next_delay() never raises: any internal fault yields fallback_ms
    - Faults are reported through the injected EventLogger when one is given
"""

import logging
import random

from catalog.core.domain_types import DelayMs
from catalog.core.repository_protocols import EventLogger

logger = logging.getLogger(__name__)


class LatencySimulator:
    """Uniform random delay in milliseconds."""

    def __init__(
        self,
        min_ms: int = 2000,
        max_ms: int = 60_000,
        fallback_ms: int = 2000,
        rng: random.Random | None = None,
        events: EventLogger | None = None,
    ):
        self.min_ms = min_ms
        self.max_ms = max_ms
        self.fallback_ms = fallback_ms
        self.rng = rng or random.Random()  # nosec B311
        self.events = events

    def next_delay(self) -> DelayMs:
        try:
            return DelayMs(self.rng.randint(self.min_ms, self.max_ms))
        except Exception as e:
            if self.events is not None:
                self.events.error("Failed to generate random delay", e)
            else:
                logger.error(f"Failed to generate random delay: {e}", exc_info=True)
            return DelayMs(self.fallback_ms)

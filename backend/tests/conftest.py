"""Root conftest: shared fixtures for controller, collaborators, and API client.

Invariants:
    - Delays never elapse on their own: the ManualClock releases them
    - The API client overrides controller/event dependencies (lifespan not run)
"""

import os

# Never reach real upstream endpoints from tests
os.environ.setdefault("CATALOG_PRODUCTS_URL", "http://catalog.test/products.json")
os.environ.setdefault("CATALOG_LOG_SINK_URL", "http://catalog.test/api/logs")
os.environ.setdefault("CATALOG_LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from catalog.api.dependencies import get_controller, get_events  # noqa: E402
from catalog.main import app  # noqa: E402
from catalog.services.interaction_controller import InteractionController  # noqa: E402

from tests.fakes import (  # noqa: E402
    SAMPLE_PRODUCT, FixedLatency, ManualClock, RecordingEvents, StaticSource,
)


@pytest.fixture
def sample_product():
    return dict(SAMPLE_PRODUCT)


@pytest.fixture
def events():
    return RecordingEvents()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def source():
    return StaticSource([dict(SAMPLE_PRODUCT)])


@pytest.fixture
async def controller(source, events, clock):
    ctrl = InteractionController(source, FixedLatency(1500), events, clock.sleep)
    yield ctrl
    await ctrl.close()


@pytest.fixture
async def loaded_controller(controller):
    await controller.initialize()
    return controller


@pytest.fixture
async def client(controller, events):
    """FastAPI test client bound to the in-memory controller."""
    app.dependency_overrides[get_controller] = lambda: controller
    app.dependency_overrides[get_events] = lambda: events

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()

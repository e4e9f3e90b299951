"""Catalog Routes: HTTP binding of the Display Surface contract.

Invariants:
    - Routes never mutate InteractionState directly; they raise intents on the controller
    - Filter/sort return 202 with the snapshot at acceptance (delay runs in the background)
    - Rows are returned as loaded; /rows adds display formatting only
"""

import logging

from fastapi import APIRouter, Depends, status

from catalog.api.dependencies import get_app_settings, get_controller, get_events
from catalog.config import Settings
from catalog.core.columns import column_definitions, format_row
from catalog.core.errors import DisplaySurfaceFault
from catalog.core.repository_protocols import EventLogger
from catalog.schemas.catalog import (
    CatalogSnapshot, DisplayErrorReport,
)
from catalog.schemas.grid_models import FilterModel, SortModel
from catalog.services.interaction_controller import InteractionController

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


@router.get("/state", response_model=CatalogSnapshot)
async def get_state(
    controller: InteractionController = Depends(get_controller),
):
    return controller.snapshot()


@router.get("/columns")
async def get_columns():
    return {"columns": column_definitions()}


@router.get("/rows")
async def get_rows(
    controller: InteractionController = Depends(get_controller),
    events: EventLogger = Depends(get_events),
    settings: Settings = Depends(get_app_settings),
):
    """Records with display-formatted values (categories joined, price as currency)."""
    return {
        "rows": [
            format_row(row, events, settings.currency)
            for row in controller.state.records
        ],
    }


@router.post(
    "/filter", response_model=CatalogSnapshot,
    status_code=status.HTTP_202_ACCEPTED,
)
async def change_filter(
    body: FilterModel,
    controller: InteractionController = Depends(get_controller),
):
    controller.submit_filter(body)
    return controller.snapshot()


@router.post(
    "/sort", response_model=CatalogSnapshot,
    status_code=status.HTTP_202_ACCEPTED,
)
async def change_sort(
    body: SortModel,
    controller: InteractionController = Depends(get_controller),
):
    controller.submit_sort(body)
    return controller.snapshot()


@router.post("/display-error", response_model=CatalogSnapshot)
async def report_display_error(
    body: DisplayErrorReport,
    controller: InteractionController = Depends(get_controller),
):
    controller.on_display_error(
        DisplaySurfaceFault(body.name, body.message, body.stack),
    )
    return controller.snapshot()

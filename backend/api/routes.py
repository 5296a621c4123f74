"""
API Routes

HTTP endpoints the admin editor and the storefront renderer use to
normalize solution page content.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from backend.api.schemas import (
    AnchorAxisRequest,
    AnchorKeyRequest,
    AnchorPresetInfo,
    DefaultTaskCardsRequest,
    ErrorResponse,
    HealthResponse,
    LinkedItemsRequest,
    LinkedItemsResponse,
    ListItemRequest,
    ListItemResponse,
    NormalizeTaskCardsRequest,
    RecommendationModeRequest,
    RecommendationModeResponse,
    ResolvedAnchorResponse,
    ScenePresetInfo,
    TaskCardsDocument,
    ToggleAnchorRequest,
)
from backend.core.config import settings
from backend.services.content_service import ContentService, get_content_service


# =============================================================================
# Router Setup
# =============================================================================

router = APIRouter()

ServiceDep = Annotated[ContentService, Depends(get_content_service)]

_ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Internal server error"}}


# =============================================================================
# Registry Endpoints
# =============================================================================


@router.get(
    "/scenes",
    response_model=list[ScenePresetInfo],
    summary="List usage scene presets",
)
async def list_scenes(service: ServiceDep) -> list[ScenePresetInfo]:
    """Scene presets in canonical card order."""
    return [ScenePresetInfo(**preset) for preset in service.list_scene_presets()]


@router.get(
    "/anchors",
    response_model=list[AnchorPresetInfo],
    summary="List body anchor presets",
)
async def list_anchors(service: ServiceDep) -> list[AnchorPresetInfo]:
    return [AnchorPresetInfo(**preset) for preset in service.list_anchor_presets()]


# =============================================================================
# Task Card Endpoints
# =============================================================================


@router.post(
    "/task-cards/normalize",
    response_model=TaskCardsDocument,
    responses=_ERROR_RESPONSES,
    summary="Normalize a task cards document",
    description="Return the canonical document with exactly one card per usage scene.",
)
async def normalize_task_cards(
    request: NormalizeTaskCardsRequest,
    service: ServiceDep,
) -> TaskCardsDocument:
    result = service.normalize(request.document, request.default_checked_scenes)
    return TaskCardsDocument(**result)


@router.post(
    "/task-cards/migrate",
    response_model=TaskCardsDocument,
    responses=_ERROR_RESPONSES,
    summary="Migrate legacy groups into task cards",
    description="Map a legacy {groups: [...]} document onto the fixed usage scenes by keyword.",
)
async def migrate_task_cards(
    request: NormalizeTaskCardsRequest,
    service: ServiceDep,
) -> TaskCardsDocument:
    result = service.migrate(request.document, request.default_checked_scenes)
    return TaskCardsDocument(**result)


@router.post(
    "/task-cards/defaults",
    response_model=TaskCardsDocument,
    summary="Default task cards for a solution",
    description="Fresh document pre-checked from the solution's usage scenes and industry.",
)
async def default_task_cards(
    request: DefaultTaskCardsRequest,
    service: ServiceDep,
) -> TaskCardsDocument:
    result = service.defaults_for_solution(request.industry, request.usage_scenes)
    return TaskCardsDocument(**result)


# =============================================================================
# Body Anchor Endpoints
# =============================================================================


@router.post(
    "/list-items/anchor/resolve",
    response_model=ResolvedAnchorResponse,
    summary="Resolve the display point of a list item",
)
async def resolve_anchor(request: ListItemRequest, service: ServiceDep) -> ResolvedAnchorResponse:
    return ResolvedAnchorResponse(anchor=service.resolve_anchor(request.item))


@router.post(
    "/list-items/anchor/toggle",
    response_model=ListItemResponse,
    summary="Enable or disable a list item anchor",
)
async def toggle_anchor(request: ToggleAnchorRequest, service: ServiceDep) -> ListItemResponse:
    return ListItemResponse(item=service.toggle_anchor(request.item, request.enabled))


@router.post(
    "/list-items/anchor/key",
    response_model=ListItemResponse,
    summary="Set the anchor preset key",
    description="Unknown keys leave the item unchanged.",
)
async def update_anchor_key(request: AnchorKeyRequest, service: ServiceDep) -> ListItemResponse:
    return ListItemResponse(item=service.update_anchor_key(request.item, request.key))


@router.post(
    "/list-items/anchor/axis",
    response_model=ListItemResponse,
    summary="Set one axis of the manual anchor",
    description="Text that does not parse as a finite number leaves the item unchanged.",
)
async def update_anchor_axis(request: AnchorAxisRequest, service: ServiceDep) -> ListItemResponse:
    return ListItemResponse(item=service.update_anchor_axis(request.item, request.axis, request.value))


@router.post(
    "/list-items/linked",
    response_model=LinkedItemsResponse,
    summary="Items drawn on the body map",
)
async def linked_items(request: LinkedItemsRequest, service: ServiceDep) -> LinkedItemsResponse:
    return LinkedItemsResponse(**service.linked_items(request.section_key, request.items))


# =============================================================================
# Recommended PPE Endpoint
# =============================================================================


@router.post(
    "/recommendations/mode",
    response_model=RecommendationModeResponse,
    summary="Set the recommended PPE mode",
    description="Writes the mode into the recommended-ppe section and cleans the manual product ids.",
)
async def set_recommendation_mode(
    request: RecommendationModeRequest, service: ServiceDep
) -> RecommendationModeResponse:
    return RecommendationModeResponse(
        **service.apply_recommendation_mode(request.sections, request.mode, request.product_ids)
    )


# =============================================================================
# Health Check Endpoint
# =============================================================================


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check that the scene and anchor registries are loaded.",
)
async def health_check(service: ServiceDep) -> HealthResponse:
    return HealthResponse(**service.health(), timestamp=datetime.now())


# =============================================================================
# Root Endpoint (for testing)
# =============================================================================


@router.get(
    "/",
    summary="API Root",
    description="Basic endpoint to verify API is running.",
)
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
    }

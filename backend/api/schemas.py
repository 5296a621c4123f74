"""
Pydantic Schemas for API Request/Response

Document payloads are typed as Any on purpose: stored content may have
any shape and the normalizers degrade it to defaults rather than
rejecting it.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Shared Models
# =============================================================================


class AnchorPoint(BaseModel):
    """Percentage coordinate over the body reference image."""

    x: float = Field(..., ge=0, le=100)
    y: float = Field(..., ge=0, le=100)


class TaskCard(BaseModel):
    """One canonical task card."""

    scene: str = Field(..., description="Usage scene code")
    checked: bool = Field(..., description="Whether the card is shown")
    title: str
    description: str
    items: list[str] = Field(default_factory=list)


class TaskCardsDocument(BaseModel):
    """Canonical task cards document: one card per usage scene."""

    cards: list[TaskCard]

    class Config:
        json_schema_extra = {
            "example": {
                "cards": [
                    {
                        "scene": "height-work",
                        "checked": True,
                        "title": "Working at Height",
                        "description": "Short description",
                        "items": ["Harness"],
                    }
                ]
            }
        }


# =============================================================================
# Request Schemas
# =============================================================================


class NormalizeTaskCardsRequest(BaseModel):
    """Request body for task card normalization and legacy migration."""

    document: Any = Field(default=None, description="Stored document of any shape")
    default_checked_scenes: list[Any] = Field(
        default_factory=list,
        description="Scenes that start checked when a card has no explicit flag",
        examples=[["construction", "wet-ground"]],
    )


class DefaultTaskCardsRequest(BaseModel):
    """Request body for building a fresh document for a solution."""

    industry: Optional[str] = Field(default=None, examples=["CONSTRUCTION"])
    usage_scenes: list[Any] = Field(default_factory=list)


class ListItemRequest(BaseModel):
    """Request body carrying a single content-list item."""

    item: dict[str, Any] = Field(..., examples=[{"title": "Helmet", "bodyAnchorKey": "head"}])


class ToggleAnchorRequest(ListItemRequest):
    enabled: bool


class AnchorKeyRequest(ListItemRequest):
    key: Any = Field(default=None, examples=["eyes"])


class AnchorAxisRequest(ListItemRequest):
    axis: Literal["x", "y"]
    value: str = Field(..., description="Raw text typed into the axis input")


class LinkedItemsRequest(BaseModel):
    section_key: str = Field(..., examples=["essential-categories"])
    items: list[Any] = Field(default_factory=list)


class RecommendationModeRequest(BaseModel):
    """Request to switch the recommended PPE block between rule and manual picks."""

    sections: Any = Field(default=None, description="Stored page sections of any shape")
    mode: Any = Field(default=None, examples=["manual"])
    product_ids: Any = Field(default=None, examples=[["p-100", "p-200"]])


# =============================================================================
# Response Schemas
# =============================================================================


class ScenePresetInfo(BaseModel):
    scene: str
    title: str
    description: str
    image: str
    keywords: list[str]


class AnchorPresetInfo(BaseModel):
    key: str
    label: str
    point: AnchorPoint


class ResolvedAnchorResponse(BaseModel):
    anchor: Optional[AnchorPoint] = Field(
        None, description="Display point, or null when the item has no anchor"
    )


class ListItemResponse(BaseModel):
    item: dict[str, Any]


class LinkedItemsResponse(BaseModel):
    linked: bool = Field(..., description="Whether the section renders as a body map")
    items: list[dict[str, Any]] = Field(default_factory=list)


class RecommendationModeResponse(BaseModel):
    mode: Literal["rule", "manual"]
    product_ids: list[str] = Field(default_factory=list)
    sections: list[Any] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = Field(default=False)
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error info")


# =============================================================================
# Health Check Schemas
# =============================================================================


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(..., description="Overall status: healthy or unhealthy")
    scenes: int = Field(..., description="Number of usage scenes loaded")
    anchor_keys: int = Field(..., description="Number of body anchor presets loaded")
    timestamp: datetime = Field(..., description="Check timestamp")

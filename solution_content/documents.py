"""
Document shapes produced by the normalizers.

These describe plain dicts so that normalized documents can be stored
and served without conversion.
"""

from typing_extensions import NotRequired, TypedDict


class BodyAnchorPoint(TypedDict):
    x: float
    y: float


class TaskCard(TypedDict):
    scene: str
    checked: bool
    title: str
    description: str
    items: list[str]


class TaskCardsDocument(TypedDict):
    cards: list[TaskCard]


class LegacyGroup(TypedDict):
    title: str
    description: NotRequired[str]
    items: NotRequired[list[str]]


class SectionListItem(TypedDict, total=False):
    title: str
    text: str
    bodyAnchorKey: str
    bodyAnchor: BodyAnchorPoint

from backend.core.config import Settings
from backend.services.content_service import ContentService, get_content_service
from solution_content.usage_scenes import USAGE_SCENES


def _checked_scenes(document):
    return [card["scene"] for card in document["cards"] if card["checked"]]


def test_normalize_passes_default_checked_scenes(service):
    result = service.normalize(None, ["wet-ground"])
    assert _checked_scenes(result) == ["wet-ground"]


def test_migrate_maps_legacy_groups(service):
    result = service.migrate({"groups": [{"title": "Steel and rebar", "items": ["Gloves"]}]})
    assert _checked_scenes(result) == ["steel-work"]


def test_defaults_for_solution_merges_industry_scenes(service):
    result = service.defaults_for_solution("MINING", ["wet-ground"])
    assert _checked_scenes(result) == [
        "heavy-duty",
        "impact-resistant",
        "slip-resistant",
        "dusty-work",
        "wet-ground",
    ]
    assert [card["scene"] for card in result["cards"]] == list(USAGE_SCENES)


def test_resolve_anchor_uses_configured_tolerance():
    item = {"bodyAnchor": {"x": 51, "y": 35}}

    strict = ContentService(settings=Settings(LEGACY_ANCHOR_TOLERANCE=0.5))
    loose = ContentService(settings=Settings(LEGACY_ANCHOR_TOLERANCE=1.5))

    assert strict.resolve_anchor(item) == {"x": 51, "y": 35}
    assert loose.resolve_anchor(item) == {"x": 30, "y": 52}


def test_editor_operations_delegate_to_engine(service):
    enabled = service.toggle_anchor({"title": "Helmet"}, True)
    assert enabled["bodyAnchorKey"] == "chest"

    item = {"title": "Helmet", "bodyAnchorKey": "head"}
    assert service.update_anchor_key(item, "bogus") is item
    assert service.update_anchor_axis(item, "x", "abc") is item
    assert service.update_anchor_axis(item, "x", "10")["bodyAnchor"] == {"x": 10, "y": 9}


def test_linked_items_only_for_body_map_section(service):
    items = [{"title": "Helmet", "bodyAnchor": {"x": 50, "y": 9}}]

    assert service.linked_items("recommended-ppe", items) == {"linked": False, "items": []}
    assert service.linked_items("", items) == {"linked": False, "items": []}

    linked = service.linked_items("essential-categories", items)
    assert linked["linked"] is True
    assert linked["items"][0]["itemKey"] == "Helmet-0"


def test_health_reports_registry_sizes(service):
    assert service.health() == {"status": "healthy", "scenes": 12, "anchor_keys": 8}


def test_get_content_service_is_singleton():
    assert get_content_service() is get_content_service()


def test_apply_recommendation_mode_updates_block_and_cleans_ids(service):
    sections = [
        {"key": "intro", "data": {}},
        {"key": "recommended-ppe", "data": {"mode": "rule"}},
    ]

    result = service.apply_recommendation_mode(sections, "manual", [" p-1 ", "p-1", 9, "p-2"])

    assert result["mode"] == "manual"
    assert result["product_ids"] == ["p-1", "p-2"]
    assert result["sections"][1] == {"key": "recommended-ppe", "data": {"mode": "manual"}}
    assert result["sections"][0] is sections[0]


def test_apply_recommendation_mode_falls_back_to_rule(service):
    result = service.apply_recommendation_mode("not sections", "bogus")
    assert result == {"mode": "rule", "product_ids": [], "sections": []}

"""
Scene Presets

Display title, preset image and match keywords for every usage scene.
Keywords drive the legacy group migration in task_cards.
"""

from __future__ import annotations

from dataclasses import dataclass

from solution_content.usage_scenes import USAGE_SCENES, format_usage_scene_label


@dataclass(frozen=True)
class TaskScenePreset:
    scene: str
    title: str
    description: str
    image: str
    keywords: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "scene": self.scene,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "keywords": list(self.keywords),
        }


_IMAGE_BASE_URL = "https://shop.laifappe.com/products"

TASK_SCENE_IMAGE_MAP: dict[str, str] = {
    "construction": f"{_IMAGE_BASE_URL}/1770361042141-5g4f7h.webp",
    "height-work": f"{_IMAGE_BASE_URL}/1770363013217-v00ecj.webp",
    "steel-work": f"{_IMAGE_BASE_URL}/1770363171840-vvovvq.webp",
    "falling-objects": f"{_IMAGE_BASE_URL}/1770363417228-8idl7.webp",
    "fall-protection": f"{_IMAGE_BASE_URL}/1770363558455-ue8sc.webp",
    "heavy-duty": f"{_IMAGE_BASE_URL}/1770363682624-rh88v.webp",
    "impact-resistant": f"{_IMAGE_BASE_URL}/1770363786498-b6yeht.webp",
    "slip-resistant": f"{_IMAGE_BASE_URL}/1770364175627-o5kes.webp",
    "cut-resistant": f"{_IMAGE_BASE_URL}/1770364304717-hcw5yd.webp",
    "eye-protection": f"{_IMAGE_BASE_URL}/1770364995259-le5bcj.webp",
    "dusty-work": f"{_IMAGE_BASE_URL}/1770364908075-h46bo.webp",
    "wet-ground": f"{_IMAGE_BASE_URL}/1770364856674-ejeein.webp",
}

# Scanned in taxonomy order, so an earlier scene wins a shared token
# ("fall" belongs to height-work before fall-protection is reached).
SCENE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "construction": ("construction", "site", "jobsite"),
    "height-work": ("height", "elevated", "at height", "fall"),
    "steel-work": ("steel", "rebar", "metal", "fabrication"),
    "falling-objects": ("falling object", "overhead", "dropped"),
    "fall-protection": ("harness", "lanyard", "fall protection"),
    "heavy-duty": ("heavy", "machinery", "forklift", "industrial"),
    "impact-resistant": ("impact", "collision", "struck"),
    "slip-resistant": ("slip", "wet floor", "anti-slip"),
    "cut-resistant": ("cut", "sharp", "laceration", "blade"),
    "eye-protection": ("eye", "goggle", "debris", "splash"),
    "dusty-work": ("dust", "demolition", "powder", "airborne"),
    "wet-ground": ("wet", "water", "moist", "mud"),
}


def _build_scene_keywords(scene: str) -> tuple[str, ...]:
    return (scene, format_usage_scene_label(scene).lower(), *SCENE_KEYWORDS[scene])


TASK_SCENE_PRESETS: tuple[TaskScenePreset, ...] = tuple(
    TaskScenePreset(
        scene=scene,
        title=format_usage_scene_label(scene),
        description="",
        image=TASK_SCENE_IMAGE_MAP[scene],
        keywords=_build_scene_keywords(scene),
    )
    for scene in USAGE_SCENES
)

_PRESETS_BY_SCENE = {preset.scene: preset for preset in TASK_SCENE_PRESETS}


def get_task_scene_preset(scene: str) -> TaskScenePreset:
    """Preset for a scene; unknown scenes fall back to the first preset."""
    if not isinstance(scene, str):
        return TASK_SCENE_PRESETS[0]
    return _PRESETS_BY_SCENE.get(scene, TASK_SCENE_PRESETS[0])

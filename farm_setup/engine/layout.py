# farm_setup/engine/layout.py

import math
import random
from typing import Dict, List, Mapping, Optional

from ..models.layout import FarmScene, FarmZone, SceneObject, Vec3

YARD_WIDTH = 120.0
YARD_DEPTH = 100.0

CAMERA_POSITION: Vec3 = (80.0, 50.0, 80.0)
CAMERA_FOV = 45.0

# Zone centres on the ground plane (x, y, z)
ZONE_POSITIONS: Dict[str, Vec3] = {
    "cow": (-40.0, 0.0, 0.0),
    "goat": (10.0, 0.0, -10.0),
    "hen": (-40.0, 0.0, 40.0),
    "fish": (30.0, 0.0, 30.0),
}

ZONE_LABELS = {
    "cow": "Dairy Farm",
    "goat": "Goat Farm",
    "hen": "Poultry Farm",
    "fish": "Fish Farm",
}

ANIMAL_KINDS = {
    "cow": "cow",
    "goat": "goat",
    "hen": "chicken",
    "fish": "fish",
}

# Most animals drawn per zone; larger herds are represented, not enumerated
MAX_SHOWN = {
    "cow": 12,
    "goat": 15,
    "hen": 30,
    "fish": 40,
}

TREE_POSITIONS: List[Vec3] = [
    (-50.0, 0.0, 25.0),
    (-55.0, 0.0, 10.0),
    (50.0, 0.0, 30.0),
    (55.0, 0.0, 5.0),
    (-20.0, 0.0, 40.0),
    (0.0, 0.0, 42.0),
    (25.0, 0.0, 38.0),
]


def _jitter(rng: random.Random, spread: float) -> float:
    return (rng.random() - 0.5) * spread


def place_cows(center: Vec3, n: int) -> List[Vec3]:
    """Cows stand in rows of three, 6 apart across and 3 apart deep."""
    cx, _, cz = center
    return [
        (cx - 6 + (i % 3) * 6, 0.6, cz - 4 + (i // 3) * 3)
        for i in range(n)
    ]


def place_goats(center: Vec3, n: int, rng: random.Random) -> List[Vec3]:
    cx, _, cz = center
    return [(cx + _jitter(rng, 12), 0.4, cz + _jitter(rng, 12)) for _ in range(n)]


def place_chickens(center: Vec3, n: int, rng: random.Random) -> List[Vec3]:
    cx, _, cz = center
    return [(cx + _jitter(rng, 18), 0.6, cz + _jitter(rng, 10)) for _ in range(n)]


def place_fish(center: Vec3, n: int, rng: random.Random) -> List[Vec3]:
    cx, _, cz = center
    return [
        (cx + _jitter(rng, 10), -0.3 + rng.random() * 0.5, cz + _jitter(rng, 12))
        for _ in range(n)
    ]


def place_animals(species: str, center: Vec3, n: int, rng: random.Random) -> List[Vec3]:
    if species == "cow":
        return place_cows(center, n)
    if species == "goat":
        return place_goats(center, n, rng)
    if species == "hen":
        return place_chickens(center, n, rng)
    if species == "fish":
        return place_fish(center, n, rng)
    raise ValueError(f"unknown species {species!r}")


def boundary_objects() -> List[SceneObject]:
    half_w = YARD_WIDTH / 2
    half_d = YARD_DEPTH / 2
    objs = [
        SceneObject(kind="fence", position=(0.0, 0.75, half_d), size=(YARD_WIDTH, 1.5, 0.2)),
        SceneObject(kind="fence", position=(0.0, 0.75, -half_d), size=(YARD_WIDTH, 1.5, 0.2)),
        SceneObject(
            kind="fence",
            position=(-half_w, 0.75, 0.0),
            size=(YARD_DEPTH, 1.5, 0.2),
            rotation_y=math.pi / 2,
        ),
        SceneObject(
            kind="fence",
            position=(half_w, 0.75, 0.0),
            size=(YARD_DEPTH, 1.5, 0.2),
            rotation_y=math.pi / 2,
        ),
        SceneObject(kind="gate", position=(0.0, 1.5, half_d + 0.2), size=(10.0, 3.0, 0.4)),
    ]
    for x in (-5.5, 5.5):
        objs.append(
            SceneObject(kind="gate_post", position=(x, 2.0, half_d + 0.2), size=(0.6, 4.0, 0.6))
        )
    return objs


def tree_objects() -> List[SceneObject]:
    return [
        SceneObject(kind="tree", position=p, variant="palm" if i % 3 == 0 else "pine")
        for i, p in enumerate(TREE_POSITIONS)
    ]


def build_farm_scene(counts: Mapping[str, int], seed: Optional[int] = None) -> FarmScene:
    """
    Lay out the model farm for a plan.

    Only species with a positive headcount get a zone. The same seed always
    yields the same scene.
    """
    if seed is None:
        seed = random.randrange(2**31)
    rng = random.Random(seed)

    zones: List[FarmZone] = []
    for species in ("cow", "goat", "hen", "fish"):
        planned = counts.get(species, 0)
        if planned <= 0:
            continue
        center = ZONE_POSITIONS[species]
        shown = min(planned, MAX_SHOWN[species])
        zones.append(
            FarmZone(
                species=species,
                label=ZONE_LABELS[species],
                position=center,
                animal_kind=ANIMAL_KINDS[species],
                planned_count=planned,
                animals=place_animals(species, center, shown, rng),
            )
        )

    return FarmScene(
        seed=seed,
        yard_width=YARD_WIDTH,
        yard_depth=YARD_DEPTH,
        camera_position=CAMERA_POSITION,
        camera_fov=CAMERA_FOV,
        zones=zones,
        decorations=tree_objects() + boundary_objects(),
    )

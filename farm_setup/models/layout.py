# farm_setup/models/layout.py

from typing import List, Optional, Tuple

from pydantic import Field

from .plan import CamelModel, FarmingType

Vec3 = Tuple[float, float, float]


class SceneObject(CamelModel):
    kind: str                       # "tree", "fence", "gate", "gate_post"
    position: Vec3
    variant: Optional[str] = None   # tree type
    size: Optional[Vec3] = None     # box extents for fences / gate
    rotation_y: float = 0.0


class FarmZone(CamelModel):
    species: FarmingType
    label: str
    position: Vec3
    animal_kind: str
    planned_count: int              # headcount from the plan
    animals: List[Vec3] = Field(default_factory=list)


class FarmScene(CamelModel):
    seed: int
    yard_width: float
    yard_depth: float
    camera_position: Vec3
    camera_fov: float
    zones: List[FarmZone]
    decorations: List[SceneObject]

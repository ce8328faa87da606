# farm_setup/models/plan.py

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

FarmingType = Literal["hen", "goat", "cow", "fish"]
Level = Literal["low", "medium", "high"]
Season = Literal["summer", "monsoon", "winter"]

# Display order for panels, profit rows and "Select All"
FARMING_TYPES: List[str] = ["hen", "goat", "cow", "fish"]

MIN_LAND_CENTS = 11
MAX_LAND_CENTS = 99

# Plural and long-form names seen on forms and spreadsheets
SPECIES_ALIASES = {
    "hens": "hen",
    "chicken": "hen",
    "chickens": "hen",
    "poultry": "hen",
    "goats": "goat",
    "cows": "cow",
    "cattle": "cow",
    "dairy": "cow",
}


def normalize_species_key(s: str) -> str:
    """
    'Hen', ' HENS ', 'hen farming', 'Poultry' -> 'hen'
    """
    if s is None:
        return ""
    raw = str(s).strip().lower()
    if raw.endswith(" farming"):
        raw = raw[: -len(" farming")].strip()
    return SPECIES_ALIASES.get(raw, raw)


class CamelModel(BaseModel):
    """
    snake_case in Python, camelCase on the wire.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SpeciesRate(CamelModel):
    species: FarmingType
    label: str
    allocation_weight: float
    area_per_head_sqft: float
    monthly_profit_per_head: float
    water_l_per_head_day: float
    maintenance_points: int


class FarmSetupRequest(CamelModel):
    land_size: int = Field(..., ge=MIN_LAND_CENTS, le=MAX_LAND_CENTS, description="Free land in cents")
    farming_types: List[FarmingType] = Field(default_factory=list)

    @field_validator("farming_types", mode="before")
    @classmethod
    def clean_types(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set)):
            # left for the List[FarmingType] check to reject
            return value
        seen = []
        for v in value:
            key = normalize_species_key(v) if isinstance(v, str) else v
            if key not in seen:
                seen.append(key)
        return seen


# =======================================================
# Farm Plan pieces
# =======================================================

class AreaBreakdown(CamelModel):
    total_area: int
    utility_area: int
    usable_area: int


class HenCapacity(CamelModel):
    count: int
    allocated_area: int
    shed_area: int
    feed_area: int
    egg_collection_area: int


class GoatCapacity(CamelModel):
    count: int
    allocated_area: int
    shed_area: int
    grazing_area: int
    water_feed_area: int


class CowCapacity(CamelModel):
    count: int
    allocated_area: int
    shed_area: int
    milking_area: int
    fodder_storage: int


class FishCapacity(CamelModel):
    estimated_fish_count: int
    allocated_area: int
    pond_area: int
    pond_depth: float
    fish_types: List[str]

    @property
    def count(self) -> int:
        return self.estimated_fish_count


class CalculatedCapacity(CamelModel):
    hen: Optional[HenCapacity] = None
    goat: Optional[GoatCapacity] = None
    cow: Optional[CowCapacity] = None
    fish: Optional[FishCapacity] = None

    def counts(self) -> Dict[str, int]:
        """Headcount per species, 0 for species that were not planned."""
        out = {}
        for species in FARMING_TYPES:
            record = getattr(self, species)
            out[species] = record.count if record is not None else 0
        return out


class ProfitBreakdown(CamelModel):
    hen: int = 0
    goat: int = 0
    cow: int = 0
    fish: int = 0
    total: int = 0


class ProfitEstimate(CamelModel):
    monthly: ProfitBreakdown
    annual: ProfitBreakdown


class WaterRequirement(CamelModel):
    level: Level
    daily_liters: int


class SeasonalRecommendation(CamelModel):
    farming_type: FarmingType
    suitability: Level
    notes: str


class WasteFlow(CamelModel):
    source: str
    product: str
    destination: str


class WasteReuseFlow(CamelModel):
    has_biogas: bool = False
    biogas_capacity: float = 0.0
    slurry_for_fish_pond: bool = False
    flows: List[WasteFlow] = Field(default_factory=list)
    notes: str = ""


class FarmPlan(CamelModel):
    land_size: int
    farming_types: List[FarmingType]
    area_breakdown: AreaBreakdown
    calculated_capacity: CalculatedCapacity
    profit_estimate: ProfitEstimate
    water_requirement: WaterRequirement
    maintenance_level: Level
    current_season: Season
    seasonal_recommendations: List[SeasonalRecommendation]
    waste_reuse_flow: WasteReuseFlow
    warnings: List[str] = Field(default_factory=list)
    visualization_prompt: str = ""

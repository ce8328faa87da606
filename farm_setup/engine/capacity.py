# farm_setup/engine/capacity.py

from typing import Dict, List, Mapping, Sequence, Tuple

from ..models.plan import (
    CalculatedCapacity,
    CowCapacity,
    FishCapacity,
    GoatCapacity,
    HenCapacity,
    SpeciesRate,
)

MIN_FISH_LAND_CENTS = 15
POND_DEPTH_FT = 5.0
SMALL_POND_SQFT = 2000

FISH_LAND_WARNING = "Fish farming requires minimum 15 cents of land"

# Share of a species' allocation given to each sub-area.
# Fish keeps the last 20% for the bund around the pond.
SUB_AREA_FRACTIONS: Dict[str, Dict[str, float]] = {
    "hen": {"shed_area": 0.60, "feed_area": 0.25, "egg_collection_area": 0.15},
    "goat": {"shed_area": 0.30, "grazing_area": 0.55, "water_feed_area": 0.15},
    "cow": {"shed_area": 0.55, "milking_area": 0.25, "fodder_storage": 0.20},
    "fish": {"pond_area": 0.80},
}

# Sub-area that limits the headcount
PRIMARY_SUB_AREA = {
    "hen": "shed_area",
    "goat": "shed_area",
    "cow": "shed_area",
    "fish": "pond_area",
}


def fish_allowed(land_size: float) -> bool:
    return land_size >= MIN_FISH_LAND_CENTS


def allocate_areas(
    usable_area: int,
    farming_types: Sequence[str],
    land_size: float,
    rates: Mapping[str, SpeciesRate],
) -> Dict[str, int]:
    """
    Share the usable area between the selected species by allocation weight.

    Fish gets nothing below the minimum land size; the other species split
    the whole usable area among themselves. Shares are floored, so their sum
    never exceeds usable_area.
    """
    alloc = {s: 0 for s in farming_types}

    eligible = [s for s in farming_types if s != "fish" or fish_allowed(land_size)]
    total_weight = sum(rates[s].allocation_weight for s in eligible)
    if total_weight <= 0:
        return alloc

    for s in eligible:
        alloc[s] = int(usable_area * rates[s].allocation_weight / total_weight)
    return alloc


def split_sub_areas(species: str, allocated_area: int) -> Dict[str, int]:
    return {
        name: int(allocated_area * fraction)
        for name, fraction in SUB_AREA_FRACTIONS[species].items()
    }


def headcount(species: str, sub_areas: Mapping[str, int], rate: SpeciesRate) -> int:
    if rate.area_per_head_sqft <= 0:
        return 0
    return int(sub_areas[PRIMARY_SUB_AREA[species]] // rate.area_per_head_sqft)


def fish_types_for_pond(pond_area: int) -> List[str]:
    if pond_area <= 0:
        return []
    if pond_area < SMALL_POND_SQFT:
        return ["Tilapia", "Catfish"]
    return ["Rohu", "Catla", "Mrigal"]


def build_capacity(
    land_size: float,
    usable_area: int,
    farming_types: Sequence[str],
    rates: Mapping[str, SpeciesRate],
) -> Tuple[CalculatedCapacity, List[str]]:
    """
    Turn the usable area into per-species capacity records.

    Returns the capacity and the warnings raised on the way.
    """
    warnings: List[str] = []
    alloc = allocate_areas(usable_area, farming_types, land_size, rates)
    records = {}

    for species in farming_types:
        area = alloc[species]
        subs = split_sub_areas(species, area)
        count = headcount(species, subs, rates[species])

        if species == "hen":
            records["hen"] = HenCapacity(count=count, allocated_area=area, **subs)
        elif species == "goat":
            records["goat"] = GoatCapacity(count=count, allocated_area=area, **subs)
        elif species == "cow":
            records["cow"] = CowCapacity(count=count, allocated_area=area, **subs)
        elif species == "fish":
            records["fish"] = FishCapacity(
                estimated_fish_count=count,
                allocated_area=area,
                pond_area=subs["pond_area"],
                pond_depth=POND_DEPTH_FT if subs["pond_area"] > 0 else 0.0,
                fish_types=fish_types_for_pond(subs["pond_area"]),
            )

        if species == "fish" and not fish_allowed(land_size):
            warnings.append(FISH_LAND_WARNING)
        elif count == 0:
            warnings.append(
                f"Not enough land for {species} farming with the current selection"
            )

    return CalculatedCapacity(**records), warnings

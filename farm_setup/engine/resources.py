# farm_setup/engine/resources.py

from typing import List, Mapping

from ..models.plan import SpeciesRate, WasteFlow, WasteReuseFlow, WaterRequirement

WATER_LOW_LITERS = 500
WATER_MEDIUM_LITERS = 2000

MAINTENANCE_LOW_POINTS = 2
MAINTENANCE_MEDIUM_POINTS = 5

BIOGAS_M3_PER_COW = 0.4  # ~10 kg dung per cow per day


def water_requirement(
    counts: Mapping[str, int],
    rates: Mapping[str, SpeciesRate],
) -> WaterRequirement:
    liters = 0.0
    for species, count in counts.items():
        if count > 0 and species in rates:
            liters += count * rates[species].water_l_per_head_day
    daily = int(round(liters))

    if daily < WATER_LOW_LITERS:
        level = "low"
    elif daily < WATER_MEDIUM_LITERS:
        level = "medium"
    else:
        level = "high"
    return WaterRequirement(level=level, daily_liters=daily)


def maintenance_level(
    counts: Mapping[str, int],
    rates: Mapping[str, SpeciesRate],
) -> str:
    points = sum(
        rates[s].maintenance_points
        for s, count in counts.items()
        if count > 0 and s in rates
    )
    if points <= MAINTENANCE_LOW_POINTS:
        return "low"
    if points <= MAINTENANCE_MEDIUM_POINTS:
        return "medium"
    return "high"


def waste_reuse_flow(counts: Mapping[str, int]) -> WasteReuseFlow:
    """
    Cross-species byproduct flow:
      cow dung -> biogas -> cooking fuel
      biogas slurry -> fish pond (only with fish)
      hen litter / goat manure -> compost -> fodder plots
    """
    cows = counts.get("cow", 0)
    fish = counts.get("fish", 0)

    has_biogas = cows > 0
    capacity = round(cows * BIOGAS_M3_PER_COW, 1) if has_biogas else 0.0
    slurry_to_pond = has_biogas and fish > 0

    flows: List[WasteFlow] = []
    notes: List[str] = []

    if has_biogas:
        flows.append(WasteFlow(source="cow", product="biogas", destination="cooking fuel"))
        notes.append(
            f"Dung from {cows} cows can run a {capacity} m³/day biogas plant for cooking fuel."
        )
    if slurry_to_pond:
        flows.append(WasteFlow(source="biogas slurry", product="nutrients", destination="fish pond"))
        notes.append("Biogas slurry fertilises the fish pond and saves 20-30% of feed cost.")
    if counts.get("hen", 0) > 0:
        flows.append(WasteFlow(source="hen", product="litter compost", destination="fodder plots"))
    if counts.get("goat", 0) > 0:
        flows.append(WasteFlow(source="goat", product="manure compost", destination="fodder plots"))
    if counts.get("hen", 0) > 0 or counts.get("goat", 0) > 0:
        notes.append("Poultry litter and goat manure can be composted for fodder plots.")

    return WasteReuseFlow(
        has_biogas=has_biogas,
        biogas_capacity=capacity,
        slurry_for_fish_pond=slurry_to_pond,
        flows=flows,
        notes=" ".join(notes),
    )

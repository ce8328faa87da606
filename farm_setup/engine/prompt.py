# farm_setup/engine/prompt.py

from typing import List

from ..models.plan import AreaBreakdown, CalculatedCapacity, WasteReuseFlow


def build_visualization_prompt(
    land_size: int,
    area: AreaBreakdown,
    capacity: CalculatedCapacity,
    waste: WasteReuseFlow,
) -> str:
    """
    Text prompt describing the planned farm, for generating an illustration by hand.
    """
    lines: List[str] = [
        f"Top-down illustration of a small integrated Indian farm on {land_size} cents "
        f"({area.total_area:,} sq ft), with {area.utility_area:,} sq ft of paths and storage.",
    ]

    if capacity.cow is not None and capacity.cow.count > 0:
        c = capacity.cow
        lines.append(
            f"- A cattle shed of {c.shed_area:,} sq ft with {c.count} cows, "
            f"a {c.milking_area:,} sq ft milking area and {c.fodder_storage:,} sq ft of fodder storage."
        )
    if capacity.goat is not None and capacity.goat.count > 0:
        g = capacity.goat
        lines.append(
            f"- A raised goat shed of {g.shed_area:,} sq ft with {g.count} goats "
            f"and a {g.grazing_area:,} sq ft fenced grazing patch."
        )
    if capacity.hen is not None and capacity.hen.count > 0:
        h = capacity.hen
        lines.append(
            f"- A poultry shed of {h.shed_area:,} sq ft housing {h.count} hens "
            f"with nesting boxes for egg collection."
        )
    if capacity.fish is not None and capacity.fish.estimated_fish_count > 0:
        f = capacity.fish
        lines.append(
            f"- A {f.pond_area:,} sq ft fish pond, {f.pond_depth:g} ft deep, "
            f"stocked with {', '.join(f.fish_types)}."
        )
    if waste.has_biogas:
        lines.append(f"- A small {waste.biogas_capacity} m³ biogas plant beside the cattle shed.")

    lines.append("Solar panels on shed roofs, coconut and pine trees along a fenced boundary, daylight.")
    return "\n".join(lines)

# farm_setup/services/planner.py

import logging
from datetime import date
from typing import Dict, Optional, Sequence

from ..engine.area import compute_area_breakdown
from ..engine.capacity import build_capacity
from ..engine.profit import estimate_profit
from ..engine.prompt import build_visualization_prompt
from ..engine.resources import maintenance_level, waste_reuse_flow, water_requirement
from ..engine.seasons import current_season, seasonal_recommendations
from ..models.plan import FARMING_TYPES, FarmPlan, SpeciesRate, normalize_species_key
from .species_rates import get_species_rate

logger = logging.getLogger(__name__)


class RateTableError(RuntimeError):
    """The species rate table has no row for a requested species."""


def _normalize_types(farming_types: Sequence[str]) -> list:
    out = []
    for t in farming_types:
        key = normalize_species_key(t)
        if key not in FARMING_TYPES:
            raise ValueError(f"unknown farming type {t!r}")
        if key not in out:
            out.append(key)
    return out


def load_rates(farming_types: Sequence[str]) -> Dict[str, SpeciesRate]:
    rates: Dict[str, SpeciesRate] = {}
    for species in farming_types:
        try:
            rates[species] = get_species_rate(species)
        except KeyError:
            raise RateTableError(f"no rate data for {species!r}") from None
    return rates


def calculate_farm_plan(
    land_size: int,
    farming_types: Sequence[str],
    today: Optional[date] = None,
) -> FarmPlan:
    """
    Build a complete Farm Plan for a land size (cents) and a livestock selection.

      1. area breakdown (25% utility)
      2. per-species allocation, sub-areas and headcount
      3. profit, water, maintenance
      4. season, suitability, waste reuse, prompt
    """
    types = _normalize_types(farming_types)
    if not types:
        raise ValueError("at least one farming type is required")

    rates = load_rates(types)

    area = compute_area_breakdown(land_size)
    capacity, warnings = build_capacity(land_size, area.usable_area, types, rates)
    counts = capacity.counts()

    season = current_season(today)
    waste = waste_reuse_flow(counts)

    plan = FarmPlan(
        land_size=land_size,
        farming_types=types,
        area_breakdown=area,
        calculated_capacity=capacity,
        profit_estimate=estimate_profit(counts, rates),
        water_requirement=water_requirement(counts, rates),
        maintenance_level=maintenance_level(counts, rates),
        current_season=season,
        seasonal_recommendations=seasonal_recommendations(types, season),
        waste_reuse_flow=waste,
        warnings=warnings,
        visualization_prompt=build_visualization_prompt(land_size, area, capacity, waste),
    )

    logger.info(
        "farm plan: %s cents, types=%s, counts=%s, monthly=%s",
        land_size,
        ",".join(types),
        counts,
        plan.profit_estimate.monthly.total,
    )
    return plan

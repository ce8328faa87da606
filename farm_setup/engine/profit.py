# farm_setup/engine/profit.py

from typing import Dict, Mapping

from ..models.plan import FARMING_TYPES, ProfitBreakdown, ProfitEstimate, SpeciesRate

MONTHS_PER_YEAR = 12


def monthly_profit_by_species(
    counts: Mapping[str, int],
    rates: Mapping[str, SpeciesRate],
) -> Dict[str, int]:
    out = {}
    for species in FARMING_TYPES:
        count = counts.get(species, 0)
        if count <= 0 or species not in rates:
            out[species] = 0
            continue
        out[species] = int(round(count * rates[species].monthly_profit_per_head))
    return out


def _breakdown(parts: Mapping[str, int]) -> ProfitBreakdown:
    # total is summed from the rounded parts so the rows always add up
    return ProfitBreakdown(total=sum(parts.values()), **parts)


def estimate_profit(
    counts: Mapping[str, int],
    rates: Mapping[str, SpeciesRate],
) -> ProfitEstimate:
    """
    Monthly profit per species = headcount * profit per head (INR),
    annual = 12 * monthly, per species and in total.
    """
    monthly = monthly_profit_by_species(counts, rates)
    annual = {s: v * MONTHS_PER_YEAR for s, v in monthly.items()}
    return ProfitEstimate(monthly=_breakdown(monthly), annual=_breakdown(annual))

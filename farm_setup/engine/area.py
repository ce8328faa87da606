# farm_setup/engine/area.py

from ..models.plan import AreaBreakdown, MIN_LAND_CENTS, MAX_LAND_CENTS

SQFT_PER_CENT = 435.6
UTILITY_FRACTION = 0.25  # paths, storage, drainage


def cents_to_sqft(cents: float) -> int:
    return int(round(cents * SQFT_PER_CENT))


def compute_area_breakdown(land_size: float) -> AreaBreakdown:
    """
    Split the land into a fixed utility share and the usable remainder.

    usable is derived by subtraction so that utility + usable == total exactly.
    """
    if land_size < MIN_LAND_CENTS or land_size > MAX_LAND_CENTS:
        raise ValueError(
            f"land size must be between {MIN_LAND_CENTS} and {MAX_LAND_CENTS} cents, got {land_size}"
        )

    total = cents_to_sqft(land_size)
    utility = int(round(total * UTILITY_FRACTION))
    return AreaBreakdown(
        total_area=total,
        utility_area=utility,
        usable_area=total - utility,
    )

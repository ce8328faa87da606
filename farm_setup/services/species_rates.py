# farm_setup/services/species_rates.py

import math
import logging
from functools import lru_cache
from typing import List

import pandas as pd

from .. import config
from ..models.plan import SpeciesRate, normalize_species_key

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [
    "species",
    "label",
    "allocation_weight",
    "area_per_head_sqft",
    "monthly_profit_per_head",
    "water_l_per_head_day",
    "maintenance_points",
]


def _safe_float(value, default: float = 0.0) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(x) or math.isinf(x):
        return default
    return x


# --------------------------------------------------
# Loader
# --------------------------------------------------

@lru_cache(maxsize=1)
def _load_rates_df() -> pd.DataFrame:
    """
    Load the species rate table and add a normalized species key.
    """
    try:
        df = pd.read_csv(config.RATES_CSV)
    except Exception as e:
        logger.warning("could not load species rates from %s: %s", config.RATES_CSV, e)
        return pd.DataFrame()

    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        logger.warning("species rate table is missing columns: %s", missing)
        return pd.DataFrame()

    df["species_key"] = df["species"].apply(normalize_species_key)
    return df


def clear_rates_cache() -> None:
    _load_rates_df.cache_clear()


# --------------------------------------------------
# Public helpers
# --------------------------------------------------

def _row_to_rate(row) -> SpeciesRate:
    return SpeciesRate(
        species=row["species_key"],
        label=str(row.get("label", "")),
        allocation_weight=_safe_float(row.get("allocation_weight")),
        area_per_head_sqft=_safe_float(row.get("area_per_head_sqft")),
        monthly_profit_per_head=_safe_float(row.get("monthly_profit_per_head")),
        water_l_per_head_day=_safe_float(row.get("water_l_per_head_day")),
        maintenance_points=int(_safe_float(row.get("maintenance_points"))),
    )


def list_species_rates() -> List[SpeciesRate]:
    df = _load_rates_df()
    if df.empty:
        return []
    return [_row_to_rate(row) for _, row in df.iterrows()]


def get_species_rate(species: str) -> SpeciesRate:
    """
    Return the rate row for one species.
    Raises KeyError if the species is not in the table.
    """
    df = _load_rates_df()
    key = normalize_species_key(species)

    if df.empty:
        raise KeyError(key)

    sub = df.loc[df["species_key"] == key]
    if sub.empty:
        raise KeyError(key)

    return _row_to_rate(sub.iloc[0])

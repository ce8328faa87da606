# farm_setup/engine/seasons.py

from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from ..models.plan import SeasonalRecommendation


def current_season(today: Optional[date] = None) -> str:
    """
    Indian agricultural seasons by month:
      Mar-May -> summer, Jun-Sep -> monsoon, Oct-Feb -> winter
    """
    month = (today or date.today()).month
    if 3 <= month <= 5:
        return "summer"
    if 6 <= month <= 9:
        return "monsoon"
    return "winter"


# (species, season) -> (suitability, notes)
SUITABILITY: Dict[Tuple[str, str], Tuple[str, str]] = {
    ("hen", "summer"): (
        "medium",
        "Heat stress lowers laying. Keep sheds ventilated and give cool water several times a day.",
    ),
    ("hen", "monsoon"): (
        "medium",
        "Damp litter spreads disease. Raise the shed floor and change litter often.",
    ),
    ("hen", "winter"): (
        "high",
        "Best laying season. Cover open sides at night to keep birds warm.",
    ),
    ("goat", "summer"): (
        "medium",
        "Provide shade in the grazing area and graze early morning or evening.",
    ),
    ("goat", "monsoon"): (
        "low",
        "Goats dislike wet ground. Use a raised slatted floor and deworm before the rains.",
    ),
    ("goat", "winter"): (
        "high",
        "Good season for breeding and weight gain on dry fodder.",
    ),
    ("cow", "summer"): (
        "medium",
        "Milk yield drops in heat. Use fans or sprinklers in the shed and plenty of green fodder.",
    ),
    ("cow", "monsoon"): (
        "high",
        "Green fodder is plentiful. Watch for hoof problems on wet floors.",
    ),
    ("cow", "winter"): (
        "high",
        "Comfortable season with steady milk yield. Store dry fodder for the summer.",
    ),
    ("fish", "summer"): (
        "medium",
        "Water levels fall and temperature rises. Top up the pond and reduce feeding at midday.",
    ),
    ("fish", "monsoon"): (
        "high",
        "Ideal stocking time. Strengthen the pond bund and screen the outlet against overflow.",
    ),
    ("fish", "winter"): (
        "low",
        "Growth slows in cold water. Feed less and avoid fresh stocking.",
    ),
}


def seasonal_recommendations(
    farming_types: Sequence[str],
    season: str,
) -> List[SeasonalRecommendation]:
    recs: List[SeasonalRecommendation] = []
    for species in farming_types:
        suitability, notes = SUITABILITY[(species, season)]
        recs.append(
            SeasonalRecommendation(
                farming_type=species,
                suitability=suitability,
                notes=notes,
            )
        )
    return recs

import pytest

from farm_setup import config
from farm_setup.models.plan import normalize_species_key
from farm_setup.services import species_rates
from farm_setup.services.species_rates import get_species_rate, list_species_rates


@pytest.mark.parametrize(
    "raw, key",
    [
        ("hen", "hen"),
        (" HENS ", "hen"),
        ("Hen Farming", "hen"),
        ("poultry", "hen"),
        ("Cattle", "cow"),
        ("fish", "fish"),
        (None, ""),
    ],
)
def test_normalize_species_key(raw, key):
    assert normalize_species_key(raw) == key


def test_table_has_all_four_species():
    species = sorted(r.species for r in list_species_rates())
    assert species == ["cow", "fish", "goat", "hen"]


def test_get_species_rate_accepts_loose_names():
    assert get_species_rate("Goats").species == "goat"
    assert get_species_rate("cow").area_per_head_sqft > 0


def test_unknown_species_raises_key_error():
    with pytest.raises(KeyError):
        get_species_rate("llama")


def test_missing_table_is_empty(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "RATES_CSV", str(tmp_path / "nope.csv"))
    species_rates.clear_rates_cache()
    try:
        assert list_species_rates() == []
        with pytest.raises(KeyError):
            get_species_rate("hen")
    finally:
        monkeypatch.undo()
        species_rates.clear_rates_cache()


def test_table_missing_columns_is_empty(monkeypatch, tmp_path):
    bad = tmp_path / "rates.csv"
    bad.write_text("species,label\nhen,Hen\n", encoding="utf-8")
    monkeypatch.setattr(config, "RATES_CSV", str(bad))
    species_rates.clear_rates_cache()
    try:
        assert list_species_rates() == []
    finally:
        monkeypatch.undo()
        species_rates.clear_rates_cache()

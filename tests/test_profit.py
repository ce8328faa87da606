from farm_setup.engine.profit import estimate_profit


def test_totals_equal_sum_of_species(rates):
    counts = {"hen": 333, "goat": 17, "cow": 5, "fish": 1201}
    est = estimate_profit(counts, rates)

    for period in (est.monthly, est.annual):
        assert period.total == period.hen + period.goat + period.cow + period.fish


def test_annual_is_twelve_months(rates):
    counts = {"hen": 100, "goat": 0, "cow": 3, "fish": 0}
    est = estimate_profit(counts, rates)

    for species in ("hen", "goat", "cow", "fish", "total"):
        assert getattr(est.annual, species) == 12 * getattr(est.monthly, species)


def test_monthly_uses_profit_per_head(rates):
    est = estimate_profit({"cow": 4}, rates)
    assert est.monthly.cow == round(4 * rates["cow"].monthly_profit_per_head)
    assert est.monthly.hen == 0
    assert est.monthly.total == est.monthly.cow


def test_zero_counts_give_zero_profit(rates):
    est = estimate_profit({}, rates)
    assert est.monthly.total == 0
    assert est.annual.total == 0

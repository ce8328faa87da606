def test_root(api):
    resp = api.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_calculate_returns_camel_case_plan(api):
    resp = api.post("/farm-setup/calculate", json={"landSize": 50, "farmingTypes": ["hen", "cow"]})
    assert resp.status_code == 200

    data = resp.json()
    area = data["areaBreakdown"]
    assert area["totalArea"] == 21780
    assert area["utilityArea"] + area["usableArea"] == area["totalArea"]

    cap = data["calculatedCapacity"]
    assert cap["hen"]["count"] > 0
    assert "eggCollectionArea" in cap["hen"]
    assert cap["cow"]["fodderStorage"] >= 0
    assert cap["goat"] is None
    assert cap["fish"] is None

    monthly = data["profitEstimate"]["monthly"]
    assert monthly["total"] == monthly["hen"] + monthly["cow"]
    assert data["waterRequirement"]["level"] in ("low", "medium", "high")
    assert data["maintenanceLevel"] in ("low", "medium", "high")
    assert data["currentSeason"] in ("summer", "monsoon", "winter")
    assert len(data["seasonalRecommendations"]) == 2
    assert data["wasteReuseFlow"]["hasBiogas"] is True
    assert isinstance(data["visualizationPrompt"], str)


def test_calculate_empty_selection_is_400(api):
    resp = api.post("/farm-setup/calculate", json={"landSize": 50, "farmingTypes": []})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please select at least one farming type"


def test_calculate_rejects_land_out_of_range(api):
    for land in (10, 100):
        resp = api.post("/farm-setup/calculate", json={"landSize": land, "farmingTypes": ["hen"]})
        assert resp.status_code == 422


def test_calculate_rejects_unknown_species(api):
    resp = api.post("/farm-setup/calculate", json={"landSize": 50, "farmingTypes": ["llama"]})
    assert resp.status_code == 422


def test_fish_on_small_land_warns_but_succeeds(api):
    resp = api.post("/farm-setup/calculate", json={"landSize": 12, "farmingTypes": ["fish"]})
    assert resp.status_code == 200

    data = resp.json()
    assert "Fish farming requires minimum 15 cents of land" in data["warnings"]
    assert data["calculatedCapacity"]["fish"]["estimatedFishCount"] == 0


def test_species_endpoint(api):
    resp = api.get("/farm-setup/species")
    assert resp.status_code == 200
    assert {r["species"] for r in resp.json()} == {"hen", "goat", "cow", "fish"}
    assert "areaPerHeadSqft" in resp.json()[0]


def test_layout_endpoint_is_reproducible_with_seed(api):
    body = {"landSize": 60, "farmingTypes": ["goat", "fish"]}
    first = api.post("/farm-setup/layout", params={"seed": 5}, json=body)
    second = api.post("/farm-setup/layout", params={"seed": 5}, json=body)

    assert first.status_code == 200
    assert first.json() == second.json()
    assert sorted(z["species"] for z in first.json()["zones"]) == ["fish", "goat"]


def test_pdf_endpoint(api):
    resp = api.post("/farm-setup/pdf", json={"landSize": 33, "farmingTypes": ["hen", "goat"]})

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert 'filename="farm-setup-33-cents.pdf"' in resp.headers["content-disposition"]
    assert resp.content.startswith(b"%PDF")


def test_calculate_rejects_non_list_species(api):
    for bad in (5, True, {"hen": 1}):
        resp = api.post("/farm-setup/calculate", json={"landSize": 50, "farmingTypes": bad})
        assert resp.status_code == 422


def test_calculate_accepts_species_aliases(api):
    resp = api.post(
        "/farm-setup/calculate",
        json={"landSize": 50, "farmingTypes": ["Hens", "cattle", "cow", "Goat Farming"]},
    )
    assert resp.status_code == 200
    assert resp.json()["farmingTypes"] == ["hen", "cow", "goat"]

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from . import config
from .engine.layout import build_farm_scene
from .models.layout import FarmScene
from .models.plan import FarmPlan, FarmSetupRequest, SpeciesRate
from .services.pdf_export import pdf_filename, render_plan_pdf
from .services.planner import RateTableError, calculate_farm_plan
from .services.species_rates import list_species_rates

logger = logging.getLogger(__name__)


# =======================================================
# FastAPI app
# =======================================================

app = FastAPI(title="Farm Setup Planner API", version="1.0")


@app.on_event("startup")
def on_startup() -> None:
    config.configure_logging()


@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Farm Setup Planner API running (hen / goat / cow / fish)",
    }


# =======================================================
# Core helper
# =======================================================

def plan_for_request(req: FarmSetupRequest) -> FarmPlan:
    """
    Run the planner for a validated request, mapping failures to HTTP errors.
    """
    if not req.farming_types:
        raise HTTPException(status_code=400, detail="Please select at least one farming type")

    try:
        return calculate_farm_plan(req.land_size, req.farming_types)
    except RateTableError as e:
        logger.error("rate table problem: %s", e)
        raise HTTPException(status_code=500, detail="Species rate data is unavailable")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# =======================================================
# GET /farm-setup/species
# =======================================================

@app.get("/farm-setup/species", response_model=List[SpeciesRate])
def species_rates():
    rates = list_species_rates()
    if not rates:
        raise HTTPException(status_code=500, detail="Species rate data is unavailable")
    return rates


# =======================================================
# POST /farm-setup/calculate
# =======================================================

@app.post("/farm-setup/calculate", response_model=FarmPlan)
def calculate(req: FarmSetupRequest):
    """
    Capacity / profit plan for a land size (11-99 cents) and a livestock selection.

    Fish below 15 cents is not rejected: the plan carries a warning and no fish.
    """
    return plan_for_request(req)


# =======================================================
# POST /farm-setup/layout
# =======================================================

@app.post("/farm-setup/layout", response_model=FarmScene)
def layout(
    req: FarmSetupRequest,
    seed: Optional[int] = Query(None, ge=0, description="Fix the scatter of animals"),
):
    """
    Model-farm scene for the plan: a zone per planned species, decorations and camera.
    """
    plan = plan_for_request(req)
    return build_farm_scene(plan.calculated_capacity.counts(), seed=seed)


# =======================================================
# POST /farm-setup/pdf
# =======================================================

@app.post("/farm-setup/pdf")
def plan_pdf(req: FarmSetupRequest):
    plan = plan_for_request(req)

    try:
        content = render_plan_pdf(plan)
    except Exception:
        logger.exception("PDF generation failed for %s cents", req.land_size)
        raise HTTPException(status_code=500, detail="Failed to generate PDF")

    filename = pdf_filename(req.land_size)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

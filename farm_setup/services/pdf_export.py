# farm_setup/services/pdf_export.py

from typing import List, Tuple

from fpdf import FPDF

from ..models.plan import FarmPlan
from .formatting import format_inr

SPECIES_TITLES = {
    "hen": "Hen Farming",
    "goat": "Goat Farming",
    "cow": "Cow Farming",
    "fish": "Fish Farming",
}


def pdf_filename(land_size: int) -> str:
    return f"farm-setup-{land_size}-cents.pdf"


def _rs(amount: float) -> str:
    # core PDF fonts are latin-1 only, no rupee sign
    return format_inr(amount, symbol="Rs. ")


def _capacity_rows(plan: FarmPlan) -> List[Tuple[str, List[str]]]:
    cap = plan.calculated_capacity
    rows = []
    if cap.hen is not None and cap.hen.count > 0:
        rows.append((
            f"{SPECIES_TITLES['hen']}: {cap.hen.count:,} hens",
            [
                f"Shed area: {cap.hen.shed_area:,} sq ft",
                f"Feed area: {cap.hen.feed_area:,} sq ft",
                f"Egg collection: {cap.hen.egg_collection_area:,} sq ft",
            ],
        ))
    if cap.goat is not None and cap.goat.count > 0:
        rows.append((
            f"{SPECIES_TITLES['goat']}: {cap.goat.count:,} goats",
            [
                f"Shed area: {cap.goat.shed_area:,} sq ft",
                f"Grazing area: {cap.goat.grazing_area:,} sq ft",
                f"Water & feed: {cap.goat.water_feed_area:,} sq ft",
            ],
        ))
    if cap.cow is not None and cap.cow.count > 0:
        rows.append((
            f"{SPECIES_TITLES['cow']}: {cap.cow.count:,} cows",
            [
                f"Cattle shed: {cap.cow.shed_area:,} sq ft",
                f"Milking area: {cap.cow.milking_area:,} sq ft",
                f"Fodder storage: {cap.cow.fodder_storage:,} sq ft",
            ],
        ))
    if cap.fish is not None and cap.fish.estimated_fish_count > 0:
        rows.append((
            f"{SPECIES_TITLES['fish']}: {cap.fish.estimated_fish_count:,} fish",
            [
                f"Pond area: {cap.fish.pond_area:,} sq ft",
                f"Pond depth: {cap.fish.pond_depth:g} ft",
                f"Fish types: {', '.join(cap.fish.fish_types)}",
            ],
        ))
    return rows


def _waste_lines(plan: FarmPlan) -> List[str]:
    waste = plan.waste_reuse_flow
    if not waste.flows:
        return []
    out = [f"{f.source} -> {f.product} -> {f.destination}" for f in waste.flows]
    if waste.notes:
        out.append(waste.notes)
    return out


def render_plan_pdf(plan: FarmPlan) -> bytes:
    """A4 summary of a farm plan, sized to fit on one page."""
    pdf = FPDF(orientation="P", unit="mm", format="A4")
    pdf.set_auto_page_break(auto=True, margin=10)
    pdf.add_page()

    epw = pdf.w - 2 * pdf.l_margin

    def line(text: str, h: float = 4.5) -> None:
        pdf.set_x(pdf.l_margin)
        pdf.multi_cell(epw, h, text, new_x="LMARGIN", new_y="NEXT")

    def heading(text: str) -> None:
        pdf.ln(1.5)
        pdf.set_font("Helvetica", "B", 13)
        line(text, 6.5)
        pdf.set_font("Helvetica", "", 10)

    pdf.set_font("Helvetica", "B", 16)
    line("Your Optimized Farm Plan", 10)
    pdf.set_font("Helvetica", "", 10)
    line(f"Land size: {plan.land_size} cents | Season: {plan.current_season.title()}")

    for warning in plan.warnings:
        line(f"! {warning}")

    area = plan.area_breakdown
    heading("Area Breakdown")
    line(f"Total area: {area.total_area:,} sq ft")
    line(f"Utility (25%): -{area.utility_area:,} sq ft")
    line(f"Usable area: {area.usable_area:,} sq ft")

    heading("Capacity")
    for title, details in _capacity_rows(plan):
        pdf.set_font("Helvetica", "B", 10)
        line(title)
        pdf.set_font("Helvetica", "", 10)
        line("    " + "  |  ".join(details))

    profit = plan.profit_estimate
    heading("Profit Estimate")
    line(f"Monthly profit: {_rs(profit.monthly.total)}")
    line(f"Annual profit: {_rs(profit.annual.total)}")
    for species in ("hen", "goat", "cow", "fish"):
        monthly = getattr(profit.monthly, species)
        if monthly > 0:
            line(f"    {species.title()}: {_rs(monthly)}/month")

    heading("Resources")
    line(
        f"Water: {plan.water_requirement.level.upper()} "
        f"(~{plan.water_requirement.daily_liters:,} L/day)"
    )
    line(f"Maintenance: {plan.maintenance_level.upper()}")

    heading("Seasonal Suitability")
    for rec in plan.seasonal_recommendations:
        line(f"{rec.farming_type.title()} - {rec.suitability.upper()}: {rec.notes}")

    waste = _waste_lines(plan)
    if waste:
        heading("Waste Reuse")
        for text in waste:
            line(text)

    return bytes(pdf.output())

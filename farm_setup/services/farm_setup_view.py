# farm_setup/services/farm_setup_view.py

import logging
from pathlib import Path
from typing import Callable, List, Literal, Optional, Union

from pydantic import BaseModel

from ..engine.area import cents_to_sqft
from ..engine.capacity import MIN_FISH_LAND_CENTS
from ..models.plan import FARMING_TYPES, MAX_LAND_CENTS, MIN_LAND_CENTS, FarmPlan
from .formatting import format_inr
from .pdf_export import pdf_filename, render_plan_pdf
from .planner_client import FarmSetupClient, FarmSetupError

logger = logging.getLogger(__name__)

DEFAULT_LAND_SIZE = 50


class Notification(BaseModel):
    level: Literal["success", "error", "loading"]
    message: str
    key: Optional[str] = None


class FarmSetupView:
    """
    State behind the farm setup form and its result panels.

    Holds the inputs, the last successful plan and the toast notifications.
    A failed calculation or PDF export never replaces the shown plan.
    """

    def __init__(
        self,
        client: FarmSetupClient,
        pdf_renderer: Callable[[FarmPlan], bytes] = render_plan_pdf,
    ):
        self.client = client
        self.pdf_renderer = pdf_renderer
        self._land_size = DEFAULT_LAND_SIZE
        self.farming_types: List[str] = []
        self.loading = False
        self.result: Optional[FarmPlan] = None
        self.notifications: List[Notification] = []

    # --------------------------------------------------
    # Inputs
    # --------------------------------------------------

    @property
    def land_size(self) -> int:
        return self._land_size

    @land_size.setter
    def land_size(self, value: float) -> None:
        self._land_size = min(MAX_LAND_CENTS, max(MIN_LAND_CENTS, int(round(value))))

    @property
    def approx_sqft(self) -> int:
        return cents_to_sqft(self._land_size)

    def toggle(self, farming_type: str) -> None:
        if farming_type not in FARMING_TYPES:
            raise ValueError(f"unknown farming type {farming_type!r}")
        if farming_type in self.farming_types:
            self.farming_types = [t for t in self.farming_types if t != farming_type]
        else:
            self.farming_types = self.farming_types + [farming_type]

    def select_all(self) -> None:
        self.farming_types = list(FARMING_TYPES)

    @property
    def show_fish_warning(self) -> bool:
        return "fish" in self.farming_types and self._land_size < MIN_FISH_LAND_CENTS

    @property
    def can_calculate(self) -> bool:
        return bool(self.farming_types) and not self.loading

    # --------------------------------------------------
    # Notifications
    # --------------------------------------------------

    def notify(self, level: str, message: str, key: Optional[str] = None) -> None:
        """Add a toast; a toast with the same key replaces the earlier one."""
        if key is not None:
            self.notifications = [n for n in self.notifications if n.key != key]
        self.notifications.append(Notification(level=level, message=message, key=key))

    # --------------------------------------------------
    # Actions
    # --------------------------------------------------

    def calculate(self) -> Optional[FarmPlan]:
        if not self.farming_types:
            self.notify("error", "Please select at least one farming type")
            return None

        self.loading = True
        try:
            plan = self.client.calculate(self._land_size, self.farming_types)
        except FarmSetupError as e:
            self.notify("error", e.message)
            return None
        finally:
            self.loading = False

        self.result = plan
        self.notify("success", "Farm setup calculated!")
        return plan

    def download_pdf(self, directory: Union[str, Path]) -> Optional[Path]:
        if self.result is None:
            return None

        self.notify("loading", "Generating PDF...", key="pdf")
        try:
            data = self.pdf_renderer(self.result)
            path = Path(directory) / pdf_filename(self._land_size)
            path.write_bytes(data)
        except Exception:
            logger.exception("PDF generation failed")
            self.notify("error", "Failed to generate PDF", key="pdf")
            return None

        self.notify("success", "PDF downloaded!", key="pdf")
        return path

    # --------------------------------------------------
    # Result panels
    # --------------------------------------------------

    def visible_capacity_panels(self) -> List[str]:
        if self.result is None:
            return []
        counts = self.result.calculated_capacity.counts()
        return [s for s in FARMING_TYPES if counts[s] > 0]

    def visible_profit_rows(self) -> List[str]:
        if self.result is None:
            return []
        monthly = self.result.profit_estimate.monthly
        return [s for s in FARMING_TYPES if getattr(monthly, s) > 0]

    @staticmethod
    def format_currency(amount: float) -> str:
        return format_inr(amount)

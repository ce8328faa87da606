# farm_setup/services/planner_client.py

import logging
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from .. import config
from ..models.plan import FarmPlan

logger = logging.getLogger(__name__)

CALCULATE_PATH = "/farm-setup/calculate"
DEFAULT_ERROR = "Calculation failed"


class FarmSetupError(Exception):
    """A calculate call failed; message is fit to show the user."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return DEFAULT_ERROR

    if isinstance(data, dict):
        detail = data.get("message") or data.get("detail")
        if isinstance(detail, str) and detail:
            return detail
    return DEFAULT_ERROR


class FarmSetupClient:
    """
    Talks to the capacity estimator over HTTP.

    Pass `http` to reuse an existing httpx.Client (a FastAPI TestClient works too).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[httpx.Client] = None,
    ):
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=base_url or config.API_BASE,
            timeout=timeout if timeout is not None else config.TIMEOUT_SECONDS,
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "FarmSetupClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def calculate(self, land_size: int, farming_types: Sequence[str]) -> FarmPlan:
        payload = {"landSize": land_size, "farmingTypes": list(farming_types)}

        try:
            resp = self._http.post(CALCULATE_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.warning("calculate request failed: %r", e)
            raise FarmSetupError(DEFAULT_ERROR) from e

        if resp.is_error:
            message = _error_message(resp)
            logger.warning("calculate returned %s: %s", resp.status_code, message)
            raise FarmSetupError(message, status_code=resp.status_code)

        try:
            return FarmPlan.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            logger.warning("calculate returned an unreadable plan: %s", e)
            raise FarmSetupError(DEFAULT_ERROR, status_code=resp.status_code) from e

# farm_setup/config.py

import os
import logging

BASE_DIR = os.path.dirname(__file__)
DATA_DIR = os.path.join(BASE_DIR, "data")

# Capacity estimator the client talks to
API_BASE = os.environ.get("FARM_SETUP_API_BASE", "http://localhost:8000")
TIMEOUT_SECONDS = float(os.environ.get("FARM_SETUP_TIMEOUT", "8.0"))

RATES_CSV = os.environ.get(
    "FARM_SETUP_RATES_CSV",
    os.path.join(DATA_DIR, "species_rates.csv"),
)

LOG_LEVEL = os.environ.get("FARM_SETUP_LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

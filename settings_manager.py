"""
gravityBrain app
settings_manager.py
"""

import copy
import json
import logging
import math
import os

from gravity_log import DEFAULT_CALIBRATION_F, GravityTable, TempUnit

logger = logging.getLogger(__name__)

SETTINGS_FILE = "gravity_brain_settings.json"

DEFAULT_SETTINGS = {
    "units": "imperial",                          # "imperial" (°F) or "metric" (°C)
    "default_calibration_f": DEFAULT_CALIBRATION_F,  # most hydrometers are calibrated at 60°F
}


def load_settings(path=SETTINGS_FILE):
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    if not os.path.exists(path):
        return settings
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s, using defaults: %s", path, e)
        return settings
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        return settings

    if data.get("units") in ("imperial", "metric"):
        settings["units"] = data["units"]
    elif "units" in data:
        logger.warning("Unknown units %r in %s", data["units"], path)

    cal = data.get("default_calibration_f")
    if isinstance(cal, (int, float)) and not isinstance(cal, bool) and math.isfinite(cal):
        settings["default_calibration_f"] = float(cal)
    elif cal is not None:
        logger.warning("Invalid default_calibration_f %r in %s", cal, path)
    return settings


def build_table(settings):
    unit = TempUnit.CELSIUS if settings.get("units") == "metric" else TempUnit.FAHRENHEIT
    return GravityTable(
        unit=unit,
        default_calibration_f=settings.get("default_calibration_f", DEFAULT_CALIBRATION_F))

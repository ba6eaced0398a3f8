# wxcalc/constants.py

"""
Application-wide constants for the Weather Calculators.
Physics constants live next to the formulas that use them - this file is for app config constants.
"""

import os

# =============================================================================
# DEBUG SETTINGS
# =============================================================================
DEBUG_LOG = os.environ.get("WXCALC_DEBUG_LOG", "0") == "1"

VERSION = "0.0.1"  # bump when the formulas or the form change

# =============================================================================
# DEFAULT VALUES
# =============================================================================
DEFAULT_PRESSURE = "1013.25"  # hPa, standard atmosphere
DEFAULT_PRESSURE_UNIT = "hPa"
DEFAULT_TIME_OF_DAY = "day"
DEFAULT_SEASON = "summer"
DEFAULT_ENVIRONMENT_TYPE = "lake"
DEFAULT_ENVIRONMENT_SIZE = "medium"

# =============================================================================
# MESSAGES
# =============================================================================
INVALID_NUMBERS_MESSAGE = "Please enter valid numbers for all fields."
DEW_POINT_ABOVE_TEMP_MESSAGE = "Dew point cannot be higher than temperature."
NON_POSITIVE_PRESSURE_MESSAGE = "Pressure must be greater than zero."
OUT_OF_RANGE_MESSAGE = "These inputs are outside the range the cloud base models can handle."

CLOUD_BASE_NOTE = (
    "Note: MSL = Mean Sea Level, AGL = Above Ground Level. These calculations are based on "
    "simplified models and may not account for all atmospheric conditions. Always consult "
    "official weather reports for flight planning."
)

# =============================================================================
# RESULT LABELS (display order)
# =============================================================================
CLOUD_BASE_METHOD_LABELS = {
    "dewpointSpread": "Dewpoint Spread Method",
    "espyMethod": "Espy's Method",
    "accurateLCL": "Accurate LCL Calculation",
    "stuveMethod": "Stüve's Diagram Method",
}

# =============================================================================
# TURBULENCE CATEGORY BANDS (inclusive upper score bound)
# =============================================================================
TURBULENCE_CATEGORY_BANDS = [
    (3, "Low"),
    (6, "Moderate"),
]
TURBULENCE_TOP_CATEGORY = "High"
TURBULENCE_MAX_SCORE = 10

# =============================================================================
# STYLING CONSTANTS
# =============================================================================
COLORS = {
    "dewpointSpread": "#1f77b4",
    "espyMethod": "#2ca02c",
    "accurateLCL": "#9467bd",
    "stuveMethod": "#ff7f0e",
    "Low": "green",
    "Moderate": "orange",
    "High": "red",
    "gauge_bar": "#1b1e23",
}

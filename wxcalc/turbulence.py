# wxcalc/turbulence.py

"""
Heuristic turbulence potential score (0-10) for low-level flight.
Points accumulate from temperature deviation, wind, daytime heating,
season and the size of the surrounding environment.
"""

import math
from dataclasses import dataclass
from enum import Enum

from .constants import (
    TURBULENCE_CATEGORY_BANDS,
    TURBULENCE_MAX_SCORE,
    TURBULENCE_TOP_CATEGORY,
)
from .validation import coerce_choice, dprint, parse_numbers

REFERENCE_TEMP_C = 15
TEMP_POINTS_CAP = 3
WIND_POINTS_CAP = 3


class TimeOfDay(str, Enum):
    DAY = "day"
    NIGHT = "night"


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class EnvironmentType(str, Enum):
    LAKE = "lake"
    CITY = "city"


class EnvironmentSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


TIME_OF_DAY_POINTS = {
    TimeOfDay.DAY: 1,
    TimeOfDay.NIGHT: 0,
}

SEASON_POINTS = {
    Season.SPRING: 0,
    Season.SUMMER: 1,
    Season.FALL: 0,
    Season.WINTER: 1,
}

ENVIRONMENT_SIZE_POINTS = {
    EnvironmentSize.SMALL: 0,
    EnvironmentSize.MEDIUM: 1,
    EnvironmentSize.LARGE: 2,
}


@dataclass(frozen=True)
class TurbulenceResult:
    score: int
    category: str

    def to_dict(self):
        return {"score": self.score, "category": self.category}


def compute_temperature_points(temperature_c):
    """Deviation from 15°C, 1 point per 5°C, capped at 3."""
    temp_diff = abs(temperature_c - REFERENCE_TEMP_C)
    return min(temp_diff / 5, TEMP_POINTS_CAP)


def compute_wind_points(wind_speed_kts):
    """1 point per 10 kts, capped at 3."""
    return min(wind_speed_kts / 10, WIND_POINTS_CAP)


def round_score(score):
    """Nearest integer with halves rounding up (2.5 -> 3), capped at the max score."""
    return min(int(math.floor(score + 0.5)), TURBULENCE_MAX_SCORE)


def categorize_score(score):
    for upper_bound, category in TURBULENCE_CATEGORY_BANDS:
        if score <= upper_bound:
            return category
    return TURBULENCE_TOP_CATEGORY


def compute_turbulence_score(
    temperature,
    wind_speed,
    time_of_day,
    season,
    environment_size,
    environment_type=None,
):
    """
    Score turbulence potential.

    Args:
        temperature: Surface temperature (°C)
        wind_speed: Surface wind (kts)
        time_of_day: "day" / "night"
        season: "spring" / "summer" / "fall" / "winter"
        environment_size: "small" / "medium" / "large"
        environment_type: "lake" / "city"; checked but does not change the score

    Returns:
        TurbulenceResult

    Raises:
        InvalidInputError: temperature or wind speed is not a number, or a selection is unknown
    """
    time_of_day = coerce_choice(TimeOfDay, time_of_day, "time of day")
    season = coerce_choice(Season, season, "season")
    environment_size = coerce_choice(EnvironmentSize, environment_size, "environment size")
    if environment_type is not None:
        environment_type = coerce_choice(EnvironmentType, environment_type, "environment type")

    temperature_c, wind_kts = parse_numbers(temperature, wind_speed)

    score = 0
    score += compute_temperature_points(temperature_c)
    score += compute_wind_points(wind_kts)
    score += TIME_OF_DAY_POINTS[time_of_day]
    score += SEASON_POINTS[season]
    score += ENVIRONMENT_SIZE_POINTS[environment_size]

    total = round_score(score)
    category = categorize_score(total)

    dprint(f"[TURBULENCE] raw={score:.2f} total={total} ({category}) "
           f"{time_of_day.value}/{season.value}/{environment_size.value}")

    return TurbulenceResult(score=total, category=category)

# test_turbulence.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from wxcalc import (
    InvalidInputError,
    TimeOfDay,
    Season,
    EnvironmentSize,
    EnvironmentType,
    TurbulenceResult,
    compute_turbulence_score,
)
from wxcalc.turbulence import (
    categorize_score,
    compute_temperature_points,
    compute_wind_points,
    round_score,
)


def test_calm_spring_night():
    print("\n=== TEST: Calm spring night ===")
    result = compute_turbulence_score(15, 0, "night", "spring", "small")
    print(result)
    assert result == TurbulenceResult(score=0, category="Low")


def test_hot_windy_summer_day():
    print("\n=== TEST: Hot, windy summer day ===")
    result = compute_turbulence_score(35, 30, "day", "summer", "large")
    print(result)
    # 3 (temp, capped) + 3 (wind, capped) + 1 day + 1 summer + 2 large
    assert result.score == 10, "Every factor maxed should score 10"
    assert result.category == "High"


def test_contribution_caps():
    assert compute_temperature_points(15) == 0
    assert compute_temperature_points(25) == 2, "10°C off reference is 2 points"
    assert compute_temperature_points(5) == 2, "Cold deviation counts the same as warm"
    assert compute_temperature_points(-30) == 3, "Temperature points cap at 3"
    assert compute_wind_points(15) == 1.5
    assert compute_wind_points(80) == 3, "Wind points cap at 3"


def test_score_never_exceeds_ten():
    result = compute_turbulence_score(-40, 90, "day", "winter", "large")
    assert result.score == 10
    assert round_score(14.2) == 10


def test_halves_round_up():
    # 2.5°C off reference = 0.5 points
    assert compute_turbulence_score(17.5, 0, "night", "spring", "small").score == 1
    # 12.5°C off reference = 2.5 points
    assert compute_turbulence_score(27.5, 0, "night", "spring", "small").score == 3
    assert round_score(2.49) == 2


def test_moderate_band():
    # 2 (temp) + 2 (wind) + 1 day + 0 fall + 0 small
    result = compute_turbulence_score(25, 20, "day", "fall", "small")
    assert result.score == 5
    assert result.category == "Moderate"


def test_category_boundaries():
    assert categorize_score(0) == "Low"
    assert categorize_score(3) == "Low"
    assert categorize_score(4) == "Moderate"
    assert categorize_score(6) == "Moderate"
    assert categorize_score(7) == "High"
    assert categorize_score(10) == "High"


def test_environment_size_points():
    scores = [
        compute_turbulence_score(15, 0, "night", "spring", size).score
        for size in ["small", "medium", "large"]
    ]
    assert scores == [0, 1, 2]


def test_season_points():
    scores = {
        season: compute_turbulence_score(15, 0, "night", season, "small").score
        for season in ["spring", "summer", "fall", "winter"]
    }
    assert scores == {"spring": 0, "summer": 1, "fall": 0, "winter": 1}


def test_environment_type_does_not_change_score():
    lake = compute_turbulence_score(22, 12, "day", "summer", "medium", environment_type="lake")
    city = compute_turbulence_score(22, 12, "day", "summer", "medium", environment_type="city")
    unset = compute_turbulence_score(22, 12, "day", "summer", "medium")
    assert lake == city == unset


def test_enum_and_string_inputs_match():
    from_strings = compute_turbulence_score("22", "12", "day", "summer", "medium", "city")
    from_enums = compute_turbulence_score(
        22, 12, TimeOfDay.DAY, Season.SUMMER, EnvironmentSize.MEDIUM, EnvironmentType.CITY
    )
    assert from_strings == from_enums


@pytest.mark.parametrize("temperature, wind_speed", [(None, 10), ("", 10), (20, "abc"), (20, None)])
def test_non_numeric_inputs_rejected(temperature, wind_speed):
    with pytest.raises(InvalidInputError):
        compute_turbulence_score(temperature, wind_speed, "day", "summer", "medium")


@pytest.mark.parametrize("field, value", [
    ("time_of_day", "dusk"),
    ("season", "monsoon"),
    ("environment_size", "huge"),
    ("environment_type", "forest"),
])
def test_unknown_selection_rejected(field, value):
    kwargs = dict(
        temperature=20,
        wind_speed=10,
        time_of_day="day",
        season="summer",
        environment_size="medium",
        environment_type="lake",
    )
    kwargs[field] = value
    with pytest.raises(InvalidInputError) as excinfo:
        compute_turbulence_score(**kwargs)
    assert value in str(excinfo.value)


def test_negative_wind_is_not_clamped():
    print("\n=== TEST: Negative wind ===")
    assert compute_wind_points(-50) == -5, "Wind points have no lower bound"
    result = compute_turbulence_score(15, -50, "night", "spring", "small")
    print(result)
    assert result.score == -5, "The total has no lower clamp"
    assert result.category == "Low"


def test_idempotent():
    first = compute_turbulence_score(28.3, 17, "day", "winter", "medium")
    assert first == compute_turbulence_score(28.3, 17, "day", "winter", "medium")
    assert first.to_dict() == {"score": first.score, "category": first.category}


if __name__ == "__main__":
    test_calm_spring_night()
    test_hot_windy_summer_day()
    test_contribution_caps()
    test_score_never_exceeds_ten()
    test_halves_round_up()
    test_moderate_band()
    test_category_boundaries()
    test_environment_size_points()
    test_season_points()
    test_environment_type_does_not_change_score()
    test_enum_and_string_inputs_match()
    test_negative_wind_is_not_clamped()
    test_idempotent()
    print("\n✓ All turbulence tests passed!")

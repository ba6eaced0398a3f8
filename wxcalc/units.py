# wxcalc/units.py

"""
Unit conversions for the calculators.
Every unit the forms offer is a closed Enum whose values match the form values.
"""

from enum import Enum

FEET_PER_METER = 3.28084

# Multipliers to hPa for each barometer unit
INHG_TO_HPA = 33.86389
MMHG_TO_HPA = 1.33322


class TemperatureUnit(str, Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


class PressureUnit(str, Enum):
    HPA = "hPa"
    INHG = "inHg"
    MMHG = "mmHg"


class HeightUnit(str, Enum):
    METERS = "meters"
    FEET = "feet"


def to_celsius(f):
    """°F -> °C"""
    return (f - 32) * (5 / 9)


def to_fahrenheit(c):
    """°C -> °F"""
    return c * (9 / 5) + 32


def to_feet(m):
    return m * FEET_PER_METER


def to_meters(ft):
    return ft / FEET_PER_METER


def to_hpa(value, unit):
    """
    Normalize a barometer reading to hPa.

    Args:
        value: Pressure reading
        unit: PressureUnit (or its string value, e.g. "inHg")

    Returns:
        Pressure in hPa

    Raises:
        ValueError: unit is not one of hPa, inHg, mmHg
    """
    unit = PressureUnit(unit)
    if unit is PressureUnit.INHG:
        return value * INHG_TO_HPA
    if unit is PressureUnit.MMHG:
        return value * MMHG_TO_HPA
    if unit is PressureUnit.HPA:
        return value
    raise ValueError(f"Unhandled pressure unit: {unit!r}")


def temperature_to_celsius(value, unit):
    """Normalize a temperature in `unit` to °C."""
    unit = TemperatureUnit(unit)
    if unit is TemperatureUnit.FAHRENHEIT:
        return to_celsius(value)
    if unit is TemperatureUnit.CELSIUS:
        return value
    raise ValueError(f"Unhandled temperature unit: {unit!r}")


def height_to_meters(value, unit):
    """Normalize a height in `unit` to meters."""
    unit = HeightUnit(unit)
    if unit is HeightUnit.FEET:
        return to_meters(value)
    if unit is HeightUnit.METERS:
        return value
    raise ValueError(f"Unhandled height unit: {unit!r}")


def meters_to_height(value_m, unit):
    """Express a height in meters in `unit`."""
    unit = HeightUnit(unit)
    if unit is HeightUnit.FEET:
        return to_feet(value_m)
    if unit is HeightUnit.METERS:
        return value_m
    raise ValueError(f"Unhandled height unit: {unit!r}")

# wxcalc/cloud_base.py

"""
Cloud base height estimates.
Four lifted condensation level (LCL) models plus relative humidity, all computed
from surface temperature, dew point, station pressure and field elevation.
"""

import math
from dataclasses import dataclass

from .constants import (
    DEW_POINT_ABOVE_TEMP_MESSAGE,
    NON_POSITIVE_PRESSURE_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
)
from .units import (
    HeightUnit,
    PressureUnit,
    TemperatureUnit,
    height_to_meters,
    meters_to_height,
    temperature_to_celsius,
    to_hpa,
)
from .validation import (
    InvalidPhysicalStateError,
    coerce_choice,
    dprint,
    parse_numbers,
    round_half_up,
)

# Physical constants
L_VAPORIZATION = 2_500_000  # J/kg, latent heat of vaporization of water
R_VAPOR = 461.5             # J/(kg·K), gas constant for water vapor
g = 9.8                     # m/s²
CP_DRY_AIR = 1004           # J/(kg·K), specific heat at constant pressure
DRY_LAPSE_RATE = 0.00976    # K/m
KELVIN_OFFSET = 273.15

# Rule-of-thumb climb per °C of spread (m)
DEWPOINT_SPREAD_FACTOR = 122
ESPY_FACTOR = 125
STUVE_EXPONENT = 0.286
REFERENCE_PRESSURE_HPA = 1000

HEIGHT_DECIMALS = 2
RH_DECIMALS = 1


@dataclass(frozen=True)
class HeightEstimate:
    """One method's cloud base, MSL and AGL, in the result's unit."""
    msl: float
    agl: float


@dataclass(frozen=True)
class CloudBaseResult:
    dewpoint_spread: HeightEstimate
    espy_method: HeightEstimate
    accurate_lcl: HeightEstimate
    stuve_method: HeightEstimate
    relative_humidity: float
    unit: HeightUnit

    def estimates(self):
        """(method key, HeightEstimate) pairs in display order."""
        return [
            ("dewpointSpread", self.dewpoint_spread),
            ("espyMethod", self.espy_method),
            ("accurateLCL", self.accurate_lcl),
            ("stuveMethod", self.stuve_method),
        ]

    def to_dict(self):
        """Flat MSL values with a nested 'agl' block, plus RH and unit."""
        data = {key: est.msl for key, est in self.estimates()}
        data["relativeHumidity"] = self.relative_humidity
        data["unit"] = self.unit.value
        data["agl"] = {key: est.agl for key, est in self.estimates()}
        return data


def compute_dewpoint_spread_lcl(spread_c):
    """122 m per °C of temperature/dew point spread."""
    return spread_c * DEWPOINT_SPREAD_FACTOR


def compute_espy_lcl(spread_c):
    """Espy: 125 m per °C of spread."""
    return ESPY_FACTOR * spread_c


def compute_stuve_lcl(spread_c, pressure_hpa):
    """
    Spread rule scaled by the potential temperature factor (1000 / p)^0.286,
    an approximation of reading the LCL off a Stüve diagram.
    """
    return DEWPOINT_SPREAD_FACTOR * spread_c * math.pow(REFERENCE_PRESSURE_HPA / pressure_hpa, STUVE_EXPONENT)


def compute_accurate_lcl(temp_c, dew_c, pressure_hpa):
    """
    Thermodynamic LCL: spread / (Γd - Γs).

    e  = 6.11 * exp(17.27 Td / (Td + 237.3))                 vapor pressure (hPa)
    r  = 0.622 e / (p - e)                                  mixing ratio
    Γs = g (1 + L r / (Rv T)) / (Cp + L² r / (Rv T²))       saturated lapse rate
    """
    e = 6.11 * math.exp((17.27 * dew_c) / (dew_c + 237.3))
    r = 0.622 * e / (pressure_hpa - e)
    temp_k = temp_c + KELVIN_OFFSET
    moist_lapse_rate = (g * (1 + (L_VAPORIZATION * r) / (R_VAPOR * temp_k))) / (
        CP_DRY_AIR + (L_VAPORIZATION * L_VAPORIZATION * r) / (R_VAPOR * temp_k * temp_k)
    )
    return (temp_c - dew_c) / (DRY_LAPSE_RATE - moist_lapse_rate)


def compute_saturation_vapor_pressure(temp_c):
    """Magnus formula, hPa."""
    return 6.112 * math.exp((17.67 * temp_c) / (temp_c + 243.5))


def compute_relative_humidity(temp_c, dew_c):
    """RH (%) = 100 * e(Td) / e(T)"""
    saturation = compute_saturation_vapor_pressure(temp_c)
    actual = compute_saturation_vapor_pressure(dew_c)
    return (actual / saturation) * 100


def compute_cloud_base(
    temp_raw,
    dew_raw,
    pressure_raw,
    elevation_raw,
    temp_unit=TemperatureUnit.CELSIUS,
    pressure_unit=PressureUnit.HPA,
    elevation_unit=HeightUnit.METERS,
    output_unit=HeightUnit.METERS,
):
    """
    Estimate cloud base height with all four methods.

    Args:
        temp_raw, dew_raw: Temperature and dew point in temp_unit (number or numeric string)
        pressure_raw: Station pressure in pressure_unit
        elevation_raw: Field elevation in elevation_unit
        output_unit: Unit for every height in the result

    Returns:
        CloudBaseResult

    Raises:
        InvalidInputError: a field is not a number, or a unit is unknown
        InvalidPhysicalStateError: dew point above temperature, pressure <= 0,
            or inputs the formulas cannot evaluate
    """
    temp_unit = coerce_choice(TemperatureUnit, temp_unit, "temperature unit")
    pressure_unit = coerce_choice(PressureUnit, pressure_unit, "pressure unit")
    elevation_unit = coerce_choice(HeightUnit, elevation_unit, "elevation unit")
    output_unit = coerce_choice(HeightUnit, output_unit, "height unit")

    temp, dew, pressure, elevation = parse_numbers(temp_raw, dew_raw, pressure_raw, elevation_raw)

    pressure_hpa = to_hpa(pressure, pressure_unit)
    temp_c = temperature_to_celsius(temp, temp_unit)
    dew_c = temperature_to_celsius(dew, temp_unit)
    elevation_m = height_to_meters(elevation, elevation_unit)

    spread = temp_c - dew_c
    if spread < 0:
        dprint(f"[CLOUD BASE] Dew point {dew_c:.2f}°C above temperature {temp_c:.2f}°C")
        raise InvalidPhysicalStateError(DEW_POINT_ABOVE_TEMP_MESSAGE)

    if pressure_hpa <= 0:
        raise InvalidPhysicalStateError(NON_POSITIVE_PRESSURE_MESSAGE)

    try:
        lcl_m = {
            "dewpoint_spread": compute_dewpoint_spread_lcl(spread),
            "espy_method": compute_espy_lcl(spread),
            "accurate_lcl": compute_accurate_lcl(temp_c, dew_c, pressure_hpa),
            "stuve_method": compute_stuve_lcl(spread, pressure_hpa),
        }
        rh = compute_relative_humidity(temp_c, dew_c)
    except (ZeroDivisionError, OverflowError) as e:
        dprint(f"[CLOUD BASE] Model failure for T={temp_c} Td={dew_c} p={pressure_hpa}: {e}")
        raise InvalidPhysicalStateError(OUT_OF_RANGE_MESSAGE) from e
    if not all(math.isfinite(value) for value in [rh, *lcl_m.values()]):
        raise InvalidPhysicalStateError(OUT_OF_RANGE_MESSAGE)

    elevation_out = meters_to_height(elevation_m, output_unit)

    estimates = {}
    for name, height_m in lcl_m.items():
        agl_out = meters_to_height(height_m, output_unit)
        # MSL rounds the sum, not the rounded parts
        estimates[name] = HeightEstimate(
            msl=round_half_up(agl_out + elevation_out, HEIGHT_DECIMALS),
            agl=round_half_up(agl_out, HEIGHT_DECIMALS),
        )

    rh = round_half_up(rh, RH_DECIMALS)

    dprint(f"[CLOUD BASE] T={temp_c:.2f}°C Td={dew_c:.2f}°C p={pressure_hpa:.2f} hPa "
           f"elev={elevation_m:.1f} m spread={spread:.2f} RH={rh}")

    return CloudBaseResult(relative_humidity=rh, unit=output_unit, **estimates)

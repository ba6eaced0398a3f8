# wxcalc/__init__.py

"""
Core module containing the weather calculations, unit conversions, and constants.
"""

from .constants import (
    DEBUG_LOG,
    VERSION,
    DEFAULT_PRESSURE,
    DEFAULT_PRESSURE_UNIT,
    DEFAULT_TIME_OF_DAY,
    DEFAULT_SEASON,
    DEFAULT_ENVIRONMENT_TYPE,
    DEFAULT_ENVIRONMENT_SIZE,
    INVALID_NUMBERS_MESSAGE,
    DEW_POINT_ABOVE_TEMP_MESSAGE,
    CLOUD_BASE_NOTE,
    CLOUD_BASE_METHOD_LABELS,
    COLORS,
)

from .units import (
    TemperatureUnit,
    PressureUnit,
    HeightUnit,
    to_celsius,
    to_fahrenheit,
    to_feet,
    to_meters,
    to_hpa,
)

from .validation import (
    CalculationError,
    InvalidInputError,
    InvalidPhysicalStateError,
    dprint,
    parse_number,
)

from .cloud_base import (
    HeightEstimate,
    CloudBaseResult,
    compute_cloud_base,
    compute_accurate_lcl,
    compute_relative_humidity,
)

from .turbulence import (
    TimeOfDay,
    Season,
    EnvironmentType,
    EnvironmentSize,
    TurbulenceResult,
    compute_turbulence_score,
)

from .summary import cloud_base_lines, turbulence_lines
from .figures import cloud_base_figure, turbulence_gauge

# wxcalc/summary.py

"""
Plain-text result lines, shared by the web form and anything else that prints results.
"""

from .constants import CLOUD_BASE_METHOD_LABELS


def format_height(value):
    """Up to two decimals, trailing zeros dropped (1220.0 -> '1220', 1215.37 -> '1215.37')."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def cloud_base_lines(result):
    """
    One line per method plus relative humidity, e.g.
    "Dewpoint Spread Method: 1220 meters MSL (1220 meters AGL)"
    """
    unit = result.unit.value
    lines = []
    for key, estimate in result.estimates():
        label = CLOUD_BASE_METHOD_LABELS[key]
        lines.append(
            f"{label}: {format_height(estimate.msl)} {unit} MSL "
            f"({format_height(estimate.agl)} {unit} AGL)"
        )
    lines.append(f"Relative Humidity: {result.relative_humidity:.1f}%")
    return lines


def turbulence_lines(result):
    return [
        f"Score: {result.score}/10",
        f"Category: {result.category}",
    ]

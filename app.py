import os

import dash
from dash import dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc
from flask import jsonify

from calculator_page import calculators_layout
from wxcalc import (
    VERSION,
    CLOUD_BASE_NOTE,
    TemperatureUnit,
    HeightUnit,
    CalculationError,
    compute_cloud_base,
    compute_turbulence_score,
    cloud_base_lines,
    turbulence_lines,
    cloud_base_figure,
    turbulence_gauge,
    dprint,
)

# ✅ Initialize Dash app
app = dash.Dash(
    __name__,
    title="Weather Calculators",
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    suppress_callback_exceptions=True,
)
server = app.server

app.layout = calculators_layout()


def selected_units(temp_fahrenheit, height_feet):
    """Map the two switches to (temperature unit, height unit)."""
    temp_unit = TemperatureUnit.FAHRENHEIT if temp_fahrenheit else TemperatureUnit.CELSIUS
    height_unit = HeightUnit.FEET if height_feet else HeightUnit.METERS
    return temp_unit, height_unit


def cloud_base_results_layout(result):
    return html.Div([
        html.H5("Estimated Cloud Base Height:", style={"fontWeight": "600"}),
        html.Ul([html.Li(line) for line in cloud_base_lines(result)]),
        dcc.Graph(figure=cloud_base_figure(result), config={"displayModeBar": False}),
        html.P(CLOUD_BASE_NOTE, className="text-muted", style={"fontSize": "13px", "marginTop": "12px"}),
    ])


def turbulence_results_layout(result):
    return html.Div([
        html.H5("Turbulence Potential:", style={"fontWeight": "600"}),
        *[html.P(line, style={"marginBottom": "4px"}) for line in turbulence_lines(result)],
        dcc.Graph(figure=turbulence_gauge(result), config={"displayModeBar": False}),
    ], style={"backgroundColor": "#f3f4f6", "borderRadius": "6px", "padding": "16px"})


@app.callback(
    Output("temperature-label", "children"),
    Output("temperature-input", "placeholder"),
    Output("dew-point-label", "children"),
    Output("dew-point-input", "placeholder"),
    Output("elevation-label", "children"),
    Output("elevation-input", "placeholder"),
    Output("pressure-input", "placeholder"),
    Input("temp-unit-toggle", "value"),
    Input("height-unit-toggle", "value"),
    Input("pressure-unit-select", "value"),
)
def update_cloud_base_labels(temp_fahrenheit, height_feet, pressure_unit):
    temp_unit, height_unit = selected_units(temp_fahrenheit, height_feet)
    temp_symbol = f"°{temp_unit.value}"
    height_name = height_unit.value
    return (
        f"Temperature ({temp_symbol})",
        f"Enter temperature in {temp_symbol}",
        f"Dew Point ({temp_symbol})",
        f"Enter dew point in {temp_symbol}",
        f"Airport Elevation ({height_name})",
        f"Enter elevation in {height_name}",
        f"Enter pressure in {pressure_unit}",
    )


@app.callback(
    Output("cloud-base-results", "children"),
    Output("cloud-base-error", "children"),
    Output("cloud-base-error", "is_open"),
    Input("cloud-base-button", "n_clicks"),
    State("temperature-input", "value"),
    State("dew-point-input", "value"),
    State("pressure-input", "value"),
    State("elevation-input", "value"),
    State("temp-unit-toggle", "value"),
    State("height-unit-toggle", "value"),
    State("pressure-unit-select", "value"),
    prevent_initial_call=True
)
def calculate_cloud_base(n_clicks, temperature, dew_point, pressure, elevation,
                         temp_fahrenheit, height_feet, pressure_unit):
    if not n_clicks:
        raise PreventUpdate

    temp_unit, height_unit = selected_units(temp_fahrenheit, height_feet)

    try:
        # One switch drives both the elevation input unit and the output unit
        result = compute_cloud_base(
            temperature, dew_point, pressure, elevation,
            temp_unit=temp_unit,
            pressure_unit=pressure_unit,
            elevation_unit=height_unit,
            output_unit=height_unit,
        )
    except CalculationError as e:
        dprint(f"[CLOUD BASE] {e}")
        return None, str(e), True

    return cloud_base_results_layout(result), "", False


@app.callback(
    Output("turbulence-results", "children"),
    Output("turbulence-error", "children"),
    Output("turbulence-error", "is_open"),
    Input("turbulence-button", "n_clicks"),
    State("turbulence-temperature-input", "value"),
    State("wind-speed-input", "value"),
    State("time-of-day-select", "value"),
    State("season-select", "value"),
    State("environment-type-select", "value"),
    State("environment-size-select", "value"),
    prevent_initial_call=True
)
def calculate_turbulence(n_clicks, temperature, wind_speed, time_of_day, season,
                         environment_type, environment_size):
    if not n_clicks:
        raise PreventUpdate

    try:
        result = compute_turbulence_score(
            temperature, wind_speed, time_of_day, season, environment_size,
            environment_type=environment_type,
        )
    except CalculationError as e:
        dprint(f"[TURBULENCE] {e}")
        return None, str(e), True

    return turbulence_results_layout(result), "", False


@app.server.route("/health")
def health():
    return jsonify({"status": "ok", "version": VERSION})


if __name__ == "__main__":
    # Use env var to control debug (1 = on, 0 = off)
    debug_mode = os.environ.get("WXCALC_DEBUG", "1") == "1"
    port = int(os.environ.get("PORT", 8050))

    app.run(debug=debug_mode, host="127.0.0.1", port=port)

from dash import dcc, html
import dash_bootstrap_components as dbc

from wxcalc import (
    VERSION,
    DEFAULT_PRESSURE,
    DEFAULT_PRESSURE_UNIT,
    DEFAULT_TIME_OF_DAY,
    DEFAULT_SEASON,
    DEFAULT_ENVIRONMENT_TYPE,
    DEFAULT_ENVIRONMENT_SIZE,
    PressureUnit,
    TimeOfDay,
    Season,
    EnvironmentType,
    EnvironmentSize,
)


def create_field_row(label, component, label_id=None):
    """Helper to create a consistent labelled field"""
    label_kwargs = {"id": label_id} if label_id else {}
    return html.Div([
        html.Label(label, className="input-label", **label_kwargs),
        component
    ], className="mb-3")


def create_unit_switch(label, left, right, switch_id):
    """Label on the left, 'left [switch] right' on the right. Switch off = left unit."""
    return html.Div([
        html.Label(label, className="input-label"),
        html.Div([
            html.Span(left, className="me-2"),
            dbc.Switch(id=switch_id, value=False, className="d-inline-block"),
            html.Span(right),
        ], className="d-flex align-items-center"),
    ], className="d-flex justify-content-between align-items-center mb-3")


def enum_options(enum_cls):
    return [{"label": member.value.capitalize(), "value": member.value} for member in enum_cls]


# --- Cloud Base Calculator ---
def cloud_base_card():
    return dbc.Card([
        dbc.CardHeader([
            html.Div("Cloud Base Height Calculator", style={"fontWeight": "600", "fontSize": "20px"}),
            html.Span(f"v{VERSION}", className="text-muted", style={"fontSize": "12px"}),
        ]),
        dbc.CardBody([
            create_unit_switch("Temperature Unit", "°C", "°F", "temp-unit-toggle"),
            create_unit_switch("Height Unit", "Meters", "Feet", "height-unit-toggle"),

            create_field_row(
                "Temperature (°C)",
                dcc.Input(id="temperature-input", type="number", placeholder="Enter temperature in °C",
                          className="form-control"),
                label_id="temperature-label",
            ),
            create_field_row(
                "Dew Point (°C)",
                dcc.Input(id="dew-point-input", type="number", placeholder="Enter dew point in °C",
                          className="form-control"),
                label_id="dew-point-label",
            ),
            create_field_row(
                "Atmospheric Pressure",
                dbc.Row([
                    dbc.Col(
                        dcc.Input(id="pressure-input", type="number", value=float(DEFAULT_PRESSURE),
                                  placeholder=f"Enter pressure in {DEFAULT_PRESSURE_UNIT}",
                                  className="form-control"),
                    ),
                    dbc.Col(
                        dcc.Dropdown(
                            id="pressure-unit-select",
                            options=[{"label": u.value, "value": u.value} for u in PressureUnit],
                            value=DEFAULT_PRESSURE_UNIT,
                            clearable=False,
                        ),
                        width=4,
                    ),
                ], className="g-2"),
            ),
            create_field_row(
                "Airport Elevation (meters)",
                dcc.Input(id="elevation-input", type="number", placeholder="Enter elevation in meters",
                          className="form-control"),
                label_id="elevation-label",
            ),

            dbc.Button("Calculate Cloud Base", id="cloud-base-button", color="primary", className="w-100 mb-3"),
            dbc.Alert(id="cloud-base-error", color="danger", is_open=False),
            html.Div(id="cloud-base-results"),
        ]),
    ], className="mb-4")


# --- Turbulence Potential Calculator ---
def turbulence_card():
    return dbc.Card([
        dbc.CardHeader(html.Div("Turbulence Potential Calculator", style={"fontWeight": "600", "fontSize": "20px"})),
        dbc.CardBody([
            create_field_row(
                "Temperature (°C)",
                dcc.Input(id="turbulence-temperature-input", type="number", placeholder="Enter temperature",
                          className="form-control"),
            ),
            create_field_row(
                "Wind Speed (knots)",
                dcc.Input(id="wind-speed-input", type="number", placeholder="Enter wind speed",
                          className="form-control"),
            ),
            create_field_row(
                "Time of Day",
                dcc.Dropdown(id="time-of-day-select", options=enum_options(TimeOfDay),
                             value=DEFAULT_TIME_OF_DAY, clearable=False),
            ),
            create_field_row(
                "Season",
                dcc.Dropdown(id="season-select", options=enum_options(Season),
                             value=DEFAULT_SEASON, clearable=False),
            ),
            create_field_row(
                "Environment Type",
                dcc.Dropdown(id="environment-type-select", options=enum_options(EnvironmentType),
                             value=DEFAULT_ENVIRONMENT_TYPE, clearable=False),
            ),
            create_field_row(
                "Environment Size",
                dcc.Dropdown(id="environment-size-select", options=enum_options(EnvironmentSize),
                             value=DEFAULT_ENVIRONMENT_SIZE, clearable=False),
            ),

            dbc.Button("Calculate Turbulence Potential", id="turbulence-button", color="primary",
                       className="w-100 mb-3"),
            dbc.Alert(id="turbulence-error", color="danger", is_open=False),
            html.Div(id="turbulence-results"),
        ]),
    ], className="mb-4")


# --- Full Page Layout ---
def calculators_layout():
    return dbc.Container([
        html.H1("Weather Calculators", style={"fontSize": "26px", "fontWeight": "bold", "margin": "16px 0"}),
        cloud_base_card(),
        turbulence_card(),
    ], style={"maxWidth": "720px"})

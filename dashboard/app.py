"""Vehicle Dashboard.

Interactive cockpit built with Streamlit and Plotly.  Shows a speedometer,
a fuel gauge and the engine state of one vehicle, forwards button presses
to the vehicle's operations, and lets a running vehicle coast down at the
configured refresh cadence.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

import time

import plotly.graph_objects as go
import streamlit as st

from vehicle_sim.config import VehiclePreset, load_dashboard_settings, load_presets
from vehicle_sim.core.coasting import CoastingPolicy, apply_coasting
from vehicle_sim.core.commands import Command, CommandStep, apply_command
from vehicle_sim.core.telemetry import TelemetryLog, fuel_band
from vehicle_sim.core.vehicle import Vehicle

# ---------------------------------------------------------------------------
# Button layout
# ---------------------------------------------------------------------------

_BUTTONS: list[tuple[Command, str]] = [
    (Command.DRIVE_OFF, "Drive off"),
    (Command.ACCELERATE, "Accelerate +{accelerate:.0f}"),
    (Command.BRAKE, "Brake -{brake:.0f}"),
    (Command.REFUEL, "Refuel +{refuel:.0f}"),
    (Command.HONK, "Honk"),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _reset_session(preset: VehiclePreset) -> None:
    """Put a fresh vehicle for ``preset`` into the session."""
    st.session_state["preset"] = preset.name
    st.session_state["vehicle"] = preset.build()
    st.session_state["telemetry"] = TelemetryLog()
    st.session_state["tick"] = 0
    st.session_state["last_tick_at"] = time.monotonic()
    st.session_state["status"] = ""
    st.session_state["notice"] = None
    st.session_state["notice_until"] = 0.0


def _advance_clock(
    vehicle: Vehicle,
    telemetry: TelemetryLog,
    policy: CoastingPolicy,
) -> None:
    """Run one coasting tick if a full refresh interval has elapsed."""
    now = time.monotonic()
    if now - st.session_state["last_tick_at"] < policy.interval:
        return
    apply_coasting(vehicle, policy)
    st.session_state["tick"] += 1
    st.session_state["last_tick_at"] = now
    telemetry.record(vehicle, st.session_state["tick"])


def _press(vehicle: Vehicle, command: Command, step: CommandStep) -> None:
    """Button callback; runs before the rerun so labels see the new state."""
    result = apply_command(vehicle, command, step)
    st.session_state["status"] = result.outcome.describe()
    st.session_state["notice"] = result.notice
    st.session_state["notice_until"] = time.monotonic() + result.notice_seconds


def _active_notice() -> str | None:
    if time.monotonic() >= st.session_state["notice_until"]:
        st.session_state["notice"] = None
    return st.session_state["notice"]


def _speed_gauge(vehicle: Vehicle) -> go.Figure:
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=vehicle.speed,
            number={"suffix": " km/h", "valueformat": ".1f"},
            gauge={
                "axis": {"range": [0, vehicle.max_speed]},
                "bar": {"color": "#2c3e50"},
            },
            title={"text": "Speed"},
        )
    )
    fig.update_layout(height=300, margin=dict(t=60, b=20))
    return fig


def _fuel_gauge(vehicle: Vehicle) -> go.Figure:
    _, colour = fuel_band(vehicle.fuel_ratio)
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=vehicle.fuel_ratio * 100.0,
            number={"suffix": " %", "valueformat": ".0f"},
            gauge={
                "shape": "bullet",
                "axis": {"range": [0, 100]},
                "bar": {"color": colour},
            },
            title={"text": "Fuel"},
        )
    )
    fig.update_layout(height=150, margin=dict(t=30, b=20))
    return fig


def _history_chart(telemetry: TelemetryLog) -> go.Figure:
    frame = telemetry.to_frame()
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(x=frame["tick"], y=frame["speed"], name="Speed", mode="lines")
    )
    fig.add_trace(
        go.Scatter(
            x=frame["tick"],
            y=frame["fuel_level"],
            name="Fuel",
            mode="lines",
            yaxis="y2",
        )
    )
    fig.update_layout(
        title="Recent history",
        xaxis_title="Tick",
        yaxis=dict(title="Speed"),
        yaxis2=dict(title="Fuel", overlaying="y", side="right"),
        height=300,
    )
    return fig


# ---------------------------------------------------------------------------
# Streamlit app
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="Vehicle Dashboard", layout="wide")

    presets = load_presets()
    policy, step = load_dashboard_settings()

    # ── Sidebar ──────────────────────────────────────────────────────────
    st.sidebar.header("Vehicle")
    names = [p.name for p in presets]
    selected: str = st.sidebar.selectbox("Preset", options=names, index=0)
    preset = presets[names.index(selected)]

    reset_clicked: bool = st.sidebar.button("Reset")
    if reset_clicked or st.session_state.get("preset") != selected:
        _reset_session(preset)

    st.sidebar.markdown("---")
    st.sidebar.caption(
        f"Refresh {policy.refresh_hz:.0f} Hz, coasting -{policy.deceleration} "
        f"per tick above {policy.threshold:.0f} km/h"
    )

    vehicle: Vehicle = st.session_state["vehicle"]
    st.title(f"{vehicle.model} Dashboard")

    @st.fragment(run_every=policy.interval)
    def cockpit() -> None:
        telemetry: TelemetryLog = st.session_state["telemetry"]

        # ── Controls ─────────────────────────────────────────────────────
        engine_label = "Stop engine" if vehicle.engine_running else "Start engine"
        cols = st.columns(len(_BUTTONS) + 1)
        cols[0].button(
            engine_label,
            key="btn_engine",
            on_click=_press,
            args=(vehicle, Command.TOGGLE_ENGINE, step),
        )
        for col, (command, label) in zip(cols[1:], _BUTTONS):
            text = label.format(
                accelerate=step.accelerate, brake=step.brake, refuel=step.refuel
            )
            col.button(
                text,
                key=f"btn_{command.value}",
                on_click=_press,
                args=(vehicle, command, step),
            )

        _advance_clock(vehicle, telemetry, policy)

        # ── Gauges ───────────────────────────────────────────────────────
        col_speed, col_status = st.columns([2, 1])
        with col_speed:
            st.plotly_chart(_speed_gauge(vehicle), use_container_width=True)
        with col_status:
            st.metric("Engine", "On" if vehicle.engine_running else "Off")
            st.metric("State", vehicle.state.value)
            st.plotly_chart(_fuel_gauge(vehicle), use_container_width=True)
            if vehicle.is_fuel_critical():
                st.error("Fuel critical: less than 10% left.")
            notice = _active_notice()
            if notice:
                st.warning(notice)
            if st.session_state["status"]:
                st.caption(st.session_state["status"])

        if len(telemetry) > 1:
            st.plotly_chart(_history_chart(telemetry), use_container_width=True)

    cockpit()

    # ── Footer ───────────────────────────────────────────────────────────
    st.markdown("---")
    st.caption("The dashboard only reads state and forwards commands.")


if __name__ == "__main__":
    main()

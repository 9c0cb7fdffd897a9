"""LNG introduction into a cooled pipeline: liquid front advance and N2 venting."""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from .hydraulics import gas_column_pressure_bar
from .properties import ATMOSPHERIC_PRESSURE_BAR, GAS_CONSTANT, PA_PER_BAR, RHO_N2_NORMAL, ZERO_CELSIUS_K
from .ramps import fill_rate_setpoint
from .types import (
    CooldownResults,
    FailureKind,
    LngChartPoint,
    LngInputs,
    LngOutcome,
    LngResults,
    ProfileSnapshot,
    SimulationFailure,
)

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 50_000


def displaced_n2_nm3(volume_m3: float, temp_c: float, back_pressure_bar: float) -> float:
    """Normal volume of N2 pushed out when `volume_m3` of pipe is filled at the vent conditions."""
    moles = back_pressure_bar * PA_PER_BAR * volume_m3 / (GAS_CONSTANT * (temp_c + ZERO_CELSIUS_K))
    return moles * GAS_CONSTANT * ZERO_CELSIUS_K / (ATMOSPHERIC_PRESSURE_BAR * PA_PER_BAR)


def pressure_profile(
    centres: np.ndarray,
    filled_length: float,
    column_length: float,
    inlet_bar: float,
    back_pressure_bar: float,
) -> np.ndarray:
    """Pressure along the pipe: inlet pressure behind the liquid front, linear decay across the gas column."""
    profile = np.full(centres.shape, back_pressure_bar)
    liquid = centres < filled_length
    profile[liquid] = inlet_bar
    if column_length > 0:
        to_vent = column_length - (centres[~liquid] - filled_length)
        profile[~liquid] = back_pressure_bar + (inlet_bar - back_pressure_bar) * to_vent / column_length
    return profile


def run_lng_introduction_simulation(inputs: LngInputs, cooldown: CooldownResults) -> LngOutcome:
    """Fill the cooled pipe with LNG under a velocity cap, tracking vent rate and inlet pressure."""
    geo = cooldown.geometry
    pipe_volume = geo.internal_volume
    if pipe_volume <= 0 or geo.length <= 0:
        return SimulationFailure(FailureKind.INVALID_CONFIG, "Invalid pipe dimensions from cooldown results.")
    dt = float(inputs.time_step_s)
    if dt <= 0:
        return SimulationFailure(FailureKind.INVALID_CONFIG, f"Time step must be positive (got {dt} s).")

    max_rate = inputs.max_velocity * geo.flow_area * 3600.0
    if inputs.initial_fill_rate > max_rate:
        msg = (
            f"Initial filling rate ({inputs.initial_fill_rate} m³/h) cannot exceed the max rate calculated "
            f"from velocity limit ({max_rate:.1f} m³/h)."
        )
        logger.warning(msg)
        return SimulationFailure(FailureKind.INVALID_CONFIG, msg)

    n = geo.n_segments
    centres = (np.arange(n) + 0.5) * geo.segment_length
    pipe_temp = cooldown.inputs.target_temp
    back_p = inputs.vent_back_pressure
    logger.info(f"LNG introduction: {pipe_volume:.1f} m³ to fill, max rate {max_rate:.1f} m³/h")

    chart: List[LngChartPoint] = [
        LngChartPoint(
            time=0.0,
            lng_flow_rate=inputs.initial_fill_rate,
            lng_velocity=inputs.initial_fill_rate / 3600.0 / geo.flow_area,
            filled_volume=0.0,
            n2_vent_rate=0.0,
            inlet_pressure=back_p,
        )
    ]
    temp_series = [ProfileSnapshot(0.0, (float(pipe_temp),) * n)]
    pressure_series = [ProfileSnapshot(0.0, (float(back_p),) * n)]

    filled = 0.0
    time_s = 0.0
    next_snapshot_s = inputs.snapshot_interval_s
    iteration = 0
    while filled < pipe_volume and iteration < MAX_ITERATIONS:
        iteration += 1
        rate = fill_rate_setpoint(time_s / 3600.0, inputs.initial_fill_rate, max_rate, inputs.ramp_up_hours)
        added = rate * dt / 3600.0
        filled += added
        time_s += dt

        filled_length = filled / geo.flow_area
        column = max(0.0, geo.length - filled_length)
        vent_nm3_h = displaced_n2_nm3(added, pipe_temp, back_p) / (dt / 3600.0)
        vent_kg_s = vent_nm3_h * RHO_N2_NORMAL / 3600.0
        p_inlet = gas_column_pressure_bar(vent_kg_s, column, pipe_temp, geo, back_p)

        chart.append(
            LngChartPoint(
                time=time_s / 3600.0,
                lng_flow_rate=rate,
                lng_velocity=rate / 3600.0 / geo.flow_area,
                filled_volume=min(filled, pipe_volume),
                n2_vent_rate=vent_nm3_h,
                inlet_pressure=p_inlet,
            )
        )

        if time_s >= next_snapshot_s:
            temps = np.where(centres < filled_length, inputs.lng_temperature, pipe_temp)
            temp_series.append(ProfileSnapshot(time_s / 3600.0, tuple(temps.tolist())))
            pressures = pressure_profile(centres, filled_length, column, p_inlet, back_p)
            pressure_series.append(ProfileSnapshot(time_s / 3600.0, tuple(pressures.tolist())))
            next_snapshot_s += inputs.snapshot_interval_s

    if filled < pipe_volume:
        msg = f"LNG filling simulation timed out after {iteration} steps at {filled:.1f} of {pipe_volume:.1f} m³."
        logger.warning(msg)
        return SimulationFailure(FailureKind.TIMEOUT, msg)

    final_profile = (float(inputs.lng_temperature),) * n
    temp_series.append(ProfileSnapshot(time_s / 3600.0, final_profile))
    logger.info(f"LNG fill complete in {time_s / 3600.0:.2f} h")

    return LngResults(
        inputs=inputs,
        cooldown=cooldown,
        total_filling_time_hours=time_s / 3600.0,
        total_lng_volume_m3=pipe_volume,
        total_lng_mass_kg=pipe_volume * inputs.lng_density,
        max_flow_rate_m3_h=max_rate,
        positions=tuple(centres.tolist()),
        final_temp_profile=final_profile,
        chart_data=chart,
        pressure_time_series=pressure_series,
        temp_time_series=temp_series,
    )

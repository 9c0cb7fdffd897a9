from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from .front import front_position, mixing_factors
from .geometry import prep_geometry
from .heat_transfer import heat_ingress, n2_temperature_march
from .hydraulics import inlet_pressure_bar
from .inventory import n2_inventory
from .properties import ATMOSPHERIC_PRESSURE_BAR, RHO_N2_NORMAL, cp_steel
from .ramps import n2_flow_setpoint, n2_inlet_temp_setpoint
from .types import (
    ChartPoint,
    CooldownInputs,
    CooldownOutcome,
    CooldownResults,
    FailureKind,
    PipelineGeometry,
    ProfileSnapshot,
    SimulationFailure,
)

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 500_000
SNAPSHOT_INTERVAL_S = 3600.0
# outlet must have moved this far below its start before a stall can be declared
STALL_MIN_COOLING_C = 1e-6
# with both ramps finished, a decelerating outlet cooling slower than this is stalled
STAGNATION_RATE_C_PER_H = 0.01


def update_segment_temp(temp_c: float, net_heat_w: float, segment_mass: float, dt_s: float) -> float:
    """Explicit Euler step of the lumped segment energy balance."""
    return temp_c + net_heat_w * dt_s / (segment_mass * cp_steel(temp_c))


def segment_ingress(temp_c: float, inputs: CooldownInputs, geo: PipelineGeometry):
    return heat_ingress(
        temp_c,
        inputs.ambient_temp,
        geo.segment_insulation_area,
        inputs.emissivity,
        inputs.ext_convection_coeff,
        geo.r_conductive_segment,
    )


def capacity_stall(
    temps: Sequence[float],
    inlet_temp: float,
    inputs: CooldownInputs,
    geo: PipelineGeometry,
) -> Optional[SimulationFailure]:
    """Stall when the outlet segment gains more from ambient than max N2 flow could take out of it.

    Max-flow removal comes from a full march at the current inlet temperature,
    with no mixing factor. Only checked once the outlet has started to cool.
    """
    outlet = float(temps[-1])
    if inputs.initial_temp - outlet <= STALL_MIN_COOLING_C:
        return None
    max_removal = n2_temperature_march(
        temps, inlet_temp, inputs.max_n2_flow, geo.inner_diameter, geo.segment_inner_area
    )[-1]
    outlet_ingress = segment_ingress(outlet, inputs, geo).q_total
    if outlet_ingress < max_removal:
        return None
    return SimulationFailure(
        FailureKind.STALL,
        f"Stalled at outlet temperature {outlet:.1f}°C. Heat ingress to the final pipe segment "
        f"({outlet_ingress:.0f} W) exceeds its maximum possible heat removal ({max_removal:.0f} W). "
        f"Increase max N₂ flow or improve insulation.",
    )


def run_cooldown_simulation(inputs: CooldownInputs) -> CooldownOutcome:
    """Simulate the N2 cooldown until the outlet reaches target, the run stalls, or times out.

    Returns a CooldownResults on success, or a SimulationFailure describing
    why the run was rejected or could not finish.
    """
    dt = float(inputs.time_step_s)
    if dt <= 0:
        logger.warning(f"Rejected cooldown run: time step {dt} s")
        return SimulationFailure(FailureKind.INVALID_CONFIG, f"Time step must be positive (got {dt} s).")
    try:
        geo = prep_geometry(inputs)
    except ValueError as e:
        logger.warning(f"Rejected cooldown run: {e}")
        return SimulationFailure(FailureKind.INVALID_CONFIG, str(e))

    n = geo.n_segments
    d_in = geo.inner_diameter
    logger.info(
        f"Cooldown run: {geo.length:.0f} m pipe, {geo.mass:.0f} kg steel, "
        f"{geo.internal_volume_nm3:.1f} Nm³ gas inventory, dt={dt:.0f} s"
    )

    positions = tuple(float(x) for x in (np.arange(n) + 1) * geo.segment_length)
    temps = np.full(n, float(inputs.initial_temp))
    flow = float(inputs.initial_n2_flow)
    n2_used = 0.0
    time_s = 0.0

    heat_added = heat_added_conv = heat_added_rad = heat_removed = 0.0
    chart: List[ChartPoint] = [
        ChartPoint(
            time=0.0, temperature=inputs.initial_temp, n2_flow=flow, cooldown_rate=0.0,
            n2_accumulated=0.0, pressure_bar=ATMOSPHERIC_PRESSURE_BAR,
            q_total=0.0, q_convection=0.0, q_radiation=0.0, q_removed=0.0, q_accumulation=0.0,
            heat_added=0.0, heat_added_convection=0.0, heat_added_radiation=0.0,
            heat_removed=0.0, net_heat_removed=0.0,
        )
    ]
    snapshots: List[ProfileSnapshot] = [ProfileSnapshot(0.0, tuple(temps.tolist()))]
    next_snapshot_s = SNAPSHOT_INTERVAL_S
    hour_start_outlet = float(inputs.initial_temp)
    prev_hour_cooling = float("inf")

    iteration = 0
    while temps[-1] > inputs.target_temp and iteration < MAX_ITERATIONS:
        iteration += 1
        prev_outlet = float(temps[-1])
        hours = time_s / 3600.0

        inlet_temp = n2_inlet_temp_setpoint(
            hours,
            inputs.initial_n2_inlet_temp,
            inputs.final_n2_inlet_temp,
            inputs.n2_temp_step_size,
            inputs.n2_temp_hold_hours,
        )
        factors = mixing_factors(front_position(n2_used, geo.internal_volume_nm3, n), n)
        removed = n2_temperature_march(temps, inlet_temp, flow, d_in, geo.segment_inner_area)

        q_in = q_conv = q_rad = q_out = 0.0
        for i in range(n):
            seg_temp = float(temps[i])
            ing = segment_ingress(seg_temp, inputs, geo)
            removal = removed[i] * factors[i]
            temps[i] = update_segment_temp(seg_temp, ing.q_total - removal, geo.segment_mass, dt)
            q_in += ing.q_total
            q_conv += ing.q_convection
            q_rad += ing.q_radiation
            q_out += removal

        outlet = float(temps[-1])
        rate = (prev_outlet - outlet) / (dt / 3600.0)
        time_s += dt

        if time_s >= next_snapshot_s:
            snapshots.append(ProfileSnapshot(time_s / 3600.0, tuple(temps.tolist())))
            next_snapshot_s += SNAPSHOT_INTERVAL_S
            logger.debug(f"t={time_s / 3600.0:.1f} h outlet={outlet:.1f} °C flow={flow:.0f} Nm³/h")

            hour_cooling = hour_start_outlet - outlet
            ramps_done = flow >= inputs.max_n2_flow and inlet_temp <= inputs.final_n2_inlet_temp
            if (
                ramps_done
                and (inputs.initial_temp - outlet) > STALL_MIN_COOLING_C
                and hour_cooling < STAGNATION_RATE_C_PER_H
                and hour_cooling <= prev_hour_cooling
            ):
                msg = (
                    f"Stalled at outlet temperature {outlet:.1f}°C. At max N₂ flow ({inputs.max_n2_flow:.0f} Nm³/h) "
                    f"and final inlet temperature ({inlet_temp:.0f}°C) the outlet cooled only "
                    f"{hour_cooling:.4f}°C in the last hour. Increase max N₂ flow or improve insulation."
                )
                logger.warning(msg)
                return SimulationFailure(FailureKind.STALL, msg)
            hour_start_outlet = outlet
            prev_hour_cooling = hour_cooling

        n2_used += flow * dt / 3600.0
        p_inlet = inlet_pressure_bar(temps, flow, geo, ATMOSPHERIC_PRESSURE_BAR)

        heat_added += q_in * dt / 1e6
        heat_added_conv += q_conv * dt / 1e6
        heat_added_rad += q_rad * dt / 1e6
        heat_removed += q_out * dt / 1e6
        chart.append(
            ChartPoint(
                time=time_s / 3600.0,
                temperature=outlet,
                n2_flow=flow,
                cooldown_rate=rate,
                n2_accumulated=n2_used,
                pressure_bar=p_inlet,
                q_total=q_in / 1000.0,
                q_convection=q_conv / 1000.0,
                q_radiation=q_rad / 1000.0,
                q_removed=q_out / 1000.0,
                q_accumulation=-(q_in - q_out) / 1000.0,
                heat_added=heat_added,
                heat_added_convection=heat_added_conv,
                heat_added_radiation=heat_added_rad,
                heat_removed=heat_removed,
                net_heat_removed=heat_removed - heat_added,
            )
        )

        # setpoint for the next step, from this step's start time
        flow = n2_flow_setpoint(
            hours,
            inputs.initial_n2_flow,
            inputs.intermediate_n2_flow,
            inputs.max_n2_flow,
            inputs.flow_ramp_intermediate_hours,
            inputs.flow_ramp_total_hours,
        )

        stall = capacity_stall(temps, inlet_temp, inputs, geo)
        if stall is not None:
            logger.warning(stall.message)
            return stall

    if temps[-1] > inputs.target_temp:
        msg = (
            f"Simulation timed out after {iteration} steps ({time_s / 3600.0:.1f} h) with outlet at "
            f"{temps[-1]:.1f}°C. Check input parameters."
        )
        logger.warning(msg)
        return SimulationFailure(FailureKind.TIMEOUT, msg)

    final_profile = tuple(temps.tolist())
    snapshots.append(ProfileSnapshot(time_s / 3600.0, final_profile))
    inv = n2_inventory(inputs, geo, n2_used)
    logger.info(
        f"Cooldown reached {inputs.target_temp:.0f}°C in {time_s / 3600.0:.2f} h; "
        f"N2 cooldown {inv.cooldown:.0f} Nm³, grand total {inv.grand_total:.0f} Nm³"
    )

    return CooldownResults(
        inputs=inputs,
        geometry=geo,
        total_time_hours=time_s / 3600.0,
        peak_cooldown_rate=max(p.cooldown_rate for p in chart),
        peak_heat_removal_kw=max(p.q_removed for p in chart),
        n2_purge_nm3=inv.purge,
        n2_cooldown_nm3=inv.cooldown,
        n2_holds_nm3=inv.holds,
        n2_preservation_nm3=inv.preservation,
        n2_subtotal_nm3=inv.subtotal,
        n2_margin_nm3=inv.margin,
        n2_grand_total_nm3=inv.grand_total,
        n2_grand_total_kg=inv.grand_total * RHO_N2_NORMAL,
        heat_ingress_mj=heat_added,
        heat_ingress_convection_mj=heat_added_conv,
        heat_ingress_radiation_mj=heat_added_rad,
        heat_removed_mj=heat_removed,
        initial_cp_steel=cp_steel(inputs.initial_temp),
        final_cp_steel=cp_steel(inputs.target_temp),
        r_pipe=geo.r_pipe_segment * n,
        r_insulation=geo.r_insulation_segment * n,
        positions=positions,
        temperature_profile=final_profile,
        chart_data=chart,
        time_series_profile=snapshots,
    )

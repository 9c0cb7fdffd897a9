from __future__ import annotations

import math


def n2_inlet_temp_setpoint(
    elapsed_hours: float,
    initial_temp: float,
    final_temp: float,
    step_size: float,
    hold_hours: float,
) -> float:
    """Step-and-hold vaporizer outlet temperature.

    One step of `step_size` is taken at the end of every completed hold
    period. A non-positive step or hold jumps straight to `final_temp`.
    """
    if step_size <= 0 or hold_hours <= 0:
        temp = final_temp
    else:
        steps = math.floor(elapsed_hours / hold_hours)
        temp = initial_temp - steps * step_size
    return max(final_temp, temp)


def n2_flow_setpoint(
    elapsed_hours: float,
    initial_flow: float,
    intermediate_flow: float,
    max_flow: float,
    intermediate_hours: float,
    total_hours: float,
) -> float:
    """Two-stage linear flow ramp: initial -> intermediate -> max, clamped to [initial, max]."""
    if total_hours > 0 and elapsed_hours <= total_hours:
        if elapsed_hours <= intermediate_hours:
            progress = elapsed_hours / intermediate_hours if intermediate_hours > 0 else 1.0
            flow = initial_flow + progress * (intermediate_flow - initial_flow)
        else:
            stage2 = total_hours - intermediate_hours
            progress = (elapsed_hours - intermediate_hours) / stage2 if stage2 > 0 else 1.0
            flow = intermediate_flow + progress * (max_flow - intermediate_flow)
    else:
        flow = max_flow
    return min(max_flow, max(initial_flow, flow))


def fill_rate_setpoint(elapsed_hours: float, initial_rate: float, max_rate: float, ramp_hours: float) -> float:
    # LNG: single linear ramp, then hold
    if ramp_hours > 0 and elapsed_hours < ramp_hours:
        return initial_rate + elapsed_hours / ramp_hours * (max_rate - initial_rate)
    return max_rate

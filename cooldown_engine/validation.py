"""Input checks run before a simulation. Each returns {field_name: message}; empty means valid."""

from __future__ import annotations

import math
from dataclasses import asdict
from typing import Dict

from .types import CooldownInputs, LngInputs

_COOLDOWN_POSITIVE = [
    "pipe_length",
    "pipe_od",
    "pipe_wt",
    "cooldown_rate_limit",
    "insulation_thickness",
    "insulation_k",
    "initial_n2_flow",
    "time_step_s",
]
_COOLDOWN_NON_NEGATIVE = [
    "max_n2_flow",
    "ext_convection_coeff",
    "pipe_roughness",
    "number_of_holds",
    "hold_duration_hours",
    "purge_volumes",
    "preservation_days",
    "preservation_leak_rate_pct_per_day",
    "operational_margin_pct",
    "flow_ramp_intermediate_hours",
    "flow_ramp_total_hours",
]
_LNG_POSITIVE = ["initial_fill_rate", "max_velocity", "lng_density", "vent_back_pressure", "time_step_s", "snapshot_interval_s"]
_LNG_NON_NEGATIVE = ["ramp_up_hours"]


def _number_errors(values: Dict[str, object]) -> Dict[str, str]:
    errors = {}
    for key, val in values.items():
        try:
            ok = math.isfinite(float(val))
        except (TypeError, ValueError):
            ok = False
        if not ok:
            errors[key] = "Must be a valid number."
    return errors


def validate_cooldown_inputs(inputs: CooldownInputs) -> Dict[str, str]:
    errors = _number_errors(asdict(inputs))
    if errors:
        return errors
    x = inputs

    for key in _COOLDOWN_POSITIVE:
        if getattr(x, key) <= 0:
            errors[key] = "Must be greater than 0."
    for key in _COOLDOWN_NON_NEGATIVE:
        if getattr(x, key) < 0:
            errors[key] = "Cannot be negative."

    if x.pipe_wt >= x.pipe_od / 2:
        errors["pipe_wt"] = "Must be less than half the outer diameter."
    if not 0 <= x.emissivity <= 1:
        errors["emissivity"] = "Must be between 0 and 1."
    if x.target_temp >= x.initial_temp:
        errors["target_temp"] = "Must be colder than initial temperature."
    if x.final_n2_inlet_temp >= x.initial_temp:
        errors["final_n2_inlet_temp"] = "Final N₂ inlet must be colder than pipe initial temperature."
    if x.final_n2_inlet_temp >= x.initial_n2_inlet_temp:
        errors["final_n2_inlet_temp"] = "Must be colder than initial N₂ temperature."
    if x.initial_n2_inlet_temp >= x.initial_temp:
        errors["initial_n2_inlet_temp"] = "Should be at or colder than pipe's initial temperature."
    if x.initial_n2_flow > x.max_n2_flow:
        errors["initial_n2_flow"] = "Must be less than or equal to Max N₂ Flow."
    if x.flow_ramp_intermediate_hours > x.flow_ramp_total_hours:
        errors["flow_ramp_intermediate_hours"] = "Must not exceed the total ramp time."
    return errors


def validate_lng_inputs(inputs: LngInputs) -> Dict[str, str]:
    errors = _number_errors(asdict(inputs))
    if errors:
        return errors
    for key in _LNG_POSITIVE:
        if getattr(inputs, key) <= 0:
            errors[key] = "Must be greater than 0."
    for key in _LNG_NON_NEGATIVE:
        if getattr(inputs, key) < 0:
            errors[key] = "Cannot be negative."
    return errors

"""Nitrogen inventory for the whole procedure: purge, cooldown, holds, preservation and margin."""

from __future__ import annotations

from typing import NamedTuple

from .heat_transfer import heat_ingress
from .properties import RHO_N2_NORMAL, cp_n2
from .types import CooldownInputs, PipelineGeometry


class N2Inventory(NamedTuple):
    purge: float          # Nm³
    cooldown: float
    holds: float
    preservation: float
    subtotal: float
    margin: float
    grand_total: float


def hold_ingress_w(inputs: CooldownInputs, geometry: PipelineGeometry) -> float:
    """Total ambient ingress (W) with every segment held at the target temperature."""
    per_segment = heat_ingress(
        inputs.target_temp,
        inputs.ambient_temp,
        geometry.segment_insulation_area,
        inputs.emissivity,
        inputs.ext_convection_coeff,
        geometry.r_conductive_segment,
    ).q_total
    return per_segment * geometry.n_segments


def hold_volume_nm3(inputs: CooldownInputs, geometry: PipelineGeometry) -> float:
    """N2 needed to cancel ingress while holding cold, fed at the final vaporizer temperature."""
    if inputs.number_of_holds <= 0 or inputs.hold_duration_hours <= 0:
        return 0.0
    delta_t = inputs.target_temp - inputs.final_n2_inlet_temp
    if delta_t <= 0:
        return 0.0
    cp = cp_n2((inputs.target_temp + inputs.final_n2_inlet_temp) / 2.0)
    m_dot = hold_ingress_w(inputs, geometry) / (cp * delta_t)
    flow_nm3_h = m_dot * 3600.0 / RHO_N2_NORMAL
    return flow_nm3_h * inputs.number_of_holds * inputs.hold_duration_hours


def n2_inventory(inputs: CooldownInputs, geometry: PipelineGeometry, cooldown_nm3: float) -> N2Inventory:
    purge = geometry.internal_volume_nm3 * inputs.purge_volumes
    holds = hold_volume_nm3(inputs, geometry)
    preservation = (
        geometry.internal_volume_nm3
        * (inputs.preservation_leak_rate_pct_per_day / 100.0)
        * inputs.preservation_days
    )
    subtotal = cooldown_nm3 + holds + purge + preservation
    margin = subtotal * (inputs.operational_margin_pct / 100.0)
    return N2Inventory(
        purge=purge,
        cooldown=cooldown_nm3,
        holds=holds,
        preservation=preservation,
        subtotal=subtotal,
        margin=margin,
        grand_total=subtotal + margin,
    )

from __future__ import annotations

from typing import Sequence

from .properties import (
    PA_PER_BAR,
    density_n2,
    friction_factor,
    n2_mass_flow,
    viscosity_n2,
)
from .types import PipelineGeometry

MIN_MASS_FLOW_KG_S = 1e-6


def friction_loss_pa(
    m_dot: float,
    length: float,
    temp_c: float,
    pressure_bar: float,
    inner_diameter: float,
    flow_area: float,
    relative_roughness: float,
) -> float:
    """Darcy-Weisbach loss (Pa) for N2 over a run of pipe at one local state."""
    rho = density_n2(temp_c, pressure_bar)
    mu = viscosity_n2(temp_c)
    v = m_dot / (rho * flow_area)
    re = rho * v * inner_diameter / mu
    f = friction_factor(re, relative_roughness)
    return f * (length / inner_diameter) * rho * v * v / 2.0


def inlet_pressure_bar(
    segment_temps: Sequence[float],
    flow_nm3_h: float,
    geometry: PipelineGeometry,
    back_pressure_bar: float,
) -> float:
    """Required inlet pressure, marching segment losses from the outlet back to the inlet.

    Each segment's density is taken at the pressure reached so far, so the
    gas expands correctly toward the outlet.
    """
    m_dot = n2_mass_flow(flow_nm3_h)
    if m_dot <= MIN_MASS_FLOW_KG_S:
        return back_pressure_bar

    p_pa = back_pressure_bar * PA_PER_BAR
    for temp in reversed(segment_temps):
        p_pa += friction_loss_pa(
            m_dot,
            geometry.segment_length,
            float(temp),
            p_pa / PA_PER_BAR,
            geometry.inner_diameter,
            geometry.flow_area,
            geometry.relative_roughness,
        )
    return p_pa / PA_PER_BAR


def gas_column_pressure_bar(
    m_dot: float,
    column_length: float,
    temp_c: float,
    geometry: PipelineGeometry,
    back_pressure_bar: float,
) -> float:
    """Pressure behind a gas column of uniform temperature vented at the back-pressure."""
    if m_dot <= MIN_MASS_FLOW_KG_S or column_length <= 0:
        return back_pressure_bar
    dp = friction_loss_pa(
        m_dot,
        column_length,
        temp_c,
        back_pressure_bar,
        geometry.inner_diameter,
        geometry.flow_area,
        geometry.relative_roughness,
    )
    return back_pressure_bar + dp / PA_PER_BAR

"""Per-segment heat balance: ambient ingress through the insulation and removal by the flowing N2."""

from __future__ import annotations

import math
from typing import NamedTuple, List, Sequence

from .properties import (
    ATMOSPHERIC_PRESSURE_BAR,
    LAMINAR_RE_LIMIT,
    STEFAN_BOLTZMANN,
    ZERO_CELSIUS_K,
    conductivity_n2,
    cp_n2,
    density_n2,
    n2_mass_flow,
    viscosity_n2,
)

INGRESS_MAX_ITERATIONS = 10
INGRESS_TOLERANCE_C = 0.1
MIN_FLOW_NM3_H = 1e-6


class HeatIngress(NamedTuple):
    q_convection: float   # W
    q_radiation: float    # W
    q_total: float        # W
    surface_temp: float   # °C, insulation outer surface


class HeatRemoval(NamedTuple):
    q_removed: float      # W
    n2_outlet_temp: float  # °C


def heat_ingress(
    segment_temp: float,
    ambient_temp: float,
    surface_area: float,
    emissivity: float,
    h_ext: float,
    r_conductive: float,
) -> HeatIngress:
    """Heat leaking into one segment from ambient through wall + insulation.

    The insulation surface temperature is found by fixed-point iteration: the
    radiative coefficient is linearised around the current surface estimate,
    then the series network (conduction, combined external film) is solved
    for a new surface temperature. After INGRESS_MAX_ITERATIONS the last
    estimate is used as is. No ingress is modelled when the segment is at or
    above ambient, or when there is neither external convection nor
    radiation.
    """
    if ambient_temp <= segment_temp:
        return HeatIngress(0.0, 0.0, 0.0, segment_temp)

    ambient_k = ambient_temp + ZERO_CELSIUS_K
    surface_temp = segment_temp + 0.75 * (ambient_temp - segment_temp)
    h_rad = 0.0
    h_combined = h_ext
    r_external = 0.0
    for _ in range(INGRESS_MAX_ITERATIONS):
        surface_k = surface_temp + ZERO_CELSIUS_K
        h_rad = STEFAN_BOLTZMANN * emissivity * (ambient_k + surface_k) * (ambient_k ** 2 + surface_k ** 2)
        h_combined = h_ext + h_rad
        if h_combined <= 0:
            # no external film at all: the segment is thermally isolated from ambient
            return HeatIngress(0.0, 0.0, 0.0, ambient_temp)
        r_external = 1.0 / (h_combined * surface_area)
        new_surface = (ambient_temp * r_conductive + segment_temp * r_external) / (r_conductive + r_external)
        converged = abs(new_surface - surface_temp) < INGRESS_TOLERANCE_C
        surface_temp = new_surface
        if converged:
            break

    q_total = (ambient_temp - segment_temp) / (r_conductive + r_external)
    if q_total <= 0:
        return HeatIngress(0.0, 0.0, 0.0, surface_temp)
    return HeatIngress(
        q_convection=h_ext / h_combined * q_total,
        q_radiation=h_rad / h_combined * q_total,
        q_total=q_total,
        surface_temp=surface_temp,
    )


def heat_removal(
    flow_nm3_h: float,
    segment_temp: float,
    n2_inlet_temp: float,
    inner_diameter: float,
    inner_area: float,
) -> HeatRemoval:
    """Forced-convection heat pick-up by N2 crossing one segment.

    Gas properties at the mean of gas inlet and wall temperature; Nusselt is
    3.66 below Re 2300 and Dittus-Boelter (heating, n = 0.4) above.
    """
    if flow_nm3_h <= MIN_FLOW_NM3_H or segment_temp <= n2_inlet_temp:
        return HeatRemoval(0.0, n2_inlet_temp)

    m_dot = n2_mass_flow(flow_nm3_h)
    flow_area = math.pi * (inner_diameter / 2.0) ** 2

    t_mean = (segment_temp + n2_inlet_temp) / 2.0
    rho = density_n2(t_mean, ATMOSPHERIC_PRESSURE_BAR)
    mu = viscosity_n2(t_mean)
    cp = cp_n2(t_mean)
    k = conductivity_n2(t_mean)

    velocity = m_dot / (rho * flow_area)
    reynolds = rho * velocity * inner_diameter / mu
    prandtl = cp * mu / k
    if reynolds < LAMINAR_RE_LIMIT:
        nusselt = 3.66
    else:
        nusselt = 0.023 * reynolds ** 0.8 * prandtl ** 0.4

    h_int = nusselt * k / inner_diameter
    q = h_int * inner_area * (segment_temp - n2_inlet_temp)
    return HeatRemoval(q, n2_inlet_temp + q / (m_dot * cp))


def n2_temperature_march(
    segment_temps: Sequence[float],
    n2_inlet_temp: float,
    flow_nm3_h: float,
    inner_diameter: float,
    inner_area: float,
) -> List[float]:
    """Per-segment heat removal (W) for gas entering at segment 0 and warming toward the outlet."""
    removed = []
    gas_temp = n2_inlet_temp
    for seg_temp in segment_temps:
        q, gas_temp = heat_removal(flow_nm3_h, float(seg_temp), gas_temp, inner_diameter, inner_area)
        removed.append(q)
    return removed

"""Temperature-dependent property correlations for the pipe steel and nitrogen gas.

All temperatures are °C, pressures bar absolute, results in SI units.
"""

from __future__ import annotations

import math

from scipy import constants

ZERO_CELSIUS_K = constants.zero_Celsius
GAS_CONSTANT = constants.R                      # J/(mol·K)
STEFAN_BOLTZMANN = constants.sigma              # W/(m²·K⁴)
ATMOSPHERIC_PRESSURE_BAR = constants.atm / constants.bar
PA_PER_BAR = constants.bar

MOLAR_MASS_N2 = 0.028014       # kg/mol
RHO_N2_NORMAL = 1.251          # kg/Nm³ at 0 °C, 1 atm
RHO_STEEL = 8000.0             # kg/m³
K_STEEL = 20.0                 # W/m·K

# Sutherland's law for N2, referenced to 20 °C
_MU_REF = 1.76e-5
_T_REF_K = 293.15
_SUTHERLAND_S = 111.0

LAMINAR_RE_LIMIT = 2300.0


def cp_steel(temp_c: float) -> float:
    """Specific heat of the pipe steel (J/kg·K); linear fit with a cryogenic branch below 100 K."""
    t_k = temp_c + ZERO_CELSIUS_K
    if t_k < 100.0:
        return 150.0 + 2.5 * t_k
    return 440.0 + 0.15 * (t_k - 273.0)


def cp_n2(temp_c: float) -> float:
    # constant over the operating range
    return 1040.0


def conductivity_n2(temp_c: float) -> float:
    t_k = temp_c + ZERO_CELSIUS_K
    return 0.000078 * t_k + 0.0034


def viscosity_n2(temp_c: float) -> float:
    """Dynamic viscosity of N2 (Pa·s) from Sutherland's law."""
    t_k = temp_c + ZERO_CELSIUS_K
    return _MU_REF * (t_k / _T_REF_K) ** 1.5 * (_T_REF_K + _SUTHERLAND_S) / (t_k + _SUTHERLAND_S)


def density_n2(temp_c: float, pressure_bar: float) -> float:
    """Ideal-gas density of N2 (kg/m³)."""
    t_k = temp_c + ZERO_CELSIUS_K
    return pressure_bar * PA_PER_BAR * MOLAR_MASS_N2 / (GAS_CONSTANT * t_k)


def friction_factor(reynolds: float, relative_roughness: float) -> float:
    """Darcy friction factor: 64/Re below Re 2300, Haaland above. No blending at the transition."""
    if reynolds < LAMINAR_RE_LIMIT:
        return 64.0 / reynolds
    haaland = -1.8 * math.log10((relative_roughness / 3.7) ** 1.11 + 6.9 / reynolds)
    return (1.0 / haaland) ** 2


def n2_mass_flow(flow_nm3_h: float) -> float:
    """Convert a normal volumetric flow (Nm³/h) to kg/s."""
    return flow_nm3_h * RHO_N2_NORMAL / 3600.0

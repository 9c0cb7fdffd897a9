from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, List, Union


@dataclass
class CooldownInputs:
    # Pipeline
    pipe_length: float = 622.0        # m
    pipe_od: float = 323.8            # mm
    pipe_wt: float = 21.44            # mm
    pipe_roughness: float = 0.045     # mm

    # Process
    initial_temp: float = 40.0        # °C
    target_temp: float = -110.0       # °C
    ambient_temp: float = 40.0        # °C

    # N2 vaporizer, step-and-hold inlet temperature
    initial_n2_inlet_temp: float = 15.0    # °C
    final_n2_inlet_temp: float = -150.0    # °C
    n2_temp_step_size: float = 30.0        # °C
    n2_temp_hold_hours: float = 1.0        # h

    # N2 flow, two-stage ramp
    initial_n2_flow: float = 1000.0        # Nm³/h
    intermediate_n2_flow: float = 3000.0   # Nm³/h
    max_n2_flow: float = 5000.0            # Nm³/h
    flow_ramp_intermediate_hours: float = 4.0
    flow_ramp_total_hours: float = 8.0

    # Heat transfer & constraints
    insulation_thickness: float = 100.0    # mm
    insulation_k: float = 0.01             # W/m·K
    ext_convection_coeff: float = 10.0     # W/m²·K
    emissivity: float = 0.9
    cooldown_rate_limit: float = 10.0      # °C/h, reporting only
    number_of_holds: float = 1
    hold_duration_hours: float = 2.0

    # Purge, preservation & margin
    purge_volumes: float = 3
    preservation_days: float = 0.0
    preservation_leak_rate_pct_per_day: float = 1.0
    operational_margin_pct: float = 20.0

    # Simulation
    time_step_s: float = 60.0


@dataclass
class LngInputs:
    initial_fill_rate: float = 5.0         # m³/h
    max_velocity: float = 0.1              # m/s
    ramp_up_hours: float = 1.0
    lng_density: float = 450.0             # kg/m³
    vent_back_pressure: float = 1.1        # bar abs
    lng_temperature: float = -162.0        # °C
    time_step_s: float = 60.0
    snapshot_interval_s: float = 1800.0


@dataclass(frozen=True)
class PipelineGeometry:
    length: float                  # m
    outer_radius: float            # m
    inner_radius: float            # m
    wall_thickness: float          # m
    insulation_thickness: float    # m
    roughness: float               # m
    cross_section_area: float      # m², steel annulus
    flow_area: float               # m², gas-filled bore
    mass: float                    # kg
    outer_surface_area: float      # m²
    internal_volume: float         # m³
    internal_volume_nm3: float     # Nm³ of gas at initial temperature
    n_segments: int
    segment_length: float
    segment_mass: float
    segment_inner_area: float      # m²
    segment_insulation_area: float  # m², insulation outer surface
    r_pipe_segment: float          # K/W
    r_insulation_segment: float    # K/W

    @property
    def inner_diameter(self) -> float:
        return 2.0 * self.inner_radius

    @property
    def r_conductive_segment(self) -> float:
        return self.r_pipe_segment + self.r_insulation_segment

    @property
    def relative_roughness(self) -> float:
        return self.roughness / self.inner_diameter


@dataclass(frozen=True)
class ChartPoint:
    time: float                    # h
    temperature: float             # outlet, °C
    n2_flow: float                 # Nm³/h
    cooldown_rate: float           # °C/h
    n2_accumulated: float          # Nm³
    pressure_bar: float            # inlet, bar abs
    q_total: float                 # kW
    q_convection: float
    q_radiation: float
    q_removed: float
    q_accumulation: float
    heat_added: float              # MJ, cumulative
    heat_added_convection: float
    heat_added_radiation: float
    heat_removed: float
    net_heat_removed: float


@dataclass(frozen=True)
class ProfileSnapshot:
    time: float                    # h
    values: Tuple[float, ...]


@dataclass(frozen=True)
class CooldownResults:
    inputs: CooldownInputs
    geometry: PipelineGeometry
    total_time_hours: float
    peak_cooldown_rate: float
    peak_heat_removal_kw: float

    n2_purge_nm3: float
    n2_cooldown_nm3: float
    n2_holds_nm3: float
    n2_preservation_nm3: float
    n2_subtotal_nm3: float
    n2_margin_nm3: float
    n2_grand_total_nm3: float
    n2_grand_total_kg: float

    heat_ingress_mj: float
    heat_ingress_convection_mj: float
    heat_ingress_radiation_mj: float
    heat_removed_mj: float

    initial_cp_steel: float
    final_cp_steel: float
    r_pipe: float
    r_insulation: float

    positions: Tuple[float, ...]
    temperature_profile: Tuple[float, ...]
    chart_data: List[ChartPoint] = field(default_factory=list)
    time_series_profile: List[ProfileSnapshot] = field(default_factory=list)


@dataclass(frozen=True)
class LngChartPoint:
    time: float                    # h
    lng_flow_rate: float           # m³/h
    lng_velocity: float            # m/s
    filled_volume: float           # m³
    n2_vent_rate: float            # Nm³/h
    inlet_pressure: float          # bar abs


@dataclass(frozen=True)
class LngResults:
    inputs: LngInputs
    cooldown: CooldownResults
    total_filling_time_hours: float
    total_lng_volume_m3: float
    total_lng_mass_kg: float
    max_flow_rate_m3_h: float
    positions: Tuple[float, ...]
    final_temp_profile: Tuple[float, ...]
    chart_data: List[LngChartPoint] = field(default_factory=list)
    pressure_time_series: List[ProfileSnapshot] = field(default_factory=list)
    temp_time_series: List[ProfileSnapshot] = field(default_factory=list)


class FailureKind(str, Enum):
    INVALID_CONFIG = "invalid_config"
    STALL = "stall"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class SimulationFailure:
    kind: FailureKind
    message: str

    @property
    def error(self) -> str:
        return self.message


CooldownOutcome = Union[CooldownResults, SimulationFailure]
LngOutcome = Union[LngResults, SimulationFailure]

from __future__ import annotations

import math

from .properties import (
    ATMOSPHERIC_PRESSURE_BAR,
    GAS_CONSTANT,
    K_STEEL,
    PA_PER_BAR,
    RHO_STEEL,
    ZERO_CELSIUS_K,
)
from .types import CooldownInputs, PipelineGeometry

NUM_SEGMENTS = 50


def prep_geometry(inputs: CooldownInputs, n_segments: int = NUM_SEGMENTS) -> PipelineGeometry:
    """Derive the fixed pipeline geometry from an input record (mm inputs, m outputs)."""
    od_m = inputs.pipe_od / 1000.0
    wt_m = inputs.pipe_wt / 1000.0
    ins_m = inputs.insulation_thickness / 1000.0
    outer_r = od_m / 2.0
    inner_r = outer_r - wt_m
    if inner_r <= 0:
        raise ValueError(
            f"Pipe wall thickness too large: WT {inputs.pipe_wt} mm leaves no bore in OD {inputs.pipe_od} mm."
        )
    ins_outer_r = outer_r + ins_m
    length = float(inputs.pipe_length)

    steel_area = math.pi * (outer_r ** 2 - inner_r ** 2)
    flow_area = math.pi * inner_r ** 2
    internal_volume = flow_area * length
    mass = steel_area * length * RHO_STEEL

    # Gas inventory in Nm³: moles at 1 atm and the initial temperature, restated at 0 °C
    p_pa = ATMOSPHERIC_PRESSURE_BAR * PA_PER_BAR
    moles = p_pa * internal_volume / (GAS_CONSTANT * (inputs.initial_temp + ZERO_CELSIUS_K))
    volume_nm3 = moles * GAS_CONSTANT * ZERO_CELSIUS_K / p_pa

    seg_len = length / n_segments
    r_pipe = math.log(outer_r / inner_r) / (2.0 * math.pi * K_STEEL * seg_len)
    r_ins = math.log(ins_outer_r / outer_r) / (2.0 * math.pi * inputs.insulation_k * seg_len)

    return PipelineGeometry(
        length=length,
        outer_radius=outer_r,
        inner_radius=inner_r,
        wall_thickness=wt_m,
        insulation_thickness=ins_m,
        roughness=inputs.pipe_roughness / 1000.0,
        cross_section_area=steel_area,
        flow_area=flow_area,
        mass=mass,
        outer_surface_area=math.pi * od_m * length,
        internal_volume=internal_volume,
        internal_volume_nm3=volume_nm3,
        n_segments=n_segments,
        segment_length=seg_len,
        segment_mass=mass / n_segments,
        segment_inner_area=math.pi * 2.0 * inner_r * seg_len,
        segment_insulation_area=math.pi * 2.0 * ins_outer_r * seg_len,
        r_pipe_segment=r_pipe,
        r_insulation_segment=r_ins,
    )

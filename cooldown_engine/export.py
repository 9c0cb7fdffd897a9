from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import pandas as pd
from scipy.interpolate import CubicSpline

from .config import inputs_table
from .types import CooldownResults, LngResults, ProfileSnapshot

logger = logging.getLogger(__name__)

CHART_COLUMNS = {
    "time": "Time (h)",
    "temperature": "Outlet Temperature (°C)",
    "n2_flow": "N2 Flow (Nm³/h)",
    "cooldown_rate": "Cooldown Rate (°C/h)",
    "n2_accumulated": "Cumulative N2 (Nm³)",
    "pressure_bar": "Inlet Pressure (bara)",
    "q_total": "Heat Ingress (kW)",
    "q_convection": "Ingress Convection (kW)",
    "q_radiation": "Ingress Radiation (kW)",
    "q_removed": "Heat Removed (kW)",
    "q_accumulation": "Net Heat Removal (kW)",
    "heat_added": "Cumulative Ingress (MJ)",
    "heat_added_convection": "Cumulative Ingress Convection (MJ)",
    "heat_added_radiation": "Cumulative Ingress Radiation (MJ)",
    "heat_removed": "Cumulative Removed (MJ)",
    "net_heat_removed": "Cumulative Net Removed (MJ)",
}

LNG_CHART_COLUMNS = {
    "time": "Time (h)",
    "lng_flow_rate": "LNG Flow (m³/h)",
    "lng_velocity": "LNG Velocity (m/s)",
    "filled_volume": "Filled Volume (m³)",
    "n2_vent_rate": "N2 Vent Rate (Nm³/h)",
    "inlet_pressure": "Inlet Pressure (bara)",
}


def condensed_profile(snapshot: ProfileSnapshot, positions: Sequence[float], n_points: int = 10) -> pd.DataFrame:
    """Resample one profile onto `n_points` evenly spaced positions between the first and last segment.

    Natural cubic spline through the segment values; linear when there are
    fewer than three segments.
    """
    x = np.asarray(positions, dtype=float)
    y = np.asarray(snapshot.values, dtype=float)
    xq = np.linspace(x[0], x[-1], n_points)
    if x.size >= 3:
        yq = CubicSpline(x, y, bc_type="natural")(xq)
    else:
        yq = np.interp(xq, x, y)
    return pd.DataFrame({"Length (m)": xq, "Value": yq.astype(float)})


def chart_frame(results: CooldownResults) -> pd.DataFrame:
    df = pd.DataFrame([asdict(p) for p in results.chart_data])
    return df.rename(columns=CHART_COLUMNS)


def lng_chart_frame(results: LngResults) -> pd.DataFrame:
    df = pd.DataFrame([asdict(p) for p in results.chart_data])
    return df.rename(columns=LNG_CHART_COLUMNS)


def profile_frame(snapshots: Sequence[ProfileSnapshot], positions: Sequence[float]) -> pd.DataFrame:
    """Wide table: one row per position, one column per snapshot time."""
    data = {f"{s.time:.2f} h": list(s.values) for s in snapshots}
    df = pd.DataFrame(data, index=pd.Index(list(positions), name="Length (m)"))
    return df


def summary_frame(results: CooldownResults, lng: Optional[LngResults] = None) -> pd.DataFrame:
    geo = results.geometry
    rows = [
        ("Total Cooldown Time (h)", results.total_time_hours),
        ("Peak Cooldown Rate (°C/h)", results.peak_cooldown_rate),
        ("Cooldown Rate Limit (°C/h)", results.inputs.cooldown_rate_limit),
        ("Peak Heat Removal (kW)", results.peak_heat_removal_kw),
        ("N2 for Purge (Nm³)", results.n2_purge_nm3),
        ("N2 for Cooldown (Nm³)", results.n2_cooldown_nm3),
        ("N2 for Holds (Nm³)", results.n2_holds_nm3),
        ("N2 for Preservation (Nm³)", results.n2_preservation_nm3),
        ("N2 Subtotal (Nm³)", results.n2_subtotal_nm3),
        ("Operational Margin (Nm³)", results.n2_margin_nm3),
        ("N2 Grand Total (Nm³)", results.n2_grand_total_nm3),
        ("N2 Grand Total (kg)", results.n2_grand_total_kg),
        ("Heat Ingress (MJ)", results.heat_ingress_mj),
        ("Heat Ingress Convection (MJ)", results.heat_ingress_convection_mj),
        ("Heat Ingress Radiation (MJ)", results.heat_ingress_radiation_mj),
        ("Heat Removed (MJ)", results.heat_removed_mj),
        ("Pipe Mass (kg)", geo.mass),
        ("Pipe Internal Volume (m³)", geo.internal_volume),
        ("Pipe Gas Inventory (Nm³)", geo.internal_volume_nm3),
        ("Steel Cp Initial (J/kg·K)", results.initial_cp_steel),
        ("Steel Cp Final (J/kg·K)", results.final_cp_steel),
        ("R Pipe Wall (K/W)", results.r_pipe),
        ("R Insulation (K/W)", results.r_insulation),
    ]
    if lng is not None:
        rows += [
            ("LNG Filling Time (h)", lng.total_filling_time_hours),
            ("LNG Volume (m³)", lng.total_lng_volume_m3),
            ("LNG Mass (kg)", lng.total_lng_mass_kg),
            ("LNG Max Fill Rate (m³/h)", lng.max_flow_rate_m3_h),
        ]
    return pd.DataFrame(rows, columns=["Parameter", "Value"])


def export_results(path, results: CooldownResults, lng: Optional[LngResults] = None) -> Path:
    """Write inputs, summary and series to an Excel workbook."""
    path = Path(path)
    if path.suffix.lower() != ".xlsx":
        raise ValueError(f"Export path must end in .xlsx, got '{path.name}'")

    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        inputs_table(results.inputs, lng.inputs if lng is not None else None).to_excel(
            writer, sheet_name="Simulation Inputs", index=False
        )
        summary_frame(results, lng).to_excel(writer, sheet_name="Summary", index=False)
        chart_frame(results).to_excel(writer, sheet_name="Cooldown Series", index=False)
        profile_frame(results.time_series_profile, results.positions).to_excel(
            writer, sheet_name="Temperature Profiles"
        )
        if lng is not None:
            lng_chart_frame(lng).to_excel(writer, sheet_name="LNG Series", index=False)
            profile_frame(lng.pressure_time_series, lng.positions).to_excel(
                writer, sheet_name="LNG Pressure Profiles"
            )
    logger.info(f"Exported results to {path}")
    return path

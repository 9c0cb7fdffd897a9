"""Building input records from dicts and Parameter/Value tables (.xlsx or .csv)."""

from __future__ import annotations

import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

import pandas as pd

from .types import CooldownInputs, LngInputs

logger = logging.getLogger(__name__)

LNG_PREFIX = "lng_"
T = TypeVar("T", CooldownInputs, LngInputs)


def inputs_from_mapping(cls: Type[T], data: Mapping[str, Any]) -> T:
    """Create `cls` from `data`; missing keys keep their defaults, unknown keys are an error."""
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} parameter(s): {', '.join(unknown)}")
    values = {}
    for key, val in data.items():
        try:
            values[key] = float(val)
        except (TypeError, ValueError):
            raise ValueError(f"Parameter '{key}' must be numeric, got {val!r}")
    return cls(**values)


def inputs_table(cooldown: CooldownInputs, lng: Optional[LngInputs] = None) -> pd.DataFrame:
    """Parameter/Value table of the input records; LNG rows carry the `lng_` prefix."""
    rows = list(asdict(cooldown).items())
    if lng is not None:
        rows += [(LNG_PREFIX + k, v) for k, v in asdict(lng).items()]
    return pd.DataFrame(rows, columns=["Parameter", "Value"])


def _read_table(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".xlsx":
        return pd.read_excel(path, sheet_name="Simulation Inputs", engine="openpyxl")
    if suffix == ".csv":
        return pd.read_csv(path)
    raise ValueError(f"Unsupported inputs file type '{suffix}'. Use .xlsx or .csv.")


def load_inputs(path) -> Tuple[CooldownInputs, Optional[LngInputs]]:
    path = Path(path)
    df = _read_table(path)
    if not {"Parameter", "Value"} <= set(df.columns):
        raise ValueError(f"{path.name}: expected 'Parameter' and 'Value' columns, found {list(df.columns)}")

    cooldown: Dict[str, Any] = {}
    lng: Dict[str, Any] = {}
    for name, value in zip(df["Parameter"].astype(str).str.strip(), df["Value"]):
        if pd.isna(value):
            continue
        if name.startswith(LNG_PREFIX):
            lng[name[len(LNG_PREFIX):]] = value
        else:
            cooldown[name] = value

    logger.info(f"Loaded {len(cooldown)} cooldown and {len(lng)} LNG parameters from {path}")
    lng_inputs = inputs_from_mapping(LngInputs, lng) if lng else None
    return inputs_from_mapping(CooldownInputs, cooldown), lng_inputs

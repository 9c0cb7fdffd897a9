"""Run a cooldown + LNG introduction case from the command line.

Usage:
    python run_cooldown.py [inputs.xlsx|inputs.csv] [output.xlsx]

Without an inputs file the reference case defaults are used.
"""

from __future__ import annotations

import logging
import sys

from cooldown_engine import (
    CooldownInputs,
    LngInputs,
    SimulationFailure,
    run_cooldown_simulation,
    run_lng_introduction_simulation,
    validate_cooldown_inputs,
    validate_lng_inputs,
)
from cooldown_engine.config import load_inputs
from cooldown_engine.export import export_results


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler('cooldown_simulation.log'),
            logging.StreamHandler(sys.stdout)
        ]
    )


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    if argv:
        inputs, lng_inputs = load_inputs(argv[0])
    else:
        inputs, lng_inputs = CooldownInputs(), None
    lng_inputs = lng_inputs or LngInputs()
    out_path = argv[1] if len(argv) > 1 else None

    errors = {**validate_cooldown_inputs(inputs), **{"lng_" + k: v for k, v in validate_lng_inputs(lng_inputs).items()}}
    if errors:
        for key, msg in errors.items():
            logging.error(f"Input validation failed: {key}: {msg}")
        return 1

    result = run_cooldown_simulation(inputs)
    if isinstance(result, SimulationFailure):
        logging.error(f"Cooldown failed ({result.kind.value}): {result.message}")
        return 1

    print(f"Cooldown time:        {result.total_time_hours:.2f} h")
    print(f"Peak cooldown rate:   {result.peak_cooldown_rate:.1f} °C/h (limit {inputs.cooldown_rate_limit:.1f})")
    print(f"N2 cooldown:          {result.n2_cooldown_nm3:,.0f} Nm³")
    print(f"N2 grand total:       {result.n2_grand_total_nm3:,.0f} Nm³ ({result.n2_grand_total_kg:,.0f} kg)")

    lng = run_lng_introduction_simulation(lng_inputs, result)
    if isinstance(lng, SimulationFailure):
        logging.error(f"LNG introduction failed ({lng.kind.value}): {lng.message}")
        return 1
    print(f"LNG filling time:     {lng.total_filling_time_hours:.2f} h ({lng.total_lng_volume_m3:.1f} m³)")

    if out_path:
        export_results(out_path, result, lng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

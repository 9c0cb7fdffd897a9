"""Tiny onboarding helper for first-time users of this repo.

Run:
    python start_here.py

It prints a plain-English checklist and checks whether core dependencies are installed.
"""

from __future__ import annotations

import importlib
import platform
import sys

REQUIRED_MODULES = [
    "numpy",
    "scipy",
    "pandas",
    "openpyxl",
]


def check_module(name: str) -> bool:
    try:
        importlib.import_module(name)
        return True
    except ImportError:
        return False


def print_step(number: int, text: str) -> None:
    print(f"Step {number}) {text}")


def main() -> int:
    print("=" * 72)
    print("Pipeline Cooldown Planner: START HERE")
    print("=" * 72)
    print(f"Python: {sys.version.split()[0]} | OS: {platform.system()} {platform.release()}")
    print()

    print_step(1, "Install the package (copy/paste this):")
    print("   pip install -e .[test]")
    print()

    print_step(2, "Run the reference case:")
    print("   python run_cooldown.py")
    print()

    print_step(3, "Run your own case and save a workbook:")
    print("   python run_cooldown.py my_inputs.xlsx results.xlsx")
    print("   (inputs sheet 'Simulation Inputs' with Parameter / Value columns;")
    print("    LNG rows are prefixed with lng_, e.g. lng_max_velocity)")
    print()

    print_step(4, "If a run fails, check cooldown_simulation.log and note:")
    print("   - Input file used:")
    print("   - Failure kind (invalid_config / stall / timeout):")
    print("   - Message text:")
    print()

    print("Dependency check:")
    missing = []
    for mod in REQUIRED_MODULES:
        ok = check_module(mod)
        print(f"  {'[OK]':<5} {mod}" if ok else f"  {'[MISSING]':<9} {mod}")
        if not ok:
            missing.append(mod)

    print()
    if missing:
        print("Status: not ready yet (dependencies missing).")
        print("Run this exact command:")
        print("   pip install " + " ".join(missing))
        print()
        return 1

    print("Status: ready. Next command:")
    print("   python run_cooldown.py")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
Cooldown Engine Package - UI-agnostic pipeline cooldown simulation engine

Transient N2 cooldown of an insulated steel pipeline followed by LNG
introduction, with nitrogen inventory accounting. No UI coupling.
"""

from .types import (
    CooldownInputs,
    CooldownResults,
    FailureKind,
    LngInputs,
    LngResults,
    SimulationFailure,
)
from .engine import run_cooldown_simulation
from .lng import run_lng_introduction_simulation
from .validation import validate_cooldown_inputs, validate_lng_inputs

__all__ = [
    'CooldownInputs', 'CooldownResults', 'LngInputs', 'LngResults',
    'SimulationFailure', 'FailureKind',
    'run_cooldown_simulation', 'run_lng_introduction_simulation',
    'validate_cooldown_inputs', 'validate_lng_inputs',
]

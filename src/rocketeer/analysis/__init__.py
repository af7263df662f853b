"""
Analysis Package
---------------

This package provides functions for running motor simulations and
summarising their results.
"""

# Import from performance module
from .performance import (
    CSV_COLUMNS,
    DEFAULT_SIMULATION_STEP,
    DEFAULT_STEPS,
    STOP_PREDICATES,
    SimulationResult,
    burnout,
    generation_stalled,
    run_simulation
)

__all__ = [
    'CSV_COLUMNS',
    'DEFAULT_SIMULATION_STEP',
    'DEFAULT_STEPS',
    'STOP_PREDICATES',
    'SimulationResult',
    'burnout',
    'generation_stalled',
    'run_simulation'
]

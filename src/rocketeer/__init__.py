"""
Rocketeer - Solid Rocket Motor Internal Ballistics
--------------------------------------------------

Steps a solid-propellant motor through its burn: grain regression, burning
area, mass generation and nozzle flow, and the resulting chamber pressure.
Aimed at amateur motor designers checking a design before building it.
"""

__version__ = '1.0.0'
__author__ = 'Rocketeer Development Team'

from .propulsion import DEFAULT_ENVIRONMENT, Environment
from .propulsion.grain import (
    GrainGeometry,
    InhibitedSurface,
    PressureOutOfRangeError,
    Propellant,
    RegressionSimulation,
    burn_rate_coefficients
)
from .propulsion.motor import (
    ChamberGeometry,
    MotorConfiguration,
    NozzleGeometry,
    PressureSimulation,
    PressureState
)
from .analysis import SimulationResult, run_simulation

__all__ = [
    'DEFAULT_ENVIRONMENT',
    'Environment',
    'GrainGeometry',
    'InhibitedSurface',
    'PressureOutOfRangeError',
    'Propellant',
    'RegressionSimulation',
    'burn_rate_coefficients',
    'ChamberGeometry',
    'MotorConfiguration',
    'NozzleGeometry',
    'PressureSimulation',
    'PressureState',
    'SimulationResult',
    'run_simulation',
]

"""
Rocket Propulsion Package
------------------------

This package provides the propellant, grain, chamber and nozzle models of a
solid rocket motor and the simulations that step through its burn.
"""

# Import sub-packages
from . import grain
from . import motor
from .environment import Environment, DEFAULT_ENVIRONMENT

__all__ = [
    'grain',
    'motor',
    'Environment',
    'DEFAULT_ENVIRONMENT'
]

"""
Rocket Motor Grain Package
--------------------------

This package provides the propellant table, grain geometry and the grain
regression model of a solid rocket motor.
"""

from .types import Propellant, InhibitedSurface
from .base import Cylinder, PropellantProperties, PressureOutOfRangeError
from .propellants import (
    PROPELLANT_LIBRARY,
    get_propellant,
    get_propellant_names,
    burn_rate_coefficients
)
from .geometries import GrainGeometry
from .regression import RegressionSimulation

__all__ = [
    # Enumerations
    'Propellant',
    'InhibitedSurface',
    
    # Base classes
    'Cylinder',
    'PropellantProperties',
    'PressureOutOfRangeError',
    
    # Propellant table
    'PROPELLANT_LIBRARY',
    'get_propellant',
    'get_propellant_names',
    'burn_rate_coefficients',
    
    # Geometry and regression
    'GrainGeometry',
    'RegressionSimulation'
]

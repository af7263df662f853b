"""
Rocket Motor Package
--------------------

This package provides the chamber and nozzle components, the assembled
motor configuration, and the chamber pressure simulation.
"""

# Import motor components
from .components import ChamberGeometry, NozzleGeometry

# Import motor configuration
from .design import MotorConfiguration

# Import pressure simulation
from .simulation import PressureSimulation, PressureState, choked_mass_flow

__all__ = [
    # Component classes
    'ChamberGeometry',
    'NozzleGeometry',
    
    # Motor configuration
    'MotorConfiguration',
    
    # Pressure simulation
    'PressureSimulation',
    'PressureState',
    'choked_mass_flow'
]

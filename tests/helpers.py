"""
Shared fixtures for the Rocketeer tests.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from rocketeer.propulsion.motor import MotorConfiguration


def reference_motor(**overrides) -> MotorConfiguration:
    """Four-grain KNSU motor used throughout the tests."""
    inputs = dict(
        propellant="KNSU",
        inhibited_surfaces=[],
        core_diameter=10.0,
        grain_length=65.0,
        grain_diameter=41.0,
        number_of_grains=4,
        chamber_length=300.0,
        chamber_diameter=41.25,
        throat_diameter=9.5,
        convergent_angle=30.0,
        divergent_angle=12.0,
        erosion=0.0
    )
    inputs.update(overrides)
    return MotorConfiguration.from_inputs(**inputs)

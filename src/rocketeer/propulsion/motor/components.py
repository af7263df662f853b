"""
Motor Components Module
--------------------

This module provides classes for the combustion chamber and nozzle
of a solid rocket motor. Lengths are in millimetres, angles in radians.
"""

from dataclasses import dataclass

import numpy as np

from ..grain import GrainGeometry
from ..grain.base import Cylinder


@dataclass(frozen=True)
class ChamberGeometry:
    """Class representing the combustion chamber and the grains loaded in it."""
    length: float  # mm
    diameter: float  # mm
    grain: GrainGeometry

    @property
    def cylinder(self) -> Cylinder:
        return Cylinder(length=self.length, diameter=self.diameter)

    @property
    def volume(self) -> float:
        """Empty chamber volume in mm³."""
        return self.cylinder.volume

    @property
    def bore_area(self) -> float:
        """Chamber cross-section in mm²."""
        return self.cylinder.face_area


@dataclass(frozen=True)
class NozzleGeometry:
    """Class representing a conical nozzle."""
    throat_diameter: float  # mm
    convergent_angle: float  # rad, half-angle
    divergent_angle: float  # rad, half-angle
    erosion: float = 0.0  # mm, throat diameter growth at burnout

    @property
    def throat_area(self) -> float:
        """Nominal throat area in mm²."""
        return 0.25 * np.pi * self.throat_diameter ** 2

    def eroded_throat_diameter(self, web_fraction_burned: float) -> float:
        """Throat diameter after the given fraction of the web has burned."""
        return self.throat_diameter + self.erosion * web_fraction_burned

    def eroded_throat_area(self, web_fraction_burned: float) -> float:
        return np.pi / 4 * self.eroded_throat_diameter(web_fraction_burned) ** 2

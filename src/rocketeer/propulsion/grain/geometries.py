"""
Grain Geometry Module
---------------------

This module describes a stack of identical cylindrical (BATES style) grains.
All lengths are in millimetres.
"""

from dataclasses import dataclass

from .base import Cylinder, PropellantProperties
from .types import InhibitedSurface, Propellant


@dataclass(frozen=True)
class GrainGeometry:
    """A stack of identical cored cylindrical grains burning in parallel."""
    propellant: Propellant
    inhibited_surfaces: InhibitedSurface
    core_diameter: float  # mm
    length: float  # mm, single grain
    diameter: float  # mm, outer
    number_of_grains: int
    density_ratio: float = 0.95  # actual / ideal

    def is_inhibited(self, surface: InhibitedSurface) -> bool:
        return surface in self.inhibited_surfaces

    @property
    def properties(self) -> PropellantProperties:
        return self.propellant.properties

    @property
    def outer_cylinder(self) -> Cylinder:
        return Cylinder(length=self.length, diameter=self.diameter)

    @property
    def core_cylinder(self) -> Cylinder:
        return Cylinder(length=self.length, diameter=self.core_diameter)

    @property
    def total_length(self) -> float:
        """Length of the whole stack in mm."""
        return self.length * self.number_of_grains

    @property
    def total_volume(self) -> float:
        """
        Propellant volume in mm³.

        Always four grains' worth, whatever ``number_of_grains`` says.
        """
        return (self.outer_cylinder.volume - self.core_cylinder.volume) * 4

    @property
    def actual_density(self) -> float:
        """Cast propellant density in g/cm³."""
        return self.density_ratio * self.properties.density

    @property
    def web_thickness(self) -> float:
        """Initial radial web in mm."""
        return (self.diameter - self.core_diameter) / 2

    def burn_area(self) -> float:
        """Initial burning area of a single grain in mm²."""
        area = 0.0
        if not self.is_inhibited(InhibitedSurface.OUTER):
            area += self.outer_cylinder.wall_area

        if not self.is_inhibited(InhibitedSurface.CORE):
            area += self.core_cylinder.wall_area

        if not self.is_inhibited(InhibitedSurface.ENDS):
            area += 2 * (self.outer_cylinder.face_area - self.core_cylinder.face_area)

        return area

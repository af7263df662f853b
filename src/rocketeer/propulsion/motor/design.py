"""
Motor Design Module
---------------

This module provides the MotorConfiguration class that assembles the grain
stack, chamber and nozzle into the immutable description of a motor.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Union

import numpy as np

from .components import ChamberGeometry, NozzleGeometry
from ..grain import GrainGeometry, InhibitedSurface, Propellant
from ...core.logger import get_logger

# Setup logger
logger = get_logger(__name__)


@dataclass(frozen=True)
class MotorConfiguration:
    """Complete description of a solid motor: chamber (with grains) and nozzle."""
    chamber: ChamberGeometry
    nozzle: NozzleGeometry

    @property
    def grain(self) -> GrainGeometry:
        return self.chamber.grain

    @property
    def propellant(self) -> Propellant:
        return self.chamber.grain.propellant

    @classmethod
    def from_inputs(cls,
                    propellant: Union[Propellant, str],
                    inhibited_surfaces: Union[InhibitedSurface, Iterable[str]],
                    core_diameter: float,
                    grain_length: float,
                    grain_diameter: float,
                    number_of_grains: int,
                    chamber_length: float,
                    chamber_diameter: float,
                    throat_diameter: float,
                    convergent_angle: float,
                    divergent_angle: float,
                    erosion: float = 0.0) -> 'MotorConfiguration':
        """
        Build a motor from raw user inputs.

        Args:
            propellant: Propellant member or name (e.g. "KNSU")
            inhibited_surfaces: Surface flags or names ("outer", "core", "ends")
            core_diameter: Grain core diameter in mm
            grain_length: Length of one grain in mm
            grain_diameter: Grain outer diameter in mm
            number_of_grains: Number of grains in the stack
            chamber_length: Chamber length in mm
            chamber_diameter: Chamber inner diameter in mm
            throat_diameter: Nozzle throat diameter in mm
            convergent_angle: Convergent half-angle in degrees
            divergent_angle: Divergent half-angle in degrees
            erosion: Throat diameter growth over the burn in mm

        Returns:
            The validated motor configuration

        Raises:
            ValueError: If any input is physically invalid
        """
        if not isinstance(propellant, Propellant):
            propellant = Propellant.from_name(propellant)
        if not isinstance(inhibited_surfaces, InhibitedSurface):
            inhibited_surfaces = InhibitedSurface.from_names(inhibited_surfaces)

        core_diameter = _number('core_diameter', core_diameter)
        grain_length = _number('grain_length', grain_length)
        grain_diameter = _number('grain_diameter', grain_diameter)
        grains = _number('number_of_grains', number_of_grains)
        chamber_length = _number('chamber_length', chamber_length)
        chamber_diameter = _number('chamber_diameter', chamber_diameter)
        throat_diameter = _number('throat_diameter', throat_diameter)
        convergent_angle = _number('convergent_angle', convergent_angle)
        divergent_angle = _number('divergent_angle', divergent_angle)
        erosion = _number('erosion', erosion)

        _require(grains.is_integer() and grains >= 1,
                 f"Number of grains must be a positive integer: {number_of_grains}")
        number_of_grains = int(grains)
        _require(core_diameter >= 0, f"Core diameter cannot be negative: {core_diameter}")
        _require(grain_length > 0, f"Grain length must be positive: {grain_length}")
        _require(grain_diameter > core_diameter,
                 f"Grain diameter ({grain_diameter}) must exceed core diameter ({core_diameter})")
        _require(chamber_diameter >= grain_diameter,
                 f"Grains ({grain_diameter} mm) do not fit a {chamber_diameter} mm chamber")
        _require(chamber_length >= grain_length * number_of_grains,
                 f"Grain stack ({grain_length * number_of_grains} mm) is longer than the chamber ({chamber_length} mm)")
        _require(throat_diameter > 0, f"Throat diameter must be positive: {throat_diameter}")
        _require(0 < convergent_angle < 90, f"Convergent angle must be between 0 and 90 degrees: {convergent_angle}")
        _require(0 < divergent_angle < 90, f"Divergent angle must be between 0 and 90 degrees: {divergent_angle}")
        _require(erosion >= 0, f"Nozzle erosion cannot be negative: {erosion}")

        grain = GrainGeometry(
            propellant=propellant,
            inhibited_surfaces=inhibited_surfaces,
            core_diameter=float(core_diameter),
            length=float(grain_length),
            diameter=float(grain_diameter),
            number_of_grains=int(number_of_grains)
        )
        chamber = ChamberGeometry(
            length=float(chamber_length),
            diameter=float(chamber_diameter),
            grain=grain
        )
        nozzle = NozzleGeometry(
            throat_diameter=float(throat_diameter),
            convergent_angle=float(np.radians(convergent_angle)),
            divergent_angle=float(np.radians(divergent_angle)),
            erosion=float(erosion)
        )

        motor = cls(chamber=chamber, nozzle=nozzle)
        logger.debug(f"Motor configured: {propellant.name}, {grain.number_of_grains} grains, "
                     f"throat {nozzle.throat_diameter} mm")
        return motor

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MotorConfiguration':
        """Create a motor from the plain-input dictionary produced by ``to_dict``."""
        try:
            return cls.from_inputs(
                propellant=data['propellant'],
                inhibited_surfaces=data.get('inhibited_surfaces', []),
                core_diameter=data['core_diameter'],
                grain_length=data['grain_length'],
                grain_diameter=data['grain_diameter'],
                number_of_grains=data['number_of_grains'],
                chamber_length=data['chamber_length'],
                chamber_diameter=data['chamber_diameter'],
                throat_diameter=data['throat_diameter'],
                convergent_angle=data['convergent_angle'],
                divergent_angle=data['divergent_angle'],
                erosion=data.get('erosion', 0.0)
            )
        except KeyError as e:
            raise ValueError(f"Missing motor input: {e.args[0]}") from None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the motor to plain inputs (angles in degrees)."""
        grain = self.grain
        return {
            'propellant': grain.propellant.name,
            'inhibited_surfaces': grain.inhibited_surfaces.to_names(),
            'core_diameter': grain.core_diameter,
            'grain_length': grain.length,
            'grain_diameter': grain.diameter,
            'number_of_grains': grain.number_of_grains,
            'chamber_length': self.chamber.length,
            'chamber_diameter': self.chamber.diameter,
            'throat_diameter': self.nozzle.throat_diameter,
            'convergent_angle': float(np.degrees(self.nozzle.convergent_angle)),
            'divergent_angle': float(np.degrees(self.nozzle.divergent_angle)),
            'erosion': self.nozzle.erosion,
        }


def _number(name: str, value: Any) -> float:
    """Read one numeric input, accepting numbers written as strings."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Motor input {name} must be a number: {value!r}") from None
    _require(np.isfinite(number), f"Motor input {name} must be finite: {value!r}")
    return number


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)

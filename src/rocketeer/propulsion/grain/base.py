"""
Base Grain Module
-----------------

This module provides the solid-of-revolution helpers used to describe grains
and chambers, and the class holding propellant thermochemical properties.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from .types import Propellant


@dataclass(frozen=True)
class Cylinder:
    """A right circular cylinder. Dimensions are not validated."""
    length: float
    diameter: float

    @property
    def volume(self) -> float:
        return np.pi * (self.diameter / 2) ** 2 * self.length

    @property
    def wall_area(self) -> float:
        """Lateral (curved) surface area."""
        return 2 * np.pi * (self.diameter / 2) * self.length

    @property
    def face_area(self) -> float:
        """Area of one flat end face."""
        return np.pi * (self.diameter / 2) ** 2

    @property
    def area(self) -> float:
        """Total surface area: wall plus both faces."""
        return self.wall_area + 2 * self.face_area


# Burn rate band: upper pressure bound (Pa, inclusive), coefficient a, exponent n
BurnRateBand = Tuple[float, float, float]


class PressureOutOfRangeError(ValueError):
    """Raised when a pressure lies outside a propellant's burn rate correlation."""

    def __init__(self, propellant: Propellant, pressure: float):
        self.propellant = propellant
        self.pressure = pressure
        super().__init__(
            f"Pressure {pressure:.0f} Pa exceeds supported burn rate correlation range "
            f"for {propellant.name}"
        )


@dataclass(frozen=True)
class PropellantProperties:
    """Class representing propellant thermochemical and physical properties."""

    propellant: Propellant
    density: float  # g/cm³, ideal
    ratio_of_specific_heats_2ph: float  # dynamic (zero lag) gas-particle mixture
    ratio_of_specific_heats_mixture: float  # static gas-particle mixture
    effective_molecular_weight: float  # kg/kmol
    chamber_temperature: float  # K, adiabatic flame temperature
    burn_rate_bands: Tuple[BurnRateBand, ...] = ()
    burn_rate_constant: Tuple[float, float] = (1.0, 1.0)

    @property
    def name(self) -> str:
        return self.propellant.name

    @property
    def has_burn_rate_correlation(self) -> bool:
        """False for propellants that only carry the placeholder (1, 1) pair."""
        return bool(self.burn_rate_bands) or self.burn_rate_constant != (1.0, 1.0)

    def burn_rate_coefficients(self, pressure: float) -> Tuple[float, float]:
        """
        Look up the burn rate coefficient and pressure exponent.

        Args:
            pressure: Chamber pressure in Pa

        Returns:
            Tuple (a, n) valid at the given pressure

        Raises:
            PressureOutOfRangeError: If the propellant uses pressure bands and
                the pressure does not fall into any of them
        """
        if not self.burn_rate_bands:
            return self.burn_rate_constant

        # Bands are contiguous and closed; the first matching one wins
        if pressure >= 0:
            for upper, a, n in self.burn_rate_bands:
                if pressure <= upper:
                    return a, n

        raise PressureOutOfRangeError(self.propellant, pressure)

    @property
    def max_pressure(self) -> float:
        """Upper end of the burn rate correlation, Pa (inf when unbounded)."""
        if not self.burn_rate_bands:
            return float("inf")
        return self.burn_rate_bands[-1][0]

    def to_dict(self) -> Dict:
        """Convert the propellant properties to a dictionary."""
        return {
            'name': self.name,
            'density': self.density,
            'ratio_of_specific_heats_2ph': self.ratio_of_specific_heats_2ph,
            'ratio_of_specific_heats_mixture': self.ratio_of_specific_heats_mixture,
            'effective_molecular_weight': self.effective_molecular_weight,
            'chamber_temperature': self.chamber_temperature,
        }

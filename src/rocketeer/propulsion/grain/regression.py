"""
Grain Regression Simulation Module
----------------------------------

This module advances the regression depth of a grain stack in fixed steps and
derives the instantaneous grain dimensions, burning areas, eroded throat area
and Kn at that depth. All lengths are in millimetres.
"""

from typing import TYPE_CHECKING

import numpy as np

from .types import InhibitedSurface

if TYPE_CHECKING:
    from ..motor.design import MotorConfiguration


class RegressionSimulation:
    """
    Geometric regression of the grain stack.

    The only state is the regression depth ``x``; everything else is a pure
    function of the motor and ``x``. ``step()`` never checks for burnout, the
    caller decides when to stop.
    """

    def __init__(self, motor: 'MotorConfiguration', simulation_step: float = 0.49,
                 current_step: int = 0):
        """
        Args:
            motor: Motor being simulated
            simulation_step: Regression advanced per step in mm
            current_step: Step index to resume from
        """
        self.motor = motor
        self.simulation_step = simulation_step
        self.x = current_step * simulation_step

    def step(self) -> None:
        self.x += self.simulation_step

    def _burns(self, surface: InhibitedSurface) -> bool:
        return not self.motor.grain.is_inhibited(surface)

    @property
    def regression_depth(self) -> float:
        return self.x

    @property
    def core_diameter(self) -> float:
        """Core diameter d in mm."""
        grain = self.motor.grain
        return grain.core_diameter + (2 * self.x if self._burns(InhibitedSurface.CORE) else 0.0)

    @property
    def outer_diameter(self) -> float:
        """Grain outer diameter D in mm."""
        grain = self.motor.grain
        return grain.diameter - (2 * self.x if self._burns(InhibitedSurface.OUTER) else 0.0)

    @property
    def total_length(self) -> float:
        """Stack length L in mm; every grain loses both ends."""
        grain = self.motor.grain
        if not self._burns(InhibitedSurface.ENDS):
            return grain.total_length
        return grain.total_length - 2 * grain.number_of_grains * self.x

    @property
    def web_thickness(self) -> float:
        return (self.outer_diameter - self.core_diameter) / 2

    @property
    def web_thickness_initial(self) -> float:
        return self.motor.grain.web_thickness

    @property
    def remaining_web(self) -> float:
        """Initial web less the regression of every burning radial surface."""
        burning_sides = int(self._burns(InhibitedSurface.CORE)) + int(self._burns(InhibitedSurface.OUTER))
        return self.web_thickness_initial - self.x * burning_sides

    @property
    def end_burn_area(self) -> float:
        """Burning area of all grain ends in mm²."""
        if not self._burns(InhibitedSurface.ENDS):
            return 0.0
        n = self.motor.grain.number_of_grains
        return 2 * n * np.pi / 4 * (self.outer_diameter ** 2 - self.core_diameter ** 2)

    @property
    def core_burn_area(self) -> float:
        if not self._burns(InhibitedSurface.CORE):
            return 0.0
        return np.pi * self.core_diameter * self.total_length

    @property
    def outer_burn_area(self) -> float:
        if not self._burns(InhibitedSurface.OUTER):
            return 0.0
        return np.pi * self.outer_diameter * self.total_length

    @property
    def total_burn_area(self) -> float:
        return self.end_burn_area + self.core_burn_area + self.outer_burn_area

    @property
    def throat_area(self) -> float:
        """
        Effective throat area in mm².

        The throat diameter grows linearly with the fraction of web consumed,
        reaching ``throat_diameter + erosion`` when the web is gone.
        """
        web_initial = self.web_thickness_initial
        burned_fraction = (web_initial - self.web_thickness) / web_initial
        return self.motor.nozzle.eroded_throat_area(burned_fraction)

    @property
    def kn(self) -> float:
        """Ratio of burning area to throat area."""
        return self.total_burn_area / self.throat_area

    @property
    def is_burned_out(self) -> bool:
        return self.web_thickness <= 0 or self.total_length <= 0

    def __repr__(self) -> str:
        return (f"RegressionSimulation(x={self.x:.4f} mm, d={self.core_diameter:.3f}, "
                f"D={self.outer_diameter:.3f}, L={self.total_length:.3f}, Kn={self.kn:.1f})")

"""
Pressure Simulation Module
--------------------------

This module provides the lumped (0-D) chamber mass balance. Each step advances
the grain regression by a fixed depth, derives the time increment from the
burn rate, and integrates mass generation, choked nozzle flow and stored
combustion products with an explicit Euler update to get chamber pressure.

Units follow the motor description: lengths in mm, areas in mm² (except the
critical area, m²), volumes in mm³, pressure in Pa, mass in kg, time in s.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Tuple

import numpy as np

from .design import MotorConfiguration
from ..environment import DEFAULT_ENVIRONMENT, Environment
from ..grain import RegressionSimulation
from ...core.logger import get_logger

# Setup logger
logger = get_logger(__name__)


def choked_mass_flow(chamber_pressure: float, ambient_pressure: float, critical_area: float,
                     specific_gas_constant: float, chamber_temperature: float,
                     ratio_of_specific_heats: float) -> float:
    """
    Mass flow through a choked nozzle.

    Args:
        chamber_pressure: Chamber pressure in Pa (absolute)
        ambient_pressure: Ambient pressure in Pa
        critical_area: Throat area in m²
        specific_gas_constant: Gas constant of the products in J/(kg·K)
        chamber_temperature: Actual chamber temperature in K
        ratio_of_specific_heats: Ratio of specific heats of the products

    Returns:
        Mass flow rate in kg/s
    """
    k = ratio_of_specific_heats
    return ((chamber_pressure - ambient_pressure) * critical_area
            / np.sqrt(specific_gas_constant * chamber_temperature)
            * np.sqrt(k) * (2 / (k + 1)) ** ((k + 1) / 2 / (k - 1)))


@dataclass(frozen=True)
class PressureState:
    """Immutable snapshot of a pressure simulation after a step."""
    step: int
    regression_depth: float  # mm
    web_thickness: float  # mm
    core_diameter: float  # mm
    outer_diameter: float  # mm
    total_length: float  # mm
    throat_area: float  # mm²
    critical_area: float  # m²
    duct_area: float  # mm²
    duct_to_throat_ratio: float
    erosive_factor: float
    previous_pressure: float  # Pa
    burn_rate_coefficient: float
    burn_rate_exponent: float
    burn_rate: float  # mm/s
    time: float  # s
    grain_volume: float  # mm³
    free_volume: float  # mm³
    grain_mass: float  # kg
    mass_generation_rate: float  # kg/s
    nozzle_mass_flow: float  # kg/s
    mass_storage_rate: float  # kg/s
    stored_mass: float  # kg
    product_density: float  # kg/m³
    pressure: float  # Pa
    choked_mass_flow: float  # kg/s
    kn: float
    burn_area: float  # mm²

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


class PressureSimulation:
    """
    Chamber pressure history of a solid motor.

    Owns a ``RegressionSimulation`` and advances it in lock-step. The burn rate
    used for a step is evaluated at the pressure of the previous step.
    Nothing stops the simulation at burnout; past it the geometry becomes
    meaningless, so the caller must supply a stop condition.
    """

    def __init__(self, motor: MotorConfiguration, simulation_step: float = 0.49,
                 environment: Environment = DEFAULT_ENVIRONMENT):
        """
        Args:
            motor: Motor being simulated
            simulation_step: Grain regression per step in mm
            environment: Physical constants and model switches
        """
        self.motor = motor
        self.simulation_step = simulation_step
        self.environment = environment
        self.regression = RegressionSimulation(motor, simulation_step)

        self.step_index = 0
        # Web regression, mm
        self.x = 0.0
        # Time since start of burn, s
        self.time = 0.0
        self.previous_pressure = environment.ambient_pressure
        # Chamber pressure, Pa (abs)
        self.pressure = environment.ambient_pressure
        self.mass_generation_rate = 0.0
        self.nozzle_mass_flow = 0.0
        # Mass of combustion products stored in the chamber, kg
        self.stored_mass = 0.0
        self.choked_mass_flow = 0.0

        self._history: List[PressureState] = [self.snapshot()]
        logger.debug(f"Pressure simulation created for {motor.propellant.name}, "
                     f"step {simulation_step} mm")

    @property
    def actual_chamber_temperature(self) -> float:
        """Adiabatic flame temperature scaled by combustion efficiency, K."""
        return self.motor.grain.properties.chamber_temperature * self.environment.combustion_efficiency

    @property
    def critical_area(self) -> float:
        """Nozzle critical passage area in m²."""
        return self.regression.throat_area / 1000 ** 2

    @property
    def duct_area(self) -> float:
        """Flow area between the chamber bore and the grain in mm²."""
        regression = self.regression
        return (self.motor.chamber.bore_area
                - np.pi / 4 * (regression.outer_diameter ** 2 - regression.core_diameter ** 2))

    @property
    def erosive_factor(self) -> float:
        """Erosive burning factor G."""
        return max(0.0, self.environment.erosive_area_ratio_threshold
                   - self.duct_area / self.regression.throat_area)

    @property
    def burn_rate_coefficients(self) -> Tuple[float, float]:
        """Coefficient a and exponent n valid at the previous step's pressure."""
        return self.motor.grain.properties.burn_rate_coefficients(self.previous_pressure)

    def _burn_rate(self, a: float, n: float) -> float:
        kv = self.environment.erosive_velocity_coefficient
        return (1 + kv * self.erosive_factor) * a * (self.previous_pressure / 1_000_000) ** n

    @property
    def burn_rate(self) -> float:
        """Propellant burn rate in mm/s."""
        return self._burn_rate(*self.burn_rate_coefficients)

    @property
    def grain_volume(self) -> float:
        """Remaining propellant volume in mm³."""
        regression = self.regression
        return (np.pi / 4 * (regression.outer_diameter ** 2 - regression.core_diameter ** 2)
                * regression.total_length)

    @property
    def free_volume(self) -> float:
        """Chamber volume not occupied by propellant in mm³."""
        return self.motor.chamber.volume - self.grain_volume

    @property
    def grain_mass(self) -> float:
        """Remaining propellant mass in kg."""
        return self.motor.grain.actual_density * self.grain_volume / 1_000_000

    @property
    def mass_storage_rate(self) -> float:
        """Rate of combustion products accumulating in the chamber, kg/s."""
        return self.mass_generation_rate - self.nozzle_mass_flow

    @property
    def product_density(self) -> float:
        """Density of combustion products in the chamber, kg/m³."""
        return self.stored_mass / (self.free_volume / 1_000_000_000)

    @property
    def state(self) -> PressureState:
        """The latest snapshot."""
        return self._history[-1]

    @property
    def history(self) -> List[PressureState]:
        """All snapshots, starting with the initial state."""
        return list(self._history)

    def snapshot(self) -> PressureState:
        regression = self.regression
        a, n = self.burn_rate_coefficients
        duct_area = self.duct_area
        throat_area = regression.throat_area
        return PressureState(
            step=self.step_index,
            regression_depth=self.x,
            web_thickness=regression.web_thickness,
            core_diameter=regression.core_diameter,
            outer_diameter=regression.outer_diameter,
            total_length=regression.total_length,
            throat_area=throat_area,
            critical_area=self.critical_area,
            duct_area=duct_area,
            duct_to_throat_ratio=duct_area / throat_area,
            erosive_factor=self.erosive_factor,
            previous_pressure=self.previous_pressure,
            burn_rate_coefficient=a,
            burn_rate_exponent=n,
            burn_rate=self._burn_rate(a, n),
            time=self.time,
            grain_volume=self.grain_volume,
            free_volume=self.free_volume,
            grain_mass=self.grain_mass,
            mass_generation_rate=self.mass_generation_rate,
            nozzle_mass_flow=self.nozzle_mass_flow,
            mass_storage_rate=self.mass_storage_rate,
            stored_mass=self.stored_mass,
            product_density=self.product_density,
            pressure=self.pressure,
            choked_mass_flow=self.choked_mass_flow,
            kn=regression.kn,
            burn_area=regression.total_burn_area
        )

    def step(self) -> PressureState:
        """
        Advance the regression by one step and update the chamber state.

        Returns:
            Snapshot of the new state

        Raises:
            PressureOutOfRangeError: If the burn rate correlation does not
                cover the current pressure. The simulation is left unchanged.
        """
        env = self.environment
        previous = self.state

        # Raises before any state changes
        a, n = self.motor.grain.properties.burn_rate_coefficients(self.pressure)

        self.regression.step()
        self.x += self.simulation_step
        self.step_index += 1
        self.previous_pressure = self.pressure

        dt = self.simulation_step / self._burn_rate(a, n)
        self.time = previous.time + dt

        self.mass_generation_rate = (previous.grain_mass - self.grain_mass) / dt

        temperature = self.actual_chamber_temperature
        self.choked_mass_flow = choked_mass_flow(
            self.previous_pressure, env.ambient_pressure, self.critical_area,
            env.specific_gas_constant, temperature, env.ratio_of_specific_heats
        )

        if self.mass_generation_rate < self.choked_mass_flow:
            # Nozzle stays closed until the burst pressure is exceeded
            if self.previous_pressure > env.burst_pressure:
                self.nozzle_mass_flow = self.choked_mass_flow
            else:
                self.nozzle_mass_flow = 0.0
        else:
            self.nozzle_mass_flow = self.choked_mass_flow

        self.stored_mass += self.mass_storage_rate * dt

        self.pressure = (self.product_density * env.specific_gas_constant * temperature
                         + env.ambient_pressure)

        state = self.snapshot()
        self._history.append(state)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"step {state.step}: t={state.time:.6g} s, Po={state.pressure:.6g} Pa, "
                         f"mgen={state.mass_generation_rate:.6g} kg/s, mnoz={state.nozzle_mass_flow:.6g} kg/s")
        return state

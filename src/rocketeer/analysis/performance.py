"""
Motor Performance Analysis Module
---------------------------------

This module runs a pressure simulation to completion and collects the
resulting time series for tabulation, export and plotting.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

import numpy as np
import pandas as pd

from ..propulsion.environment import DEFAULT_ENVIRONMENT, Environment
from ..propulsion.grain import PressureOutOfRangeError
from ..propulsion.motor import MotorConfiguration, PressureSimulation, PressureState

# Configure module logger
logger = logging.getLogger(__name__)

# Number of states in a default run (initial state included)
DEFAULT_STEPS: int = 834

# Grain regression per step, mm
DEFAULT_SIMULATION_STEP: float = 0.0294

# Export column name -> PressureState attribute
CSV_COLUMNS: Dict[str, str] = {
    "xi": "regression_depth",
    "tweb": "web_thickness",
    "d": "core_diameter",
    "D": "outer_diameter",
    "L": "total_length",
    "At": "throat_area",
    "A*": "critical_area",
    "Aduct": "duct_area",
    "Aduct/At": "duct_to_throat_ratio",
    "G": "erosive_factor",
    "PoLast": "previous_pressure",
    "a": "burn_rate_coefficient",
    "n": "burn_rate_exponent",
    "r": "burn_rate",
    "t": "time",
    "Vgrain": "grain_volume",
    "Vfree": "free_volume",
    "mgrain": "grain_mass",
    "mgen": "mass_generation_rate",
    "mnoz": "nozzle_mass_flow",
    "msto": "mass_storage_rate",
    "masssto": "stored_mass",
    "roprod": "product_density",
    "Po": "pressure",
    "ai29": "choked_mass_flow",
    "Kn": "kn",
}

StopPredicate = Callable[[PressureState], bool]


def burnout(state: PressureState) -> bool:
    """True once the web or the stack length is consumed."""
    return state.web_thickness <= 0 or state.total_length <= 0


def generation_stalled(state: PressureState) -> bool:
    """True once the grain stops generating combustion products."""
    return state.step > 1 and state.mass_generation_rate <= 0


STOP_PREDICATES: Dict[str, Optional[StopPredicate]] = {
    "none": None,
    "burnout": burnout,
    "stalled": generation_stalled,
}


@dataclass
class SimulationResult:
    """States collected from one pressure simulation run."""
    motor: MotorConfiguration
    simulation_step: float
    environment: Environment
    states: List[PressureState] = field(default_factory=list)
    stop_reason: str = "steps"
    error: Optional[Exception] = None

    @property
    def completed(self) -> bool:
        """False when the run was halted by an error."""
        return self.error is None

    def series(self, attribute: str) -> np.ndarray:
        """Values of one PressureState attribute over the run."""
        return np.array([getattr(state, attribute) for state in self.states])

    @property
    def times(self) -> np.ndarray:
        return self.series("time")

    @property
    def pressures(self) -> np.ndarray:
        return self.series("pressure")

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabulate the run.

        Returns
        -------
        pd.DataFrame
            One row per state, with the columns of ``CSV_COLUMNS``
        """
        if not self.states:
            return pd.DataFrame(columns=list(CSV_COLUMNS))
        df = pd.DataFrame([state.to_dict() for state in self.states])
        return df[list(CSV_COLUMNS.values())].rename(columns={v: k for k, v in CSV_COLUMNS.items()})

    def summary(self) -> Dict[str, Any]:
        """
        Key figures of the run.

        Returns
        -------
        Dict[str, Any]
            Dictionary containing:
            - 'steps': Number of states recorded
            - 'stop_reason': Why the run ended
            - 'peak_pressure': Maximum chamber pressure in Pa
            - 'peak_pressure_time': Time of the peak in s
            - 'burn_time': Elapsed time of the last state in s
            - 'max_kn': Maximum Kn
            - 'mass_generated': Propellant mass consumed in kg
        """
        if not self.states:
            return {"steps": 0, "stop_reason": self.stop_reason}

        pressures = self.pressures
        peak = int(np.argmax(pressures))
        return {
            "steps": len(self.states),
            "stop_reason": self.stop_reason,
            "peak_pressure": float(pressures[peak]),
            "peak_pressure_time": float(self.states[peak].time),
            "burn_time": float(self.states[-1].time),
            "max_kn": float(np.max(self.series("kn"))),
            "mass_generated": float(self.states[0].grain_mass - self.states[-1].grain_mass),
        }


def run_simulation(motor: MotorConfiguration,
                   steps: int = DEFAULT_STEPS,
                   simulation_step: float = DEFAULT_SIMULATION_STEP,
                   environment: Environment = DEFAULT_ENVIRONMENT,
                   stop_when: Union[str, StopPredicate, None] = None) -> SimulationResult:
    """
    Step a pressure simulation and collect its states.

    Parameters
    ----------
    motor : MotorConfiguration
        Motor to simulate
    steps : int, optional
        Number of states to record, initial state included (default 834)
    simulation_step : float, optional
        Grain regression per step in mm (default 0.0294)
    environment : Environment, optional
        Physical constants
    stop_when : str or callable, optional
        Name from ``STOP_PREDICATES`` or a predicate on the latest state.
        The state that satisfies it is kept and the run ends.

    Returns
    -------
    SimulationResult
        Recorded states. If the burn rate correlation runs out of range the
        run halts, the error is logged and stored on the result.
    """
    if steps < 1:
        raise ValueError(f"Number of steps must be at least 1: {steps}")

    stop_name = None
    if isinstance(stop_when, str):
        stop_name = stop_when
        try:
            stop_when = STOP_PREDICATES[stop_when]
        except KeyError:
            raise ValueError(f"Unknown stop condition: {stop_when}") from None

    properties = motor.grain.properties
    if not properties.has_burn_rate_correlation:
        logger.warning(f"{properties.name} has no burn rate correlation; "
                       f"results use placeholder coefficients and are not physical")

    simulation = PressureSimulation(motor, simulation_step, environment)
    result = SimulationResult(motor=motor, simulation_step=simulation_step,
                              environment=environment, states=[simulation.state])
    logger.info(f"Starting simulation: {properties.name}, {steps} states, step {simulation_step} mm")
    logger.debug(f"Propellant: {properties.to_dict()}")
    logger.debug(f"Environment: {environment.to_dict()}")

    burnout_reported = False
    for _ in range(steps - 1):
        try:
            state = simulation.step()
        except PressureOutOfRangeError as e:
            logger.error(f"Simulation halted at step {simulation.step_index + 1}: {e}")
            result.stop_reason = "error"
            result.error = e
            break

        result.states.append(state)

        if not burnout_reported and burnout(state):
            logger.debug(f"Grain burned out at step {state.step}, t = {state.time:.6g} s")
            burnout_reported = True

        if stop_when is not None and stop_when(state):
            result.stop_reason = stop_name or getattr(stop_when, "__name__", "predicate")
            break

    logger.info(f"Simulation completed: {len(result.states)} states, "
                f"peak pressure = {float(np.max(result.pressures)):.0f} Pa, "
                f"stop reason = {result.stop_reason}")
    return result

"""
Simulation Environment Module
-----------------------------

Physical constants shared by the pressure simulation. They are bundled in an
immutable ``Environment`` value that is handed to each simulation, so runs
with different ambient conditions can coexist.
"""

from dataclasses import dataclass, replace


# Universal gas constant, J/(kmol·K)
R_UNIVERSAL: float = 8314.0

# Effective molecular weight of combustion products, kg/kmol
EFFECTIVE_MOLECULAR_WEIGHT: float = 42.39

# Specific gas constant of combustion products, J/(kg·K)
SPECIFIC_GAS_CONSTANT: float = 196.1

# Ratio of specific heats, gas-particle mixture
RATIO_OF_SPECIFIC_HEATS: float = 1.131

COMBUSTION_EFFICIENCY: float = 0.95

# Ambient pressure, Pa
AMBIENT_PRESSURE: float = 101_000.0

# Erosive burning velocity coefficient (0 disables erosive burning)
EROSIVE_VELOCITY_COEFFICIENT: float = 0.0

# Erosive burning area ratio threshold
EROSIVE_AREA_RATIO_THRESHOLD: float = 6.0

# Pressure above which the nozzle is considered open, Pa
BURST_PRESSURE: float = 0.0


@dataclass(frozen=True)
class Environment:
    """Physical constants and model switches used by a pressure simulation."""
    universal_gas_constant: float = R_UNIVERSAL  # J/(kmol·K)
    effective_molecular_weight: float = EFFECTIVE_MOLECULAR_WEIGHT  # kg/kmol
    specific_gas_constant: float = SPECIFIC_GAS_CONSTANT  # J/(kg·K)
    ratio_of_specific_heats: float = RATIO_OF_SPECIFIC_HEATS
    combustion_efficiency: float = COMBUSTION_EFFICIENCY
    ambient_pressure: float = AMBIENT_PRESSURE  # Pa
    erosive_velocity_coefficient: float = EROSIVE_VELOCITY_COEFFICIENT
    erosive_area_ratio_threshold: float = EROSIVE_AREA_RATIO_THRESHOLD
    burst_pressure: float = BURST_PRESSURE  # Pa

    @property
    def erosive_burning_enabled(self) -> bool:
        return self.erosive_velocity_coefficient != 0.0

    def with_overrides(self, **changes) -> 'Environment':
        """Return a copy of this environment with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            'universal_gas_constant': self.universal_gas_constant,
            'effective_molecular_weight': self.effective_molecular_weight,
            'specific_gas_constant': self.specific_gas_constant,
            'ratio_of_specific_heats': self.ratio_of_specific_heats,
            'combustion_efficiency': self.combustion_efficiency,
            'ambient_pressure': self.ambient_pressure,
            'erosive_velocity_coefficient': self.erosive_velocity_coefficient,
            'erosive_area_ratio_threshold': self.erosive_area_ratio_threshold,
            'burst_pressure': self.burst_pressure,
        }


DEFAULT_ENVIRONMENT = Environment()

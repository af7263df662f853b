"""
Grain Type Definitions Module
---------------------------

This module provides the basic type definitions and enumerations
for rocket motor grain configurations.
"""

from enum import Enum, Flag


class Propellant(Enum):
    """Enumeration of supported potassium-nitrate ("rocket candy") propellants."""
    KNSB = "knsb"
    KNSU = "knsu"
    KNDX = "kndx"
    KNER = "kner"
    KNMN = "knmn"

    @property
    def properties(self):
        """Chemistry constants of this propellant."""
        from .propellants import get_propellant
        return get_propellant(self)

    def burn_rate_coefficients(self, pressure: float):
        """Burn rate coefficient and pressure exponent valid at ``pressure`` (Pa)."""
        return self.properties.burn_rate_coefficients(pressure)

    @classmethod
    def from_name(cls, name: str) -> 'Propellant':
        """Look up a propellant by name, ignoring case."""
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            valid = ", ".join(p.name for p in cls)
            raise ValueError(f"Unknown propellant '{name}'. Expected one of: {valid}") from None


class InhibitedSurface(Flag):
    """Grain surfaces coated so that they do not burn."""
    NONE = 0
    OUTER = 1
    CORE = 2
    ENDS = 4
    ALL = OUTER | CORE | ENDS

    @classmethod
    def from_names(cls, names) -> 'InhibitedSurface':
        """Build a surface set from names such as ``["outer", "ends"]``."""
        # A bare string would be read one character at a time
        if isinstance(names, str):
            raise ValueError(f"Grain surfaces must be a list of names, not '{names}'")
        try:
            names = list(names)
        except TypeError:
            raise ValueError(f"Grain surfaces must be a list of names: {names!r}") from None

        surfaces = cls.NONE
        for name in names:
            try:
                surfaces |= cls[name.strip().upper()]
            except (AttributeError, KeyError):
                raise ValueError(f"Unknown grain surface '{name}'") from None
        return surfaces

    def to_names(self):
        return [s.name.lower() for s in (InhibitedSurface.OUTER, InhibitedSurface.CORE, InhibitedSurface.ENDS)
                if s in self]

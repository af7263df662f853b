"""
Propellant Definitions
---------------------

This module provides the thermochemical constants and burn rate correlations
of the supported potassium-nitrate propellants.
"""

from typing import Dict, List, Tuple, Union

from .base import PropellantProperties, PressureOutOfRangeError
from .types import Propellant


PROPELLANT_LIBRARY: Dict[Propellant, PropellantProperties] = {
    Propellant.KNSB: PropellantProperties(
        propellant=Propellant.KNSB,
        density=1.841,  # g/cm³
        ratio_of_specific_heats_2ph=1.042,
        ratio_of_specific_heats_mixture=1.136,
        effective_molecular_weight=39.90,  # kg/kmol
        chamber_temperature=1600.0  # K
    ),

    Propellant.KNSU: PropellantProperties(
        propellant=Propellant.KNSU,
        density=1.889,
        ratio_of_specific_heats_2ph=1.044,
        ratio_of_specific_heats_mixture=1.133,
        effective_molecular_weight=41.98,
        chamber_temperature=1720.0,
        # Documented valid for 0.101 to 10.3 MPa, not enforced
        burn_rate_constant=(8_260_000.0, 0.319)
    ),

    Propellant.KNDX: PropellantProperties(
        propellant=Propellant.KNDX,
        density=1.879,
        ratio_of_specific_heats_2ph=1.043,
        ratio_of_specific_heats_mixture=1.131,
        effective_molecular_weight=42.39,
        chamber_temperature=1710.0,
        burn_rate_bands=(
            (779_000.0, 8.875, 0.619),
            (2_572_000.0, 7.553, -0.009),
            (5_930_000.0, 3.841, 0.688),
            (8_502_000.0, 17.2, -0.148),
            (11_200_000.0, 4.775, 0.422),
        )
    ),

    Propellant.KNER: PropellantProperties(
        propellant=Propellant.KNER,
        density=1.820,
        ratio_of_specific_heats_2ph=1.043,
        ratio_of_specific_heats_mixture=1.139,
        effective_molecular_weight=38.78,
        chamber_temperature=1608.0
    ),

    Propellant.KNMN: PropellantProperties(
        propellant=Propellant.KNMN,
        density=1.854,
        ratio_of_specific_heats_2ph=1.042,
        ratio_of_specific_heats_mixture=1.136,
        effective_molecular_weight=39.83,
        chamber_temperature=1616.0
    ),
}


def get_propellant(propellant: Union[Propellant, str]) -> PropellantProperties:
    """
    Get the properties of a propellant.
    
    Args:
        propellant: A Propellant member or its name (case-insensitive)
        
    Returns:
        The propellant properties
        
    Raises:
        ValueError: If the name does not match a known propellant
    """
    if isinstance(propellant, str):
        propellant = Propellant.from_name(propellant)
    return PROPELLANT_LIBRARY[propellant]


def get_propellant_names() -> List[str]:
    """
    Get a list of all available propellant names.
    
    Returns:
        List of propellant names
    """
    return [p.name for p in PROPELLANT_LIBRARY]


def burn_rate_coefficients(propellant: Union[Propellant, str], pressure: float) -> Tuple[float, float]:
    """
    Burn rate coefficient ``a`` and pressure exponent ``n`` valid at a pressure.
    
    KNDX is bucketed into pressure bands up to 11.2 MPa, KNSU uses a single
    pair, KNSB, KNER and KNMN return the placeholder pair (1, 1).
    
    Args:
        propellant: A Propellant member or its name
        pressure: Chamber pressure in Pa
        
    Returns:
        Tuple (a, n)
        
    Raises:
        PressureOutOfRangeError: If the pressure is outside the correlation range
    """
    return get_propellant(propellant).burn_rate_coefficients(pressure)


__all__ = [
    'PROPELLANT_LIBRARY',
    'PressureOutOfRangeError',
    'get_propellant',
    'get_propellant_names',
    'burn_rate_coefficients',
]

"""
Configuration module for Rocketeer
----------------------------------

This module keeps the last-used motor inputs and run settings in a JSON file
so that the next run starts from them.
"""

import os
import json
import copy
import logging
from typing import Dict, Any, Optional

# Configuration file path
CONFIG_PATH: str = os.path.expanduser("~/.rocketeer_config.json")

# Default configuration settings: a four-grain KNSU reference motor
DEFAULT_CONFIG: Dict[str, Any] = {
    "motor": {
        "propellant": "KNSU",
        "inhibited_surfaces": [],
        "core_diameter": 10.0,  # mm
        "grain_length": 65.0,  # mm
        "grain_diameter": 41.0,  # mm
        "number_of_grains": 4,
        "chamber_length": 300.0,  # mm
        "chamber_diameter": 41.25,  # mm
        "throat_diameter": 9.5,  # mm
        "convergent_angle": 30.0,  # degrees
        "divergent_angle": 12.0,  # degrees
        "erosion": 0.0,  # mm
    },
    "simulation_step": 0.0294,  # mm
    "steps": 834,
    "stop_when": "none",
}


def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file or create default if not exists.
    
    Keys missing from the file are filled in from the defaults.
    
    Parameters
    ----------
    path : str, optional
        Configuration file, defaults to CONFIG_PATH
    
    Returns
    -------
    Dict[str, Any]
        Dictionary containing configuration settings
    """
    path = path or CONFIG_PATH
    config = default_config()

    if os.path.exists(path):
        try:
            with open(path, 'r') as f:
                stored = json.load(f)
            if not isinstance(stored, dict) or not isinstance(stored.get("motor", {}), dict):
                raise ValueError(f"{path} does not hold a configuration object")
        except (json.JSONDecodeError, IOError, OSError, ValueError) as e:
            logging.getLogger(__name__).warning(f"Failed to load config file: {e}")
            return config

        config.update({k: v for k, v in stored.items() if k != "motor"})
        config["motor"].update(stored.get("motor", {}))
        return config
    
    # Create default config
    try:
        with open(path, 'w') as f:
            json.dump(config, f, indent=2)
    except (IOError, OSError) as e:
        logging.getLogger(__name__).warning(f"Failed to create default config file: {e}")
    
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Save configuration to file.
    
    Parameters
    ----------
    config : Dict[str, Any]
        Configuration dictionary to save
    path : str, optional
        Configuration file, defaults to CONFIG_PATH
        
    Returns
    -------
    bool
        True if save was successful, False otherwise
    """
    path = path or CONFIG_PATH
    try:
        with open(path, 'w') as f:
            json.dump(config, f, indent=2)
        return True
    except (IOError, OSError, TypeError) as e:
        logging.getLogger(__name__).error(f"Failed to save config file: {e}")
        return False

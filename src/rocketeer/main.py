#!/usr/bin/env python3
"""
Rocketeer - Entry Point
-----------------------

Command line entry point: builds a motor from the saved (or given) inputs,
runs the pressure simulation and writes the results.
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import __version__
from .analysis import DEFAULT_SIMULATION_STEP, DEFAULT_STEPS, STOP_PREDICATES, run_simulation
from .config import load_config, save_config
from .core.logger import configure_logging, get_logger
from .propulsion.motor import MotorConfiguration
from .utils import create_pressure_graph, export_csv, save_figure


def parse_arguments(argv: Optional[List[str]] = None):
    """
    Parse command line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Rocketeer - internal ballistics simulator for solid rocket motors"
    )
    parser.add_argument(
        "motor", nargs="?", help="JSON file with motor inputs (defaults to the last-used inputs)"
    )
    parser.add_argument(
        "--steps", type=int, help=f"Number of simulation states (default {DEFAULT_STEPS})"
    )
    parser.add_argument(
        "--step-size", type=float,
        help=f"Grain regression per step in mm (default {DEFAULT_SIMULATION_STEP})"
    )
    parser.add_argument(
        "--stop", choices=sorted(STOP_PREDICATES), help="Stop condition checked after every step"
    )
    parser.add_argument(
        "--csv", help="Write the simulation table to this CSV file"
    )
    parser.add_argument(
        "--plot", help="Write a pressure-time chart to this image file"
    )
    parser.add_argument(
        "--save-inputs", action="store_true", help="Remember these inputs for the next run"
    )
    parser.add_argument(
        "--config", help="Configuration file holding the last-used inputs"
    )
    parser.add_argument(
        "--version", action="version", version=f"Rocketeer v{__version__}"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file", help="Custom log file path"
    )

    return parser.parse_args(argv)


def _read_motor_file(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        data = json.load(f)
    # Accept either bare motor inputs or a whole configuration file
    return data.get("motor", data)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the command line tool.

    Returns
    -------
    int
        Exit status: 0 on success, 1 if the run was halted, 2 on bad input
    """
    args = parse_arguments(argv)

    configure_logging(logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)
    logger = get_logger("main")
    logger.info(f"Starting Rocketeer v{__version__}")

    config = load_config(args.config)
    if args.motor:
        try:
            config["motor"].update(_read_motor_file(args.motor))
        except (OSError, ValueError, AttributeError, TypeError) as e:
            logger.error(f"Cannot read motor file {args.motor}: {e}")
            return 2
    if args.steps is not None:
        config["steps"] = args.steps
    if args.step_size is not None:
        config["simulation_step"] = args.step_size
    if args.stop is not None:
        config["stop_when"] = args.stop

    try:
        motor = MotorConfiguration.from_dict(config["motor"])
        result = run_simulation(
            motor,
            steps=int(config["steps"]),
            simulation_step=float(config["simulation_step"]),
            stop_when=config.get("stop_when", "none")
        )
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 2

    for key, value in result.summary().items():
        logger.info(f"{key}: {value}")

    if args.save_inputs:
        config["motor"] = motor.to_dict()
        if save_config(config, args.config):
            logger.info("Inputs saved")

    df = result.to_dataframe()
    if args.csv and not export_csv(df, args.csv):
        return 1

    if args.plot:
        Path(args.plot).parent.mkdir(parents=True, exist_ok=True)
        save_figure(create_pressure_graph(df, show_mass_flow=True), args.plot)
        logger.info(f"Pressure chart written to {args.plot}")

    return 0 if result.completed else 1


if __name__ == "__main__":
    sys.exit(main())

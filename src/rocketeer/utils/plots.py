"""
Plotting Module for Rocketeer
-----------------------------

This module creates charts of simulated motor time series.
"""

from typing import Dict, Optional

import pandas as pd
from matplotlib.figure import Figure
from matplotlib import rcParams


# Set default figure style for consistent appearance
DEFAULT_FIGURE_STYLE = {
    'figure.figsize': (6, 4),
    'figure.dpi': 100,
    'figure.facecolor': 'white',
    'figure.edgecolor': 'white',
    'axes.grid': True,
    'grid.alpha': 0.3,
    'font.family': 'sans-serif',
    'font.size': 10,
}

# Apply default style
for key, value in DEFAULT_FIGURE_STYLE.items():
    rcParams[key] = value


def create_pressure_graph(df: pd.DataFrame, show_mass_flow: bool = False,
                          title: Optional[str] = None) -> Figure:
    """
    Plot chamber pressure against time.
    
    Parameters
    ----------
    df : pd.DataFrame
        Simulation table with at least the "t" and "Po" columns
    show_mass_flow : bool, optional
        Also plot mass generation and nozzle flow ("mgen", "mnoz") on a
        second axis
    title : str, optional
        Plot title
        
    Returns
    -------
    Figure
        Matplotlib Figure object
    """
    fig = Figure(figsize=(8, 5))
    ax = fig.add_subplot(111)

    if df.empty:
        ax.text(0.5, 0.5, "No simulation data", ha='center', va='center', fontsize=14)
        ax.set_xticks([])
        ax.set_yticks([])
        return fig

    ax.plot(df["t"], df["Po"] / 1e6, color='#1f77b4', linestyle='-', label='Po')
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Chamber pressure (MPa)")
    ax.set_title(title or "Chamber Pressure vs Time")
    ax.grid(True, linestyle='--', alpha=0.7)

    if show_mass_flow:
        ax2 = ax.twinx()
        ax2.plot(df["t"], df["mgen"], color='#ff7f0e', linestyle='--', label='mGen')
        ax2.plot(df["t"], df["mnoz"], color='#2ca02c', linestyle=':', label='mNoz')
        ax2.set_ylabel("Mass flow (kg/s)")
        lines = ax.get_lines() + ax2.get_lines()
        ax.legend(lines, [line.get_label() for line in lines], loc='best')
    else:
        ax.legend(loc='best')

    # Add a light box around the plot
    for spine in ax.spines.values():
        spine.set_visible(True)
        spine.set_color('#CCCCCC')

    fig.tight_layout()
    return fig


def create_graphs(df: pd.DataFrame) -> Dict[str, Figure]:
    """
    Create the standard set of graphs for a simulation table.
    
    Parameters
    ----------
    df : pd.DataFrame
        Simulation table as produced by ``SimulationResult.to_dataframe``
        
    Returns
    -------
    Dict[str, Figure]
        Dictionary of matplotlib Figure objects for different plots
    """
    if df.empty:
        return {}

    figs: Dict[str, Figure] = {"Pressure": create_pressure_graph(df, show_mass_flow=True)}

    # Kn vs regression depth
    fig = Figure(figsize=(6, 4))
    ax = fig.add_subplot(111)
    ax.plot(df["xi"], df["Kn"], color='#d62728', linestyle='-')
    ax.set_title("Kn vs Web Regression")
    ax.set_xlabel("Regression depth (mm)")
    ax.set_ylabel("Kn")
    ax.grid(True, linestyle='--', alpha=0.7)
    fig.tight_layout()
    figs["Kn"] = fig

    return figs


def save_figure(fig: Figure, filename: str, dpi: int = 150) -> None:
    """Write a figure to an image file; the format follows the extension."""
    fig.savefig(filename, dpi=dpi)

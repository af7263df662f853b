"""
Utilities Package
-----------------

This package provides export and plotting helpers for simulation results.
"""

# Import from export module
from .export import export_csv, summary_frame

# Import from plots module
from .plots import create_graphs, create_pressure_graph, save_figure

__all__ = [
    # Export functions
    'export_csv',
    'summary_frame',
    
    # Plotting functions
    'create_graphs',
    'create_pressure_graph',
    'save_figure'
]

"""
Data Export Module
----------------

This module provides functionality for exporting simulation results to CSV.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import pandas as pd

# Configure module logger
logger = logging.getLogger(__name__)


def export_csv(df: pd.DataFrame, filename: str) -> bool:
    """
    Export a DataFrame to CSV format.
    
    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to export
    filename : str
        Target filename for the CSV file
        
    Returns
    -------
    bool
        True if export was successful, False otherwise
    """
    try:
        # Ensure the directory exists
        output_path = Path(filename)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        
        df.to_csv(filename, index=False, float_format='%.6g')
        logger.info(f"Successfully exported data to CSV: {filename}")
        return True
        
    except (OSError, ValueError) as e:
        logger.error(f"Failed to export CSV: {e}")
        return False


def summary_frame(summary: Dict[str, Any]) -> pd.DataFrame:
    """
    Turn a run summary into a two-column Property/Value table.
    
    Parameters
    ----------
    summary : Dict[str, Any]
        Summary as returned by ``SimulationResult.summary``
        
    Returns
    -------
    pd.DataFrame
        Table with 'Property' and 'Value' columns
    """
    return pd.DataFrame({
        'Property': list(summary.keys()),
        'Value': list(summary.values())
    })
